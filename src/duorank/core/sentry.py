"""
Optional Sentry error reporting for the duorank command line tools.

Environment variables (all optional):
- DUORANK_SENTRY_DSN / SENTRY_DSN: DSN URL used to enable Sentry.
- SENTRY_ENV / ENV: Environment name. Defaults to development.
- SENTRY_TRACES_SAMPLE_RATE: Float in [0,1] for performance tracing.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional
from urllib.parse import urlparse

_LOG = logging.getLogger("duorank.core.sentry")

DEFAULT_DSN_ENVS = ("DUORANK_SENTRY_DSN", "SENTRY_DSN")


def _parse_rate_env(name: str, default: float) -> float:
    """Parse a sample-rate env var, clamped into [0.0, 1.0]."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        _LOG.debug("Invalid float for %s: %r; using default=%s", name, raw, default)
        return default
    return min(max(val, 0.0), 1.0)


def _find_dsn(names: Iterable[str]) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value.strip().strip("\"'")
    return None


def _is_valid_dsn(dsn: str) -> bool:
    parts = urlparse(dsn)
    return parts.scheme in {"http", "https"} and bool(parts.netloc)


def init_sentry(
    *,
    context: str,
    release: Optional[str] = None,
    dsn_envs: Iterable[str] = DEFAULT_DSN_ENVS,
) -> bool:
    """Initialize Sentry when a DSN is configured.

    ERROR-level log records become Sentry events through the logging
    integration.

    Returns:
        True if the SDK was initialized, False when no usable DSN is set.
    """
    dsn_envs = list(dsn_envs)
    dsn = _find_dsn(dsn_envs)
    if not dsn:
        _LOG.debug("Sentry disabled: no DSN configured (checked envs=%s)", dsn_envs)
        return False
    if not _is_valid_dsn(dsn):
        _LOG.info("Sentry disabled: DSN appears invalid")
        return False

    import sentry_sdk
    from sentry_sdk.integrations.logging import LoggingIntegration

    env = os.getenv("SENTRY_ENV") or os.getenv("ENV") or "development"
    traces = _parse_rate_env("SENTRY_TRACES_SAMPLE_RATE", 0.0)

    sentry_sdk.init(
        dsn=dsn,
        environment=env,
        release=release,
        integrations=[
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)
        ],
        traces_sample_rate=traces,
    )
    sentry_sdk.set_tag("service", context)
    _LOG.info("Sentry initialized: context=%s env=%s", context, env)
    return True
