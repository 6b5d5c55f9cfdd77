"""Configuration for the best-results rating engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from duorank.core.constants import (
    DEFAULT_AGE_DECAY,
    DEFAULT_FINISH_DECAY,
    DEFAULT_RECORD_LENGTH,
    DEFAULT_TIER_POINTS,
)
from duorank.core.errors import ConfigError
from duorank.core.tournament import Tier

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


def default_tier_points() -> dict[Tier, float]:
    """Fresh copy of the default point base for every tier."""
    return {Tier(name): points for name, points in DEFAULT_TIER_POINTS.items()}


@dataclass(frozen=True)
class RatingConfig:
    """Numeric parameters of a rating run.

    Tiers missing from ``tier_points`` take their default point base.
    """

    finish_decay: float = DEFAULT_FINISH_DECAY
    age_decay: float = DEFAULT_AGE_DECAY
    record_length: int = DEFAULT_RECORD_LENGTH
    tier_points: Mapping[Tier, float] = field(
        default_factory=default_tier_points
    )

    def __post_init__(self) -> None:
        for name in ("finish_decay", "age_decay"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive number, got {value!r}")
        if (
            isinstance(self.record_length, bool)
            or not isinstance(self.record_length, int)
            or self.record_length < 1
        ):
            raise ConfigError(
                f"record_length must be a positive integer, got {self.record_length!r}"
            )

        points = default_tier_points()
        for tier, value in self.tier_points.items():
            value = float(value)
            if not math.isfinite(value) or value < 0:
                raise ConfigError(
                    f"Point base for {Tier(tier).value} must be a non-negative number"
                )
            points[Tier(tier)] = value
        object.__setattr__(self, "tier_points", points)

    def point_base(self, tier: Tier) -> float:
        return self.tier_points[tier]

    def with_tier(self, tier: Tier, points: float) -> RatingConfig:
        """Copy of this config with one tier's point base replaced."""
        return replace(self, tier_points={**self.tier_points, tier: points})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RatingConfig:
        """Build a config from a plain mapping such as a parsed YAML file.

        Recognized keys are ``finish_decay``, ``age_decay``,
        ``record_length`` and ``tiers`` (tier name to point base).
        """
        unknown = set(data) - {"finish_decay", "age_decay", "record_length", "tiers"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        try:
            for key in ("finish_decay", "age_decay"):
                if data.get(key) is not None:
                    kwargs[key] = float(data[key])
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid decay value: {exc}") from exc
        if data.get("record_length") is not None:
            kwargs["record_length"] = data["record_length"]

        tiers = data.get("tiers") or {}
        if not isinstance(tiers, Mapping):
            raise ConfigError("tiers must be a mapping of tier name to points")
        tier_points: dict[Tier, float] = {}
        for name, points in tiers.items():
            try:
                tier_points[Tier(str(name).lower())] = float(points)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid tier entry {name!r}: {exc}") from exc
        kwargs["tier_points"] = tier_points

        return cls(**kwargs)


def load_config(path: str | Path | None = None) -> RatingConfig:
    """Load a :class:`RatingConfig` from a YAML file.

    Args:
        path: Config file. Defaults to the packaged ``config.yaml``.

    Raises:
        ConfigError: If the file is not valid YAML, is not a mapping or
            holds invalid values.
    """
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    with cfg_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {cfg_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config format at {cfg_path}")
    return RatingConfig.from_dict(data)
