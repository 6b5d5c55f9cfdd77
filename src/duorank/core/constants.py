"""
Default parameters for the best-results rating engine.

This module centralizes the tuning constants used by tournament scoring and
rank derivation so configuration and tests share a single source.
"""

# =============================================================================
# Decay Parameters
# =============================================================================

# Geometric discount per finishing place (place 1 is divided once)
DEFAULT_FINISH_DECAY: float = 1.1

# Geometric discount per season elapsed since the tournament
DEFAULT_AGE_DECAY: float = 1.1

# =============================================================================
# Record Parameters
# =============================================================================

# Number of best contributions summed into a player's rating
DEFAULT_RECORD_LENGTH: int = 10

# =============================================================================
# Tier Point Bases
# =============================================================================

DEFAULT_TIER_POINTS: dict[str, float] = {
    "small": 50.0,
    "medium": 125.0,
    "major": 200.0,
    "championship": 250.0,
}

# =============================================================================
# Strength-of-Field Bonus
# =============================================================================

# (worst rank in band, bonus credited for finishing above such a player)
BONUS_TABLE: tuple[tuple[int, float], ...] = (
    (5, 10.0),
    (10, 7.5),
    (20, 5.0),
    (50, 2.5),
    (100, 1.0),
    (200, 0.5),
)

# Rank assumed for players absent from the rank table
UNRANKED_RANK: int = 201

# =============================================================================
# Ingest
# =============================================================================

RESULT_FILE_PATTERN = r"(?P<date>\d{4}-\d{2}-\d{2}).*\.tsv$"
RESULT_COMMENT_PREFIX = "#"
