"""Team profiles and the matchup prediction engine."""

from nbamatchup.models.engine import ConfidenceTier, Prediction, predict
from nbamatchup.models.profile import Side, TeamProfile, validate_matchup, validate_profile

__all__ = [
    "ConfidenceTier",
    "Prediction",
    "Side",
    "TeamProfile",
    "predict",
    "validate_matchup",
    "validate_profile",
]
