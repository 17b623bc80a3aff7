"""Team profile records and input validation."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional
import math

from nbamatchup.constants import NUMERIC_FIELDS, TEXT_FIELDS
from nbamatchup.exceptions import DuplicateSelection, InvalidProfile


class Side(str, Enum):
    HOME = "home"
    AWAY = "away"


@dataclass(frozen=True)
class TeamProfile:
    """One team as seen by a single forecast."""
    name: str
    code: str
    offense_rating: float
    defense_rating: float
    pace: float
    form_score: float
    side: Optional[Side] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamProfile":
        """Build and validate a catalog base record (no side)."""
        team = str(data.get("code") or data.get("name") or "?")
        for field in TEXT_FIELDS + NUMERIC_FIELDS:
            if field not in data or data[field] is None:
                raise InvalidProfile(field, None, team=team)
        values: Dict[str, float] = {}
        for field in NUMERIC_FIELDS:
            try:
                values[field] = float(data[field])
            except (TypeError, ValueError):
                raise InvalidProfile(field, data[field], team=team) from None
        profile = cls(
            name=str(data["name"]).strip(),
            code=str(data["code"]).strip().upper(),
            **values,
        )
        validate_profile(profile)
        return profile

    def with_side(self, side: Side) -> "TeamProfile":
        return replace(self, side=side)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "code": self.code,
            "offense_rating": self.offense_rating,
            "defense_rating": self.defense_rating,
            "pace": self.pace,
            "form_score": self.form_score,
            "side": self.side.value if self.side else None,
        }


def validate_profile(profile: TeamProfile) -> None:
    """Reject profiles the engine cannot score (empty labels, NaN/inf ratings)."""
    for field in TEXT_FIELDS:
        value = getattr(profile, field)
        if not isinstance(value, str) or not value.strip():
            raise InvalidProfile(field, value, team=profile.code or profile.name)
    for field in NUMERIC_FIELDS:
        value = getattr(profile, field)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidProfile(field, value, team=profile.code)
        if not math.isfinite(value):
            raise InvalidProfile(field, value, team=profile.code)
    if not 0.0 <= profile.form_score <= 1.0:
        raise InvalidProfile("form_score", profile.form_score, team=profile.code)


def validate_matchup(home: TeamProfile, away: TeamProfile) -> None:
    """Check both profiles and the distinct-code / opposite-side invariant."""
    validate_profile(home)
    validate_profile(away)
    if home.code == away.code:
        raise DuplicateSelection(home.code)
    if home.side is not Side.HOME:
        raise InvalidProfile("side", home.side, team=home.code)
    if away.side is not Side.AWAY:
        raise InvalidProfile("side", away.side, team=away.code)
