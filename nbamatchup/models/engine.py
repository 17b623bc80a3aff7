"""Matchup scoring: projected score, totals line, spread and probabilities."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict
import math

from nbamatchup.config import DEFAULT_PARAMS, ModelParams
from nbamatchup.models.profile import TeamProfile


class ConfidenceTier(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class Prediction:
    winner_name: str
    win_probability: float
    home_score: int
    away_score: int
    total_points: int
    over_under_line: float
    over_probability: float
    spread_line: float
    spread_cover_code: str
    spread_probability: float
    confidence_tier: ConfidenceTier
    home_name: str = ""
    home_code: str = ""
    away_name: str = ""
    away_code: str = ""

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["confidence_tier"] = self.confidence_tier.value
        return payload


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def over_under_line(total_points: int, step: int = DEFAULT_PARAMS.line_step) -> float:
    """Nearest multiple of ``step`` plus a hook, so the line never pushes."""
    return round_half_away(total_points / step) * step + 0.5


def spread_line(score_diff: int) -> float:
    """Margin rounded to the half point, negated: a home favorite gets a negative line."""
    return -round_half_away(score_diff * 2) / 2


def confidence_tier(win_probability: float, params: ModelParams = DEFAULT_PARAMS) -> ConfidenceTier:
    if win_probability > params.high_confidence:
        return ConfidenceTier.HIGH
    if win_probability < params.low_confidence:
        return ConfidenceTier.LOW
    return ConfidenceTier.MEDIUM


def project_scores(home: TeamProfile, away: TeamProfile,
                   params: ModelParams = DEFAULT_PARAMS) -> Dict[str, float]:
    """Expected points for each side before form and home court are applied."""
    avg_pace = (home.pace + away.pace) / 2
    possessions = avg_pace * params.pace_factor
    home_expected = ((home.offense_rating + away.defense_rating) / 2) * (possessions / 100)
    away_expected = ((away.offense_rating + home.defense_rating) / 2) * (possessions / 100)
    return {
        "possessions": possessions,
        "home_expected": home_expected,
        "away_expected": away_expected,
    }


def predict(home: TeamProfile, away: TeamProfile,
            params: ModelParams = DEFAULT_PARAMS) -> Prediction:
    """
    Forecast a single game.

    Pure and deterministic. Inputs must already have passed
    ``validate_matchup``; nothing is checked here.

    Home court is additive and scaled by home form, while the away side
    only gets a multiplicative form scaling. Scores are not floored at
    zero. An exact tie goes to the away team.
    """
    projection = project_scores(home, away, params)

    home_score = round_half_away(
        projection["home_expected"] + params.home_advantage * home.form_score
    )
    away_score = round_half_away(projection["away_expected"] * away.form_score)

    total_points = home_score + away_score
    line = over_under_line(total_points, params.line_step)

    score_diff = home_score - away_score
    spread = spread_line(score_diff)

    home_win_prob = (
        0.5
        + score_diff / params.win_diff_divisor
        + (home.form_score - away.form_score) * params.form_weight
    )
    clamped_prob = clamp(home_win_prob, params.win_prob_min, params.win_prob_max)

    if home_score > away_score:
        winner_name = home.name
        win_probability = clamped_prob
    else:
        winner_name = away.name
        win_probability = 1 - clamped_prob

    over_probability = clamp(
        0.5 + (total_points - line) / params.over_diff_divisor,
        params.over_prob_min,
        params.over_prob_max,
    )
    spread_probability = clamp(
        0.5 + abs(score_diff) / params.spread_diff_divisor,
        params.spread_prob_min,
        params.spread_prob_max,
    )

    # Out-of-range here means the formula is broken, not the input.
    assert params.win_prob_min <= clamped_prob <= params.win_prob_max
    assert params.over_prob_min <= over_probability <= params.over_prob_max
    assert params.spread_prob_min <= spread_probability <= params.spread_prob_max

    return Prediction(
        winner_name=winner_name,
        win_probability=win_probability,
        home_score=home_score,
        away_score=away_score,
        total_points=total_points,
        over_under_line=line,
        over_probability=over_probability,
        spread_line=spread,
        spread_cover_code=home.code if spread < 0 else away.code,
        spread_probability=spread_probability,
        confidence_tier=confidence_tier(win_probability, params),
        home_name=home.name,
        home_code=home.code,
        away_name=away.name,
        away_code=away.code,
    )
