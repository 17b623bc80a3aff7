"""Configuration for the forecast model and workflow."""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Tuple
import json
import math
import os

from nbamatchup.exceptions import ConfigError


# Scoring model defaults
_DEFAULT_HOME_ADVANTAGE = 3.5
_DEFAULT_PACE_FACTOR = 0.96
_DEFAULT_LINE_STEP = 5

# Win probability
_DEFAULT_WIN_DIFF_DIVISOR = 40.0
_DEFAULT_FORM_WEIGHT = 0.15
_DEFAULT_WIN_PROB_MIN = 0.08
_DEFAULT_WIN_PROB_MAX = 0.92

# Over/under and spread probabilities
_DEFAULT_OVER_DIFF_DIVISOR = 30.0
_DEFAULT_OVER_PROB_MIN = 0.15
_DEFAULT_OVER_PROB_MAX = 0.85
_DEFAULT_SPREAD_DIFF_DIVISOR = 50.0
_DEFAULT_SPREAD_PROB_MIN = 0.20
_DEFAULT_SPREAD_PROB_MAX = 0.80

# Confidence tier thresholds
_DEFAULT_HIGH_CONFIDENCE = 0.70
_DEFAULT_LOW_CONFIDENCE = 0.55

# Simulated analysis latency (seconds)
_DEFAULT_ANALYSIS_DELAY = 1.5

# Probability windows checked as (field_min, field_max) pairs
_PROBABILITY_WINDOWS = (
    ("win_prob_min", "win_prob_max"),
    ("over_prob_min", "over_prob_max"),
    ("spread_prob_min", "spread_prob_max"),
)
_POSITIVE_FIELDS = (
    "line_step",
    "win_diff_divisor",
    "over_diff_divisor",
    "spread_diff_divisor",
)


def _number(cast: Callable[[str], float]) -> Callable[[Optional[str], float], float]:
    """Coercer that keeps the current value when the raw setting is blank or unparsable."""
    def coerce(raw: Optional[str], current: float) -> float:
        if raw is None or str(raw).strip() == "":
            return current
        try:
            return cast(str(raw).strip())
        except (TypeError, ValueError):
            return current
    return coerce


def _text(raw: Optional[str], current: str) -> str:
    return current if raw is None else str(raw)


_as_float = _number(float)
_as_int = _number(int)

# Setting key -> (Config field, coercer)
_SETTINGS: Dict[str, Tuple[str, Callable]] = {
    "HOME_ADVANTAGE": ("home_advantage", _as_float),
    "PACE_FACTOR": ("pace_factor", _as_float),
    "LINE_STEP": ("line_step", _as_int),
    "WIN_DIFF_DIVISOR": ("win_diff_divisor", _as_float),
    "FORM_WEIGHT": ("form_weight", _as_float),
    "WIN_PROB_MIN": ("win_prob_min", _as_float),
    "WIN_PROB_MAX": ("win_prob_max", _as_float),
    "OVER_DIFF_DIVISOR": ("over_diff_divisor", _as_float),
    "OVER_PROB_MIN": ("over_prob_min", _as_float),
    "OVER_PROB_MAX": ("over_prob_max", _as_float),
    "SPREAD_DIFF_DIVISOR": ("spread_diff_divisor", _as_float),
    "SPREAD_PROB_MIN": ("spread_prob_min", _as_float),
    "SPREAD_PROB_MAX": ("spread_prob_max", _as_float),
    "HIGH_CONFIDENCE": ("high_confidence", _as_float),
    "LOW_CONFIDENCE": ("low_confidence", _as_float),
    "ANALYSIS_DELAY": ("analysis_delay", _as_float),
    "NBAMATCHUP_CATALOG_PATH": ("catalog_path", _text),
}


def _env_pairs(text: str) -> Dict[str, str]:
    """KEY=VALUE lines; comments, blanks and lines without '=' are skipped."""
    pairs: Dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        pairs[key.strip()] = value
    return pairs


def _read_settings_file(path: Path) -> Dict[str, str]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Could not read config {path}: {exc}") from exc
    if path.suffix.lower() != ".json":
        return _env_pairs(text)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file is not valid JSON: {path} ({exc})") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file must hold a JSON object: {path}")
    return {str(k): str(v) for k, v in payload.items()}


@dataclass(frozen=True)
class ModelParams:
    """Tunable constants of the scoring model; rejected on construction if unusable."""

    home_advantage: float = _DEFAULT_HOME_ADVANTAGE
    pace_factor: float = _DEFAULT_PACE_FACTOR
    line_step: int = _DEFAULT_LINE_STEP
    win_diff_divisor: float = _DEFAULT_WIN_DIFF_DIVISOR
    form_weight: float = _DEFAULT_FORM_WEIGHT
    win_prob_min: float = _DEFAULT_WIN_PROB_MIN
    win_prob_max: float = _DEFAULT_WIN_PROB_MAX
    over_diff_divisor: float = _DEFAULT_OVER_DIFF_DIVISOR
    over_prob_min: float = _DEFAULT_OVER_PROB_MIN
    over_prob_max: float = _DEFAULT_OVER_PROB_MAX
    spread_diff_divisor: float = _DEFAULT_SPREAD_DIFF_DIVISOR
    spread_prob_min: float = _DEFAULT_SPREAD_PROB_MIN
    spread_prob_max: float = _DEFAULT_SPREAD_PROB_MAX
    high_confidence: float = _DEFAULT_HIGH_CONFIDENCE
    low_confidence: float = _DEFAULT_LOW_CONFIDENCE

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ConfigError(f"Model setting {name} must be a finite number, got {value!r}")
        for name in _POSITIVE_FIELDS:
            if getattr(self, name) <= 0:
                raise ConfigError(f"Model setting {name} must be positive, got {getattr(self, name)!r}")
        for low_name, high_name in _PROBABILITY_WINDOWS:
            low, high = getattr(self, low_name), getattr(self, high_name)
            if not 0.0 <= low <= high <= 1.0:
                raise ConfigError(
                    f"Model settings need 0 <= {low_name} <= {high_name} <= 1, got {low!r} and {high!r}"
                )
        if self.low_confidence > self.high_confidence:
            raise ConfigError(
                f"low_confidence {self.low_confidence!r} is above high_confidence {self.high_confidence!r}"
            )


DEFAULT_PARAMS = ModelParams()


@dataclass
class Config:
    # Scoring model
    home_advantage: float = _DEFAULT_HOME_ADVANTAGE
    pace_factor: float = _DEFAULT_PACE_FACTOR
    line_step: int = _DEFAULT_LINE_STEP

    # Win probability
    win_diff_divisor: float = _DEFAULT_WIN_DIFF_DIVISOR
    form_weight: float = _DEFAULT_FORM_WEIGHT
    win_prob_min: float = _DEFAULT_WIN_PROB_MIN
    win_prob_max: float = _DEFAULT_WIN_PROB_MAX

    # Over/under and spread
    over_diff_divisor: float = _DEFAULT_OVER_DIFF_DIVISOR
    over_prob_min: float = _DEFAULT_OVER_PROB_MIN
    over_prob_max: float = _DEFAULT_OVER_PROB_MAX
    spread_diff_divisor: float = _DEFAULT_SPREAD_DIFF_DIVISOR
    spread_prob_min: float = _DEFAULT_SPREAD_PROB_MIN
    spread_prob_max: float = _DEFAULT_SPREAD_PROB_MAX

    # Confidence tiers
    high_confidence: float = _DEFAULT_HIGH_CONFIDENCE
    low_confidence: float = _DEFAULT_LOW_CONFIDENCE

    # Workflow
    analysis_delay: float = _DEFAULT_ANALYSIS_DELAY
    catalog_path: str = ""

    def __post_init__(self) -> None:
        self.model_params()
        if not math.isfinite(self.analysis_delay):
            raise ConfigError(f"analysis_delay must be finite, got {self.analysis_delay!r}")

    @classmethod
    def from_env(cls) -> "Config":
        return cls._apply(os.environ, cls())

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Environment settings, overridden by a .env-style or JSON file when given."""
        env_config = cls.from_env()
        if not config_path:
            return env_config
        return cls._apply(_read_settings_file(Path(config_path)), env_config)

    @classmethod
    def _apply(cls, settings: Mapping[str, str], base: "Config") -> "Config":
        values = asdict(base)
        for key, (field_name, coerce) in _SETTINGS.items():
            values[field_name] = coerce(settings.get(key), values[field_name])
        return cls(**values)

    def model_params(self) -> ModelParams:
        """Freeze the model constants for the prediction engine."""
        values = asdict(self)
        return ModelParams(**{name: values[name] for name in ModelParams.__dataclass_fields__})

    def to_dict(self) -> Dict[str, str]:
        return {k: str(v) for k, v in asdict(self).items()}
