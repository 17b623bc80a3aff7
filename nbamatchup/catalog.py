"""Team catalog: the fixed, ordered list of teams a user can pick from."""

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union
import json
import logging

import numpy as np
import pandas as pd

from nbamatchup.constants import (
    DEFAULT_TEAMS,
    FIELD_ALIASES,
    NUMERIC_FIELDS,
    REQUIRED_FIELDS,
    TEXT_FIELDS,
)
from nbamatchup.exceptions import CatalogError, InvalidProfile, UnknownTeamError
from nbamatchup.models.profile import TeamProfile

logger = logging.getLogger(__name__)

MIN_TEAMS = 2


def _normalize_columns(frame: pd.DataFrame) -> pd.DataFrame:
    renamed = {}
    for column in frame.columns:
        key = str(column).strip().lower()
        renamed[column] = FIELD_ALIASES.get(key, key)
    return frame.rename(columns=renamed)


def _read_frame(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            payload = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(payload, dict):
                payload = payload.get("teams", [])
            return pd.DataFrame(payload)
        if suffix == ".csv":
            return pd.read_csv(path)
    except (OSError, ValueError) as exc:
        raise CatalogError(f"Could not read catalog {path}: {exc}") from exc
    raise CatalogError(f"Unsupported catalog format: {path.suffix or path.name}")


class TeamCatalog:
    """Ordered, code-unique collection of team base records."""

    def __init__(self, teams: Iterable[TeamProfile]) -> None:
        self._teams: List[TeamProfile] = list(teams)
        self._by_code: Dict[str, TeamProfile] = {}
        for team in self._teams:
            if team.code in self._by_code:
                raise CatalogError(f"Duplicate team code in catalog: {team.code}")
            self._by_code[team.code] = team
        if len(self._teams) < MIN_TEAMS:
            raise CatalogError(
                f"Catalog needs at least {MIN_TEAMS} teams, found {len(self._teams)}"
            )

    @classmethod
    def from_records(cls, records: Iterable[Mapping]) -> "TeamCatalog":
        return cls(TeamProfile.from_dict(record) for record in records)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "TeamCatalog":
        """Build from a table with one row per team; column aliases are accepted."""
        if frame.empty:
            raise CatalogError("Catalog has no teams")
        frame = _normalize_columns(frame)
        missing = [field for field in REQUIRED_FIELDS if field not in frame.columns]
        if missing:
            raise InvalidProfile(missing[0], None, team="catalog")
        for field in TEXT_FIELDS:
            blank = frame[field].isna()
            if blank.any():
                raise InvalidProfile(field, None, team=f"catalog row {int(blank.to_numpy().argmax())}")
        numeric = frame[list(NUMERIC_FIELDS)].apply(pd.to_numeric, errors="coerce")
        finite = np.isfinite(numeric.to_numpy(dtype=float))
        if not finite.all():
            row, col = np.argwhere(~finite)[0]
            field = NUMERIC_FIELDS[col]
            raise InvalidProfile(field, frame[field].iloc[row], team=str(frame["code"].iloc[row]))
        frame = frame.assign(**{field: numeric[field] for field in NUMERIC_FIELDS})
        return cls.from_records(frame[list(REQUIRED_FIELDS)].to_dict(orient="records"))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TeamCatalog":
        path = Path(path)
        catalog = cls.from_frame(_read_frame(path))
        logger.info("Loaded %d teams from %s", len(catalog), path)
        return catalog

    @classmethod
    def default(cls) -> "TeamCatalog":
        return cls.from_records(DEFAULT_TEAMS)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "TeamCatalog":
        """Catalog file when a path is given, otherwise the built-in teams."""
        if path:
            return cls.from_file(path)
        return cls.default()

    def __iter__(self) -> Iterator[TeamProfile]:
        return iter(self._teams)

    def __len__(self) -> int:
        return len(self._teams)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._by_code

    def get(self, code: str) -> TeamProfile:
        key = (code or "").strip().upper()
        team = self._by_code.get(key)
        if team is None:
            raise UnknownTeamError(code)
        return team

    def codes(self) -> List[str]:
        return [team.code for team in self._teams]

    def options(self, exclude: Optional[str] = None) -> List[TeamProfile]:
        """Selectable teams, leaving out the one already picked for the other side."""
        skip = (exclude or "").strip().upper()
        return [team for team in self._teams if team.code != skip]

    def to_frame(self) -> pd.DataFrame:
        rows = [{field: getattr(team, field) for field in REQUIRED_FIELDS} for team in self._teams]
        return pd.DataFrame(rows, columns=list(REQUIRED_FIELDS))
