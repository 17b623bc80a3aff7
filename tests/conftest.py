"""
Pytest configuration and shared fixtures for matchup forecast tests.
"""

import pytest

from nbamatchup.catalog import TeamCatalog
from nbamatchup.models.profile import Side, TeamProfile
from nbamatchup.ops.metrics import MetricsRecorder


@pytest.fixture
def celtics_home():
    """Boston as the home side."""
    return TeamProfile(
        name="Boston Celtics",
        code="BOS",
        offense_rating=118.4,
        defense_rating=109.2,
        pace=98.2,
        form_score=0.85,
        side=Side.HOME,
    )


@pytest.fixture
def lakers_away():
    """Los Angeles as the away side."""
    return TeamProfile(
        name="Los Angeles Lakers",
        code="LAL",
        offense_rating=114.2,
        defense_rating=112.8,
        pace=100.5,
        form_score=0.7,
        side=Side.AWAY,
    )


@pytest.fixture
def even_matchup():
    """Identical ratings; away form 1.0 and home form 0.0 produce a tied score."""
    home = TeamProfile("Home Team", "HHH", 110.0, 110.0, 100.0, 0.0, side=Side.HOME)
    away = TeamProfile("Away Team", "AAA", 110.0, 110.0, 100.0, 1.0, side=Side.AWAY)
    return home, away


@pytest.fixture
def catalog():
    """Built-in twelve-team catalog."""
    return TeamCatalog.default()


@pytest.fixture
def metrics():
    """Isolated metrics recorder so tests never share counters."""
    return MetricsRecorder()


@pytest.fixture
def catalog_records():
    """Minimal catalog rows in file-style column names."""
    return [
        {"name": "Alpha City", "abbr": "ALP", "offRating": 112.0, "defRating": 110.0,
         "pace": 98.0, "recentForm": 0.6},
        {"name": "Beta Town", "abbr": "BET", "offRating": 115.0, "defRating": 111.5,
         "pace": 101.0, "recentForm": 0.75},
        {"name": "Gamma Bay", "abbr": "GAM", "offRating": 109.5, "defRating": 108.0,
         "pace": 95.5, "recentForm": 0.5},
    ]
