"""
Custom exceptions for the matchup forecast system.

Usage:
    from nbamatchup.exceptions import MatchupError, UnknownTeamError

    try:
        workflow.select_home("XYZ")
    except UnknownTeamError as e:
        print(f"Pick another team: {e}")
"""

from typing import Any, Optional


class MatchupError(Exception):
    """
    Base exception for all matchup forecast errors.

    All custom exceptions inherit from this, allowing:
        except MatchupError:
            # Catch any system error
    """
    pass


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InvalidProfile(MatchupError):
    """
    Team profile cannot be fed to the prediction engine.

    Raised when:
    - A required field is missing
    - A rating is non-numeric, NaN or infinite
    - Name or code is empty
    - Profile carries the wrong side for its slot
    """

    def __init__(self, field: str, value: Any = None, team: Optional[str] = None):
        self.field = field
        self.value = value
        self.team = team
        msg = f"Invalid team profile field '{field}'"
        if team:
            msg += f" for {team}"
        msg += f": {value!r}"
        super().__init__(msg)


class DuplicateSelection(MatchupError):
    """Same team code chosen for both the home and away slot."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Team {code} cannot play itself")


class UnknownTeamError(MatchupError):
    """Team code not present in the catalog."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Team not found in catalog: {code}")


# =============================================================================
# SETUP ERRORS
# =============================================================================

class CatalogError(MatchupError):
    """
    Catalog could not be built.

    Raised when:
    - Catalog file is missing or unreadable
    - Two entries share a code
    - Fewer than two teams are available
    """
    pass


class ConfigError(MatchupError):
    """Configuration file is missing or in an unsupported format."""
    pass
