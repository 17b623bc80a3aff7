"""NBA matchup forecast package."""

__all__ = [
    "catalog",
    "cli",
    "config",
    "constants",
    "exceptions",
    "models",
    "ops",
    "reporting",
    "workflow",
]

__version__ = "0.1.0"
