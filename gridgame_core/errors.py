from __future__ import annotations


class GridGameError(Exception):
    """Base exception for GridGame."""


class PlacementError(GridGameError):
    """Raised when a board has no room left for a marker (bad difficulty configuration)."""


class ActionError(GridGameError):
    """Raised when a player asks the board for an action they cannot take."""


class PlayerDeadError(ActionError):
    """Raised when a dead player tries to act."""
