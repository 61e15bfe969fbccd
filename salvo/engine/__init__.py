"""Game engine components."""

from .fleet_setup import deploy_fleet, new_game
from .turn_coordinator import MoveSource, ShotEvent, TurnCoordinator
from .victory import check_victory

__all__ = [
    "check_victory",
    "deploy_fleet",
    "new_game",
    "MoveSource",
    "ShotEvent",
    "TurnCoordinator",
]
