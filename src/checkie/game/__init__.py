"""Game management layer — match state machine, controller, players, registry.

Quick start::

    from checkie.game import MatchRegistry

    registry = MatchRegistry()
    registry.create_match("m1")
    outcome = registry.make_move("m1", 40, 33)
    print(outcome.to_dict())
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import IGameController, IPlayer
from checkie.game.outcome import MoveAccepted, MoveOutcome, MoveRejected
from checkie.game.player import HumanPlayer, PracticePlayer
from checkie.game.session import MatchRegistry
from checkie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "IGameController",
    "IPlayer",
    # Outcomes
    "MoveAccepted",
    "MoveOutcome",
    "MoveRejected",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MatchRegistry",
    "MoveRecord",
    "PracticePlayer",
]
