"""Practice engine package: random move picker and Qt worker bridge."""

from checkie.engine.random_engine import RandomMoveEngine
from checkie.engine.search import IEngine, PracticeSettings, SearchResult

__all__ = [
    "IEngine",
    "PracticeSettings",
    "RandomMoveEngine",
    "SearchResult",
]
