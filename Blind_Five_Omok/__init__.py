"""Blind_Five_Omok package exports."""

from .Board import Board, Cell, OutOfBounds, FIRST, SECOND, EMPTY
from .Omokgame import Omokgame, Move, COLORS
from .engine.referee import Reject, Result
from .engine.status import GameStatus, StatusKind

# Subpackages for rules/clock, views, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "Cell",
    "OutOfBounds",
    "FIRST",
    "SECOND",
    "EMPTY",
    "Omokgame",
    "Move",
    "COLORS",
    "Reject",
    "Result",
    "GameStatus",
    "StatusKind",
    "engine",
    "gui",
    "utils",
]
