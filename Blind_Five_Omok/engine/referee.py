"""Move validation and the result values every engine command returns."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Reject(Enum):
    OUT_OF_BOUNDS = "out of bounds"
    CELL_OCCUPIED = "cell occupied"
    INVALID_STATE = "invalid state"
    NO_PENDING_MOVE = "no pending move"
    INVALID_APPEARANCE = "invalid appearance"


@dataclass(frozen=True)
class Result:
    ok: bool
    reason: Optional[Reject] = None

    def __bool__(self):
        return self.ok

    @classmethod
    def accepted(cls) -> "Result":
        return cls(True)

    @classmethod
    def rejected(cls, reason: Reject) -> "Result":
        return cls(False, reason)


OK = Result.accepted()


def check_move(move, board) -> Optional[Reject]:
    """Return the reason a stone cannot go on (x, y), or None if the cell is free."""
    x, y = move
    if not board.in_bounds(x, y):
        return Reject.OUT_OF_BOUNDS
    if not board.is_empty(x, y):
        return Reject.CELL_OCCUPIED
    return None


def check_appearance(appearance, palette) -> Optional[Reject]:
    if appearance not in palette:
        return Reject.INVALID_APPEARANCE
    return None
