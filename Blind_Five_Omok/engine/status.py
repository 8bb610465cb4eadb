"""Game status: in progress for one player, or one of the terminal outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StatusKind(Enum):
    IN_PROGRESS = "in progress"
    WON = "won"
    TIMED_OUT = "timed out"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    kind: StatusKind
    # Active player while in progress, winner when WON, loser when TIMED_OUT
    player: Optional[int] = None

    @classmethod
    def in_progress(cls, active: int) -> "GameStatus":
        return cls(StatusKind.IN_PROGRESS, active)

    @classmethod
    def won(cls, player: int) -> "GameStatus":
        return cls(StatusKind.WON, player)

    @classmethod
    def timed_out(cls, loser: int) -> "GameStatus":
        return cls(StatusKind.TIMED_OUT, loser)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(StatusKind.DRAW)

    @property
    def is_in_progress(self) -> bool:
        return self.kind is StatusKind.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        return not self.is_in_progress

    @property
    def active(self) -> Optional[int]:
        return self.player if self.is_in_progress else None

    @property
    def winner(self) -> Optional[int]:
        if self.kind is StatusKind.WON:
            return self.player
        if self.kind is StatusKind.TIMED_OUT:
            return -self.player
        return None
