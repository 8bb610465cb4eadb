"""Turn management for Blind Five: staging, commits, undo, restart and the countdown."""

from dataclasses import dataclass

try:
    from Board import Board, EMPTY_CELL, FIRST, SECOND, opponent, player_name
    from engine import referee, win_rules
    from engine.clock import CountdownClock, DEFAULT_START_SECONDS
    from engine.referee import OK, Reject, Result
    from engine.status import GameStatus
    from utils.logger import log_event
except ImportError:
    from Blind_Five_Omok.Board import Board, EMPTY_CELL, FIRST, SECOND, opponent, player_name
    from Blind_Five_Omok.engine import referee, win_rules
    from Blind_Five_Omok.engine.clock import CountdownClock, DEFAULT_START_SECONDS
    from Blind_Five_Omok.engine.referee import OK, Reject, Result
    from Blind_Five_Omok.engine.status import GameStatus
    from Blind_Five_Omok.utils.logger import log_event


COLORS = ("red", "orange", "yellow", "green", "blue", "purple", "pink")
DEFAULT_BOARD_SIZE = 18


@dataclass(frozen=True)
class Move:
    x: int
    y: int
    player: int
    appearance: str

    @property
    def position(self):
        return self.x, self.y


class Omokgame:
    """
    Single game session. All state lives here and changes only through the
    command methods, which return a Result instead of raising on misuse.
    """

    def __init__(
        self,
        board_size=DEFAULT_BOARD_SIZE,
        start_seconds=DEFAULT_START_SECONDS,
        auto_commit=False,
        win_length=win_rules.WIN_LENGTH,
        palette=COLORS,
        default_appearance="red",
        logger=log_event,
    ):
        if win_length < 1:
            raise ValueError("win_length must be at least 1")
        if default_appearance not in palette:
            raise ValueError(f"default appearance {default_appearance!r} not in palette")
        self.board = Board(size=board_size)
        self.clock = CountdownClock(start_seconds, players=(FIRST, SECOND))
        self.auto_commit = auto_commit
        self.win_length = win_length
        self.palette = tuple(palette)
        self.default_appearance = default_appearance
        self.logger = logger
        self._reset_state()

    @classmethod
    def from_settings(cls, settings, logger=log_event):
        return cls(
            board_size=settings.board_size,
            start_seconds=settings.start_seconds,
            auto_commit=settings.auto_commit,
            win_length=settings.win_length,
            palette=settings.palette,
            default_appearance=settings.default_appearance,
            logger=logger,
        )

    def _reset_state(self):
        self.board.clear()
        self.clock.reset()
        self.move_log = []
        self.pending = None
        self._status = GameStatus.in_progress(FIRST)
        self.appearances = {FIRST: self.default_appearance, SECOND: self.default_appearance}

    def _log(self, message):
        if self.logger:
            self.logger(message)

    # --- queries ---

    @property
    def board_size(self):
        return self.board.size

    def status(self):
        return self._status

    def cell_at(self, x, y):
        return self.board.get(x, y)

    def active_player(self):
        return self._status.active

    def remaining_time(self, player):
        return self.clock.remaining_for(player)

    def pending_move(self):
        return self.pending

    def move_count(self):
        return len(self.move_log)

    def moves(self):
        return list(self.move_log)

    def last_move(self):
        return self.move_log[-1] if self.move_log else None

    def appearance(self, player):
        return self.appearances[player]

    # --- commands ---

    def stage_move(self, x, y):
        if not self._status.is_in_progress:
            return Result.rejected(Reject.INVALID_STATE)
        reason = referee.check_move((x, y), self.board)
        if reason is not None:
            return Result.rejected(reason)
        self.pending = (x, y)
        if self.auto_commit:
            return self.commit_move()
        return OK

    def commit_move(self):
        if not self._status.is_in_progress:
            return Result.rejected(Reject.INVALID_STATE)
        if self.pending is None:
            return Result.rejected(Reject.NO_PENDING_MOVE)

        x, y = self.pending
        reason = referee.check_move((x, y), self.board)
        if reason is not None:
            # Someone else got there first; the staged candidate is stale.
            self.pending = None
            return Result.rejected(reason)

        player = self._status.player
        move = Move(x, y, player, self.appearances[player])
        self.board.place(x, y, player, move.appearance)
        self.move_log.append(move)
        self.pending = None
        self._log(f"Move {len(self.move_log)}: {player_name(player)} {move.position}")

        axis = win_rules.winning_axis(self.board, x, y, self.win_length)
        if axis is not None:
            self._status = GameStatus.won(player)
            self._log(f"Winner: {player_name(player)} (axis {axis})")
        elif self.board.is_full():
            self._status = GameStatus.draw()
            self._log("Result: Draw (board full)")
        else:
            self._status = GameStatus.in_progress(opponent(player))
        return OK

    def undo(self):
        if not self._status.is_in_progress or not self.move_log:
            return Result.rejected(Reject.INVALID_STATE)
        move = self.move_log.pop()
        self.board.set(*move.position, EMPTY_CELL)
        self.pending = None
        self._status = GameStatus.in_progress(move.player)
        self._log(f"Undo: {player_name(move.player)} {move.position}")
        return OK

    def restart(self):
        self._reset_state()
        self._log("Restart")
        return OK

    def set_appearance(self, player, appearance):
        if player not in (FIRST, SECOND) or not self._status.is_in_progress:
            return Result.rejected(Reject.INVALID_STATE)
        if self.move_log and player != self._status.player:
            return Result.rejected(Reject.INVALID_STATE)
        reason = referee.check_appearance(appearance, self.palette)
        if reason is not None:
            return Result.rejected(reason)
        self.appearances[player] = appearance
        return OK

    def tick(self, player=None):
        """Advance the active player's clock by one unit; None means whoever is active."""
        if not self._status.is_in_progress:
            return Result.rejected(Reject.INVALID_STATE)
        active = self._status.player
        if player is not None and player != active:
            return Result.rejected(Reject.INVALID_STATE)
        if self.clock.tick(active):
            self._status = GameStatus.timed_out(active)
            self.pending = None
            self._log(f"Timeout: {player_name(active)} ran out of time, {player_name(opponent(active))} wins")
        return OK
