"""Text adapter: type coordinates and commands, see an ASCII board with both clocks."""

try:
    from Board import FIRST, SECOND, player_name
    from gui.pygame_view import status_message
    from utils.timer import TickSource, format_time, pump_ticks
except ImportError:
    from Blind_Five_Omok.Board import FIRST, SECOND, player_name
    from Blind_Five_Omok.gui.pygame_view import status_message
    from Blind_Five_Omok.utils.timer import TickSource, format_time, pump_ticks

STONES = {FIRST: "X", SECOND: "O"}
# Lower-case colour glyphs while blind; X/O only after the reveal
GLYPHS = {"red": "r", "orange": "o", "yellow": "y", "green": "g", "blue": "b", "purple": "p", "pink": "k"}
HELP = "Commands: 'x y' select a cell, place, undo, restart, color <name>, status, quit"


def stone_glyph(cell, status):
    """Colour glyph while the game runs; owner X/O once it is over."""
    if status.is_in_progress:
        return GLYPHS.get(cell.appearance, (cell.appearance or "?")[0].lower())
    return STONES[cell.occupant]


class ConsoleView:
    def __init__(self, game, ticker=None, reader=input, writer=print):
        self.game = game
        self.ticker = ticker or TickSource()
        self.reader = reader
        self.writer = writer

    def render(self):
        game = self.game
        size = game.board_size
        pending = game.pending_move()
        status = game.status()
        lines = ["   " + " ".join(f"{x % 10}" for x in range(size))]
        for y in range(size):
            row = []
            for x in range(size):
                cell = game.cell_at(x, y)
                if cell.occupant is not None:
                    row.append(stone_glyph(cell, status))
                elif (x, y) == pending:
                    row.append("?")
                else:
                    row.append(".")
            lines.append(f"{y:2d} " + " ".join(row))
        clocks = "  ".join(
            f"{player_name(p)} {game.appearance(p)} {format_time(game.remaining_time(p))}"
            for p in (FIRST, SECOND)
        )
        lines.append(clocks)
        lines.append(status_message(game))
        return "\n".join(lines)

    def handle_line(self, line):
        """Apply one typed command. Returns (keep_running, message)."""
        parts = line.strip().lower().split()
        if not parts:
            return True, HELP
        cmd = parts[0]
        game = self.game

        if cmd in ("quit", "exit", "q"):
            return False, "Bye"
        if cmd == "status":
            return True, self.render()
        if cmd == "place":
            return True, self._describe(game.commit_move(), "Placed")
        if cmd == "undo":
            return True, self._describe(game.undo(), "Undone")
        if cmd == "restart":
            return True, self._describe(game.restart(), "New game")
        if cmd in ("color", "colour"):
            if len(parts) not in (2, 3):
                return True, "Usage: color <" + "|".join(game.palette) + "> [first|second]"
            if len(parts) == 3:
                player = {"first": FIRST, "second": SECOND}.get(parts[2])
                if player is None:
                    return True, "Player must be 'first' or 'second'"
            else:
                player = game.active_player()
                if player is None:
                    return True, self._describe(None, "")
            return True, self._describe(game.set_appearance(player, parts[1]), f"{player_name(player)} plays {parts[1]}")

        try:
            x_str, y_str = parts
            x, y = int(x_str), int(y_str)
        except ValueError:
            return True, "Invalid input; expected two integers or a command. " + HELP
        result = game.stage_move(x, y)
        if result and game.auto_commit:
            return True, "Placed"
        return True, self._describe(result, f"Selected ({x}, {y}); type 'place' to confirm")

    def _describe(self, result, success):
        if result is None:
            return "The game is over; type 'restart' to play again"
        if result:
            return success
        return f"Rejected: {result.reason.value}"

    def run(self):
        """Read commands until quit or end of input. Ticks are applied between inputs."""
        self.writer(HELP)
        self.writer(self.render())
        while True:
            pump_ticks(self.game, self.ticker)
            try:
                line = self.reader("> ")
            except EOFError:
                break
            # Time spent typing counts against whoever was to move
            pump_ticks(self.game, self.ticker)
            keep_running, message = self.handle_line(line)
            self.writer(message)
            if not keep_running:
                break
            self.writer(self.render())
        self.ticker.cancel()
        return self.game.status()
