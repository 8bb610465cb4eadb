"""Console adapter: typed commands map onto engine commands."""

from Blind_Five_Omok.Board import Cell, FIRST, SECOND
from Blind_Five_Omok.Omokgame import Omokgame
from Blind_Five_Omok.engine.status import GameStatus, StatusKind
from Blind_Five_Omok.gui.console_view import ConsoleView, stone_glyph


def make_view(**kwargs):
    kwargs.setdefault("logger", None)
    return ConsoleView(Omokgame(board_size=9, **kwargs), writer=lambda *_: None)


def test_select_and_place():
    v = make_view()
    keep, msg = v.handle_line("3 4")
    assert keep
    assert "Selected (3, 4)" in msg
    assert "?" in v.render()
    keep, msg = v.handle_line("place")
    assert msg == "Placed"
    assert v.game.cell_at(3, 4).occupant == FIRST


def test_rejections_are_reported():
    v = make_view()
    v.handle_line("1 1")
    v.handle_line("place")
    assert v.handle_line("1 1")[1] == "Rejected: cell occupied"
    assert v.handle_line("9 0")[1] == "Rejected: out of bounds"
    assert v.handle_line("place")[1] == "Rejected: no pending move"
    assert v.handle_line("a b")[1].startswith("Invalid input")


def test_auto_commit_places_immediately():
    v = make_view(auto_commit=True)
    assert v.handle_line("0 0")[1] == "Placed"
    assert v.game.active_player() == SECOND


def test_colour_commands():
    v = make_view()
    assert v.handle_line("color blue second")[1] == "Second plays blue"
    assert v.handle_line("color pink")[1] == "First plays pink"
    assert v.handle_line("color black")[1] == "Rejected: invalid appearance"
    assert v.handle_line("color blue third")[1] == "Player must be 'first' or 'second'"
    assert v.game.appearance(SECOND) == "blue"


def test_undo_restart_quit():
    v = make_view()
    v.handle_line("2 2")
    v.handle_line("place")
    assert v.handle_line("undo")[1] == "Undone"
    assert v.handle_line("undo")[1] == "Rejected: invalid state"
    assert v.handle_line("restart")[1] == "New game"
    assert v.handle_line("quit") == (False, "Bye")


def test_render_shows_clocks_and_status():
    v = make_view(start_seconds=125)
    text = v.render()
    assert "02:05" in text
    assert "First to move" in text
    assert len(text.splitlines()) == 1 + 9 + 2


def test_run_until_win():
    lines = iter(["0 0", "place", "0 1", "place", "1 0", "place", "1 1", "place",
                  "2 0", "place", "2 1", "place", "3 0", "place", "3 1", "place",
                  "4 0", "place", "quit"])
    game = Omokgame(board_size=9, logger=None)
    out = []
    v = ConsoleView(game, reader=lambda _prompt: next(lines), writer=out.append)
    status = v.run()
    assert status.kind is StatusKind.WON
    assert status.winner == FIRST
    assert out[-1] == "Bye"
    assert any("First wins!" in line for line in out)


def test_run_stops_on_end_of_input():
    def reader(_prompt):
        raise EOFError

    v = ConsoleView(Omokgame(board_size=9, logger=None), reader=reader, writer=lambda *_: None)
    assert v.run().is_in_progress
    assert not v.ticker.running


def test_ownership_hidden_while_colours_match():
    v = make_view(auto_commit=True)
    v.handle_line("color blue first")
    v.handle_line("color blue second")
    v.handle_line("0 0")
    v.handle_line("0 1")
    rows = v.render().splitlines()
    assert rows[1].split()[1] == "b"
    assert rows[2].split()[1] == "b"
    assert "X" not in "".join(rows[1:10])
    assert "O" not in "".join(rows[1:10])


def test_ownership_revealed_after_win():
    v = make_view(auto_commit=True)
    for x in range(4):
        v.handle_line(f"{x} 0")
        v.handle_line(f"{x} 1")
    v.handle_line("4 0")
    rows = v.render().splitlines()
    assert rows[1].split()[1:6] == ["X"] * 5
    assert rows[2].split()[1:5] == ["O"] * 4


def test_stone_glyphs():
    playing = GameStatus.in_progress(FIRST)
    assert stone_glyph(Cell(FIRST, "pink"), playing) == "k"
    assert stone_glyph(Cell(SECOND, "purple"), playing) == "p"
    assert stone_glyph(Cell(SECOND, "orange"), playing) == "o"
    assert stone_glyph(Cell(FIRST, "pink"), GameStatus.timed_out(FIRST)) == "X"
    assert stone_glyph(Cell(SECOND, "pink"), GameStatus.draw()) == "O"
