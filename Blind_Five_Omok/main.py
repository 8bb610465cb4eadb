"""Entry point for Blind Five. Load settings, build the game, hand it to a view."""

try:
    from utils.cli import parse_args
    from utils.logger import log_event
    from utils.settings import load_settings
    from Board import player_name
    from Omokgame import Omokgame
    from engine.status import StatusKind
    from gui.console_view import ConsoleView
    from gui.layout import BoardLayout, MARGIN
except ImportError:
    from Blind_Five_Omok.utils.cli import parse_args
    from Blind_Five_Omok.utils.logger import log_event
    from Blind_Five_Omok.utils.settings import load_settings
    from Blind_Five_Omok.Board import player_name
    from Blind_Five_Omok.Omokgame import Omokgame
    from Blind_Five_Omok.engine.status import StatusKind
    from Blind_Five_Omok.gui.console_view import ConsoleView
    from Blind_Five_Omok.gui.layout import BoardLayout, MARGIN


def describe_outcome(status):
    if status.kind is StatusKind.WON:
        return f"{player_name(status.winner)} wins"
    if status.kind is StatusKind.TIMED_OUT:
        return f"{player_name(status.winner)} wins on time"
    if status.kind is StatusKind.DRAW:
        return "Draw"
    return "Game abandoned"


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings).with_overrides(args)

    game = Omokgame.from_settings(settings, logger=log_event)

    if args.gui:
        try:
            from gui.pygame_view import PygameView
        except ImportError:
            from Blind_Five_Omok.gui.pygame_view import PygameView

        layout = BoardLayout(
            settings.board_size,
            settings.palette,
            board_px=settings.window_size - 2 * MARGIN,
        )
        view = PygameView(game, layout=layout)
    else:
        view = ConsoleView(game)

    status = view.run()
    print(describe_outcome(status))
    return status


if __name__ == "__main__":
    main()
