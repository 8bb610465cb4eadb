"""CLI options for board size, clock, placement mode and settings path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Blind Five (two-player five in a row with a countdown)")
    parser.add_argument("--board-size", type=int, help="Grid lines per side (default from settings)")
    parser.add_argument("--time-limit", type=int, help="Seconds on each player's clock")
    parser.add_argument("--win-length", type=int, help="Stones in a row needed to win")
    parser.add_argument(
        "--auto-commit",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Place on click instead of select-then-place",
    )
    parser.add_argument("--settings", default=None, help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame window (mouse input)")
    return parser.parse_args(argv)
