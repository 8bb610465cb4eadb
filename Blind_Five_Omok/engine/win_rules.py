"""Line-of-five detection anchored at the stone that was just placed."""

try:
    from Board import EMPTY
except ImportError:
    from Blind_Five_Omok.Board import EMPTY

WIN_LENGTH = 5

# horizontal, vertical, diagonal, anti-diagonal
AXES = [(1, 0), (0, 1), (1, 1), (1, -1)]


def _count_dir(board, x, y, dx, dy, player, limit):
    """Count contiguous stones of player from (x, y) (exclusive) in (dx, dy), up to limit."""
    count = 0
    cx, cy = x + dx, y + dy
    while count < limit and board.in_bounds(cx, cy) and board.cells[cy][cx] == player:
        count += 1
        cx += dx
        cy += dy
    return count


def line_length(board, x, y, dx, dy, win_length=WIN_LENGTH):
    """Length of the run through (x, y) along one axis, each side capped at win_length - 1."""
    player = board.cells[y][x]
    if player == EMPTY:
        return 0
    limit = win_length - 1
    forward = _count_dir(board, x, y, dx, dy, player, limit)
    backward = _count_dir(board, x, y, -dx, -dy, player, limit)
    return 1 + forward + backward


def winning_axis(board, x, y, win_length=WIN_LENGTH):
    """Return the first axis (dx, dy) completing a line through (x, y), or None."""
    if not board.in_bounds(x, y):
        return None
    for dx, dy in AXES:
        if line_length(board, x, y, dx, dy, win_length) >= win_length:
            return dx, dy
    return None


def evaluate(board, last_move, win_length=WIN_LENGTH):
    """True if the stone at last_move completes win_length or more in a row (overlines win)."""
    x, y = last_move.position if hasattr(last_move, "position") else last_move
    return winning_axis(board, x, y, win_length) is not None
