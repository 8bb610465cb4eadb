"""Board state container: stone ownership plus the cosmetic colour of each stone."""

from collections import namedtuple

# Player identities; raw grid values use EMPTY for vacant cells.
FIRST = -1
SECOND = 1
EMPTY = 0

PLAYER_NAMES = {FIRST: "First", SECOND: "Second"}

Cell = namedtuple("Cell", ["occupant", "appearance"])
EMPTY_CELL = Cell(None, None)


class OutOfBounds(ValueError):
    """Coordinate outside the grid."""


def opponent(player):
    return -player


def player_name(player):
    return PLAYER_NAMES.get(player, "Nobody")


class Board:
    def __init__(self, size=18):
        if size <= 0:
            raise ValueError("board size must be positive")
        # Occupancy as -1 (first), 0 (empty), 1 (second); colours kept alongside
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.colors = [[None] * size for _ in range(size)]

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y][x] == EMPTY

    def _check(self, x, y):
        if not self.in_bounds(x, y):
            raise OutOfBounds(f"({x}, {y}) is outside a {self.size}x{self.size} board")

    def get(self, x, y):
        self._check(x, y)
        occupant = self.cells[y][x]
        if occupant == EMPTY:
            return EMPTY_CELL
        return Cell(occupant, self.colors[y][x])

    def set(self, x, y, cell):
        """Overwrite a cell. Only bounds are checked; legality is the caller's job."""
        self._check(x, y)
        self.cells[y][x] = EMPTY if cell.occupant is None else cell.occupant
        self.colors[y][x] = None if cell.occupant is None else cell.appearance

    def place(self, x, y, player, appearance=None):
        """Place a stone; raise if out of bounds or occupied."""
        if player not in (FIRST, SECOND):
            raise ValueError("player must be FIRST (-1) or SECOND (1)")
        self._check(x, y)
        if self.cells[y][x] != EMPTY:
            raise ValueError("cell already occupied")
        self.set(x, y, Cell(player, appearance))

    def clear(self):
        for y in range(self.size):
            for x in range(self.size):
                self.cells[y][x] = EMPTY
                self.colors[y][x] = None

    def stone_count(self):
        """Count occupied cells by scanning the grid."""
        return sum(1 for row in self.cells for v in row if v != EMPTY)

    def is_full(self):
        return self.stone_count() >= self.size * self.size
