"""Pixel geometry for the board and controls. No pygame here, so it is testable headless."""

import math
from collections import namedtuple

Hit = namedtuple("Hit", ["kind", "value"])

BOARD_PX = 800
MARGIN = 30
PANEL_HEIGHT = 80
SIDE_WIDTH = 260
SWATCH = 28
SWATCH_GAP = 6
BUTTON_W = 220
BUTTON_H = 48


def _contains(rect, px, py):
    x, y, w, h = rect
    return x <= px < x + w and y <= py < y + h


class BoardLayout:
    def __init__(self, board_size, palette, players=(-1, 1), board_px=BOARD_PX, margin=MARGIN):
        self.board_size = board_size
        self.palette = tuple(palette)
        self.players = tuple(players)
        self.board_px = board_px
        self.margin = margin
        self.tile = board_px / board_size
        self.board_origin = (0, PANEL_HEIGHT)
        self.canvas_px = board_px + 2 * margin
        self.width = self.canvas_px + SIDE_WIDTH
        self.height = PANEL_HEIGHT + self.canvas_px
        self.side_x = self.canvas_px + 20
        self.buttons = {
            "place": (self.side_x, PANEL_HEIGHT + 470, BUTTON_W, BUTTON_H),
            "undo": (self.side_x, PANEL_HEIGHT + 530, BUTTON_W, BUTTON_H),
            "restart": (self.side_x, PANEL_HEIGHT + 590, BUTTON_W, BUTTON_H),
        }

    def _grid_origin(self):
        ox, oy = self.board_origin
        return ox + self.margin, oy + self.margin

    def pixel_of(self, x, y):
        """Centre of the intersection for grid cell (x, y)."""
        gx, gy = self._grid_origin()
        return gx + x * self.tile, gy + y * self.tile

    def cell_from_pixel(self, px, py):
        """Nearest intersection to a pointer position, or None when off the board."""
        gx, gy = self._grid_origin()
        grid_x = math.floor((px - gx + self.tile / 2) / self.tile)
        grid_y = math.floor((py - gy + self.tile / 2) / self.tile)
        if 0 <= grid_x < self.board_size and 0 <= grid_y < self.board_size:
            return grid_x, grid_y
        return None

    def star_points(self):
        coords = range(3, self.board_size, 6)
        return [(x, y) for x in coords for y in coords]

    def player_block_y(self, player):
        return PANEL_HEIGHT + 20 + self.players.index(player) * 220

    def swatch_rects(self, player):
        top = self.player_block_y(player) + 80
        rects = {}
        for i, color in enumerate(self.palette):
            rects[color] = (self.side_x + i * (SWATCH + SWATCH_GAP), top, SWATCH, SWATCH)
        return rects

    def hit_test(self, px, py):
        """Translate a click into a Hit, or None when it lands on nothing."""
        for name, rect in self.buttons.items():
            if _contains(rect, px, py):
                return Hit(name, None)
        for player in self.players:
            for color, rect in self.swatch_rects(player).items():
                if _contains(rect, px, py):
                    return Hit("swatch", (player, color))
        if px < self.canvas_px:
            cell = self.cell_from_pixel(px, py)
            if cell is not None:
                return Hit("cell", cell)
        return None
