"""Pygame-based board renderer and input adapter for a running Omokgame."""

try:
    from Board import FIRST, SECOND, player_name
    from engine.status import StatusKind
    from gui.layout import BoardLayout, PANEL_HEIGHT, SWATCH
    from utils.timer import TickSource, format_time, pump_ticks
except ImportError:
    from Blind_Five_Omok.Board import FIRST, SECOND, player_name
    from Blind_Five_Omok.engine.status import StatusKind
    from Blind_Five_Omok.gui.layout import BoardLayout, PANEL_HEIGHT, SWATCH
    from Blind_Five_Omok.utils.timer import TickSource, format_time, pump_ticks


def apply_hit(game, hit):
    """Forward a resolved click to the engine. Returns the command Result, or None."""
    if hit is None:
        return None
    if hit.kind == "cell":
        return game.stage_move(*hit.value)
    if hit.kind == "place":
        return game.commit_move()
    if hit.kind == "undo":
        return game.undo()
    if hit.kind == "restart":
        return game.restart()
    if hit.kind == "swatch":
        player, color = hit.value
        return game.set_appearance(player, color)
    return None


def stone_color(cell, status):
    """Colour to paint a stone: its chosen colour while blind, black/white once the game is over."""
    if status.is_in_progress:
        return cell.appearance or "black"
    return "black" if cell.occupant == FIRST else "white"


def status_message(game):
    status = game.status()
    if status.kind is StatusKind.WON:
        return f"{player_name(status.winner)} wins!"
    if status.kind is StatusKind.TIMED_OUT:
        return f"{player_name(status.player)} timed out. {player_name(status.winner)} wins!"
    if status.kind is StatusKind.DRAW:
        return "Draw"
    return f"{player_name(status.active)} to move"


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (4, 30, 73)
    COLOR_BOARD = (211, 227, 253)
    COLOR_GRID = (4, 30, 73)
    COLOR_TEXT = (230, 230, 230)
    COLOR_PENDING = (200, 0, 0)
    COLOR_BUTTON = (60, 80, 120)

    STONE_RADIUS = 19

    def __init__(self, game, layout=None, ticker=None):
        import pygame

        self._pygame = pygame
        self.game = game
        self.layout = layout or BoardLayout(game.board_size, game.palette)
        self.ticker = ticker or TickSource()
        self.running = False

        pygame.init()
        self.screen = pygame.display.set_mode((self.layout.width, self.layout.height))
        pygame.display.set_caption("Blind Five")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_board(self):
        pygame = self._pygame
        layout = self.layout
        ox, oy = layout.board_origin
        pygame.draw.rect(self.screen, self.COLOR_BOARD, pygame.Rect(ox, oy, layout.canvas_px, layout.canvas_px))
        tile = layout.tile
        for x in range(layout.board_size):
            for y in range(layout.board_size):
                px, py = layout.pixel_of(x, y)
                pygame.draw.rect(self.screen, self.COLOR_GRID, pygame.Rect(px, py, tile, tile), 1)
        for x, y in layout.star_points():
            pygame.draw.circle(self.screen, self.COLOR_GRID, layout.pixel_of(x, y), 4)

    def _draw_stones(self):
        board = self.game.board
        status = self.game.status()
        for y in range(board.size):
            for x in range(board.size):
                cell = board.get(x, y)
                if cell.occupant is None:
                    continue
                color = self._pygame.Color(stone_color(cell, status))
                self._pygame.draw.circle(self.screen, color, self.layout.pixel_of(x, y), self.STONE_RADIUS)

    def _draw_pending_marker(self):
        pending = self.game.pending_move()
        if not pending:
            return
        tile = self.layout.tile
        cx, cy = self.layout.pixel_of(*pending)
        rect = self._pygame.Rect(cx - tile / 2, cy - tile / 2, tile, tile)
        self._pygame.draw.rect(self.screen, self.COLOR_PENDING, rect, 3)

    def _draw_last_move_marker(self):
        last = self.game.last_move()
        if last is None:
            return
        cx, cy = self.layout.pixel_of(*last.position)
        self._pygame.draw.circle(self.screen, self.COLOR_GRID, (cx, cy), self.layout.tile * 0.15)

    def _draw_info_panel(self):
        panel_rect = self._pygame.Rect(0, 0, self.layout.width, PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)
        font = self.font_medium if self.game.status().is_in_progress else self.font_large
        self._draw_text(status_message(self.game), font, self.COLOR_TEXT, (self.layout.width / 2, PANEL_HEIGHT / 2))

    def _draw_player_areas(self):
        pygame = self._pygame
        active = self.game.active_player()
        for player in (FIRST, SECOND):
            top = self.layout.player_block_y(player)
            label = player_name(player) + (" *" if player == active else "")
            self._draw_text(label, self.font_medium, self.COLOR_TEXT, (self.layout.side_x + 110, top + 15))
            clock = format_time(self.game.remaining_time(player))
            self._draw_text(clock, self.font_large, self.COLOR_TEXT, (self.layout.side_x + 110, top + 55))
            chosen = self.game.appearance(player)
            for color, (x, y, w, h) in self.layout.swatch_rects(player).items():
                pygame.draw.rect(self.screen, pygame.Color(color), pygame.Rect(x, y, w, h))
                if color == chosen:
                    pygame.draw.rect(self.screen, self.COLOR_TEXT, pygame.Rect(x - 2, y - 2, SWATCH + 4, SWATCH + 4), 2)

    def _draw_buttons(self):
        pygame = self._pygame
        labels = {"place": "Place", "undo": "Undo", "restart": "Restart"}
        for name, (x, y, w, h) in self.layout.buttons.items():
            # Place only matters for the active player in select-then-place mode
            if name == "place" and (self.game.auto_commit or not self.game.status().is_in_progress):
                continue
            pygame.draw.rect(self.screen, self.COLOR_BUTTON, pygame.Rect(x, y, w, h))
            self._draw_text(labels[name], self.font_medium, self.COLOR_TEXT, (x + w / 2, y + h / 2))

    def render(self):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_board()
        self._draw_stones()
        self._draw_pending_marker()
        self._draw_last_move_marker()
        self._draw_info_panel()
        self._draw_player_areas()
        self._draw_buttons()
        self._pygame.display.flip()

    def handle_click(self, pos):
        return apply_hit(self.game, self.layout.hit_test(*pos))

    def run(self):
        """Event loop: clicks become engine commands, elapsed time becomes ticks."""
        pygame = self._pygame
        self.running = True
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(event.pos)
                pump_ticks(self.game, self.ticker)
                self.render()
                pygame.time.delay(10)
        finally:
            self.close()
        return self.game.status()

    def close(self):
        self.ticker.cancel()
        self._pygame.quit()
