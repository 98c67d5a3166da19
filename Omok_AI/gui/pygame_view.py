"""Pygame board renderer and mouse input helper."""

from ..Board import BLACK, WHITE


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_BLACK_STONE = (20, 20, 20)
    COLOR_WHITE_STONE = (240, 240, 235)
    COLOR_LAST = (200, 0, 0)
    COLOR_WIN = (40, 170, 70)

    PANEL_HEIGHT = 80
    MARGIN = 30

    def __init__(self, board_size, window_size=720):
        import pygame

        self.board_size = board_size
        self.window_size = window_size
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size + self.PANEL_HEIGHT))
        pygame.display.set_caption("Omok")

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)

        self.tile_size = (window_size - 2 * self.MARGIN) / (board_size - 1)
        self.stone_radius = int(self.tile_size * 0.45)

    def _cell_center(self, row, col):
        return (
            self.MARGIN + col * self.tile_size,
            self.PANEL_HEIGHT + self.MARGIN + row * self.tile_size,
        )

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_grid(self):
        pygame = self._pygame
        board_rect = pygame.Rect(0, self.PANEL_HEIGHT, self.window_size, self.window_size)
        pygame.draw.rect(self.screen, self.COLOR_WOOD, board_rect)
        for i in range(self.board_size):
            pygame.draw.line(self.screen, self.COLOR_GRID, self._cell_center(i, 0), self._cell_center(i, self.board_size - 1), 1)
            pygame.draw.line(self.screen, self.COLOR_GRID, self._cell_center(0, i), self._cell_center(self.board_size - 1, i), 1)

    def _draw_stones(self, snapshot):
        pygame = self._pygame
        winning = set(snapshot.winning_line)
        for row in range(snapshot.size):
            for col in range(snapshot.size):
                stone = snapshot.cell(row, col)
                if stone not in (BLACK, WHITE):
                    continue
                center = self._cell_center(row, col)
                fill = self.COLOR_BLACK_STONE if stone == BLACK else self.COLOR_WHITE_STONE
                pygame.draw.circle(self.screen, fill, center, self.stone_radius)
                if (row, col) in winning:
                    pygame.draw.circle(self.screen, self.COLOR_WIN, center, self.stone_radius, 4)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        # A simple red dot in the center of the piece
        self._pygame.draw.circle(self.screen, self.COLOR_LAST, self._cell_center(*last_move), self.tile_size * 0.15)

    def _draw_info_panel(self, snapshot):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)

        center = (self.window_size / 2, self.PANEL_HEIGHT / 2)
        if snapshot.result_text:
            self._draw_text(snapshot.result_text, self.font_large, self.COLOR_TEXT, center)
        else:
            player = "Black" if snapshot.current_color == BLACK else "White"
            self._draw_text(f"{player} to move", self.font_medium, self.COLOR_TEXT, center)

    def render(self, snapshot):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_grid()
        self._draw_stones(snapshot)
        self._draw_last_move_marker(snapshot.last_move)
        self._draw_info_panel(snapshot)
        self._pygame.display.flip()

    def _get_coords_from_mouse(self, pos):
        mx, my = pos
        col = int(round((mx - self.MARGIN) / self.tile_size))
        row = int(round((my - self.PANEL_HEIGHT - self.MARGIN) / self.tile_size))
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None

    def wait_for_move(self, board, player_color):
        pygame = self._pygame
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise SystemExit("Window closed")
                if event.type == pygame.MOUSEBUTTONDOWN:
                    coords = self._get_coords_from_mouse(event.pos)
                    if coords:
                        return coords
            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
