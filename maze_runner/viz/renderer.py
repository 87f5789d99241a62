import logging

import pygame

from maze_runner.core.errors import MazeError
from maze_runner.core.grid import Grid
from maze_runner.game.controls import direction_for_key, drag_direction
from maze_runner.game.session import GameSession, GameStatus, MoveRepeater
from maze_runner.viz.recorder import VideoRecorder, default_output_file

logger = logging.getLogger(__name__)


class GameRenderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_START = (60, 100, 160)  # Blue tint
    COLOR_END = (60, 160, 90)
    COLOR_PLAYER = (255, 215, 0)  # Gold
    COLOR_TEXT = (255, 255, 255)
    COLOR_WIN = (120, 230, 120)

    # key -> (width change, height change)
    RESIZE_KEYS = {
        pygame.K_LEFTBRACKET: (-1, 0),
        pygame.K_RIGHTBRACKET: (1, 0),
        pygame.K_MINUS: (0, -1),
        pygame.K_EQUALS: (0, 1),
    }

    def __init__(self, session: GameSession):
        self.session = session
        config = session.config
        self.screen_width = config.screen_width
        self.screen_height = config.screen_height
        self.fps = config.fps
        self.drag_threshold = config.drag_threshold

        # Layout
        self.hud_height = 70
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0

        self.repeater = MoveRepeater(session, interval_ms=config.move_interval_ms)
        self.drag_start = None

        self.recorder = VideoRecorder(active=config.record)
        if config.record:
            self.recorder.output_file = default_output_file(config.width, config.height)

        self.font = None
        self.big_font = None
        self.running = True
        self.clock = None
        self.surface = None

    def fit_to_screen(self):
        """Auto-adjust cell size and offset to fit the maze below the HUD."""
        grid = self.session.grid
        if grid is None:
            return
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - self.hud_height - (padding * 2)

        self.cell_size = max(2.0, min(available_w / grid.width, available_h / grid.height))

        total_maze_w = grid.width * self.cell_size
        total_maze_h = grid.height * self.cell_size
        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = self.hud_height + (self.screen_height - self.hud_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.big_font = pygame.font.SysFont("Consolas", 32, bold=True)
        self.update_caption()
        self.fit_to_screen()

    def update_caption(self):
        grid = self.session.grid
        size = f"{grid.width}x{grid.height}" if grid else "no maze"
        pygame.display.set_caption(f"Maze Runner - {size}")

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def resize_maze(self, dw=0, dh=0):
        """Regenerates at the current size shifted by (dw, dh), clamped to the allowed range."""
        config = self.session.config
        width = min(max(self.session.width + dw, config.min_dimension), config.max_dimension)
        height = min(max(self.session.height + dh, config.min_dimension), config.max_dimension)
        self.regenerate(width, height)

    def regenerate(self, width=None, height=None):
        self.repeater.stop()
        self.drag_start = None
        try:
            self.session.new_maze(width, height)
        except MazeError:
            # Session is in ERROR state; the HUD shows it
            logger.exception("Could not generate a new maze")
        self.update_caption()
        self.fit_to_screen()

    def handle_input(self):
        now = pygame.time.get_ticks()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self.regenerate()
                elif event.key in self.RESIZE_KEYS:
                    self.resize_maze(*self.RESIZE_KEYS[event.key])
                else:
                    direction = direction_for_key(event.key)
                    if direction is not None:
                        self.session.move(direction)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.session.status in (GameStatus.READY, GameStatus.PLAYING):
                    self.repeater.stop()
                    self.drag_start = event.pos

            elif event.type == pygame.MOUSEMOTION and self.drag_start is not None:
                dx = event.pos[0] - self.drag_start[0]
                dy = event.pos[1] - self.drag_start[1]
                direction = drag_direction(dx, dy, self.drag_threshold)
                if direction is not None:
                    self.repeater.start(direction, now)
                elif self.repeater.active:
                    self.repeater.stop()

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.repeater.stop()
                self.drag_start = None

    def draw_cell_fill(self, pos, color):
        sx, sy = self.world_to_screen(*pos)
        inset = max(1, int(self.cell_size * 0.2))
        size = max(1, int(self.cell_size) - inset * 2)
        pygame.draw.rect(self.surface, color, (int(sx) + inset, int(sy) + inset, size, size))

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        grid = self.session.grid
        if grid is None:
            return

        self.draw_cell_fill(grid.entrance, self.COLOR_START)
        self.draw_cell_fill(grid.exit, self.COLOR_END)

        size = int(self.cell_size) + 1
        wall_color = self.COLOR_WALL
        for y in range(grid.height):
            for x in range(grid.width):
                cell = grid.cells[y * grid.width + x]
                px = int(x * self.cell_size + self.offset_x)
                py = int(y * self.cell_size + self.offset_y)

                if cell & Grid.BOTTOM:
                    pygame.draw.line(self.surface, wall_color, (px, py + size), (px + size, py + size), 2)
                if cell & Grid.RIGHT:
                    pygame.draw.line(self.surface, wall_color, (px + size, py), (px + size, py + size), 2)

                # Outer edges only; inner top/left walls are drawn by the neighbour
                if y == 0 and (cell & Grid.TOP):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px + size, py), 2)
                if x == 0 and (cell & Grid.LEFT):
                    pygame.draw.line(self.surface, wall_color, (px, py), (px, py + size), 2)

        self.draw_cell_fill(self.session.position, self.COLOR_PLAYER)

    def draw_hud(self):
        status = self.session.status
        info = []
        summary = f"Size: {self.session.width}x{self.session.height}"
        if status in (GameStatus.PLAYING, GameStatus.WON):
            summary += f"   Time: {self.session.elapsed_seconds}s"
        info.append(summary)
        if status in (GameStatus.READY, GameStatus.PLAYING):
            info.append("Arrows/WASD or drag: move  R: new maze  [ ]: width  - =: height  Esc: quit")
        elif status is GameStatus.ERROR:
            info.append("Error loading maze. Press R to retry.")
        elif status is GameStatus.GENERATING:
            info.append("Generating maze...")
        if self.recorder.active:
            info.append("REC")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

        if status is GameStatus.WON:
            lbl = self.big_font.render("You Escaped!", True, self.COLOR_WIN)
            self.surface.blit(lbl, (self.screen_width - lbl.get_width() - 20, 15))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.repeater.tick(pygame.time.get_ticks())

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(self.fps)

        self.recorder.stop()
        pygame.quit()
