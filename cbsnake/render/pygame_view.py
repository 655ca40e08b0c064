"""
Pygame front-end for Checkbox Snake.

Draws the board as a grid of checkboxes and translates keyboard events into
DirectionalInput values for the engine.
"""

import pygame

from .. import config
from ..game.direction import DirectionalInput, row_col
from .board import CheckboxBoard


KEY_BINDINGS = {
    pygame.K_RIGHT: DirectionalInput.RIGHT,
    pygame.K_d: DirectionalInput.RIGHT,
    pygame.K_LEFT: DirectionalInput.LEFT,
    pygame.K_a: DirectionalInput.LEFT,
    pygame.K_UP: DirectionalInput.UP,
    pygame.K_w: DirectionalInput.UP,
    pygame.K_DOWN: DirectionalInput.DOWN,
    pygame.K_s: DirectionalInput.DOWN,
    pygame.K_p: DirectionalInput.PAUSE,
    pygame.K_ESCAPE: DirectionalInput.PAUSE,
}

# Keys acting as the "start" button
START_KEYS = (pygame.K_RETURN, pygame.K_SPACE)

# Number keys choosing the food count of the next game
DIFFICULTY_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}


def translate_key(key):
    """DirectionalInput for a pygame key code, or None if the key is unbound"""
    return KEY_BINDINGS.get(key)


def translate_difficulty_key(key):
    """Difficulty for a number key, or None for any other key"""
    return DIFFICULTY_KEYS.get(key)


class PygameCheckboxView(CheckboxBoard):
    """Checkbox board that can also draw itself into a pygame window"""

    def __init__(self, grid_size, cell_px=config.CELL_PX, caption="Checkbox Snake"):
        super().__init__(grid_size)
        self.cell_px = cell_px
        self.caption = caption
        self.score = 0
        self.difficulty = config.DEFAULT_DIFFICULTY
        self.message = "Press Enter to start"

        self.width = grid_size * cell_px
        self.height = grid_size * cell_px + config.HUD_HEIGHT
        self.window = None
        self.clock = None
        self.font = None

    def open(self):
        pygame.init()
        self.window = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.caption)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 28)

    def show_score(self, score):
        self.score = score

    def show_difficulty(self, difficulty):
        self.difficulty = difficulty

    def cell_rect(self, index):
        row, col = row_col(index, self.grid_size)
        margin = config.CELL_MARGIN
        return pygame.Rect(
            col * self.cell_px + margin,
            row * self.cell_px + margin,
            self.cell_px - 2 * margin,
            self.cell_px - 2 * margin
        )

    def draw(self):
        """Render the whole board and the score line"""
        if self.window is None:
            return

        self.window.fill(config.BACKGROUND)

        for index, checked in enumerate(self.cells):
            rect = self.cell_rect(index)
            if checked:
                pygame.draw.rect(self.window, config.CHECK_FILL, rect, border_radius=3)
                # Tick mark
                pygame.draw.lines(self.window, config.BOX_FILL, False, [
                    (rect.left + rect.width * 0.2, rect.top + rect.height * 0.55),
                    (rect.left + rect.width * 0.42, rect.top + rect.height * 0.75),
                    (rect.left + rect.width * 0.8, rect.top + rect.height * 0.28),
                ], 2)
            else:
                pygame.draw.rect(self.window, config.BOX_FILL, rect, border_radius=3)
                pygame.draw.rect(self.window, config.BOX_BORDER, rect, 1, border_radius=3)

        hud_top = self.grid_size * self.cell_px
        score_text = self.font.render(f"Score: {self.score}   Difficulty: {self.difficulty}", True, config.TEXT)
        self.window.blit(score_text, (10, hud_top + 10))
        if self.message:
            message_text = self.font.render(self.message, True, config.TEXT)
            self.window.blit(message_text, (10, hud_top + 34))

        pygame.display.flip()

    def tick(self, fps=config.FPS):
        if self.clock is not None:
            self.clock.tick(fps)

    def close(self):
        if self.window is not None:
            pygame.quit()
            self.window = None
