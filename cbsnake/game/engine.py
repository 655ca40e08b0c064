"""
Checkbox Snake game engine.

Owns the grid geometry, the snake body, the food and the run state. Drawing,
keyboard handling and frame scheduling are done by collaborators that are
handed to the engine at construction.
"""

import random
from collections import deque
from enum import Enum

from .. import config
from ..render.board import CheckboxBoard
from .direction import Direction, DirectionalInput, build_direction_table, wrap_index


class RunState(Enum):
    STOPPED = 'stopped'
    RUNNING = 'running'


def clamp_difficulty(value):
    """Clamp a difficulty value to the supported range, 1 for anything unparseable"""
    try:
        value = int(value)
    except (TypeError, ValueError):
        return config.MIN_DIFFICULTY
    return min(max(config.MIN_DIFFICULTY, value), config.MAX_DIFFICULTY)


class GameEngine:
    """Snake on a flat row-major grid of on/off cells"""

    def __init__(self, grid_size=config.DEFAULT_GRID_SIZE, speed=config.DEFAULT_SPEED,
                 difficulty=config.DEFAULT_DIFFICULTY, renderer=None, scheduler=None,
                 on_score=None, rng=None):
        # Args:
        #   grid_size: Cells per row, clamped to MIN_GRID_SIZE
        #   speed: Minimum milliseconds between two game steps
        #   difficulty: Pieces of food on the board (clamped 1-5 when a game starts)
        #   renderer: Cell sink with set/clear/clear_all (headless board if None)
        #   scheduler: Object with request_frame(callback), or None to drive on_frame by hand
        #   on_score: Called with the new score after each growth
        #   rng: random.Random used for food placement
        self.grid_size = max(config.MIN_GRID_SIZE, grid_size)
        self.cell_count = self.grid_size * self.grid_size
        self.directions = build_direction_table(self.grid_size)

        self.speed = speed
        self.difficulty = difficulty
        self.renderer = renderer if renderer is not None else CheckboxBoard(self.grid_size)
        self.scheduler = scheduler
        self.on_score = on_score
        self.rng = rng or random.Random()

        # Game state
        self.snake_positions = deque(config.START_BODY)
        self.food_positions = []
        self.direction = Direction.RIGHT
        self.travel_direction = Direction.RIGHT  # direction of the last step taken
        self.state = RunState.STOPPED
        self.last_timestamp = None
        self._frame_pending = False

    # Read-only views

    @property
    def running(self):
        return self.state == RunState.RUNNING

    @property
    def head(self):
        return self.snake_positions[0]

    @property
    def body(self):
        return tuple(self.snake_positions)

    @property
    def food(self):
        return tuple(self.food_positions)

    @property
    def score(self):
        return len(self.snake_positions) - 1

    # Input

    def set_direction(self, user_input):
        """Apply one directional or pause input. Invalid inputs are ignored."""
        if user_input == DirectionalInput.PAUSE:
            if self.running:
                self.pause()
            else:
                self.start()
            return

        if not isinstance(user_input, DirectionalInput):
            return

        new_direction = user_input.direction
        # No reversing into the segment behind the head
        if new_direction == self.travel_direction.opposite:
            return
        self.direction = new_direction

    # Lifecycle

    def start(self):
        """Begin a new game or resume a paused one"""
        # A fresh game has no food on the board yet
        if not self.food_positions:
            self.difficulty = clamp_difficulty(self.difficulty)
            for _ in range(self.difficulty):
                position = self.new_food_position()
                if position is not None:
                    self.food_positions.append(position)
            self._draw_snake()

        if self.running:
            return
        self.state = RunState.RUNNING
        self.last_timestamp = None
        self._request_frame()

    def pause(self):
        self.state = RunState.STOPPED

    def end(self):
        """Reset everything to the state of a fresh game.

        The score display is left alone so the finished game's score stays visible.
        """
        self.direction = Direction.RIGHT
        self.travel_direction = Direction.RIGHT
        self.snake_positions = deque(config.START_BODY)
        self.food_positions = []
        self.renderer.clear_all()

    # Game step

    def tick(self):
        """Advance the snake by one cell"""
        direction = self.direction
        new_head = self.next_head_position(direction)
        grow = self.check_food_collision(new_head)

        # Shift the body: new head in front, tail dropped unless growing
        self.snake_positions.appendleft(new_head)
        if not grow:
            tail = self.snake_positions.pop()
            self.renderer.clear(tail)
        self.renderer.set(new_head)
        self.travel_direction = direction

        if grow:
            self._replace_food(new_head)
            self._emit_score()

        return grow

    def next_head_position(self, direction=None):
        """Index the head moves to on the next step, after wrap-around"""
        direction = direction or self.direction
        raw = self.head + self.directions[direction]
        return wrap_index(raw, direction, self.grid_size)

    def check_food_collision(self, position=None):
        """Whether `position` (default: the next head position) holds food"""
        if position is None:
            position = self.next_head_position()
        return position in self.food_positions

    def check_self_collision(self):
        """End the game if the head ran into the body. Returns True on collision."""
        # A snake this short cannot reach its own body
        if len(self.snake_positions) <= 4:
            return False

        head = self.snake_positions[0]
        if head in list(self.snake_positions)[1:]:
            self.state = RunState.STOPPED
            self.end()
            return True
        return False

    # Food

    def new_food_position(self):
        """Pick a random free cell for food and switch it on.

        Returns None when the snake and the food cover the whole board.
        """
        occupied = set(self.snake_positions) | set(self.food_positions)
        if len(occupied) >= self.cell_count:
            return None

        position = self.rng.randrange(self.cell_count)
        while position in occupied:
            position = self.rng.randrange(self.cell_count)

        self.renderer.set(position)
        return position

    def _replace_food(self, eaten):
        remaining = [p for p in self.food_positions if p != eaten]
        eaten_count = len(self.food_positions) - len(remaining)
        self.food_positions = remaining
        for _ in range(eaten_count):
            position = self.new_food_position()
            if position is not None:
                self.food_positions.append(position)

    # Scheduling

    def on_frame(self, timestamp):
        """Frame callback for the scheduler. Returns True if a game step ran."""
        self._frame_pending = False
        if not self.running:
            return False

        stepped = False
        if self.last_timestamp is None:
            self.last_timestamp = timestamp

        if timestamp - self.last_timestamp >= self.speed:
            self.tick()
            self.check_self_collision()
            self.last_timestamp = timestamp
            stepped = True

        if self.running:
            self._request_frame()
        return stepped

    def _request_frame(self):
        if self.scheduler is None or self._frame_pending:
            return
        self._frame_pending = True
        self.scheduler.request_frame(self.on_frame)

    # Collaborator helpers

    def _draw_snake(self):
        for position in self.snake_positions:
            self.renderer.set(position)

    def _emit_score(self):
        if self.on_score is not None:
            self.on_score(self.score)
