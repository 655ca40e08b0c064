#!/usr/bin/env python3
"""
Checkbox Snake Demo

Play Snake on a board of checkboxes in a pygame window.
"""

import pygame

from . import config
from .game.engine import GameEngine, clamp_difficulty
from .game.scheduler import FrameScheduler
from .render.pygame_view import (
    PygameCheckboxView, START_KEYS, translate_difficulty_key, translate_key
)


def ask_settings():
    """Prompt for difficulty and grid size, falling back to the defaults"""
    try:
        difficulty = int(input(f"Difficulty 1-5 (default {config.DEFAULT_DIFFICULTY}): ")
                         or config.DEFAULT_DIFFICULTY)
        grid_size = int(input(f"Grid size (default {config.DEFAULT_GRID_SIZE}): ")
                        or config.DEFAULT_GRID_SIZE)
    except ValueError:
        print("Invalid input, using defaults")
        difficulty = config.DEFAULT_DIFFICULTY
        grid_size = config.DEFAULT_GRID_SIZE

    return clamp_difficulty(difficulty), max(config.MIN_GRID_SIZE, grid_size)


def handle_key(engine, view, key):
    """Route one key press to the engine"""
    if key in START_KEYS:
        engine.start()
        return

    difficulty = translate_difficulty_key(key)
    if difficulty is not None:
        # Only between games, a running or paused game keeps its food count
        if not engine.running and not engine.food:
            engine.difficulty = difficulty
            view.show_difficulty(difficulty)
        return

    user_input = translate_key(key)
    if user_input is not None:
        engine.set_direction(user_input)


def status_message(engine):
    if engine.running:
        return ""
    if engine.food:
        return "Paused - P to resume"
    return "Press Enter to start, 1-5 for difficulty"


def play(difficulty=config.DEFAULT_DIFFICULTY, grid_size=config.DEFAULT_GRID_SIZE,
         speed=config.DEFAULT_SPEED, engine=None):
    """Run the game window until it is closed. Returns the best score."""
    if engine is None:
        engine = GameEngine(grid_size=grid_size, speed=speed, difficulty=difficulty)
    view = PygameCheckboxView(engine.grid_size)
    scheduler = FrameScheduler()
    engine.renderer = view
    engine.scheduler = scheduler
    engine.on_score = view.show_score

    view.show_score(engine.score)
    view.show_difficulty(clamp_difficulty(engine.difficulty))
    view.open()

    print("Arrows/WASD to steer, P/Esc to pause, Enter to start, 1-5 for difficulty")
    print("Close the window to exit")

    best_score = engine.score
    games = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                handle_key(engine, view, event.key)

        was_running = engine.running
        score_before = engine.score
        scheduler.run_pending(pygame.time.get_ticks())

        # Collision resets the board, a pause keeps the food in place
        if was_running and not engine.running and not engine.food:
            games += 1
            best_score = max(best_score, score_before)
            print(f"Game {games} over! Score: {score_before}")

        view.message = status_message(engine)
        best_score = max(best_score, engine.score)
        view.draw()
        view.tick()

    engine.pause()
    scheduler.cancel_all()
    view.close()
    return best_score


def main():
    """Main demo function"""
    print("Checkbox Snake")
    print("=" * 30)
    try:
        difficulty, grid_size = ask_settings()
        print(f"Difficulty {difficulty}, {grid_size}x{grid_size} board")
        best_score = play(difficulty=difficulty, grid_size=grid_size)
        print(f"\nBest score: {best_score}")
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    except Exception as e:
        print(f"\nError: {e}")
        print("Make sure you have pygame installed: pip install pygame")


if __name__ == "__main__":
    main()
