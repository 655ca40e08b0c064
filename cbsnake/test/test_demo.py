import random
from collections import deque

import pygame
import pytest

from cbsnake import demo
from cbsnake.game import Direction, GameEngine, RunState
from cbsnake.render.pygame_view import PygameCheckboxView


def test_ask_settings_defaults(monkeypatch):
    monkeypatch.setattr('builtins.input', lambda prompt: "")
    assert demo.ask_settings() == (1, 30)


def test_ask_settings_clamps(monkeypatch):
    answers = iter(["8", "6"])
    monkeypatch.setattr('builtins.input', lambda prompt: next(answers))
    assert demo.ask_settings() == (5, 10)


def test_ask_settings_invalid(monkeypatch):
    monkeypatch.setattr('builtins.input', lambda prompt: "hard")
    assert demo.ask_settings() == (1, 30)


def key_event(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def run_frames(monkeypatch, frames, engine):
    """Play with one scripted list of events per frame, 100 ms apart"""
    monkeypatch.setenv('SDL_VIDEODRIVER', 'dummy')
    monkeypatch.setenv('SDL_AUDIODRIVER', 'dummy')
    frame_iter = iter(frames)
    clock = {'now': -100}

    def fake_get():
        step = next(frame_iter, [pygame.event.Event(pygame.QUIT)])
        return step(engine) if callable(step) else step

    def fake_ticks():
        clock['now'] += 100
        return clock['now']

    monkeypatch.setattr(pygame.event, 'get', fake_get)
    monkeypatch.setattr(pygame.time, 'get_ticks', fake_ticks)
    monkeypatch.setattr(PygameCheckboxView, 'tick', lambda self, fps=None: None)
    return demo.play(engine=engine)


@pytest.fixture
def engine():
    return GameEngine(grid_size=10, speed=60, rng=random.Random(5))


def test_handle_key_routes_start_and_directions(engine):
    view = PygameCheckboxView(10)
    engine.renderer = view
    demo.handle_key(engine, view, pygame.K_SPACE)
    assert engine.running
    demo.handle_key(engine, view, pygame.K_DOWN)
    assert engine.direction == Direction.DOWN
    demo.handle_key(engine, view, pygame.K_q)
    assert engine.direction == Direction.DOWN
    demo.handle_key(engine, view, pygame.K_p)
    assert engine.state == RunState.STOPPED


def test_difficulty_key_only_between_games(engine):
    view = PygameCheckboxView(10)
    engine.renderer = view
    demo.handle_key(engine, view, pygame.K_3)
    assert engine.difficulty == 3
    assert view.difficulty == 3

    demo.handle_key(engine, view, pygame.K_RETURN)
    assert len(engine.food) == 3

    # Ignored while a game is on the board, running or paused
    demo.handle_key(engine, view, pygame.K_5)
    demo.handle_key(engine, view, pygame.K_p)
    demo.handle_key(engine, view, pygame.K_1)
    assert engine.difficulty == 3
    assert view.difficulty == 3


def test_status_message(engine):
    assert demo.status_message(engine).startswith("Press Enter")
    engine.start()
    assert demo.status_message(engine) == ""
    engine.pause()
    assert demo.status_message(engine).startswith("Paused")


def test_play_counts_game_over_and_keeps_score(monkeypatch, capsys, engine):
    def set_up_loop(engine):
        # One step from food, two steps from running into itself
        engine.snake_positions = deque([12, 2, 1, 0])
        engine.food_positions = [11]
        engine.direction = engine.travel_direction = Direction.LEFT
        return []

    frames = [
        [key_event(pygame.K_RETURN)],
        set_up_loop,
        [key_event(pygame.K_UP)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    best_score = run_frames(monkeypatch, frames, engine)

    assert "Game 1 over! Score: 4" in capsys.readouterr().out
    assert best_score == 4
    assert engine.state == RunState.STOPPED
    assert engine.body == (1, 0)
    assert engine.renderer.score == 4
    assert engine.renderer.message.startswith("Press Enter")
    assert engine.scheduler.idle


def test_play_pause_message(monkeypatch, capsys, engine):
    frames = [
        [key_event(pygame.K_RETURN)],
        [key_event(pygame.K_p)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    run_frames(monkeypatch, frames, engine)

    assert "over!" not in capsys.readouterr().out
    assert engine.food
    assert engine.renderer.message.startswith("Paused")


def test_play_difficulty_key_changes_food_count(monkeypatch, engine):
    frames = [
        [key_event(pygame.K_4)],
        [key_event(pygame.K_RETURN)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    run_frames(monkeypatch, frames, engine)

    assert len(engine.food) == 4
    assert engine.renderer.difficulty == 4


def test_main_reports_best_score(monkeypatch, capsys):
    monkeypatch.setattr(demo, 'ask_settings', lambda: (2, 10))
    monkeypatch.setattr(demo, 'play', lambda difficulty, grid_size: 7)
    demo.main()
    out = capsys.readouterr().out
    assert "Difficulty 2, 10x10 board" in out
    assert "Best score: 7" in out


def test_main_keyboard_interrupt(monkeypatch, capsys):
    def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(demo, 'ask_settings', interrupted)
    demo.main()
    assert "Game interrupted by user." in capsys.readouterr().out


def test_main_other_errors(monkeypatch, capsys):
    def broken(difficulty, grid_size):
        raise RuntimeError("no display")

    monkeypatch.setattr(demo, 'ask_settings', lambda: (1, 10))
    monkeypatch.setattr(demo, 'play', broken)
    demo.main()
    out = capsys.readouterr().out
    assert "Error: no display" in out
    assert "pip install pygame" in out


def test_closing_mid_game_drops_queued_frames(monkeypatch, engine):
    frames = [
        [key_event(pygame.K_RETURN)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    run_frames(monkeypatch, frames, engine)

    assert engine.state == RunState.STOPPED
    assert engine.scheduler.idle
