"""
Checkbox Snake Game Module

This module contains the core game logic: grid directions, the snake body,
food placement and the run state.
"""

from .direction import Direction, DirectionalInput
from .engine import GameEngine, RunState
from .scheduler import FrameScheduler

__all__ = ['GameEngine', 'RunState', 'FrameScheduler', 'Direction', 'DirectionalInput']
