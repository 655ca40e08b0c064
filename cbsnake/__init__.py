"""
Checkbox Snake

The classic Snake game played on a board of checkboxes.
"""

from .game import GameEngine, RunState, FrameScheduler, Direction, DirectionalInput
from .render import CheckboxBoard

__all__ = ['GameEngine', 'RunState', 'FrameScheduler', 'Direction', 'DirectionalInput', 'CheckboxBoard']
