"""
Rendering Module for Checkbox Snake

Cell sinks the engine draws into: a headless numpy board and a pygame window.
"""

from .board import CellSink, CheckboxBoard

__all__ = ['CellSink', 'CheckboxBoard']
