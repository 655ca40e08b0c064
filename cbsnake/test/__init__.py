"""
Testing Module for Checkbox Snake

pytest suites for the engine, the cell sinks, the scheduler and the pygame front-end.
"""
