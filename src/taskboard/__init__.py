"""Taskboard - ordered columns of tasks with drag-and-drop reordering."""

__version__ = "0.1.0"
