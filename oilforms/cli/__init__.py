"""Command line interface (``python -m oilforms.cli``)."""

from .app import EXIT_FATAL, EXIT_SELECTION_BLOCKED, EXIT_SUCCESS, main

__all__ = [
    "main",
    "EXIT_SUCCESS",
    "EXIT_FATAL",
    "EXIT_SELECTION_BLOCKED",
]
