"""
Controllers Package

Contains the text-mode front end that drives a game session.
"""

from .console_controller import STATUS_GLYPHS, ConsoleController, render_statuses

__all__ = ['ConsoleController', 'STATUS_GLYPHS', 'render_statuses']
