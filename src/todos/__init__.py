"""Session-backed todo list application."""

__version__ = "0.1.0"
