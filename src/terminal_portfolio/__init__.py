"""Terminal-styled portfolio with a slash-command interpreter."""

__version__ = "0.1.0"
