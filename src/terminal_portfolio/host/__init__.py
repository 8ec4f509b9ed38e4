"""Console host supplying capabilities and rendering output."""

from .capabilities import SystemClipboard, WebBrowser
from .console_terminal import ConsoleTerminal, build_key_bindings
from .markup_renderer import render_markup, theme_style

__all__ = [
    "SystemClipboard",
    "WebBrowser",
    "ConsoleTerminal",
    "build_key_bindings",
    "render_markup",
    "theme_style",
]
