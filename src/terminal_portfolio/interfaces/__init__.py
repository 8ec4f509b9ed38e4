"""Abstract interfaces for the terminal portfolio."""

from .key_value_store import KeyValueStore
from .host_capabilities import Browser, Clipboard, ClipboardError

__all__ = ["KeyValueStore", "Browser", "Clipboard", "ClipboardError"]
