"""Abstract interfaces for side effects supplied by the host."""

from abc import ABC, abstractmethod


class ClipboardError(Exception):
    """Raised when the host refuses a clipboard write."""

    pass


class Browser(ABC):
    """Opens links outside the terminal."""

    @abstractmethod
    def open_url(self, url: str) -> None:
        """Open a URL in a new browsing context."""
        pass


class Clipboard(ABC):
    """Writes text to the system clipboard."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Copy text to the clipboard.

        Raises:
            ClipboardError: If the host blocks clipboard access.
        """
        pass
