"""Browser and clipboard capabilities backed by the local desktop."""

import logging
import webbrowser

import pyperclip

from ..interfaces import Browser, Clipboard, ClipboardError

logger = logging.getLogger(__name__)


class WebBrowser(Browser):
    """Opens links with the system's default browser."""

    def open_url(self, url: str) -> None:
        opened = webbrowser.open_new_tab(url)
        if not opened:
            logger.warning(f"No browser available to open {url}")


class SystemClipboard(Clipboard):
    """Clipboard access through pyperclip."""

    def write_text(self, text: str) -> None:
        """
        Copy text to the system clipboard.

        Raises:
            ClipboardError: If no clipboard mechanism is available.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e
