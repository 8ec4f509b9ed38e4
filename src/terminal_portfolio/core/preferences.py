"""Persistence of theme and command history."""

import json
import logging

from ..interfaces import KeyValueStore
from .themes import DEFAULT_THEME, normalize_theme

logger = logging.getLogger(__name__)


class Preferences:
    """Reads and writes session preferences through a key-value store.

    Values are stored JSON-encoded. Anything absent, unparsable or of the
    wrong shape loads as the default.
    """

    THEME_KEY = "theme"
    HISTORY_KEY = "history"

    def __init__(self, store: KeyValueStore, default_theme: str = DEFAULT_THEME):
        """
        Initialize preferences.

        Args:
            store: Backing key-value store.
            default_theme: Theme used when nothing valid is stored.
        """
        self.store = store
        self.default_theme = normalize_theme(default_theme) or DEFAULT_THEME

    def _read_json(self, key: str):
        raw = self.store.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def load_theme(self) -> str:
        """
        Load the stored theme.

        Older versions stored the bare theme name without JSON encoding.
        Such a value is accepted when it names a known theme and is
        rewritten in the current format.
        """
        raw = self.store.get(self.THEME_KEY)
        if raw is None:
            return self.default_theme

        try:
            value = json.loads(raw)
        except json.JSONDecodeError:
            legacy = normalize_theme(raw.strip())
            if legacy is None:
                logger.warning(f"Ignoring unreadable stored theme: {raw!r}")
                return self.default_theme
            logger.info(f"Migrating legacy theme value: {raw!r}")
            self.save_theme(legacy)
            return legacy

        theme = normalize_theme(value) if isinstance(value, str) else None
        if theme is None:
            logger.warning(f"Ignoring unknown stored theme: {value!r}")
            return self.default_theme
        return theme

    def _write(self, key: str, value) -> None:
        try:
            self.store.set(key, json.dumps(value))
        except OSError as e:
            logger.error(f"Could not save {key}: {e}")

    def save_theme(self, theme: str) -> None:
        self._write(self.THEME_KEY, theme)

    def load_history(self) -> list[str]:
        """Load stored command history, oldest first."""
        try:
            value = self._read_json(self.HISTORY_KEY)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable stored history")
            return []

        if value is None:
            return []

        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            logger.warning("Ignoring stored history of unexpected shape")
            return []

        return value

    def save_history(self, history: list[str] | tuple[str, ...]) -> None:
        self._write(self.HISTORY_KEY, list(history))
