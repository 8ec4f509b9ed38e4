"""Interpreter - Main orchestrator for the terminal portfolio."""

import logging

from pubsub import pub

from .interfaces import Browser, Clipboard
from .core import (
    CommandContext,
    CommandParser,
    CommandRegistry,
    ContentStore,
    OutputBlock,
    Preferences,
    SessionState,
    build_registry,
)
from .core.formatter import markup, to_plain_text
from .core.themes import toggled_theme

logger = logging.getLogger(__name__)

TOPIC_OUTPUT = "portfolio.output"
TOPIC_CLEAR = "portfolio.clear"
TOPIC_THEME = "portfolio.theme"


class Interpreter:
    """Runs submitted command lines against the session state.

    Owns the session state, persists theme and history through the
    preferences, and announces scrollback and theme changes on the
    pubsub topics above so a view can follow along. Every message carries
    the sending interpreter as ``interpreter``.
    """

    def __init__(
        self,
        content: ContentStore,
        browser: Browser,
        clipboard: Clipboard,
        preferences: Preferences,
        registry: CommandRegistry | None = None,
    ):
        """
        Initialize the interpreter.

        Args:
            content: Profile and project data shown by commands.
            browser: Capability for opening links.
            clipboard: Capability for clipboard writes.
            preferences: Persistence for theme and history.
            registry: Commands to dispatch to (built-ins if None).
        """
        self.content = content
        self.browser = browser
        self.clipboard = clipboard
        self.preferences = preferences
        self.registry = registry or build_registry()
        self.parser = CommandParser()

        self._state = SessionState(
            history=preferences.load_history(),
            theme=preferences.load_theme(),
        )
        logger.debug(
            f"Session restored: theme={self._state.theme}, "
            f"{len(self._state.history)} history entries"
        )

    @property
    def state(self) -> SessionState:
        return self._state

    def submit(self, line: str) -> OutputBlock | None:
        """
        Run one input line.

        The line is recorded in history before its command runs.

        Args:
            line: Raw text typed at the prompt.

        Returns:
            The appended output block, or None if nothing was printed.
        """
        parsed = self.parser.parse(line)
        if parsed is None:
            return None

        logger.debug(f"Received: {parsed.raw!r}")
        self._state = self._state.record_command(parsed.raw)
        self.preferences.save_history(self._state.history)

        spec = self.registry.resolve(parsed.name)
        if spec is None:
            logger.debug(f"Unknown command: {parsed.name}")
            return self._print(parsed.raw, [markup(f"Command not found: {parsed.name}. Type /help.")])

        logger.debug(f"Command: {spec.name}")
        context = CommandContext(
            args=parsed.args,
            tokens=parsed.tokens,
            content=self.content,
            browser=self.browser,
            clipboard=self.clipboard,
            session=self._state,
            registry=self.registry,
        )
        result = spec.handler(context)

        if result.clear:
            self.clear()

        if result.theme is not None:
            self.set_theme(result.theme)

        return self._print(parsed.raw, result.lines)

    def _print(self, command: str, lines: list[str]) -> OutputBlock | None:
        """Append lines as one block and announce it."""
        if not lines:
            return None

        block = OutputBlock(command=command, lines=lines)
        self._state = self._state.append_block(block)
        for line in lines:
            logger.debug(f"Output: {to_plain_text(line)}")
        pub.sendMessage(TOPIC_OUTPUT, block=block, interpreter=self)
        return block

    def clear(self) -> None:
        """Empty the scrollback."""
        logger.debug("Clearing scrollback")
        self._state = self._state.clear_scrollback()
        pub.sendMessage(TOPIC_CLEAR, interpreter=self)

    def set_theme(self, theme: str) -> None:
        """Switch and persist the theme."""
        logger.debug(f"Theme: {self._state.theme} -> {theme}")
        self._state = self._state.with_theme(theme)
        self.preferences.save_theme(theme)
        pub.sendMessage(TOPIC_THEME, theme=theme, interpreter=self)

    def toggle_theme(self) -> str:
        """Flip between light and dark, as the header toggle does."""
        theme = toggled_theme(self._state.theme)
        self.set_theme(theme)
        return theme

    def set_input(self, text: str) -> None:
        """Track what is typed at the prompt."""
        self._state = self._state.with_input(text)

    def history_up(self) -> str:
        """
        Recall the previous history entry.

        Returns:
            The new input buffer contents.
        """
        self._state = self._state.history_up()
        return self._state.input_buffer

    def history_down(self) -> str:
        """
        Recall the next history entry, or clear the input past the newest.

        Returns:
            The new input buffer contents.
        """
        self._state = self._state.history_down()
        return self._state.input_buffer
