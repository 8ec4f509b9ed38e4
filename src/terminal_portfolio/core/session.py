"""Session state for one terminal (immutable)."""

from dataclasses import dataclass, field, replace

from .themes import DEFAULT_THEME

# History cursor value meaning "not browsing history"
NOT_BROWSING = -1


@dataclass(frozen=True)
class OutputBlock:
    """Output lines produced by one command."""

    command: str
    lines: tuple[str, ...] = field(default_factory=tuple)

    def __init__(self, command: str, lines: list[str] | tuple[str, ...] | None = None):
        object.__setattr__(self, "command", command)
        object.__setattr__(self, "lines", tuple(lines) if lines else ())


@dataclass(frozen=True)
class SessionState:
    """Scrollback, history and preferences of a terminal session."""

    scrollback: tuple[OutputBlock, ...] = field(default_factory=tuple)
    history: tuple[str, ...] = field(default_factory=tuple)
    history_index: int = NOT_BROWSING
    theme: str = DEFAULT_THEME
    input_buffer: str = ""

    def __init__(
        self,
        scrollback: list[OutputBlock] | tuple[OutputBlock, ...] | None = None,
        history: list[str] | tuple[str, ...] | None = None,
        history_index: int = NOT_BROWSING,
        theme: str = DEFAULT_THEME,
        input_buffer: str = "",
    ):
        history = tuple(history) if history else ()
        if history_index != NOT_BROWSING and not 0 <= history_index < len(history):
            raise ValueError(f"History index out of range: {history_index}")

        object.__setattr__(self, "scrollback", tuple(scrollback) if scrollback else ())
        object.__setattr__(self, "history", history)
        object.__setattr__(self, "history_index", history_index)
        object.__setattr__(self, "theme", theme)
        object.__setattr__(self, "input_buffer", input_buffer)

    def record_command(self, command: str) -> "SessionState":
        """Append a submitted line to history, stop browsing and clear the input."""
        return replace(
            self,
            history=self.history + (command,),
            history_index=NOT_BROWSING,
            input_buffer="",
        )

    def append_block(self, block: OutputBlock) -> "SessionState":
        """Append an output block to the scrollback."""
        return replace(self, scrollback=self.scrollback + (block,))

    def clear_scrollback(self) -> "SessionState":
        """Empty the scrollback. History is kept."""
        return replace(self, scrollback=())

    def with_theme(self, theme: str) -> "SessionState":
        return replace(self, theme=theme)

    def with_input(self, text: str) -> "SessionState":
        return replace(self, input_buffer=text)

    def is_browsing(self) -> bool:
        """Check if the history cursor points at an entry."""
        return self.history_index != NOT_BROWSING

    def history_up(self) -> "SessionState":
        """
        Step back through history.

        Starts at the newest entry and stops at the oldest one.
        """
        if not self.history:
            return self

        if self.history_index == NOT_BROWSING:
            index = len(self.history) - 1
        else:
            index = max(0, self.history_index - 1)

        return replace(self, history_index=index, input_buffer=self.history[index])

    def history_down(self) -> "SessionState":
        """
        Step forward through history.

        Moving past the newest entry stops browsing and clears the input.
        """
        if not self.is_browsing():
            return self

        index = self.history_index + 1
        if index >= len(self.history):
            return replace(self, history_index=NOT_BROWSING, input_buffer="")

        return replace(self, history_index=index, input_buffer=self.history[index])
