"""Command registry mapping names to handlers."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterator

from ..interfaces import Browser, Clipboard
from .content_store import ContentStore

if TYPE_CHECKING:
    from .session import SessionState


@dataclass(frozen=True)
class CommandContext:
    """Everything a handler may read or call."""

    args: str
    tokens: tuple[str, ...]
    content: ContentStore
    browser: Browser
    clipboard: Clipboard
    session: "SessionState"
    registry: "CommandRegistry"


@dataclass
class CommandResult:
    """What a handler produced.

    Attributes:
        lines: Markup-safe output lines, shown as one block.
        theme: New theme to apply, if the command changed it.
        clear: Whether to empty the scrollback.
    """

    lines: list[str] = field(default_factory=list)
    theme: str | None = None
    clear: bool = False


Handler = Callable[[CommandContext], CommandResult]


@dataclass(frozen=True)
class CommandSpec:
    """A registered command."""

    name: str
    usage: str
    handler: Handler
    syntax: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()


class CommandRegistry:
    """Case-insensitive mapping of command names and aliases to commands."""

    def __init__(self):
        self._commands: dict[str, CommandSpec] = {}
        self._lookup: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> CommandSpec:
        """
        Add a command.

        Raises:
            ValueError: If the name or an alias is already taken.
        """
        keys = [spec.name.lower()] + [a.lower() for a in spec.aliases]
        for key in keys:
            if key in self._lookup:
                raise ValueError(f"Command already registered: {key}")

        self._commands[spec.name.lower()] = spec
        for key in keys:
            self._lookup[key] = spec
        return spec

    def command(
        self,
        name: str,
        usage: str,
        syntax: tuple[str, ...] = (),
        aliases: tuple[str, ...] = (),
    ) -> Callable[[Handler], Handler]:
        """Decorator registering a handler function."""

        def decorator(handler: Handler) -> Handler:
            self.register(
                CommandSpec(
                    name=name,
                    usage=usage,
                    handler=handler,
                    syntax=syntax,
                    aliases=aliases,
                )
            )
            return handler

        return decorator

    def resolve(self, name: str) -> CommandSpec | None:
        """Find a command by name or alias, ignoring case."""
        return self._lookup.get(name.lower())

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def __iter__(self) -> Iterator[CommandSpec]:
        """Iterate commands in registration order."""
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def syntax_hints(self) -> list[str]:
        """All syntax hints in registration order."""
        return [hint for spec in self for hint in (spec.syntax or (spec.name,))]
