"""Core components for the terminal portfolio."""

from .command_parser import CommandParser, ParsedInput, parse_int, parse_leading_int
from .commands import build_registry
from .content_store import Bio, ContentStore, Project, content_from_dict, default_content, load_content
from .preferences import Preferences
from .registry import CommandContext, CommandRegistry, CommandResult, CommandSpec
from .session import NOT_BROWSING, OutputBlock, SessionState
from .themes import DEFAULT_THEME, THEME_NAMES, THEMES

__all__ = [
    "CommandParser",
    "ParsedInput",
    "parse_int",
    "parse_leading_int",
    "build_registry",
    "Bio",
    "ContentStore",
    "Project",
    "content_from_dict",
    "default_content",
    "load_content",
    "Preferences",
    "CommandContext",
    "CommandRegistry",
    "CommandResult",
    "CommandSpec",
    "NOT_BROWSING",
    "OutputBlock",
    "SessionState",
    "DEFAULT_THEME",
    "THEME_NAMES",
    "THEMES",
]
