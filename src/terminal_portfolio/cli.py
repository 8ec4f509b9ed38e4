"""Command-line interface for the terminal portfolio."""

import argparse
import logging
import sys
from dataclasses import replace

from .config import Config, load_config
from .core import ContentStore, Preferences, default_content, load_content
from .host import ConsoleTerminal, SystemClipboard, WebBrowser
from .interfaces import KeyValueStore
from .interpreter import Interpreter
from .stores import JsonFileStore, MemoryStore


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Terminal Portfolio - A portfolio you browse with slash-commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                             # Sample profile, saved state
  %(prog)s -c config.yaml              # Use specific config file
  %(prog)s --content profile.yaml      # Show your own profile
  %(prog)s --no-persist                # Don't save theme or history
  %(prog)s -e /about -e "/projects 2"  # Run commands and exit
""",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "--content",
        metavar="FILE",
        help="Path to YAML profile with bio, projects and contacts",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "-e", "--execute",
        metavar="COMMAND",
        action="append",
        default=[],
        help="Run a command and exit (repeatable)",
    )

    # Storage options (mutually exclusive)
    storage_group = parser.add_mutually_exclusive_group()
    storage_group.add_argument(
        "--storage",
        metavar="FILE",
        help="JSON file holding theme and history",
    )
    storage_group.add_argument(
        "--no-persist",
        action="store_true",
        help="Keep theme and history in memory only",
    )

    return parser.parse_args(argv)


def build_content(config: Config) -> ContentStore:
    """Load the configured profile, or the built-in sample."""
    content_path = config.get_content_path()
    if content_path is None:
        return default_content(page_size=config.page_size)
    return load_content(content_path, page_size=config.page_size)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid config: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.content:
        config = replace(config, content_file=args.content)

    if args.storage:
        config = replace(config, storage_path=args.storage)

    try:
        content = build_content(config)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        logger.error(f"Invalid content: {e}")
        return 1

    store: KeyValueStore
    if args.no_persist:
        store = MemoryStore()
    else:
        store = JsonFileStore(config.get_storage_path())

    interpreter = Interpreter(
        content=content,
        browser=WebBrowser(),
        clipboard=SystemClipboard(),
        preferences=Preferences(store, default_theme=config.default_theme),
    )
    terminal = ConsoleTerminal(interpreter, config)

    logger.debug(f"  Projects: {len(content.projects)} (page size {content.page_size})")
    logger.debug(f"  State: {'memory' if args.no_persist else config.get_storage_path()}")

    try:
        if args.execute:
            terminal.run_commands(args.execute)
        else:
            terminal.run()
    finally:
        terminal.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
