"""Configuration handling for the terminal portfolio."""

from dataclasses import dataclass
from pathlib import Path
import yaml


@dataclass
class Config:
    """Configuration settings for the terminal.

    Attributes:
        page_size: Projects shown per /projects page.
        prompt_user: User name shown in the prompt.
        prompt_host: Host name shown in the prompt.
        location: Working directory shown in the prompt.
        default_theme: Theme used until the user picks one.
        storage_path: JSON file holding theme and history.
        content_file: YAML profile file (built-in sample if None).
    """

    page_size: int = 5
    prompt_user: str = "guest"
    prompt_host: str = "portfolio"
    location: str = "~/"
    default_theme: str = "dark"
    storage_path: str = "~/.terminal-portfolio/state.json"
    content_file: str | None = None

    def get_storage_path(self) -> Path:
        """Get storage path as expanded Path object."""
        return Path(self.storage_path).expanduser()

    def get_content_path(self) -> Path | None:
        """Get content file as expanded Path object, if one is set."""
        if self.content_file is None:
            return None
        return Path(self.content_file).expanduser()


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If a section or value has the wrong type.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping: {path}")

    # Extract sections
    terminal = _section(data, "terminal")
    storage = _section(data, "storage")
    content = _section(data, "content")

    content_file = content.get("file", Config.content_file)
    page_size = terminal.get("page_size", Config.page_size)
    if not isinstance(page_size, int) or isinstance(page_size, bool) or page_size < 1:
        raise ValueError(f"terminal.page_size must be a positive integer, got {page_size!r}")

    return Config(
        page_size=page_size,
        prompt_user=str(terminal.get("prompt_user", Config.prompt_user)),
        prompt_host=str(terminal.get("prompt_host", Config.prompt_host)),
        location=str(terminal.get("location", Config.location)),
        default_theme=str(terminal.get("default_theme", Config.default_theme)),
        storage_path=str(storage.get("path", Config.storage_path)),
        content_file=str(content_file) if content_file is not None else None,
    )


def _section(data: dict, name: str) -> dict:
    """A config section, empty when absent or left blank."""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return section
