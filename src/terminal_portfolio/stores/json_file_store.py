"""Key-value store persisted to a JSON file."""

import json
import logging
import os
from pathlib import Path

from ..interfaces import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Key-value store backed by a single JSON object on disk.

    The file is read once on first access and rewritten on every set.
    """

    def __init__(self, path: str | Path):
        """
        Initialize with the file path.

        The file and its parent directory are created on the first write.

        Args:
            path: Location of the JSON file.
        """
        self.path = Path(path).expanduser()
        self._data: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        """
        Read the file into memory.

        A missing file is empty. An unreadable or malformed file is
        treated as empty and overwritten by the next set.
        """
        if self._data is not None:
            return self._data

        self._data = {}
        if not self.path.exists():
            return self._data

        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read state file {self.path}: {e}")
            return self._data

        if not isinstance(data, dict):
            logger.warning(f"State file does not hold an object: {self.path}")
            return self._data

        self._data = {str(k): v for k, v in data.items() if isinstance(v, str)}
        return self._data

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """
        Store a value and write the file.

        Raises:
            OSError: If the file can't be written.
        """
        data = self._load()
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.path)
        logger.debug(f"Saved '{key}' to {self.path}")
