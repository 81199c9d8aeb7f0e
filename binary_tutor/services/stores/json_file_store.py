"""Key-value store persisted as a single JSON object file."""

import json
import logging
from pathlib import Path

from binary_tutor.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Stores string values under string keys in one JSON file.

    The whole file is read on every ``get`` and rewritten on every
    ``set``/``remove``, so several stores pointing at the same file
    always see each other's latest writes.
    """

    def __init__(self, file_path: Path):
        """Initialize the store.

        Args:
            file_path: Path to the JSON file (created on first write)
        """
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent."""
        value = self._load().get(key)
        if value is None or isinstance(value, str):
            return value
        logger.warning(f"Ignoring non-text value stored under '{key}'")
        return None

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``.

        Raises:
            StorageError: If the file cannot be written
        """
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        """Delete ``key`` if present.

        Raises:
            StorageError: If the file cannot be written
        """
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def _load(self) -> dict:
        """Load the key-value mapping from the JSON file."""
        if not self._file_path.exists():
            return {}
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                return data
            logger.warning(f"Storage file {self._file_path} is not a JSON object, ignoring it")
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError, OSError) as e:
            logger.warning(f"Could not read storage file {self._file_path}: {e}")
        return {}

    def _save(self, data: dict) -> None:
        """Save the key-value mapping to the JSON file."""
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise StorageError(f"Could not write storage file {self._file_path}: {e}") from e
