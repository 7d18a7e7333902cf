"""Key-value storage backends for the appointment snapshot."""

import json
import os
from pathlib import Path
from typing import Dict, Optional, Union
from utils.logger import setup_logger

logger = setup_logger(__name__)


class KeyValueStore:
    """Synchronous string key-value storage."""

    def read(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored text or None if absent
        """
        raise NotImplementedError

    def write(self, key: str, value: str) -> None:
        """
        Store text under a key, replacing any previous value.

        Args:
            key: Storage key
            value: Text to store
        """
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    """Process-local storage, used for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def write(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileStore(KeyValueStore):
    """All keys kept in one JSON document on disk.

    Writes go through a temp file and ``os.replace`` so a crash never leaves
    a half-written document behind.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            logger.warning(f"Ignoring non-object storage document at {self.path}")
            return {}
        return data

    def read(self, key: str) -> Optional[str]:
        try:
            return self._load().get(key)
        except json.JSONDecodeError as e:
            logger.error(f"Storage document {self.path} is not valid JSON: {e}")
            return None

    def write(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except json.JSONDecodeError:
            logger.warning(f"Overwriting unreadable storage document {self.path}")
            data = {}
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)
        logger.debug(f"Wrote {len(value)} characters to {self.path} [{key}]")
