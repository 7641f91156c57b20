"""Mini README: Local keyed document backend using JSON files.

Structure:
    * LocalStorageAdapter - one ``<namespace>-<key>.json`` file per key.

This is the desktop counterpart of browser local storage. Writes go to a
temporary file in the same directory which then replaces the target, so a
crash mid-write never leaves a truncated document behind.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from ..base import PersistenceAdapter
from ..registry import REGISTRY
from ...errors import PersistenceError
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class LocalStorageAdapter(PersistenceAdapter):
    """Persist JSON documents as individual files under a data directory."""

    backend_name = "local"

    def __init__(self, directory: Path, namespace: str = "vip-finance") -> None:
        self.directory = Path(directory)
        self.namespace = namespace
        self.directory.mkdir(parents=True, exist_ok=True)
        LOGGER.debug("Local backend using %s (namespace '%s')", self.directory, namespace)

    @classmethod
    def from_settings(cls, settings: Any) -> "LocalStorageAdapter":
        return cls(settings.data_directory, settings.storage_namespace)

    def storage_key(self, key: str) -> str:
        """Return the namespaced key, e.g. ``vip-finance-income``."""

        return f"{self.namespace}-{key}"

    def path_for(self, key: str) -> Path:
        return self.directory / f"{self.storage_key(key)}.json"

    def get(self, key: str) -> Optional[Any]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except (OSError, json.JSONDecodeError) as error:
            LOGGER.error("Failed to read %s: %s", path, error)
            raise PersistenceError(self.storage_key(key), str(error)) from error

    def set(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        temp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.directory,
                prefix=f".{path.stem}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_name = handle.name
                json.dump(value, handle, ensure_ascii=False, indent=2)
            os.replace(temp_name, path)
        except (OSError, TypeError, ValueError) as error:
            if temp_name and os.path.exists(temp_name):
                os.unlink(temp_name)
            LOGGER.error("Failed to write %s: %s", path, error)
            raise PersistenceError(self.storage_key(key), str(error)) from error
        LOGGER.debug("Wrote %s", path)

    def metadata(self) -> Dict[str, str]:
        return {
            "backend": self.backend_name,
            "directory": str(self.directory),
            "namespace": self.namespace,
        }


REGISTRY.register(LocalStorageAdapter)
