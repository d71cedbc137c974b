"""
Key-value storage for the auth token.

The client only ever touches one key (``authToken``), but the stores expose
generic get/set/remove so they can stand in for any durable key-value
backend. FileTokenStore keeps the values in a small JSON document on disk;
MemoryTokenStore is used by tests and short-lived embeddings.
"""

import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from fleetdash.constants import AUTH_TOKEN_KEY
from fleetdash.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class TokenStore(ABC):
    """Synchronous key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    def get_token(self) -> Optional[str]:
        return self.get(AUTH_TOKEN_KEY)

    def set_token(self, token: str) -> None:
        self.set(AUTH_TOKEN_KEY, token)

    def remove_token(self) -> None:
        self.remove(AUTH_TOKEN_KEY)


class MemoryTokenStore(TokenStore):
    """Process-local store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileTokenStore(TokenStore):
    """JSON-file backed store that survives process restarts.

    The file is rewritten atomically on every change and created with
    owner-only permissions since it holds a bearer credential.

    Args:
        path: The storage file, or a zero-argument callable returning it.
            A callable is resolved on first access.
    """

    def __init__(self, path: Union[Path, str, Callable[[], Path]]):
        self._path_source = path
        self._path: Optional[Path] = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        if self._path is None:
            source = self._path_source
            self._path = Path(source() if callable(source) else source)
        return self._path

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable token storage {self.path}: {e}")
            return {}
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read token storage {self.path}: {e}",
                help_text="Check the file permissions or set FLEETDASH_TOKEN_FILE",
            ) from e
        if not isinstance(data, dict):
            logger.warning(f"Ignoring token storage {self.path}: expected a JSON object")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".storage-")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f)
                os.chmod(tmp_name, 0o600)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write token storage {self.path}: {e}",
                help_text="Check the directory permissions or set FLEETDASH_TOKEN_FILE",
            ) from e

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)
