"""Preferences stores - Persist parameter values across sessions"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Protocol, Tuple, Union
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.PREFS)

# A class scopes its keys by qualified name; a plain string is used as-is
Namespace = Union[type, str]


def namespace_name(namespace: Namespace) -> str:
    """
    Resolve a namespace to the string it is stored under

    Args:
        namespace: Class, string, or any object (its class is used)

    Returns:
        "module.QualName" for classes, the string itself for strings
    """
    if isinstance(namespace, str):
        return namespace
    if not isinstance(namespace, type):
        namespace = type(namespace)
    return f"{namespace.__module__}.{namespace.__qualname__}"


class IPreferencesStore(Protocol):
    """
    Protocol for a key-value store of user preferences.

    Keys are scoped by a namespace; implementations decide how
    (namespace, key) pairs are laid out in their backend.
    """

    def get_int(self, namespace: Namespace, key: str, default: int) -> int:
        """Stored integer, or default when nothing is stored under the key."""
        ...

    def put_int(self, namespace: Namespace, key: str, value: int) -> None:
        ...


class MemoryPreferencesStore:
    """In-process store; values are lost when the process exits"""

    def __init__(self):
        self._values: Dict[Tuple[str, str], int] = {}

    def get_int(self, namespace: Namespace, key: str, default: int) -> int:
        return self._values.get((namespace_name(namespace), key), default)

    def put_int(self, namespace: Namespace, key: str, value: int) -> None:
        self._values[(namespace_name(namespace), key)] = int(value)

    def clear(self) -> None:
        self._values.clear()


class JsonPreferencesStore:
    """
    Preferences persisted to a JSON file

    Layout:
        {
          "plugins.deconvolve.Deconvolve": {"Iterations": 12, "Radius": 3},
          "demo": {"Threshold": 40}
        }

    The whole file is rewritten on every put_int(); values are always
    read from memory after construction.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Load existing preferences from path

        Args:
            path: JSON file location (created on first write)

        Raises:
            json.JSONDecodeError: If the file exists but is not valid JSON
            OSError: If the file exists but cannot be read
        """
        self.path = Path(path)
        self._data: Dict[str, Dict[str, int]] = self._load()

    def _load(self) -> Dict[str, Dict[str, int]]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            log.debug(f"Preferences file not found, starting empty: {self.path}")
            return {}
        except json.JSONDecodeError as e:
            log.error(f"Invalid JSON in preferences file: {e}", path=str(self.path))
            raise
        except OSError as e:
            log.error(f"Failed to read preferences: {e}", path=str(self.path))
            raise

        if not isinstance(data, dict):
            log.warn("Preferences file root is not an object, ignoring", path=str(self.path))
            return {}
        log.info(f"Loaded preferences from {self.path}", namespaces=len(data))
        return data

    def _write(self, data: Dict[str, Dict[str, int]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
        except OSError as e:
            log.error(f"Failed to save preferences: {e}", path=str(self.path))
            raise

    def get_int(self, namespace: Namespace, key: str, default: int) -> int:
        section = self._data.get(namespace_name(namespace))
        if not isinstance(section, dict) or key not in section:
            return default

        value = section[key]
        # bool is an int subclass but never a stored integer
        if isinstance(value, bool) or not isinstance(value, int):
            log.warn(
                "Stored preference is not an integer, using default",
                namespace=namespace_name(namespace),
                key=key,
                stored=value,
            )
            return default
        return value

    def put_int(self, namespace: Namespace, key: str, value: int) -> None:
        name = namespace_name(namespace)
        section = self._data.get(name)
        updated = dict(self._data)
        updated[name] = {**(section if isinstance(section, dict) else {}), key: int(value)}
        # Memory only changes once the file write succeeded
        self._write(updated)
        self._data = updated
        log.debug("Stored preference", namespace=name, key=key, value=value)


# === Process-wide default ===
_default_store: IPreferencesStore = MemoryPreferencesStore()

def get_default_store() -> IPreferencesStore:
    return _default_store

def set_default_store(store: IPreferencesStore) -> None:
    """Replace the store used by parameters constructed without prefs="""
    global _default_store
    _default_store = store
