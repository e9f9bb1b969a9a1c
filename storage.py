import json
from pathlib import Path
from typing import Optional


class KeyValueStore:
    """get(key) -> Optional[str], set(key, value). Values are always strings."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, data=None):
        self.data = dict(data or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = str(value)


class JsonFileStore(KeyValueStore):
    """Flat JSON object on disk. A missing or broken file reads as empty."""

    def __init__(self, path):
        self.path = Path(path)
        self.data = self._load()

    def _load(self):
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"⚠ Could not read {self.path.name}, starting fresh: {e}")
            return {}
        if not isinstance(data, dict):
            print(f"⚠ Ignoring {self.path.name}: expected a JSON object")
            return {}
        return data

    def get(self, key):
        value = self.data.get(key)
        return None if value is None else str(value)

    def set(self, key, value):
        self.data[key] = str(value)
        try:
            with open(self.path, "w") as f:
                json.dump(self.data, f)
        except OSError as e:
            print(f"⚠ Could not save {self.path.name}: {e}")


class WebStorageStore(KeyValueStore):
    """Browser localStorage, for the pygbag build."""

    def __init__(self, window=None):
        if window is None:
            # only exists in the web environment
            import platform
            window = platform.window
        self.storage = window.localStorage

    def get(self, key):
        value = self.storage.getItem(key)
        # JS null comes back as None
        return None if value is None else str(value)

    def set(self, key, value):
        self.storage.setItem(key, str(value))
