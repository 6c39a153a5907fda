# repo_json.py
import json
import logging
import os
from typing import Dict, List, Optional

from models import Habit, habit_from_dict, habit_to_dict

HABITS_KEY = "habits_key"

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Flat key -> text store kept in one JSON file."""

    def __init__(self, path: str):
        self.path = str(path)
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def _write(self, obj: Dict[str, str]):
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str):
        try:
            data = self._read()
        except ValueError:
            logger.warning("Preference file %s is corrupted, starting a fresh one", self.path)
            data = {}
        data[key] = value
        self._write(data)

    def remove(self, key: str):
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


class JSONRepo:
    def __init__(self, prefs: PreferenceStore, key: str = HABITS_KEY):
        self.prefs = prefs
        self.key = key

    # -------- Save --------
    def save(self, habits: List[Habit]):
        """Write the whole list under the fixed key; failures are only logged."""
        try:
            blob = json.dumps([habit_to_dict(h) for h in habits], ensure_ascii=False)
            self.prefs.set(self.key, blob)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not save %d habits: %s", len(habits), exc)

    # -------- Load --------
    def load(self) -> List[Habit]:
        """Decoded list in stored order, or [] when nothing usable is stored."""
        try:
            blob = self.prefs.get(self.key)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read preferences: %s", exc)
            return []
        if blob is None:
            logger.info("No saved habits under %r yet", self.key)
            return []

        try:
            raw = json.loads(blob)
            if not isinstance(raw, list):
                raise ValueError("stored habits must be a JSON array")
            return [habit_from_dict(item) for item in raw]
        except (TypeError, ValueError) as exc:
            logger.warning("Ignoring corrupted habits under %r: %s", self.key, exc)
            return []
