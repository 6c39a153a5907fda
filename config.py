# config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from repo_json import HABITS_KEY

DATA_DIR = Path("data")
RESET_CHECK_MS = 60_000


@dataclass
class AppConfig:
    """Paths and tuning for one HabitOne window."""
    data_dir: Path = DATA_DIR
    preferences_path: Optional[Path] = None
    log_file: Optional[Path] = None
    habits_key: str = HABITS_KEY
    reset_check_ms: int = RESET_CHECK_MS
    window_title: str = "HabitOne"
    geometry: str = "420x560"

    def __post_init__(self):
        self.data_dir = Path(self.data_dir)
        if self.preferences_path is None:
            self.preferences_path = self.data_dir / "preferences.json"
        if self.log_file is None:
            self.log_file = self.data_dir / "habitone.log"
