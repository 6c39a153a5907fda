from pathlib import Path

from config import AppConfig
from repo_json import HABITS_KEY


def test_defaults():
    cfg = AppConfig()
    assert cfg.preferences_path == Path("data") / "preferences.json"
    assert cfg.log_file == Path("data") / "habitone.log"
    assert cfg.habits_key == HABITS_KEY == "habits_key"
    assert cfg.reset_check_ms == 60_000


def test_paths_follow_data_dir(tmp_path):
    cfg = AppConfig(data_dir=tmp_path)
    assert cfg.preferences_path == tmp_path / "preferences.json"
    assert cfg.log_file.parent == tmp_path
