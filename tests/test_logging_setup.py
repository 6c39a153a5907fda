import logging
from logging.handlers import RotatingFileHandler

from logging_setup import setup_logger


def test_setup_logger_writes_to_rotating_file(tmp_path):
    log_file = tmp_path / "logs" / "habitone.log"
    previous_level = logging.getLogger().level
    root = setup_logger(log_file)
    added = root.handlers[-2:]
    try:
        assert any(isinstance(h, RotatingFileHandler) for h in added)
        logging.getLogger("store").info("Loaded %d habits", 2)
        for h in added:
            h.flush()
        assert "[INFO] store: Loaded 2 habits" in log_file.read_text(encoding="utf-8")
    finally:
        for h in added:
            root.removeHandler(h)
            h.close()
        root.setLevel(previous_level)
