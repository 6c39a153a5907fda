import logging
import tkinter as tk

from config import AppConfig
from logging_setup import setup_logger
from repo_json import JSONRepo, PreferenceStore
from scheduler import ResetTicker
from store import HabitStore
from ui.dashboard import HabitList

logger = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self, config: AppConfig = None):
        super().__init__()
        self.settings = config or AppConfig()
        self.title(self.settings.window_title)
        self.geometry(self.settings.geometry)

        # hydrate before anything is drawn
        prefs = PreferenceStore(self.settings.preferences_path)
        self.store = HabitStore(JSONRepo(prefs, key=self.settings.habits_key))

        HabitList(self, self.store).pack(fill="both", expand=True)

        self.ticker = ResetTicker(self.after, self.after_cancel, self.store, self.settings.reset_check_ms)
        self.ticker.start()
        self.protocol("WM_DELETE_WINDOW", self.close)

    def close(self):
        self.ticker.stop()
        logger.info("Closing")
        self.destroy()


def main(config: AppConfig = None):
    config = config or AppConfig()
    setup_logger(config.log_file)
    App(config).mainloop()


if __name__ == "__main__":
    main()
