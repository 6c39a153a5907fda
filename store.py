# store.py
"""In-memory habit list with explicit write-through and daily reset."""

import logging
from dataclasses import replace
from datetime import datetime, tzinfo
from typing import Callable, List, Optional, Tuple

from models import Habit, needs_reset, new_habit
from repo_json import JSONRepo

logger = logging.getLogger(__name__)

Listener = Callable[[Tuple[Habit, ...]], None]


def local_now() -> datetime:
    return datetime.now().astimezone()


class HabitStore:
    def __init__(
        self,
        repo: JSONRepo,
        clock: Callable[[], datetime] = local_now,
        tz: Optional[tzinfo] = None,
    ):
        """``tz`` fixes the zone whose midnight ends a day; None means system local time."""
        self.repo = repo
        self.clock = clock
        self.tz = tz
        self._listeners: List[Listener] = []
        self._habits: List[Habit] = list(repo.load())
        logger.info("Loaded %d habits", len(self._habits))
        self.check_daily_reset()

    # -------- Reads --------
    def snapshot(self) -> Tuple[Habit, ...]:
        return tuple(self._habits)

    def progress(self) -> int:
        """Whole percentage of habits completed right now."""
        done = sum(1 for h in self._habits if h.is_completed)
        return done * 100 // max(len(self._habits), 1)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------- Mutations --------
    def create(self, title: str, emoji: str) -> Habit:
        self._reset_stale(self.clock())
        habit = new_habit(title, emoji)
        self._habits.append(habit)
        logger.debug("Created habit %s (%s)", habit.id, title)
        self._changed()
        return habit

    def toggle_completion(self, habit_id: str):
        """Flip completion for ``habit_id``; unknown ids are ignored."""
        idx = self._index_of(habit_id)
        if idx is None:
            logger.debug("Toggle ignored, no habit with id %s", habit_id)
            return

        now = self.clock()
        self._reset_stale(now)
        habit = self._habits[idx]
        if habit.is_completed:
            # last_completed keeps the time it was last marked done
            habit = replace(habit, is_completed=False)
        else:
            habit = replace(habit, is_completed=True, last_completed=now)
        self._habits[idx] = habit
        logger.debug("Habit %s completed=%s", habit_id, habit.is_completed)
        self._changed()

    def check_daily_reset(self) -> bool:
        """Un-complete habits last done before today. Returns True if any changed."""
        if not self._reset_stale(self.clock()):
            return False
        self._changed()
        return True

    # -------- Internals --------
    def _reset_stale(self, now: datetime) -> bool:
        changed = 0
        for i, habit in enumerate(self._habits):
            if needs_reset(habit, now, self.tz):
                self._habits[i] = replace(habit, is_completed=False)
                changed += 1
        if changed:
            logger.info("Daily reset cleared %d habits", changed)
        return changed > 0

    def _index_of(self, habit_id: str):
        for i, habit in enumerate(self._habits):
            if habit.id == habit_id:
                return i
        return None

    def _changed(self):
        self.repo.save(self._habits)
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
