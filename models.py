# models.py
import uuid
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional


@dataclass(frozen=True)
class Habit:
    id: str
    title: str
    emoji: str
    is_completed: bool = False
    last_completed: Optional[datetime] = None  # last time it was ever marked done


def new_habit(title: str, emoji: str) -> Habit:
    return Habit(id=str(uuid.uuid4()), title=title, emoji=emoji)


def local_date(moment: datetime, tz: Optional[tzinfo] = None) -> date:
    """Calendar date of ``moment`` in ``tz``.

    With no ``tz`` the system's local time rules for that instant apply, so a
    stamp taken before a DST switch keeps its own offset. Naive values are
    read as local time.
    """
    return moment.astimezone(tz).date()


def is_same_day(moment: datetime, now: datetime, tz: Optional[tzinfo] = None) -> bool:
    return local_date(moment, tz) == local_date(now, tz)


def needs_reset(h: Habit, now: datetime, tz: Optional[tzinfo] = None) -> bool:
    if not h.is_completed or h.last_completed is None:
        return False
    return not is_same_day(h.last_completed, now, tz)


# -------- Wire format --------
def habit_to_dict(h: Habit) -> dict:
    return {
        "id": h.id,
        "title": h.title,
        "emoji": h.emoji,
        "isCompleted": h.is_completed,
        "lastCompletedDate": h.last_completed.isoformat() if h.last_completed else None,
    }


def habit_from_dict(raw) -> Habit:
    """Decode one stored record. Raises ValueError on any shape mismatch."""
    if not isinstance(raw, dict):
        raise ValueError("habit record must be an object")
    for key, kind in (("id", str), ("title", str), ("emoji", str), ("isCompleted", bool)):
        if not isinstance(raw.get(key), kind):
            raise ValueError(f"habit field {key!r} missing or not {kind.__name__}")

    # rejects malformed ids; the stored text is kept as-is
    uuid.UUID(raw["id"])

    stamp = raw.get("lastCompletedDate")
    if stamp is None:
        last_completed = None
    elif isinstance(stamp, str):
        last_completed = datetime.fromisoformat(stamp)
    else:
        raise ValueError("habit field 'lastCompletedDate' must be a string or null")

    return Habit(
        id=raw["id"],
        title=raw["title"],
        emoji=raw["emoji"],
        is_completed=raw["isCompleted"],
        last_completed=last_completed,
    )
