import os
import time
from datetime import datetime, timedelta, timezone

import pytest

from repo_json import JSONRepo, PreferenceStore

TZ = timezone(timedelta(hours=2))

# Central European rules as a POSIX string, so no zone files are needed
BERLIN_POSIX = "CET-1CEST,M3.5.0,M10.5.0/3"


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 10, 19, 9, 30, tzinfo=TZ))


@pytest.fixture
def berlin_local():
    """Run the test with the process's local time set to Berlin rules."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = BERLIN_POSIX
    time.tzset()
    yield
    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()


@pytest.fixture
def prefs(tmp_path):
    return PreferenceStore(tmp_path / "data" / "preferences.json")


@pytest.fixture
def repo(prefs):
    return JSONRepo(prefs)
