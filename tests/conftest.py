"""
Shared fixtures: in-memory database, fixed clock and record builders.
"""
import os
import tempfile

# Settings are read at import time, so pin them before any app module loads
_TMP = tempfile.mkdtemp(prefix="scg_tests_")
os.environ["DB_URL"] = "sqlite://"
os.environ["SCG_TIMEZONE"] = "UTC"
os.environ["SCG_LOGS_DIR"] = os.path.join(_TMP, "logs")
os.environ["SCG_OUTPUT_DIR"] = os.path.join(_TMP, "output")
os.environ["SCG_SERIAL_MIN"] = "1"
os.environ["SCG_SERIAL_MAX"] = "8"
os.environ["SCG_REPORT_FONT_PATH"] = ""

from datetime import datetime, timezone  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402

from db import init_db, make_engine, make_session_factory  # noqa: E402
from models import Actor, RecordInput, TankerRecord  # noqa: E402
from record_store import KeyValueStorage, RecordStore  # noqa: E402


class FixedClock:
    """Callable clock whose time tests can move"""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def engine():
    eng = make_engine("sqlite://")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def storage(engine):
    return KeyValueStorage(make_session_factory(engine))


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 1, 10, 8, 30, tzinfo=timezone.utc))


@pytest.fixture
def id_factory():
    counter = count(1)
    return lambda: f"rec-{next(counter)}"


@pytest.fixture
def store(storage, clock, id_factory):
    return RecordStore(storage, key="scg_records", clock=clock, id_factory=id_factory)


@pytest.fixture
def actor():
    return Actor(id="OP-7", display_name="Karim")


@pytest.fixture
def make_input():
    def _make(**overrides):
        values = dict(
            serial_number="01",
            tanker_number="TQ-001",
            entry_time="08:15",
            exit_time="09:05",
            bc_number="BC-100",
            ordered_quantity=12000,
            loaded_quantity=11950,
            old_index=1000,
            current_index=12950,
            destination="Oran",
        )
        values.update(overrides)
        return RecordInput(**values)
    return _make


@pytest.fixture
def make_record():
    counter = count(1)

    def _make(**overrides):
        n = next(counter)
        values = dict(
            serial_number=f"{n:02d}",
            tanker_number=f"TQ-{n:03d}",
            entry_time="08:15",
            exit_time="09:05",
            bc_number=f"BC-{n}",
            ordered_quantity=1000,
            loaded_quantity=900,
            old_index=0,
            current_index=900,
            destination="Oran",
            id=f"id-{n}",
            date="2024-01-10",
            created_by="OP-7",
            created_at="2024-01-10T08:30:00.000+00:00",
        )
        values.update(overrides)
        return TankerRecord(**values)
    return _make
