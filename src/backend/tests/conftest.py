import json
import os
import sys
from datetime import datetime, timezone


# Ensure `src/backend` is on sys.path so imports like `import common...` work,
# even when pytest's rootdir is the repository root.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.velocity_engine.models import LoadEvent


@pytest.fixture
def event_time() -> datetime:
    # A Wednesday in ISO week 2 of 2000.
    return datetime(2000, 1, 12, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_event(event_time):
    def _make(
        *,
        id: str = "123",
        customer_id: str = "321",
        load_amount: str = "$100.00",
        time: datetime | None = None,
    ) -> LoadEvent:
        return LoadEvent(id=id, customer_id=customer_id, load_amount=load_amount, time=time or event_time)

    return _make


@pytest.fixture
def make_line():
    def _make(
        *,
        id: str = "123",
        customer_id: str = "321",
        load_amount: str = "$100.00",
        time: str = "2000-01-12T10:30:00Z",
    ) -> str:
        return json.dumps({"id": id, "customer_id": customer_id, "load_amount": load_amount, "time": time})

    return _make
