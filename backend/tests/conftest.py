import pytest

from eldlog.segments import DayPlan, Segment


@pytest.fixture
def workday():
    return DayPlan(
        index=1,
        date="2025-03-04",
        segments=[
            Segment("08:00", "16:00", "driving"),
            Segment("06:00", "08:00", "on_duty", "Pre-trip"),
        ],
        notes="Pickup in Denver, CO",
    )


@pytest.fixture
def day_payload():
    return {
        "index": 1,
        "date": "2025-03-04",
        "segments": [
            {"t0": "06:00", "t1": "08:00", "status": "on_duty", "label": "Pre-trip"},
            {"t0": "08:00", "t1": "16:00", "status": "driving"},
        ],
        "notes": "Pickup in Denver, CO",
    }
