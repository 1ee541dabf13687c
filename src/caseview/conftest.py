"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
This file provides fixtures available to all tests in the package.
"""

import os

# Set environment BEFORE importing any app modules
os.environ["CASEVIEW_ENV"] = "test"

import pytest

from caseview.table.column import Column
from caseview.table.engine import TableEngine

# =============================================================================
# Clock Fixtures
# =============================================================================


class FakeClock:
    """Manually advanced monotonic clock, in seconds."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms / 1000.0


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# Record Fixtures
# =============================================================================


@pytest.fixture
def people() -> list[dict]:
    """The three-person collection used throughout the examples."""
    return [
        {"id": 1, "name": "Ann", "status": "active", "city": "Utrecht"},
        {"id": 2, "name": "Bob", "status": "inactive", "city": "Amsterdam"},
        {"id": 3, "name": "Cid", "status": "active", "city": "Rotterdam"},
    ]


@pytest.fixture
def numbered() -> list[dict]:
    """25 records with ids 1..25, names "Person 01".."Person 25"."""
    return [{"id": i, "name": f"Person {i:02d}", "age": 20 + i} for i in range(1, 26)]


@pytest.fixture
def clients() -> list[dict]:
    """A small client list with the fields the clients screen works on."""
    return [
        {
            "id": "c1",
            "first_name": "Anna",
            "last_name": "de Vries",
            "email": "anna@example.nl",
            "phone": "0612345678",
            "status": "active",
            "assigned_therapist_id": "t1",
            "therapist_name": "Dr. Jansen",
            "insurance_company": "Zilveren Kruis",
            "therapy_type": "CBT",
            "total_sessions": 12,
            "registration_date": "2024-01-10",
            "intake_completed": True,
        },
        {
            "id": "c2",
            "first_name": "Bram",
            "last_name": "Bakker",
            "email": "bram@example.nl",
            "phone": "0687654321",
            "status": "new",
            "assigned_therapist_id": None,
            "therapist_name": None,
            "insurance_company": "CZ",
            "therapy_type": "EMDR",
            "total_sessions": 0,
            "registration_date": "2024-03-05",
            "intake_completed": False,
        },
        {
            "id": "c3",
            "first_name": "Chris",
            "last_name": "Mulder",
            "email": "chris@example.nl",
            "phone": "0611122233",
            "status": "on_hold",
            "assigned_therapist_id": "t2",
            "therapist_name": "Dr. Smit",
            "insurance_company": None,
            "therapy_type": "CBT",
            "total_sessions": 4,
            "registration_date": "2024-02-20",
            "intake_completed": True,
        },
        {
            "id": "c4",
            "first_name": "Dewi",
            "last_name": "Jansen",
            "email": "dewi@example.nl",
            "phone": "0699988877",
            "status": "discharged",
            "assigned_therapist_id": "t1",
            "therapist_name": "Dr. Jansen",
            "insurance_company": "Zilveren Kruis",
            "therapy_type": "Schema therapy",
            "total_sessions": 30,
            "registration_date": "2023-11-15",
            "intake_completed": True,
        },
    ]


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def make_engine(clock):
    """Factory for a TableEngine over name/status columns with an injected clock."""

    def factory(records, **overrides) -> TableEngine:
        options = {
            "columns": (
                Column("name", "Name", sortable=True, searchable=True),
                Column("status", "Status", sortable=True),
                Column("city", "City", searchable=True),
                Column("age", "Age", sortable=True),
            ),
            "page_size": 10,
            "debounce_ms": 300,
            "clock": clock,
        }
        options.update(overrides)
        return TableEngine(records, **options)

    return factory
