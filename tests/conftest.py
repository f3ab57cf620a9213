"""
Pytest configuration and shared fixtures for fast_rules tests.
"""

from typing import Any, Optional

import pytest
from faker import Faker

from fast_rules.contracts.record_finder import RecordFinder
from fast_rules.core import localization

fake = Faker()


class FakeRecordFinder(RecordFinder):
    """In-memory record lookup keyed by table name."""

    def __init__(self, tables: Optional[dict[str, list[dict[str, Any]]]] = None):
        self.tables = tables or {}
        self.calls: list[tuple[str, str, Any]] = []

    async def find_one(self, collection: str, field: str, value: Any) -> Optional[dict[str, Any]]:
        self.calls.append((collection, field, value))
        for record in self.tables.get(collection, []):
            if field in record and record[field] == value:
                return record
        return None


@pytest.fixture(autouse=True)
def bundled_catalogs_only(tmp_path):
    """Isolate tests from any `lang/` directory in the working directory."""
    localization.set_locale_path(str(tmp_path / "no-app-lang"))
    localization.set_locale("en")
    yield
    localization.clear_cache()


@pytest.fixture
def sample_data():
    return {
        "name": fake.name(),
        "email": fake.email(),
        "phone": fake.numerify("##########"),
        "link": fake.url(),
    }


@pytest.fixture
def record_finder():
    return FakeRecordFinder()


# Configure pytest-asyncio
pytest_plugins = ['pytest_asyncio']


@pytest.fixture
def make_record_finder():
    return FakeRecordFinder
