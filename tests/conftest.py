"""Global pytest fixtures and default marks for STREAMINDEX."""

from __future__ import annotations

from pathlib import Path

import pytest

from streamindex import StreamIndex
from tests.fakes import RecordingItemStore

# pylint: disable=unused-argument,redefined-outer-name

TESTS_ROOT = Path(__file__).parent.resolve()

# Directory under tests/ -> mark applied to every test collected from it
DIRECTORY_MARKS = {
    "unit": "unit",
    "contract": "contract",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark tests by their top-level directory (`tests/unit/`, `tests/contract/`)."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        if (marker_name := DIRECTORY_MARKS.get(top)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def store() -> RecordingItemStore:
    """Return a fresh recording store per test (no cross-test state)."""
    return RecordingItemStore()


@pytest.fixture
def index(store: RecordingItemStore) -> StreamIndex:
    """Return an unbounded index over the recording store."""
    return StreamIndex(store)
