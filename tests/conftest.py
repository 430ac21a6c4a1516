import json

import pytest

from semester_gpa import DEFAULT_CATALOG, GpaCalculator


@pytest.fixture
def catalog():
    return DEFAULT_CATALOG


@pytest.fixture
def calculator():
    return GpaCalculator()


@pytest.fixture
def catalog_file(tmp_path):
    """Write a catalog payload to a temp file and return its path."""
    def _write(payload, name="catalog.json"):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path
    return _write
