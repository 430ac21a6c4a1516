"""
Course catalog data and loading.

This module holds the built-in semester catalog and a loader for
alternative catalogs stored as JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..errors import CatalogError
from ..models import Course

logger = logging.getLogger(__name__)


# Field of Dentistry, Year 1, Semester 1. Order is display order only.
DEFAULT_CATALOG = (
    Course("PHY113", "Biophysics for Dentistry", 2),
    Course("BMS112", "General Anatomy for Dental Students", 2),
    Course("BMS132", "General Physiology (1) for Dental Students", 1),
    Course("BMS122", "General Histology for Dental Students", 2),
    Course("BDS011", "Dental Biomaterials I", 4),
    Course("BDS021", "Dental Anatomy I", 3),
    Course("UC1", "University Requirement 1", 2),
    Course("UC2", "University Requirement 2", 2),
)


def find_course(catalog, code: str) -> Optional[Course]:
    """Look up a course by code, ignoring case and surrounding whitespace."""
    wanted = code.strip().upper()
    for course in catalog:
        if course.code.upper() == wanted:
            return course
    return None


class CatalogLoader:
    """
    Loads and caches catalog files.

    FILE FORMAT:
    ------------
        {
            "courses": [
                {"code": "PHY113", "name": "Biophysics for Dentistry", "credit_hours": 2},
                ...
            ]
        }

    A bare list of course objects is accepted too, and "creditHours" is
    accepted as an alias of "credit_hours".

    WHY CACHING: the interactive loop may ask for the same catalog more than
    once; each file is read and validated only on first use.

    Usage:
        loader = CatalogLoader()
        catalog = loader.load("catalogs/dentistry_y1_s2.json")
    """

    def __init__(self):
        # Keyed by resolved path
        self._cache = {}

    def load(self, path) -> tuple:
        """
        Load a catalog file into a tuple of Course records.

        Args:
            path: Path to the JSON catalog file

        Returns:
            Tuple of Course objects in file order

        Raises:
            CatalogError: file missing or unreadable, not JSON, or any course invalid
        """
        filepath = Path(path).expanduser().resolve()
        if filepath in self._cache:
            logger.debug("Catalog cache hit for %s", filepath)
            return self._cache[filepath]

        if not filepath.exists():
            raise CatalogError(f"No catalog file found at: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file {filepath} is not valid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"Could not read catalog file {filepath}: {e}") from e

        catalog = self.parse(payload)
        self._cache[filepath] = catalog
        logger.debug("Loaded %d courses from %s", len(catalog), filepath)
        return catalog

    @classmethod
    def parse(cls, payload) -> tuple:
        """
        Validate decoded catalog JSON and build Course records.

        Raises:
            CatalogError: if the payload shape or any course is invalid
        """
        if isinstance(payload, dict):
            courses_raw = payload.get("courses")
        else:
            courses_raw = payload

        if not isinstance(courses_raw, list) or not courses_raw:
            raise CatalogError("Catalog must contain a non-empty list of courses")

        catalog = []
        seen = set()
        for i, entry in enumerate(courses_raw, 1):
            course = cls._parse_course(entry, i)
            key = course.code.upper()
            if key in seen:
                raise CatalogError(f"Duplicate course code in catalog: {course.code}")
            seen.add(key)
            catalog.append(course)

        return tuple(catalog)

    @staticmethod
    def _parse_course(entry, position: int) -> Course:
        """Build one Course, checking each field."""
        if not isinstance(entry, dict):
            raise CatalogError(f"Course #{position} is not an object")

        code = str(entry.get("code") or "").strip()
        name = str(entry.get("name") or "").strip()
        credit_hours = entry.get("credit_hours", entry.get("creditHours"))

        if not code:
            raise CatalogError(f"Course #{position} has no code")
        if not name:
            raise CatalogError(f"Course {code} has no name")
        # bool is an int subclass; reject it explicitly
        if isinstance(credit_hours, bool) or not isinstance(credit_hours, int) or credit_hours <= 0:
            raise CatalogError(
                f"Course {code} must have a positive integer credit_hours, got {credit_hours!r}"
            )

        return Course(code=code, name=name, credit_hours=credit_hours)
