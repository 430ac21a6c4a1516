"""
Tests for the built-in catalog and the JSON catalog loader.
"""

import dataclasses

import pytest

from semester_gpa import DEFAULT_CATALOG, CatalogError, CatalogLoader, Course, find_course


class TestDefaultCatalog:

    def test_courses_in_display_order(self):
        assert [(c.code, c.credit_hours) for c in DEFAULT_CATALOG] == [
            ("PHY113", 2),
            ("BMS112", 2),
            ("BMS132", 1),
            ("BMS122", 2),
            ("BDS011", 4),
            ("BDS021", 3),
            ("UC1", 2),
            ("UC2", 2),
        ]

    def test_names(self):
        assert DEFAULT_CATALOG[2].name == "General Physiology (1) for Dental Students"
        assert DEFAULT_CATALOG[4].name == "Dental Biomaterials I"

    def test_courses_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CATALOG[0].credit_hours = 9

    def test_find_course_ignores_case(self):
        assert find_course(DEFAULT_CATALOG, " bds021 ").code == "BDS021"
        assert find_course(DEFAULT_CATALOG, "NOPE") is None


class TestCatalogLoader:

    def test_load_object_form(self, catalog_file):
        path = catalog_file({"courses": [
            {"code": "BDS012", "name": "Dental Biomaterials II", "credit_hours": 4},
            {"code": "BDS022", "name": "Dental Anatomy II", "creditHours": 3},
        ]})
        catalog = CatalogLoader().load(path)
        assert catalog == (
            Course("BDS012", "Dental Biomaterials II", 4),
            Course("BDS022", "Dental Anatomy II", 3),
        )

    def test_load_list_form(self, catalog_file):
        path = catalog_file([{"code": "A1", "name": "Alpha", "credit_hours": 1}])
        assert CatalogLoader().load(path) == (Course("A1", "Alpha", 1),)

    def test_cached_per_path(self, catalog_file):
        path = catalog_file([{"code": "A1", "name": "Alpha", "credit_hours": 1}])
        loader = CatalogLoader()
        first = loader.load(path)
        path.write_text("not json any more", encoding="utf-8")
        assert loader.load(path) is first

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="No catalog file"):
            CatalogLoader().load(tmp_path / "missing.json")

    def test_invalid_json(self, catalog_file):
        with pytest.raises(CatalogError, match="not valid JSON"):
            CatalogLoader().load(catalog_file("{oops"))

    def test_directory_path(self, tmp_path):
        with pytest.raises(CatalogError, match="Could not read"):
            CatalogLoader().load(tmp_path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(CatalogError, match="Could not read"):
            CatalogLoader().load(path)

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({"courses": []}, "non-empty"),
            ({"other": 1}, "non-empty"),
            (["PHY113"], "not an object"),
            ([{"name": "No Code", "credit_hours": 2}], "has no code"),
            ([{"code": "A1", "credit_hours": 2}], "has no name"),
            ([{"code": "A1", "name": "Alpha"}], "positive integer"),
            ([{"code": "A1", "name": "Alpha", "credit_hours": 0}], "positive integer"),
            ([{"code": "A1", "name": "Alpha", "credit_hours": 2.5}], "positive integer"),
            ([{"code": "A1", "name": "Alpha", "credit_hours": True}], "positive integer"),
            ([{"code": "A1", "name": "Alpha", "credit_hours": 1},
              {"code": "a1", "name": "Again", "credit_hours": 1}], "Duplicate"),
        ],
    )
    def test_invalid_payloads(self, payload, message):
        with pytest.raises(CatalogError, match=message):
            CatalogLoader.parse(payload)
