"""Unit tests for the team catalog."""

import json

import pandas as pd
import pytest

from nbamatchup.catalog import TeamCatalog
from nbamatchup.exceptions import CatalogError, InvalidProfile, UnknownTeamError


class TestDefaultCatalog:

    def test_order_and_size(self, catalog):
        assert len(catalog) == 12
        assert catalog.codes()[:3] == ["LAL", "BOS", "GSW"]

    def test_lookup_is_case_insensitive(self, catalog):
        assert catalog.get("bos").name == "Boston Celtics"
        assert " nyk " in catalog
        assert "XYZ" not in catalog

    def test_unknown_code(self, catalog):
        with pytest.raises(UnknownTeamError) as exc_info:
            catalog.get("XYZ")
        assert exc_info.value.code == "XYZ"

    def test_options_exclude_other_selection(self, catalog):
        codes = [team.code for team in catalog.options(exclude="bos")]
        assert "BOS" not in codes
        assert len(codes) == 11
        assert len(catalog.options()) == 12

    def test_to_frame(self, catalog):
        frame = catalog.to_frame()
        assert list(frame.columns) == [
            "name", "code", "offense_rating", "defense_rating", "pace", "form_score",
        ]
        assert frame.loc[frame["code"] == "BOS", "pace"].iloc[0] == 98.2


class TestCatalogValidation:

    def test_duplicate_codes(self, catalog_records):
        catalog_records[2]["abbr"] = "alp"
        with pytest.raises(CatalogError, match="Duplicate"):
            TeamCatalog.from_frame(pd.DataFrame(catalog_records))

    def test_needs_two_teams(self, catalog_records):
        with pytest.raises(CatalogError):
            TeamCatalog.from_frame(pd.DataFrame(catalog_records[:1]))

    def test_empty(self):
        with pytest.raises(CatalogError):
            TeamCatalog.from_frame(pd.DataFrame())

    def test_missing_column(self, catalog_records):
        frame = pd.DataFrame(catalog_records).drop(columns=["pace"])
        with pytest.raises(InvalidProfile) as exc_info:
            TeamCatalog.from_frame(frame)
        assert exc_info.value.field == "pace"

    def test_non_numeric_rating(self, catalog_records):
        catalog_records[1]["defRating"] = "n/a"
        with pytest.raises(InvalidProfile) as exc_info:
            TeamCatalog.from_frame(pd.DataFrame(catalog_records))
        assert exc_info.value.field == "defense_rating"
        assert exc_info.value.team == "BET"

    def test_missing_code(self, catalog_records):
        catalog_records[0]["abbr"] = None
        with pytest.raises(InvalidProfile) as exc_info:
            TeamCatalog.from_frame(pd.DataFrame(catalog_records))
        assert exc_info.value.field == "code"


class TestCatalogFiles:

    def test_json_list(self, tmp_path, catalog_records):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps(catalog_records), encoding="utf-8")
        catalog = TeamCatalog.from_file(path)
        assert catalog.codes() == ["ALP", "BET", "GAM"]
        assert catalog.get("BET").form_score == 0.75

    def test_json_object_with_teams_key(self, tmp_path, catalog_records):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps({"teams": catalog_records}), encoding="utf-8")
        assert len(TeamCatalog.from_file(path)) == 3

    def test_csv(self, tmp_path, catalog_records):
        path = tmp_path / "teams.csv"
        pd.DataFrame(catalog_records).to_csv(path, index=False)
        catalog = TeamCatalog.from_file(path)
        assert catalog.get("gam").offense_rating == 109.5

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            TeamCatalog.from_file(tmp_path / "nope.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "teams.xml"
        path.write_text("<teams/>", encoding="utf-8")
        with pytest.raises(CatalogError, match="Unsupported"):
            TeamCatalog.from_file(path)

    def test_load_without_path_uses_default(self):
        assert len(TeamCatalog.load(None)) == 12
        assert len(TeamCatalog.load("")) == 12
