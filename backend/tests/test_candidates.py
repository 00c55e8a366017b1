"""Tests for candidate ordering."""
import pytest

from chronoscape.core.candidates import (
    ANCIENT_IDENTIFIER,
    ANTIQUITY_IDENTIFIER,
    DEFAULT_IDENTIFIER,
    asset_path,
    build_candidates,
    plan_candidates,
)


def test_full_order_with_decade_and_location():
    assert build_candidates("March 1947", "Paris, France") == [
        "194france",
        "194generic",
        "20france",
        "20generic",
        "genericfrance",
        "default",
    ]


def test_three_digit_year_has_no_decade_entries():
    assert build_candidates("AD 476", "Rome") == [
        "5italy",
        "5generic",
        "genericitaly",
        "default",
    ]


def test_unparseable_date_uses_nineteenth_century():
    assert build_candidates("unknown", "London") == [
        "19uk",
        "19generic",
        "genericuk",
        "default",
    ]


def test_empty_location_skips_location_entries():
    assert build_candidates("1850", "") == ["185generic", "19generic", "default"]


def test_empty_inputs():
    assert build_candidates("", "") == ["19generic", "default"]


@pytest.mark.parametrize("date,identifier", [
    ("1200 BCE", ANCIENT_IDENTIFIER),
    ("3000 BC", ANCIENT_IDENTIFIER),
    ("800 BCE", ANTIQUITY_IDENTIFIER),
    ("44 B.C.", ANTIQUITY_IDENTIFIER),
])
def test_pre_classical_eras_ignore_location(date, identifier):
    candidates = build_candidates(date, "Thebes, Egypt")
    assert candidates == [identifier, DEFAULT_IDENTIFIER]
    assert not any("egypt" in c for c in candidates)


@pytest.mark.parametrize("date,location", [
    ("", ""),
    ("1947", "California"),
    ("800 BCE", "Egypt"),
    ("no year", "Nowhere, Atlantis"),
    ("2024", "USA"),
])
def test_never_empty_and_ends_with_default(date, location):
    candidates = build_candidates(date, location)
    assert candidates
    assert candidates[-1] == DEFAULT_IDENTIFIER
    assert len(candidates) == len(set(candidates))


def test_parent_regions_are_opt_in():
    assert "194us" not in build_candidates("1947", "California")

    assert build_candidates("1947", "California", include_parent_regions=True) == [
        "194california",
        "194us",
        "194generic",
        "20california",
        "20us",
        "20generic",
        "genericcalifornia",
        "default",
    ]


def test_plan_exposes_intermediate_values():
    plan = plan_candidates("1850", "London")
    assert plan.era.century == 19
    assert plan.decade == "185"
    assert plan.location_code == "uk"
    assert plan.candidates[0] == "185uk"


def test_asset_path():
    assert asset_path("194france") == "/locations/194france.jpg"
    assert asset_path("default") == "/locations/default.jpg"
    assert asset_path("19uk", prefix="/static/bg/", extension=".webp") == "/static/bg/19uk.webp"


def test_asset_path_encodes_reserved_characters():
    assert asset_path("19ohio?") == "/locations/19ohio%3F.jpg"
    assert asset_path("genericst#louis") == "/locations/genericst%23louis.jpg"
    assert asset_path("19a/b") == "/locations/19a%2Fb.jpg"
