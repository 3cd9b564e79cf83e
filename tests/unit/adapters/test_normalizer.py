"""Tests for raw value normalizer functions."""

from devmatch.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    parse_bool,
    parse_int,
    parse_list,
    parse_optional_float,
)

# ─── normalize_column_name ───────────────────────────────────────────


def test_strip_trailing_spaces():
    assert normalize_column_name("  Rating  ") == "rating"


def test_remove_bom():
    assert normalize_column_name("\ufeffID") == "id"


def test_spaces_and_dashes_become_underscore():
    assert normalize_column_name("Technical Area") == "technical_area"
    assert normalize_column_name("Budget - Range") == "budget_range"


def test_non_breaking_space():
    assert normalize_column_name("Estimated\u00a0Duration") == "estimated_duration"


def test_punctuation_removed():
    assert normalize_column_name("Rating (0-5)") == "rating_0_5"


# ─── clean_string ────────────────────────────────────────────────────


def test_clean_string_strips():
    assert clean_string("  hello  ") == "hello"


def test_clean_string_empty_to_none():
    assert clean_string("   ") is None
    assert clean_string("") is None
    assert clean_string(None) is None


def test_clean_string_converts_numbers():
    assert clean_string(42) == "42"


# ─── parse_list ──────────────────────────────────────────────────────


def test_parse_list_separators():
    assert parse_list("React, Node.js; SQL | Go") == ("React", "Node.js", "SQL", "Go")


def test_parse_list_keeps_multiword_items():
    assert parse_list("Full Stack, API Integration") == ("Full Stack", "API Integration")


def test_parse_list_passthrough():
    assert parse_list(["React", " ", None, "Vue "]) == ("React", "Vue")


def test_parse_list_empty():
    assert parse_list(None) == ()
    assert parse_list("") == ()


# ─── parse_bool ──────────────────────────────────────────────────────


def test_parse_bool_strings():
    assert parse_bool("true") is True
    assert parse_bool("Yes") is True
    assert parse_bool("1") is True
    assert parse_bool("false") is False
    assert parse_bool("") is False
    assert parse_bool("maybe") is False


def test_parse_bool_schedule_object():
    assert parse_bool({"days": ["mon"], "hours": "9-17"}) is True
    assert parse_bool({}) is False


def test_parse_bool_native():
    assert parse_bool(True) is True
    assert parse_bool(None) is False
    assert parse_bool(0) is False


# ─── parse_optional_float / parse_int ────────────────────────────────


def test_parse_optional_float():
    assert parse_optional_float("4,5") == 4.5
    assert parse_optional_float(0) == 0.0
    assert parse_optional_float("") is None
    assert parse_optional_float(None) is None
    assert parse_optional_float("n/a") is None
    assert parse_optional_float("nan") is None


def test_parse_int():
    assert parse_int("90") == 90
    assert parse_int("90.0") == 90
    assert parse_int(45) == 45
    assert parse_int("") == 0
    assert parse_int("soon") == 0
    assert parse_int(None, default=-1) == -1
