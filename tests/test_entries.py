import pytest

from explicit_tsp.entries import EntryKind, EntryStore, EntryValue, validate_specification
from explicit_tsp.errors import CompletenessError, EntryKindError, ValidationError


def _store(**pairs):
    entries = EntryStore()
    for key, value in pairs.items():
        validate_specification(entries, key, value)
    return entries


def test_accepted_entries_are_all_recorded():
    entries = _store(
        NAME="gr5",
        TYPE="TSP",
        COMMENT="a comment: with colon",
        DIMENSION="5",
        EDGE_WEIGHT_TYPE="EXPLICIT",
        EDGE_WEIGHT_FORMAT="WHATEVER",
        NODE_COORD_TYPE="NO_COORDS",
        DISPLAY_DATA_TYPE="TWOD_DISPLAY",
    )
    assert len(entries) == 8
    assert entries.get_text("NAME") == "gr5"
    assert entries.get_text("TYPE") == "TSP"
    assert entries.get_text("COMMENT") == "a comment: with colon"
    assert entries.get_int("DIMENSION") == 5
    # format name is not checked until the section is read
    assert entries.get_text("EDGE_WEIGHT_FORMAT") == "WHATEVER"
    assert entries.as_dict()["DIMENSION"] == 5


@pytest.mark.parametrize(
    "key,value",
    [
        ("TYPE", "ATSP"),
        ("TYPE", "tsp"),
        ("EDGE_WEIGHT_TYPE", "EUC_2D"),
        ("NODE_COORD_TYPE", "TWOD_COORDS"),
        ("DISPLAY_DATA_TYPE", "COORD_DISPLAY"),
        ("DIMENSION", "0"),
        ("DIMENSION", "-4"),
        ("DIMENSION", "ten"),
        ("DIMENSION", "3.5"),
        ("DIMENSION", "0_2"),
        ("DIMENSION", "1_000"),
        ("DIMENSION", "\u0663"),
        ("DIMENSION", "99999999999999999999"),
        ("DIMENSION", ""),
    ],
)
def test_rejected_values(key, value):
    entries = EntryStore()
    with pytest.raises(ValidationError) as exc:
        validate_specification(entries, key, value)
    assert key in str(exc.value)
    assert key not in entries


def test_display_types():
    assert _store(DISPLAY_DATA_TYPE="NO_DISPLAY").get_text("DISPLAY_DATA_TYPE") == "NO_DISPLAY"
    assert _store(DISPLAY_DATA_TYPE="TWOD_DISPLAY").get_text("DISPLAY_DATA_TYPE") == "TWOD_DISPLAY"


def test_unknown_key_is_rejected():
    with pytest.raises(ValidationError, match="CAPACITY is unsupported"):
        validate_specification(EntryStore(), "CAPACITY", "10")


def test_key_is_written_once():
    entries = _store(NAME="first", DIMENSION="4")
    validate_specification(entries, "NAME", "second")
    validate_specification(entries, "DIMENSION", "9")
    assert entries.get_text("NAME") == "first"
    assert entries.get_int("DIMENSION") == 4
    assert len(entries) == 2
    assert not entries.insert("NAME", EntryValue.text("third"))


def test_repeated_key_still_validated():
    entries = _store(TYPE="TSP")
    with pytest.raises(ValidationError, match="ATSP"):
        validate_specification(entries, "TYPE", "ATSP")


def test_typed_accessors():
    entries = EntryStore()
    entries.insert("DIMENSION", EntryValue.integer(7))
    entries.insert("NAME", EntryValue.text("x"))
    assert entries.get_int("DIMENSION") == 7
    assert entries.get_int("MISSING") is None
    with pytest.raises(EntryKindError):
        entries.get_text("DIMENSION")
    with pytest.raises(EntryKindError):
        entries.get_int("NAME")


def test_require_reports_missing_field():
    entries = EntryStore()
    with pytest.raises(CompletenessError, match="DIMENSION not defined"):
        entries.require_int("DIMENSION")
    with pytest.raises(CompletenessError, match="EDGE_WEIGHT_FORMAT not defined"):
        entries.require_text("EDGE_WEIGHT_FORMAT")


def test_entry_value_is_tagged():
    assert EntryValue.text("5").kind is EntryKind.TEXT
    assert EntryValue.integer(5).kind is EntryKind.INTEGER
    assert EntryValue.text("5") != EntryValue.integer(5)
