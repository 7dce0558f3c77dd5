import pytest

from explicit_tsp.errors import StructureError
from explicit_tsp.lines import Entry, LineSource, classify_line, is_blank


@pytest.mark.parametrize("line", ["", " ", "\t", " \t\f\v\r", "\n"])
def test_blank_lines(line):
    assert is_blank(line)


@pytest.mark.parametrize("line", ["EOF", "  5", "\t.", "NAME: x"])
def test_substantive_lines(line):
    assert not is_blank(line)


def test_classify_specification_entry():
    assert classify_line("NAME: br17") == Entry("NAME", "br17")
    # leading blanks of the value skipped, trailing whitespace trimmed
    assert classify_line("COMMENT:   some text \t ") == Entry("COMMENT", "some text")
    assert classify_line("DIMENSION: ") == Entry("DIMENSION", "")


def test_classify_data_marker():
    entry = classify_line("EDGE_WEIGHT_SECTION")
    assert entry == Entry("EDGE_WEIGHT_SECTION", None)
    assert entry.is_data_marker
    assert not classify_line("TYPE: TSP").is_data_marker


def test_colon_must_be_followed_by_space():
    # 'KEY:value' and 'KEY : value' are not specification entries
    assert classify_line("NAME:br17").is_data_marker
    assert classify_line("NAME : br17") == Entry("NAME", None)


@pytest.mark.parametrize("line", [": value", "-1", "  NAME: x", "*"])
def test_classify_rejects_lines_without_key(line):
    with pytest.raises(StructureError):
        classify_line(line)


def test_line_source_strips_terminators_and_counts():
    src = LineSource(["a\r\n", "b\n", "c"])
    assert src.read_line() == "a"
    assert src.read_line() == "b"
    assert src.read_line() == "c"
    assert src.line_number == 3
    assert src.read_line() is None


def test_next_substantive_skips_blank_lines():
    src = LineSource(["", "   ", "\t", "NAME: x", "", "EOF"])
    assert src.next_substantive() == "NAME: x"
    assert src.line_number == 4
    assert src.next_substantive() == "EOF"
    assert src.next_substantive() is None


def test_tokens_cross_lines_and_leave_remainder():
    src = LineSource(["1 2", "", "  3 4 5 ", "EOF"])
    assert [src.read_token() for _ in range(3)] == ["1", "2", "3"]
    # the rest of the partially read line comes back first
    assert src.read_line() == " 4 5 "
    assert src.next_substantive() == "EOF"
    assert src.read_token() is None
