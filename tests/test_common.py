import pytest

from _saxlex.tokenizer.common import (
    is_whitespace,
    matches_keyword,
    read_past,
    read_until,
)
from _saxlex.tokenizer.event_kind import EventKind


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\r"])
def test_whitespace(char):
    assert is_whitespace("a" + char, 1)


@pytest.mark.parametrize("char", ["\f", "\v", "\u00a0", "a"])
def test_not_whitespace(char):
    assert not is_whitespace(char, 0)


def test_whitespace_past_end():
    assert not is_whitespace("a", 1)


def test_read_until():
    assert read_until("<a>b</a>", 1, "<") == 4
    assert read_until("<a>", 1, "<") == 3


def test_read_past():
    assert read_past("a-->b", 0, "-->") == 4
    assert read_past("a--", 0, "-->") == 3


def test_matches_keyword():
    assert matches_keyword("<?XML a", 0, "<?xml", ignore_case=True)
    assert not matches_keyword("<?XML a", 0, "<?xml")
    assert not matches_keyword("<?xml", 0, "<?xml")


@pytest.mark.parametrize("kind", list(EventKind))
def test_lookup_by_value(kind):
    assert EventKind.lookup(kind.value) is kind
    assert EventKind.lookup(kind) is kind


def test_spanned_kinds():
    assert EventKind.ERROR not in EventKind.spanned()
    assert EventKind.END_OF_INPUT not in EventKind.spanned()
    assert len(EventKind.spanned()) == len(EventKind) - 2
