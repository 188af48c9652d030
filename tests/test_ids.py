"""Tests for ID generation and prefix lookup."""

from scrumdo.ids import new_id, resolve_id, short_id


def test_new_id_is_hex():
    value = new_id()
    assert len(value) == 32
    int(value, 16)


def test_new_ids_differ():
    assert new_id() != new_id()


def test_short_id():
    assert short_id("3f2a9c1e0b4d") == "3f2a9c1e"
    assert short_id("abc") == "abc"


def test_resolve_unique_prefix():
    assert resolve_id("3f", ["3f2a", "a1b2"]) == "3f2a"


def test_resolve_full_id():
    assert resolve_id("a1b2", ["3f2a", "a1b2"]) == "a1b2"


def test_resolve_is_case_insensitive():
    assert resolve_id(" A1 ", ["3f2a", "a1b2"]) == "a1b2"


def test_resolve_ambiguous():
    assert resolve_id("a", ["a1b2", "a9c8"]) is None


def test_resolve_exact_beats_longer():
    assert resolve_id("a1", ["a1", "a1b2"]) == "a1"


def test_resolve_no_match():
    assert resolve_id("ff", ["3f2a"]) is None


def test_resolve_empty_prefix():
    assert resolve_id("", ["3f2a"]) is None
