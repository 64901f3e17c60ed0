# tests/test_match_result.py
import dataclasses

import pytest

from match_result import EXACT, Hit, Match


def test_hit_defaults():
    hit = Hit(2, 3)
    assert hit.accuracy == EXACT == 1.0
    assert hit.end == 5


@pytest.mark.parametrize("args", [(-1, 1), (0, -1), (0, 1, 1.5), (0, 1, -0.1)])
def test_invalid_hit_rejected(args):
    with pytest.raises(ValueError):
        Hit(*args)


def test_sort_by_accuracy_is_stable():
    hits = [Hit(0, 1, 0.5), Hit(1, 1, 1.0), Hit(2, 1, 0.5), Hit(3, 1, 1.0)]
    match = Match("abcd", "a", hits)
    assert match.sorted_by_accuracy is True
    assert match.starts == (1, 3, 0, 2)


def test_unsorted_keeps_discovery_order():
    hits = [Hit(0, 1, 0.5), Hit(1, 1, 1.0), Hit(2, 1, 0.5)]
    match = Match("abcd", "a", hits, sorted_by_accuracy=False)
    assert match.starts == (0, 1, 2)


def test_hits_are_copied():
    hits = [Hit(0, 1)]
    match = Match("ab", "a", hits)
    hits.append(Hit(1, 1))
    assert match.hits == (Hit(0, 1),)


def test_match_is_frozen():
    match = Match("ab", "a", [Hit(0, 1)])
    with pytest.raises(dataclasses.FrozenInstanceError):
        match.base = "zz"


def test_hit_outside_base_rejected():
    with pytest.raises(ValueError):
        Match("abc", "bc", [Hit(2, 2)])


def test_negative_indent_rejected():
    with pytest.raises(ValueError):
        Match("abc", "a", [], indent=-1)


def test_defaults():
    match = Match("abc", "a")
    assert match.hits == ()
    assert match.indent == 5
    assert match.comparisons == 0
    assert match.algorithm == ""
