# tests/test_render.py
from algorithms import naive_search
from match_result import Hit, Match
from render import format_hit, format_match, hit_context, match_to_records


def test_format_match_single_hit():
    match = naive_search("abcXYZdef", "XYZ")
    assert format_match(match) == (
        'string = "abcXYZdef";\n'
        'pattern = "XYZ", 1 hits produced (sorted)\n'
        'hit (100%, pos 3 to 5): abc<XYZ>def\n'
    )


def test_format_match_without_hits():
    match = naive_search("abcdef", "zz", sort_by_accuracy=False)
    assert format_match(match) == (
        'string = "abcdef";\n'
        'pattern = "zz", 0 hits produced (unsorted)\n'
    )


def test_context_is_truncated_with_ellipsis():
    base = "0123456789abcdefghij"
    match = naive_search(base, "abc")
    assert hit_context(match, match.hits[0]) == ("...56789", "defgh...")

    narrow = naive_search(base, "abc", indent=3)
    assert hit_context(narrow, narrow.hits[0]) == ("...789", "def...")


def test_context_at_edges():
    match = naive_search("01234abc", "abc")
    assert hit_context(match, match.hits[0]) == ("01234", "")

    match = naive_search("abc0123456", "abc")
    assert hit_context(match, match.hits[0]) == ("", "01234...")


def test_partial_accuracy_percentage():
    match = Match("abcdef", "ab", [Hit(0, 2, 0.5)])
    assert format_hit(match, match.hits[0]) == "hit (50%, pos 0 to 1): <ab>cdef"


def test_match_to_records():
    match = naive_search("aaaa", "aa", indent=1)
    records = match_to_records(match)
    assert [r["start"] for r in records] == [0, 1, 2]
    assert records[1] == {
        "start": 1,
        "end": 3,
        "length": 2,
        "accuracy": 1.0,
        "text": "aa",
        "prefix": "a",
        "suffix": "a",
    }
