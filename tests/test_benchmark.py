# tests/test_benchmark.py
from functools import partial

import pytest

from alphabet import AlphabetError, EmptyPatternError, HashConfig
from algorithms import ALGORITHMS, NAIVE, RABIN_KARP, naive_search, rabin_karp_search
from benchmark import find_disagreements, run_all_algorithms, run_batch_analysis


def test_run_all_algorithms():
    results = run_all_algorithms("aaaa", "aa")
    assert [r["name"] for r in results] == list(ALGORITHMS)
    for result in results:
        assert result["hits"] == 3
        assert result["time"] >= 0
        assert result["comparisons"] == result["match"].comparisons > 0


def test_run_all_algorithms_passes_options():
    results = run_all_algorithms("abcabc", "abc", indent=1, sort_by_accuracy=False)
    assert all(r["match"].indent == 1 for r in results)
    assert all(not r["match"].sorted_by_accuracy for r in results)


def test_agreeing_algorithms_have_no_disagreements():
    assert find_disagreements(run_all_algorithms("Sampletestsampletestingsample.", "amp")) == {}


def test_hash_collision_reported_as_extra():
    weak = HashConfig(multiplier=1, modulus=1_000_000_007)
    algorithms = {NAIVE: naive_search, RABIN_KARP: partial(rabin_karp_search, hash_config=weak)}
    results = run_all_algorithms("xbay", "ab", algorithms)
    assert find_disagreements(results) == {RABIN_KARP: {"extra": [1], "missing": []}}


def test_missing_reference():
    results = run_all_algorithms("abc", "b", {RABIN_KARP: rabin_karp_search})
    with pytest.raises(KeyError):
        find_disagreements(results)


def test_batch_case_insensitive_and_skipped():
    documents = {"one": "Hello hello", "short": "h"}
    report, aggregate = run_batch_analysis(documents, "hello", case_sensitive=False)

    assert [entry["document"] for entry in report] == ["one", "short"]
    assert "pattern longer than base" in report[1]["skipped"]
    assert report[1]["results"] == []

    first = report[0]
    assert first["disagreements"] == {}
    assert all(r["starts"] == [0, 6] for r in first["results"])
    assert aggregate[NAIVE]["hits"] == 2
    assert set(aggregate) == set(ALGORITHMS)


def test_batch_case_sensitive():
    report, aggregate = run_batch_analysis({"one": "Hello hello"}, "hello")
    assert report[0]["results"][0]["starts"] == [6]
    assert aggregate[NAIVE]["hits"] == 1


def test_batch_cleans_text():
    report, _ = run_batch_analysis({"doc": "café cafe\tcafe"}, "cafe")
    assert report[0]["length"] == 14
    assert report[0]["results"][0]["starts"] == [0, 5, 10]


def test_batch_rejects_empty_pattern():
    with pytest.raises(EmptyPatternError):
        run_batch_analysis({"one": "abc"}, "")


def test_batch_rejects_pattern_outside_alphabet():
    with pytest.raises(AlphabetError) as excinfo:
        run_batch_analysis({"doc": "price in euro"}, "€uro")
    assert excinfo.value.label == "pattern"
    assert excinfo.value.symbols == ["€"]


def test_batch_rejects_pattern_before_reading_documents():
    # the tab would otherwise be cleaned away and "ab" searched instead
    with pytest.raises(AlphabetError):
        run_batch_analysis({}, "a\tb")


def test_batch_hit_records_follow_options():
    documents = {"doc": "xx ab yy ab zz"}
    report, _ = run_batch_analysis(documents, "ab", indent=2, sort_by_accuracy=False)

    hits = report[0]["hits"]
    assert [h["start"] for h in hits] == [3, 9]
    assert hits[0]["prefix"] == "..." + "x "
    assert hits[0]["suffix"] == " y..."


def test_batch_passes_sort_and_indent_to_every_algorithm():
    seen = []

    def recording_search(base, pattern, **options):
        seen.append(options)
        return naive_search(base, pattern, **options)

    run_batch_analysis({"doc": "abcabc"}, "abc", algorithms={NAIVE: recording_search},
                       indent=1, sort_by_accuracy=False)
    assert len(seen) == 1
    assert seen[0]["indent"] == 1
    assert seen[0]["sort_by_accuracy"] is False


def test_batch_skipped_documents_have_no_hits():
    report, _ = run_batch_analysis({"short": "ab"}, "abc")
    assert report[0]["hits"] == []
