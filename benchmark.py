# benchmark.py
# Times every search algorithm over the same input and compares what they found.

import time

from alphabet import (
    DEFAULT_ALPHABET,
    DEFAULT_INDENT,
    AlphabetError,
    EmptyPatternError,
    PatternTooLongError,
)
from algorithms import ALGORITHMS, NAIVE
from render import match_to_records
from utils import clean_to_alphabet

DEMO_BASE = "Sampletestsampletestingsample."
DEMO_PATTERNS = ("amp", "ample")


def run_all_algorithms(base: str, pattern: str, algorithms=None, **options) -> list:
    """
    Runs each algorithm once on (base, pattern).

    Returns one dict per algorithm, in registry order:
    {"name", "time" (ms), "comparisons", "hits", "match"}.
    Extra keyword options are passed to every search function.
    """
    if algorithms is None:
        algorithms = ALGORITHMS

    results = []
    for name, algo_func in algorithms.items():
        start = time.perf_counter()
        match = algo_func(base, pattern, **options)
        elapsed_ms = (time.perf_counter() - start) * 1000
        results.append({
            "name": name,
            "time": elapsed_ms,
            "comparisons": match.comparisons,
            "hits": len(match.hits),
            "match": match,
        })
    return results


def find_disagreements(results, reference=NAIVE):
    """
    Start offsets each algorithm reported beyond ("extra") or short of
    ("missing") the reference algorithm. Algorithms that agree are left out.
    """
    by_name = {r["name"]: set(r["match"].starts) for r in results}
    if reference not in by_name:
        raise KeyError(f"Reference algorithm not in results: {reference}")
    expected = by_name[reference]

    report = {}
    for name, starts in by_name.items():
        if name == reference or starts == expected:
            continue
        report[name] = {
            "extra": sorted(starts - expected),
            "missing": sorted(expected - starts),
        }
    return report


def run_batch_analysis(documents, pattern, case_sensitive=True, alphabet=DEFAULT_ALPHABET,
                       algorithms=None, indent=DEFAULT_INDENT, sort_by_accuracy=True):
    """
    Runs every algorithm over each document of {name: text}.

    Document text is cleaned to the alphabet; the pattern is not, and is
    rejected if it holds symbols outside the alphabet.

    Returns (report, aggregate): report holds one entry per document, with a
    "skipped" reason for documents shorter than the pattern and the hit
    records of the reference search under "hits"; aggregate maps algorithm
    name to summed {"comps", "time", "hits"}.
    """
    if algorithms is None:
        algorithms = ALGORITHMS

    if not pattern:
        raise EmptyPatternError()
    invalid = alphabet.invalid_symbols(pattern)
    if invalid:
        raise AlphabetError("pattern", invalid)

    pattern_to_find = pattern if case_sensitive else pattern.lower()

    report = []
    aggregate = {name: {"comps": 0, "time": 0.0, "hits": 0} for name in algorithms}

    for name, text in documents.items():
        text_to_search = clean_to_alphabet(text, alphabet)
        if not case_sensitive:
            text_to_search = text_to_search.lower()

        entry = {"document": name, "length": len(text_to_search), "results": []}
        try:
            results = run_all_algorithms(text_to_search, pattern_to_find, algorithms, alphabet=alphabet,
                                         indent=indent, sort_by_accuracy=sort_by_accuracy)
        except PatternTooLongError as e:
            entry["skipped"] = str(e)
            entry["hits"] = []
            report.append(entry)
            continue

        reference = next((r for r in results if r["name"] == NAIVE), results[0])
        entry["hits"] = match_to_records(reference["match"])

        for result in results:
            agg = aggregate[result["name"]]
            agg["comps"] += result["comparisons"]
            agg["time"] += result["time"]
            agg["hits"] += result["hits"]
            entry["results"].append({
                "algorithm": result["name"],
                "time_ms": result["time"],
                "comparisons": result["comparisons"],
                "hits": result["hits"],
                "starts": list(result["match"].starts),
            })
        entry["disagreements"] = find_disagreements(results) if NAIVE in algorithms else {}
        report.append(entry)

    return report, aggregate
