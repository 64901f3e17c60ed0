# algorithms.py
# Contains all string-searching algorithm implementations.
#
# Every search takes the whole base text and one pattern, checks them with
# validate_inputs() and returns a Match. Candidate start offsets run from 0 to
# n - m inclusive.

from alphabet import (
    DEFAULT_ALPHABET,
    DEFAULT_HASH_CONFIG,
    DEFAULT_INDENT,
    validate_inputs,
)
from match_result import Hit, Match

NAIVE = "Naive Scan"
RABIN_KARP = "Rabin-Karp"
RABIN_KARP_VERIFIED = "Rabin-Karp (verified)"
KMP = "Knuth-Morris-Pratt (KMP)"
BOYER_MOORE = "Boyer-Moore (bad character)"


def _compare_window(base, start, pattern):
    """Compares pattern with base[start:start + m] left to right.

    Returns (matched, comparisons)."""
    comparisons = 0
    for j in range(len(pattern)):
        comparisons += 1
        if base[start + j] != pattern[j]:
            return False, comparisons
    return True, comparisons


def naive_search(base, pattern, *, alphabet=DEFAULT_ALPHABET,
                 sort_by_accuracy=True, indent=DEFAULT_INDENT):
    """Finds a pattern in text by checking every window. O((n-m+1)*m)."""
    validate_inputs(base, pattern, alphabet)
    n = len(base); m = len(pattern)

    hits = []
    comparisons = 0
    for i in range(n - m + 1):
        matched, comps = _compare_window(base, i, pattern)
        comparisons += comps
        if matched:
            hits.append(Hit(i, m))

    return Match(base, pattern, hits, indent=indent, sorted_by_accuracy=sort_by_accuracy,
                 algorithm=NAIVE, comparisons=comparisons)


def _rolling_hash_scan(base, pattern, hash_config, verify):
    n = len(base); m = len(pattern)
    k = hash_config.multiplier
    mod = hash_config.modulus
    inverse = hash_config.inverse

    # symbol at position p contributes ord(symbol) * k**p
    pat_hash = 0; win_hash = 0; power = 1
    for i in range(m):
        pat_hash = (pat_hash + ord(pattern[i]) * power) % mod
        win_hash = (win_hash + ord(base[i]) * power) % mod
        power = (power * k) % mod
    # power == k**m (mod)

    hits = []
    comparisons = 0
    for i in range(n - m + 1):
        comparisons += 1
        if win_hash == pat_hash:
            if verify:
                matched, comps = _compare_window(base, i, pattern)
                comparisons += comps
            else:
                matched = True
            if matched:
                hits.append(Hit(i, m))
        if i < n - m:
            # drop base[i], add base[i+m] at k**m, then divide out one k
            win_hash = (win_hash - ord(base[i]) + ord(base[i + m]) * power) * inverse % mod

    return hits, comparisons


def rabin_karp_search(base, pattern, *, alphabet=DEFAULT_ALPHABET, hash_config=DEFAULT_HASH_CONFIG,
                      sort_by_accuracy=True, indent=DEFAULT_INDENT):
    """
    Finds a pattern in text with a rolling hash, fast-and-approximate mode.

    A window is reported as soon as its hash equals the pattern hash; no
    symbol-by-symbol check follows, so hash collisions show up as hits.
    Use rabin_karp_verified_search() for exact results.
    """
    validate_inputs(base, pattern, alphabet)
    hits, comparisons = _rolling_hash_scan(base, pattern, hash_config, verify=False)
    return Match(base, pattern, hits, indent=indent, sorted_by_accuracy=sort_by_accuracy,
                 algorithm=RABIN_KARP, comparisons=comparisons)


def rabin_karp_verified_search(base, pattern, *, alphabet=DEFAULT_ALPHABET,
                               hash_config=DEFAULT_HASH_CONFIG,
                               sort_by_accuracy=True, indent=DEFAULT_INDENT):
    """Rolling-hash search that confirms every hash match symbol by symbol."""
    validate_inputs(base, pattern, alphabet)
    hits, comparisons = _rolling_hash_scan(base, pattern, hash_config, verify=True)
    return Match(base, pattern, hits, indent=indent, sorted_by_accuracy=sort_by_accuracy,
                 algorithm=RABIN_KARP_VERIFIED, comparisons=comparisons)


def _prefix_scan(sequence):
    n = len(sequence)
    prefix = [0] * n
    comparisons = 0
    for i in range(1, n):
        j = prefix[i - 1]
        while j > 0:
            comparisons += 1
            if sequence[i] == sequence[j]:
                break
            j = prefix[j - 1]
        else:
            comparisons += 1
        if sequence[i] == sequence[j]:
            j += 1
        prefix[i] = j
    return prefix, comparisons


def prefix_function(sequence):
    """
    Returns the prefix-length array of `sequence`: entry i is the length of
    the longest proper prefix that is also a suffix of sequence[:i + 1].
    """
    return _prefix_scan(sequence)[0]


def kmp_search(base, pattern, *, alphabet=DEFAULT_ALPHABET,
               sort_by_accuracy=True, indent=DEFAULT_INDENT):
    """
    Finds a pattern in text using the Knuth-Morris-Pratt (KMP) prefix function.

    The prefix function runs over pattern + delimiter + base. The delimiter
    never occurs in either sequence, so no prefix length can exceed m and a
    length of exactly m marks an occurrence ending at that composite index.
    """
    validate_inputs(base, pattern, alphabet)
    m = len(pattern)

    composite = pattern + alphabet.delimiter + base
    prefix, comparisons = _prefix_scan(composite)

    hits = [Hit(i - 2 * m, m) for i, length in enumerate(prefix) if length == m]
    return Match(base, pattern, hits, indent=indent, sorted_by_accuracy=sort_by_accuracy,
                 algorithm=KMP, comparisons=comparisons)


def bad_character_table(pattern, alphabet=DEFAULT_ALPHABET):
    """
    Shift for every alphabet symbol when it sits under the last pattern
    position: m - 1 - (rightmost index of the symbol in pattern[:-1]), or m
    when the symbol does not occur there.
    """
    m = len(pattern)
    table = dict.fromkeys(alphabet.symbols, m)
    for k in range(m - 1):
        table[pattern[k]] = m - 1 - k
    return table


def boyer_moore_search(base, pattern, *, alphabet=DEFAULT_ALPHABET,
                       sort_by_accuracy=True, indent=DEFAULT_INDENT):
    """
    Finds a pattern in text with Boyer-Moore's bad-character rule only.

    No good-suffix rule, so worst case stays O((n-m+1)*m).
    """
    validate_inputs(base, pattern, alphabet)
    n = len(base); m = len(pattern)
    table = bad_character_table(pattern, alphabet)

    hits = []
    comparisons = 0
    shift = 0
    while shift <= n - m:
        i = m - 1
        while i >= 0:
            comparisons += 1
            if pattern[i] != base[shift + i]:
                break
            i -= 1

        if i < 0:
            hits.append(Hit(shift, m))
            shift += table[base[shift + m - 1]]
        else:
            # table values are measured from the window end; re-anchor to i
            shift += max(1, table[base[shift + i]] - (m - 1 - i))

    return Match(base, pattern, hits, indent=indent, sorted_by_accuracy=sort_by_accuracy,
                 algorithm=BOYER_MOORE, comparisons=comparisons)


ALGORITHMS = {
    NAIVE: naive_search,
    RABIN_KARP: rabin_karp_search,
    RABIN_KARP_VERIFIED: rabin_karp_verified_search,
    KMP: kmp_search,
    BOYER_MOORE: boyer_moore_search,
}
