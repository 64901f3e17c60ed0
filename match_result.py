# match_result.py
# Result model shared by every search algorithm.

from dataclasses import dataclass
from typing import Tuple

from alphabet import DEFAULT_INDENT

EXACT = 1.0


@dataclass(frozen=True)
class Hit:
    start: int
    length: int
    accuracy: float = EXACT

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"hit start must be non-negative, got {self.start}")
        if self.length < 0:
            raise ValueError(f"hit length must be non-negative, got {self.length}")
        if not 0.0 <= self.accuracy <= 1.0:
            raise ValueError(f"hit accuracy must lie in [0, 1], got {self.accuracy}")

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.start + self.length


@dataclass(frozen=True)
class Match:
    """
    All hits of `pattern` inside `base` reported by one algorithm.

    With `sorted_by_accuracy` set the hits are ordered by descending accuracy,
    keeping discovery order among equal accuracies; otherwise they stay in
    discovery order (increasing start offset for every search here).
    `indent` is only read by renderers.
    """
    base: str
    pattern: str
    hits: Tuple[Hit, ...] = ()
    indent: int = DEFAULT_INDENT
    sorted_by_accuracy: bool = True
    algorithm: str = ""
    comparisons: int = 0

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
        hits = tuple(self.hits)
        for hit in hits:
            if hit.end > len(self.base):
                raise ValueError(
                    f"hit at {hit.start} (length {hit.length}) runs past the base "
                    f"of length {len(self.base)}"
                )
        if self.sorted_by_accuracy:
            # sorted() stays stable with reverse=True
            hits = tuple(sorted(hits, key=lambda h: h.accuracy, reverse=True))
        object.__setattr__(self, "hits", hits)

    @property
    def starts(self) -> Tuple[int, ...]:
        return tuple(hit.start for hit in self.hits)
