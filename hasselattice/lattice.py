"""Subset enumeration and covering edges of the powerset lattice.

Subsets are integers in ``[0, 2**N)``; bit ``j`` stands for the element at
position ``j`` of the ElementSet. The covering relation links each subset
to every subset obtained by adding exactly one absent element.
"""

from typing import Iterator, NamedTuple

from hasselattice.elements.element_set import ElementSet
from hasselattice.elements.subset import Subset


class CoverEdge(NamedTuple):
    """``superset`` covers ``subset``: they differ by exactly one element."""

    superset: Subset
    subset: Subset


def enumerate_subsets(elements: ElementSet) -> Iterator[Subset]:
    """Yield every subset in bitmask order, from the empty set to the full set."""
    for bitmask in range(elements.subset_count):
        yield Subset(bitmask, elements)


def iter_cover_edges(elements: ElementSet) -> Iterator[CoverEdge]:
    """
    Yield the covering edges in generation order.

    For each subset in bitmask order (the full set is skipped, nothing can be
    added to it) and each absent element in input order, yield
    ``(subset + element, subset)``. Duplicate labels count as distinct
    elements because absence is decided by bit position, not by label.
    """
    for subset in enumerate_subsets(elements):
        if subset.is_full:
            continue
        for index in subset.missing_indices():
            yield CoverEdge(subset.with_element(index), subset)


def count_cover_edges(n: int) -> int:
    """Number of covering edges of the powerset lattice over ``n`` elements."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    return n * (1 << (n - 1))
