"""Lattice graph builder: powerset Hasse diagram as a DOT description."""

import logging
import math
from numbers import Real
from typing import Sequence, Union

from hasselattice.dot import add_cover_edge, check_label, new_digraph
from hasselattice.elements.element_set import ElementSet
from hasselattice.errors import InvalidInput
from hasselattice.lattice import iter_cover_edges
from hasselattice.types import DEFAULT_SPACING, DiagramResult

logger = logging.getLogger(__name__)


def validate_spacing(spacing: float) -> float:
    """Return ``spacing`` as a float, or raise InvalidInput unless it is finite and > 0."""
    if isinstance(spacing, bool) or not isinstance(spacing, Real):
        raise InvalidInput(f"Spacing must be a number, got {spacing!r}")
    value = float(spacing)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput(f"Spacing must be a positive finite number, got {spacing!r}")
    return value


def build_diagram(
    elements: Union[ElementSet, Sequence[str]],
    spacing: float = DEFAULT_SPACING,
) -> DiagramResult:
    """
    Build the DOT description of the powerset lattice over ``elements``.

    Every subset except the full set gets one edge per absent element, drawn
    from the one-larger superset down to the subset with a reversed arrow so
    the layout engine places the full set at the top.

    Args:
        elements: Ordered labels; position decides the bit used internally.
        spacing: Rank and node separation passed to the layout engine.

    Returns:
        DiagramResult with the description, the subset count (2**N) and the
        number of edge statements.

    Raises:
        InvalidInput: if ``spacing`` is not a positive finite number or
            ``elements`` is empty or a label contains ``:``. All checks run
            before enumeration.
    """
    value = validate_spacing(spacing)
    element_set = elements if isinstance(elements, ElementSet) else ElementSet(elements)
    if len(element_set) == 0:
        raise InvalidInput("At least one element is required")

    for label in element_set:
        check_label(label)

    graph = new_digraph(value)
    edge_count = 0
    for edge in iter_cover_edges(element_set):
        add_cover_edge(graph, edge.superset.label(), edge.subset.label())
        edge_count += 1

    logger.debug(
        "[diagram] %d elements -> %d subsets, %d edges",
        len(element_set),
        element_set.subset_count,
        edge_count,
    )
    return DiagramResult(
        description=graph.source,
        subset_count=element_set.subset_count,
        edge_count=edge_count,
        elements=element_set.labels,
    )
