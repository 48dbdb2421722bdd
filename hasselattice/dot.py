"""Graphviz DOT graph for the lattice diagram."""

import graphviz

from hasselattice.errors import InvalidInput

# Arrowheads point from the smaller set to the larger one while the larger
# set stays the edge tail, which keeps the full set at the top.
REVERSE_ARROW = "back"


def format_spacing(spacing: float) -> str:
    return repr(float(spacing))


def new_digraph(spacing: float) -> graphviz.Digraph:
    """Empty directed graph with ``spacing`` as rank and node separation."""
    value = format_spacing(spacing)
    return graphviz.Digraph(graph_attr={"ranksep": value, "nodesep": value})


def check_label(label: str) -> None:
    """
    Raises:
        InvalidInput: if ``label`` contains ``:``, which graphviz reads as a
            node port separator in edge statements.
    """
    if ":" in label:
        raise InvalidInput(f"Element names must not contain ':' (got {label!r})")


def add_cover_edge(graph: graphviz.Digraph, superset_label: str, subset_label: str) -> None:
    """Edge ``superset -> subset`` drawn with a reversed arrowhead.

    ``graphviz.escape`` keeps backslashes literal; the library does the quoting.
    """
    graph.edge(
        graphviz.escape(superset_label),
        graphviz.escape(subset_label),
        dir=REVERSE_ARROW,
    )
