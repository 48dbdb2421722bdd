"""Powerset Hasse diagrams rendered with Graphviz."""

from hasselattice.diagram import build_diagram
from hasselattice.elements import ElementSet, Subset, parse_elements
from hasselattice.errors import (
    DecodeFailure,
    HasseLatticeError,
    InvalidInput,
    RenderFailure,
    SaveFailure,
)
from hasselattice.lattice import CoverEdge, count_cover_edges, iter_cover_edges
from hasselattice.types import DiagramResult, OutputFormat, RenderConfig

__all__ = [
    "build_diagram",
    "parse_elements",
    "ElementSet",
    "Subset",
    "CoverEdge",
    "iter_cover_edges",
    "count_cover_edges",
    "DiagramResult",
    "OutputFormat",
    "RenderConfig",
    "HasseLatticeError",
    "InvalidInput",
    "RenderFailure",
    "DecodeFailure",
    "SaveFailure",
]
