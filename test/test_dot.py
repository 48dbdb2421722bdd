import pytest

from hasselattice.dot import add_cover_edge, check_label, format_spacing, new_digraph
from hasselattice.elements.subset import canonical_label
from hasselattice.errors import InvalidInput


def test_canonical_label_sorts_members():
    assert canonical_label(["c", "a", "b"]) == "{a,b,c}"
    assert canonical_label([]) == "{}"


def test_graph_carries_spacing_twice():
    source = new_digraph(0.8).source
    assert source.startswith("digraph {")
    assert "graph [nodesep=0.8 ranksep=0.8]" in source
    assert format_spacing(2) == "2.0"


def test_cover_edge_has_reverse_hint():
    graph = new_digraph(1.0)
    add_cover_edge(graph, "{a}", "{}")
    assert '"{a}" -> "{}" [dir=back]' in graph.source


def test_quotes_and_backslashes_in_labels():
    graph = new_digraph(1.0)
    add_cover_edge(graph, '{say "hi"}', "{}")
    add_cover_edge(graph, "{a\\b}", "{}")
    assert '"{say \\"hi\\"}" -> "{}"' in graph.source
    assert '"{a\\\\b}" -> "{}"' in graph.source


def test_colon_rejected():
    check_label("plain")
    with pytest.raises(InvalidInput, match="':'"):
        check_label("host:port")
