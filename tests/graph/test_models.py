"""Tests for the immutable Graph model and its projections."""

import pytest
from pydantic import ValidationError

from mvsgraph.graph import Edge, NodeStatus, convert_text

SCENARIO = "root pkgA@1.0.0\nroot pkgB@1.0.0\npkgA@1.0.0 pkgB@2.0.0\npkgA@1.0.0 pkgB@2.0.0\n"


def test_graph_is_frozen() -> None:
    """Graph fields cannot be reassigned after construction."""
    graph = convert_text(SCENARIO)

    with pytest.raises(ValidationError):
        graph.root = "other"  # type: ignore[misc]


def test_edge_accepts_from_alias() -> None:
    """Edges can be built from mappings keyed by 'from'."""
    edge = Edge.model_validate({"from": "a", "to": "b@v1"})

    assert edge.from_ == "a"
    assert edge.to_dict() == {"from": "a", "to": "b@v1"}


def test_nodes_and_status() -> None:
    """Nodes list the root first and each node gets a status."""
    graph = convert_text(SCENARIO)

    assert graph.nodes() == ["root", "pkgA@1.0.0", "pkgB@1.0.0", "pkgB@2.0.0"]
    assert graph.status("root") == NodeStatus.ROOT
    assert graph.status("pkgB@2.0.0") == NodeStatus.PICKED
    assert graph.status("pkgB@1.0.0") == NodeStatus.UNPICKED
    assert graph.status("missing@v1") == NodeStatus.UNKNOWN
    assert graph.status_map()["pkgA@1.0.0"] == NodeStatus.PICKED


def test_version_views() -> None:
    """Picked and superseded versions are grouped by module."""
    graph = convert_text(SCENARIO)

    assert graph.picked_versions() == {"pkgA": "1.0.0", "pkgB": "2.0.0"}
    assert graph.superseded_versions() == {"pkgB": ["1.0.0"]}


def test_to_networkx_keeps_parallel_edges() -> None:
    """The networkx projection is a multigraph with status attributes."""
    native = convert_text(SCENARIO).to_networkx()

    assert native.number_of_nodes() == 4
    assert native.number_of_edges() == 4
    assert native.number_of_edges("pkgA@1.0.0", "pkgB@2.0.0") == 2
    assert native.nodes["pkgB@1.0.0"]["status"] == "unpicked"
    assert native.nodes["pkgB@2.0.0"]["module"] == "pkgB"
    assert native.nodes["pkgB@2.0.0"]["version"] == "2.0.0"
    assert native.graph["root"] == "root"


def test_to_dict_shape() -> None:
    """The dict form carries root, edges, picked, unpicked and nodes."""
    data = convert_text(SCENARIO).to_dict()

    assert data["root"] == "root"
    assert data["edges"][0] == {"from": "root", "to": "pkgA@1.0.0"}
    assert data["picked"] == ["pkgA@1.0.0", "pkgB@2.0.0"]
    assert data["unpicked"] == ["pkgB@1.0.0"]
    assert data["nodes"][0] == {"id": "root", "module": "root", "version": "", "status": "root"}
