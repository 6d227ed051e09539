"""Public graph API surface."""

from mvsgraph.graph.builder import GraphBuilder, convert, convert_stream, convert_text
from mvsgraph.graph.identifiers import is_versioned, make_node_id, split_node_id
from mvsgraph.graph.models import Edge, EdgeKind, Graph, NodeStatus
from mvsgraph.graph.selector import Classification, VersionSelector

__all__ = [
    "Classification",
    "Edge",
    "EdgeKind",
    "Graph",
    "GraphBuilder",
    "NodeStatus",
    "VersionSelector",
    "convert",
    "convert_stream",
    "convert_text",
    "is_versioned",
    "make_node_id",
    "split_node_id",
]
