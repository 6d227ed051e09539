"""Immutable graph models produced by the graph builder.

The Graph value is built once per conversion and handed to exporters. It
is a frozen pydantic model holding tuples so nothing downstream can mutate
the selection result.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Any, Dict, List, Tuple

import networkx as nx
from pydantic import BaseModel, ConfigDict, Field

from mvsgraph.graph.identifiers import split_node_id

logger = logging.getLogger("mvsgraph.graph.models")


class NodeStatus(str, Enum):
    """Selection status of a node in the finished graph."""

    ROOT = "root"
    PICKED = "picked"
    UNPICKED = "unpicked"
    UNKNOWN = "unknown"


class EdgeKind(str, Enum):
    """Edge kind constants used when projecting to networkx."""

    REQUIRES = "requires"


class Edge(BaseModel):
    """A single requirement: ``from_`` requires ``to``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: Annotated[str, Field(..., alias="from", description="Requiring node ID")]
    to: Annotated[str, Field(..., description="Required node ID")]

    def to_dict(self) -> Dict[str, str]:
        return {"from": self.from_, "to": self.to}


class Graph(BaseModel):
    """Result of converting an edge list under minimal version selection.

    Attributes:
        root: Root module path, or an empty string when none was found.
        edges: Edges in input order, duplicates preserved.
        picked: Selected ``module@version`` IDs, sorted as plain strings.
        unpicked: Superseded ``module@version`` IDs in detection order.
    """

    model_config = ConfigDict(frozen=True)

    root: Annotated[str, Field(default="", description="Root module path")]
    edges: Annotated[Tuple[Edge, ...], Field(default=())]
    picked: Annotated[Tuple[str, ...], Field(default=())]
    unpicked: Annotated[Tuple[str, ...], Field(default=())]

    def nodes(self) -> List[str]:
        """Return every node ID: the root first, then edge endpoints in first-seen order."""
        seen: Dict[str, None] = {}
        if self.root:
            seen[self.root] = None
        for edge in self.edges:
            seen.setdefault(edge.from_, None)
            seen.setdefault(edge.to, None)
        return list(seen)

    def status(self, node_id: str) -> NodeStatus:
        """Classify a node ID against the selection result."""
        if self.root and node_id == self.root:
            return NodeStatus.ROOT
        if node_id in self.picked:
            return NodeStatus.PICKED
        if node_id in self.unpicked:
            return NodeStatus.UNPICKED
        return NodeStatus.UNKNOWN

    def status_map(self) -> Dict[str, NodeStatus]:
        """Return the status of every node, keyed by node ID in ``nodes()`` order."""
        picked = set(self.picked)
        unpicked = set(self.unpicked)
        result: Dict[str, NodeStatus] = {}
        for node_id in self.nodes():
            if self.root and node_id == self.root:
                result[node_id] = NodeStatus.ROOT
            elif node_id in picked:
                result[node_id] = NodeStatus.PICKED
            elif node_id in unpicked:
                result[node_id] = NodeStatus.UNPICKED
            else:
                result[node_id] = NodeStatus.UNKNOWN
        return result

    def picked_versions(self) -> Dict[str, str]:
        """Return the picked set as a module -> version mapping."""
        result: Dict[str, str] = {}
        for node_id in self.picked:
            module, version = split_node_id(node_id)
            result[module] = version or ""
        return result

    def superseded_versions(self) -> Dict[str, List[str]]:
        """Return unpicked versions grouped by module, in detection order."""
        result: Dict[str, List[str]] = {}
        for node_id in self.unpicked:
            module, version = split_node_id(node_id)
            result.setdefault(module, []).append(version or "")
        return result

    def to_networkx(self) -> nx.MultiDiGraph:
        """Project the graph onto a networkx multigraph.

        Every node carries ``module``, ``version`` and ``status`` attributes.
        Duplicate edges become parallel edges with distinct keys.
        """
        graph = nx.MultiDiGraph(root=self.root)
        for node_id, status in self.status_map().items():
            module, version = split_node_id(node_id)
            graph.add_node(
                node_id,
                module=module,
                version=version or "",
                status=status.value,
            )
        for edge in self.edges:
            graph.add_edge(edge.from_, edge.to, kind=EdgeKind.REQUIRES.value)

        logger.debug(
            "Projected graph to networkx: %d nodes, %d edges",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return graph

    def to_dict(self) -> Dict[str, Any]:
        """Convert the graph into a JSON-serializable mapping."""
        nodes = []
        for node_id, status in self.status_map().items():
            module, version = split_node_id(node_id)
            nodes.append(
                {
                    "id": node_id,
                    "module": module,
                    "version": version or "",
                    "status": status.value,
                }
            )
        return {
            "root": self.root,
            "edges": [edge.to_dict() for edge in self.edges],
            "picked": list(self.picked),
            "unpicked": list(self.unpicked),
            "nodes": nodes,
        }


__all__ = ["Edge", "EdgeKind", "Graph", "NodeStatus"]
