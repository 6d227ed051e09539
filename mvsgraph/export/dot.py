"""DOT export for converted graphs."""

import logging
from pathlib import Path

import networkx as nx

from mvsgraph.errors import ExportError
from mvsgraph.graph.models import Graph, NodeStatus

logger = logging.getLogger("mvsgraph.export.dot")

_NODE_STYLES = {
    NodeStatus.ROOT.value: {"shape": "box", "style": "filled", "fillcolor": "lightblue"},
    NodeStatus.PICKED.value: {"shape": "ellipse", "style": "filled", "fillcolor": "palegreen"},
    NodeStatus.UNPICKED.value: {"shape": "ellipse", "style": "dashed", "color": "grey", "fontcolor": "grey"},
}


def to_styled_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Project the graph to networkx with Graphviz style attributes attached."""
    native = graph.to_networkx()
    for _, attrs in native.nodes(data=True):
        attrs.update(_NODE_STYLES.get(attrs.get("status"), {}))
    for _, target, attrs in native.edges(data=True):
        if native.nodes[target].get("status") == NodeStatus.UNPICKED.value:
            attrs["color"] = "grey"
    return native


def export_dot(graph: Graph, output_path: Path) -> None:
    """Export graph to DOT format.

    Args:
        graph: Converted graph.
        output_path: Output file path.

    Raises:
        ExportError: If neither pydot nor pygraphviz is available.
    """
    logger.info("Exporting graph to DOT: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    native = to_styled_networkx(graph)

    try:
        from networkx.drawing.nx_pydot import write_dot
    except ImportError:
        try:
            from networkx.drawing.nx_agraph import write_dot
        except ImportError as e:
            raise ExportError(
                "DOT export requires pydot or pygraphviz to be installed"
            ) from e
    write_dot(native, str(output_path))

    logger.info(
        "DOT export completed: %d nodes, %d edges",
        native.number_of_nodes(),
        native.number_of_edges(),
    )
