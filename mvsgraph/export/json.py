"""JSON export for converted graphs."""

import json
import logging
from pathlib import Path

from mvsgraph.graph.models import Graph

logger = logging.getLogger("mvsgraph.export.json")


def render_json(graph: Graph) -> str:
    """Serialize a graph to a JSON document."""
    return json.dumps(graph.to_dict(), indent=2, ensure_ascii=False)


def export_json(graph: Graph, output_path: Path) -> None:
    """Export graph to JSON format.

    Args:
        graph: Converted graph.
        output_path: Output file path.
    """
    logger.info("Exporting graph to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(render_json(graph))

    logger.info(
        "JSON export completed: %d nodes, %d edges",
        len(graph.nodes()),
        len(graph.edges),
    )
