"""Exporters for converted graphs."""

from pathlib import Path

from mvsgraph.errors import ExportError
from mvsgraph.export.dot import export_dot
from mvsgraph.export.html import HTMLRenderer, export_html
from mvsgraph.export.json import export_json, render_json
from mvsgraph.graph.models import Graph

def export_graph(
    graph: Graph, output_path: Path, fmt: str, title: str = "Dependency Tree"
) -> None:
    """Export ``graph`` to ``output_path`` in the requested format.

    Raises:
        ExportError: If the format is unknown or the exporter cannot run.
    """
    fmt = fmt.lower()
    if fmt == "json":
        export_json(graph, output_path)
    elif fmt == "dot":
        export_dot(graph, output_path)
    elif fmt == "html":
        export_html(graph, output_path, title=title)
    else:
        raise ExportError(f"Unsupported export format: {fmt}")

__all__ = [
    "HTMLRenderer",
    "export_dot",
    "export_graph",
    "export_html",
    "export_json",
    "render_json",
]
