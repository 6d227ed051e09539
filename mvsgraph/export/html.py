"""HTML export: a standalone page drawing the graph in the browser."""

import logging
from pathlib import Path

from jinja2 import Environment, PackageLoader, select_autoescape

from mvsgraph.graph.models import Graph

logger = logging.getLogger("mvsgraph.export.html")

TEMPLATE_NAME = "dependency_tree.html.j2"


class HTMLRenderer:
    """Render converted graphs to HTML using Jinja2."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=PackageLoader("mvsgraph.export", "templates"),
            autoescape=select_autoescape(["html", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, graph: Graph, title: str = "Dependency Tree") -> str:
        """Render a graph to an HTML document.

        Args:
            graph: Converted graph.
            title: Page title.

        Returns:
            Rendered HTML string.
        """
        template = self.env.get_template(TEMPLATE_NAME)
        return template.render(
            title=title,
            root=graph.root,
            edge_count=len(graph.edges),
            picked_count=len(graph.picked),
            unpicked_count=len(graph.unpicked),
            graph_data=graph.to_dict(),
        )


def export_html(graph: Graph, output_path: Path, title: str = "Dependency Tree") -> None:
    """Export graph to a standalone HTML page.

    Args:
        graph: Converted graph.
        output_path: Output file path.
        title: Page title.
    """
    logger.info("Exporting graph to HTML: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = HTMLRenderer().render(graph, title=title)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)

    logger.info("HTML export completed: %d bytes", len(html))
