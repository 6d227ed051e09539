"""Summary command: print picked modules and what they superseded."""

import logging
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from mvsgraph.cli.common import COMMAND_ERRORS, load_graph
from mvsgraph.graph import Graph

logger = logging.getLogger("mvsgraph.cli.summary")


def build_summary_table(graph: Graph) -> Table:
    """Build a rich table with one row per picked module."""
    table = Table(title=f"MVS selection for {graph.root or '(unknown root)'}")
    table.add_column("Module", style="cyan", no_wrap=True)
    table.add_column("Picked", style="green")
    table.add_column("Superseded", style="dim")

    superseded = graph.superseded_versions()
    for module, version in graph.picked_versions().items():
        table.add_row(module, version, ", ".join(superseded.get(module, [])))
    return table


def summary_command(args, console: Optional[Console] = None) -> int:
    """Execute summary command.

    Args:
        args: Parsed command-line arguments.
        console: Console to print to (defaults to stdout).

    Returns:
        int: Exit code.
    """
    try:
        _, graph = load_graph(args)
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return 1
    except COMMAND_ERRORS as e:
        logger.error("Error converting graph data: %s", e)
        return 1

    console = console or Console()
    console.print(build_summary_table(graph))
    console.print(
        f"{len(graph.edges)} edges, {len(graph.picked)} picked, "
        f"{len(graph.unpicked)} unpicked"
    )
    return 0
