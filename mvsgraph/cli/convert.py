"""Convert command: build the selection graph and export it."""

import logging
from pathlib import Path

from pydantic import ValidationError

from mvsgraph.cli.common import COMMAND_ERRORS, load_graph
from mvsgraph.export import export_graph
from mvsgraph.export.html import HTMLRenderer
from mvsgraph.utils.browser import open_in_browser, write_temp_html

logger = logging.getLogger("mvsgraph.cli.convert")


def convert_command(args) -> int:
    """Execute convert command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code.
    """
    try:
        config, graph = load_graph(args)
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        return 1
    except COMMAND_ERRORS as e:
        logger.error("Error converting graph data: %s", e)
        return 1

    export = config.export
    try:
        if export.open_browser:
            if export.format != "html":
                logger.warning(
                    "--open renders HTML; ignoring requested format %s", export.format
                )
            html = HTMLRenderer().render(graph, title=export.title)
            temp_path = write_temp_html(html)
            open_in_browser(temp_path)
            logger.info("Opened %s in the default browser", temp_path)
            return 0

        output_path = Path(export.default_output())
        export_graph(graph, output_path, export.format, title=export.title)
        logger.info("Wrote %s", output_path)
    except COMMAND_ERRORS as e:
        logger.error("Error exporting graph: %s", e)
        return 1

    return 0
