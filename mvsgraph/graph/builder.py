"""Build a Graph from ``go mod graph`` style edge-list text.

Each non-empty line holds two whitespace-separated node IDs, ``<from> <to>``,
meaning "from requires to". Parsing is all-or-nothing: the first malformed
line raises FormatError and no partial graph is returned. Errors from the
underlying line source (OSError) propagate unchanged.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Iterable, List, Optional

from mvsgraph.errors import FormatError
from mvsgraph.graph.identifiers import is_versioned
from mvsgraph.graph.models import Edge, Graph
from mvsgraph.graph.selector import VersionSelector

logger = logging.getLogger("mvsgraph.graph.builder")


class GraphBuilder:
    """Incremental edge-list parser feeding a VersionSelector.

    Args:
        root: Explicit root module path. When given, edges with an
            unversioned endpoint other than the root are skipped. When
            omitted, the first unversioned node becomes the root.
    """

    def __init__(self, root: Optional[str] = None) -> None:
        self.explicit_root = root
        self.selector = VersionSelector(root=root)
        self.edges: List[Edge] = []
        self.line_count = 0
        self.skipped_lines = 0

    def _is_foreign_bare(self, node_id: str) -> bool:
        return node_id != self.explicit_root and not is_versioned(node_id)

    def feed_line(self, line: str) -> None:
        """Parse one line of input.

        Args:
            line: Raw line, with or without its trailing newline.

        Raises:
            FormatError: If the line is not empty and does not hold exactly
                two tokens.
        """
        self.line_count += 1
        line = line.rstrip("\r\n")
        if line == "":
            return

        parts = line.split()
        if len(parts) != 2:
            raise FormatError(self.line_count, len(parts), line)

        from_id, to_id = parts
        if self.explicit_root is not None and (
            self._is_foreign_bare(from_id) or self._is_foreign_bare(to_id)
        ):
            self.skipped_lines += 1
            logger.debug("Skipping edge outside root %s: %s", self.explicit_root, line)
            return

        self.edges.append(Edge(from_=from_id, to=to_id))
        for node_id in (from_id, to_id):
            self.selector.submit(node_id)

    def feed(self, lines: Iterable[str]) -> "GraphBuilder":
        """Parse every line from ``lines``."""
        for line in lines:
            self.feed_line(line)
        return self

    def build(self) -> Graph:
        """Freeze the accumulated state into a Graph."""
        graph = Graph(
            root=self.selector.root or "",
            edges=tuple(self.edges),
            picked=tuple(self.selector.picked()),
            unpicked=tuple(self.selector.unpicked()),
        )
        logger.info(
            "Converted %d line(s): %d edges, %d picked, %d unpicked",
            self.line_count,
            len(graph.edges),
            len(graph.picked),
            len(graph.unpicked),
        )
        if self.skipped_lines:
            logger.info("Skipped %d edge(s) outside root module", self.skipped_lines)
        if not graph.root:
            logger.warning("No root module found in input")
        return graph


def convert(lines: Iterable[str], root: Optional[str] = None) -> Graph:
    """Convert edge-list lines into a Graph.

    Args:
        lines: Iterable of text lines. Trailing newlines are ignored.
        root: Optional explicit root module path.

    Returns:
        Graph: Finished, immutable graph.

    Raises:
        FormatError: On the first malformed line.
        OSError: If reading ``lines`` fails.
    """
    return GraphBuilder(root=root).feed(lines).build()


def convert_text(text: str, root: Optional[str] = None) -> Graph:
    """Convert a whole edge-list string into a Graph."""
    return convert(io.StringIO(text), root=root)


def convert_stream(stream: IO[str], root: Optional[str] = None) -> Graph:
    """Convert a text stream (file, pipe, stdin) into a Graph."""
    return convert(stream, root=root)


__all__ = ["GraphBuilder", "convert", "convert_stream", "convert_text"]
