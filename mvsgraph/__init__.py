"""mvsgraph: minimal version selection over Go module dependency graphs."""

from mvsgraph.errors import FormatError, MVSGraphError
from mvsgraph.graph import Edge, Graph, convert, convert_text

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "FormatError",
    "Graph",
    "MVSGraphError",
    "convert",
    "convert_text",
]
