"""Identifier helpers for graph node IDs.

A node ID is either a bare module path (the root module) or
``modulePath@version`` for every other node. Module path and version are
separated by the first ``@``.
"""

from __future__ import annotations

from typing import Optional, Tuple

VERSION_SEPARATOR = "@"


def is_versioned(node_id: str) -> bool:
    """Return True when the node ID carries a version suffix."""
    return VERSION_SEPARATOR in node_id


def split_node_id(node_id: str) -> Tuple[str, Optional[str]]:
    """Split a node ID into module path and version.

    Args:
        node_id: Node identifier such as ``golang.org/x/mod@v0.14.0``.

    Returns:
        ``(module, version)``. ``version`` is None for bare module paths.
    """
    module, sep, version = node_id.partition(VERSION_SEPARATOR)
    if not sep:
        return node_id, None
    return module, version


def make_node_id(module: str, version: Optional[str]) -> str:
    """Create a node ID from a module path and optional version."""
    if version is None:
        return module
    return f"{module}{VERSION_SEPARATOR}{version}"


__all__ = [
    "VERSION_SEPARATOR",
    "is_versioned",
    "make_node_id",
    "split_node_id",
]
