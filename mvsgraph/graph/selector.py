"""Minimal version selection over observed node IDs.

The selector keeps, per module path, the highest version observed so far.
Each distinct ``module@version`` ID is classified exactly once: it either
becomes the current pick for its module (demoting the previous pick to the
unpicked list) or is recorded as unpicked itself.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Set

from mvsgraph.graph import semver
from mvsgraph.graph.identifiers import is_versioned, make_node_id, split_node_id

logger = logging.getLogger("mvsgraph.graph.selector")


class Classification(str, Enum):
    """Outcome of submitting a node ID to the selector."""

    ROOT = "root"
    SEEN = "seen"
    PICKED = "picked"
    UNPICKED = "unpicked"


class VersionSelector:
    """Per-conversion minimal version selection state.

    One instance owns all state for one graph, so independent conversions
    never share selection results.
    """

    def __init__(self, root: Optional[str] = None) -> None:
        """Initialize selector.

        Args:
            root: Root module path when known up front. Otherwise the first
                bare module path submitted becomes the root.
        """
        self.root: Optional[str] = root
        self._seen: Set[str] = set()
        self._max_version: Dict[str, str] = {}
        self._unpicked: List[str] = []
        self._ignored: Set[str] = set()

    def submit(self, node_id: str) -> Classification:
        """Classify one occurrence of a node ID.

        Args:
            node_id: Bare root module path or ``module@version``.

        Returns:
            Classification describing what this submission did.
        """
        if not is_versioned(node_id):
            if self.root is None:
                self.root = node_id
                logger.debug("Root module detected: %s", node_id)
            elif node_id != self.root and node_id not in self._ignored:
                self._ignored.add(node_id)
                logger.warning(
                    "Ignoring unversioned node %s; root is already %s",
                    node_id,
                    self.root,
                )
            return Classification.ROOT

        if node_id in self._seen:
            return Classification.SEEN
        self._seen.add(node_id)

        module, version = split_node_id(node_id)
        assert version is not None

        current = self._max_version.get(module)
        if current is None:
            self._max_version[module] = version
            return Classification.PICKED

        if semver.compare(version, current) > 0:
            self._unpicked.append(make_node_id(module, current))
            self._max_version[module] = version
            logger.debug("%s: %s supersedes %s", module, version, current)
            return Classification.PICKED

        self._unpicked.append(node_id)
        logger.debug("%s: %s not above current pick %s", module, version, current)
        return Classification.UNPICKED

    def picked(self) -> List[str]:
        """Return picked node IDs sorted in plain string order."""
        return sorted(
            make_node_id(module, version)
            for module, version in self._max_version.items()
        )

    def unpicked(self) -> List[str]:
        """Return unpicked node IDs in the order they were superseded."""
        return list(self._unpicked)

    def selected_version(self, module: str) -> Optional[str]:
        """Return the currently picked version of ``module``, if any."""
        return self._max_version.get(module)

    def __len__(self) -> int:
        return len(self._seen)


__all__ = ["Classification", "VersionSelector"]
