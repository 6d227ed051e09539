"""Shared helpers for CLI commands: configuration, input and root resolution."""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

from mvsgraph.config import MVSGraphConfig, load_config
from mvsgraph.errors import ExportError, FormatError, GoCommandError, GoModError
from mvsgraph.graph import Graph, convert_text
from mvsgraph.source import read_module_path, run_go_mod_graph

logger = logging.getLogger("mvsgraph.cli.common")

# Failures a command reports and turns into exit code 1.
COMMAND_ERRORS = (
    ExportError,
    FormatError,
    GoCommandError,
    GoModError,
    OSError,
    RuntimeError,
    ValueError,
)


def resolve_config(args) -> MVSGraphConfig:
    """Load configuration and apply command-line overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        MVSGraphConfig with flags taking precedence over file values.
    """
    config = load_config(getattr(args, "config", None))
    data = config.to_dict()

    root = getattr(args, "root", None)
    go_mod = getattr(args, "go_mod", None)
    if root:
        data["root"] = root
        data["go_mod"] = None
    elif go_mod:
        data["go_mod"] = go_mod
        data["root"] = None

    workdir = getattr(args, "dir", None)
    if workdir:
        data["go"]["workdir"] = workdir
    go_binary = getattr(args, "go_binary", None)
    if go_binary:
        data["go"]["binary"] = go_binary

    fmt = getattr(args, "format", None)
    if fmt:
        data["export"]["format"] = fmt
    output = getattr(args, "output", None)
    if output:
        data["export"]["output"] = output
    if getattr(args, "open", False):
        data["export"]["open_browser"] = True

    return MVSGraphConfig.from_dict(data)


def resolve_root(config: MVSGraphConfig, from_go_tool: bool = False) -> Optional[str]:
    """Return the explicit root module path, if one is known.

    Args:
        config: Resolved configuration.
        from_go_tool: The edge list comes from ``go mod graph``. The root is
            then read from ``<workdir>/go.mod`` when that file exists.
    """
    if config.root:
        return config.root
    if config.go_mod:
        return read_module_path(config.go_mod)
    if from_go_tool:
        go_mod = Path(config.go.workdir or ".") / "go.mod"
        if go_mod.is_file():
            return read_module_path(go_mod)
        logger.debug("No go.mod at %s; inferring root from graph output", go_mod)
    return None


def read_edge_list(input_arg: Optional[str], config: MVSGraphConfig) -> str:
    """Read edge-list text from a file, stdin or ``go mod graph``.

    Args:
        input_arg: File path, ``-`` for stdin, or None to run the go tool.
        config: Resolved configuration.

    Returns:
        Raw edge-list text.
    """
    if input_arg == "-":
        logger.info("Reading edge list from stdin")
        return sys.stdin.read()
    if input_arg:
        path = Path(input_arg)
        logger.info("Reading edge list from %s", path)
        return path.read_text(encoding="utf-8")
    return run_go_mod_graph(
        config.go.workdir,
        go_binary=config.go.binary,
        timeout=config.go.timeout,
    )


def load_graph(args) -> Tuple[MVSGraphConfig, Graph]:
    """Resolve configuration, read input and convert it.

    Returns:
        Tuple of (MVSGraphConfig, Graph).
    """
    config = resolve_config(args)
    input_arg = getattr(args, "input", None)
    root = resolve_root(config, from_go_tool=not input_arg)
    text = read_edge_list(input_arg, config)
    graph = convert_text(text, root=root)
    return config, graph
