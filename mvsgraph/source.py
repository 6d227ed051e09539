"""Acquire edge-list text and root module information from a Go module.

Two collaborators live here:

* ``run_go_mod_graph`` runs ``go mod graph`` in a module directory and
  returns its stdout.
* ``read_module_path`` reads the ``module`` directive from ``go.mod`` so the
  root can be passed explicitly instead of inferred from the edge list.
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Optional, Union

from mvsgraph.errors import GoCommandError, GoModError

logger = logging.getLogger("mvsgraph.source")

_MODULE_RE = re.compile(r"^\s*module\s+(?P<path>\"[^\"]*\"|`[^`]*`|\S+)\s*(?://.*)?$")


def _strip_line_comment(line: str) -> str:
    return line.split("//", 1)[0].strip()


def _unquote(path: str) -> str:
    if path[:1] in {'"', "`"}:
        return path[1:-1]
    return path


def parse_module_path(text: str) -> Optional[str]:
    """Extract the module path from go.mod content.

    Both the single-line form (``module example.com/app``) and the block
    form (``module (`` ... ``)``) are accepted.

    Args:
        text: go.mod file contents.

    Returns:
        Module path, or None when there is no module directive.

    Raises:
        GoModError: If a module block holds no module path.
    """
    in_block_comment = False
    in_module_block = False
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if in_block_comment:
            if "*/" in line:
                in_block_comment = False
                line = line.split("*/", 1)[1].strip()
            else:
                continue
        if line.startswith("/*"):
            in_block_comment = "*/" not in line
            continue

        if in_module_block:
            line = _strip_line_comment(line)
            if not line:
                continue
            if line == ")":
                raise GoModError("go.mod module block does not declare a module path")
            path = _unquote(line.split()[0])
            if path:
                return path
            continue

        match = _MODULE_RE.match(line)
        if match is None:
            continue
        path = match.group("path")
        if path == "(":
            in_module_block = True
            continue
        if path.startswith("("):
            raise GoModError(f"go.mod module directive is malformed: {line}")
        path = _unquote(path)
        if path:
            return path

    if in_module_block:
        raise GoModError("go.mod module block is not closed")
    return None


def read_module_path(go_mod: Union[str, Path]) -> str:
    """Read the root module path from a go.mod file.

    Args:
        go_mod: Path to go.mod, or to the directory containing it.

    Returns:
        Module path declared by the ``module`` directive.

    Raises:
        GoModError: If the file cannot be read or declares no module.
    """
    path = Path(go_mod)
    if path.is_dir():
        path = path / "go.mod"

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GoModError(f"could not read go.mod file {path}: {e}") from e

    module_path = parse_module_path(text)
    if module_path is None:
        raise GoModError(f"go.mod is not in expected format, module not found: {path}")

    logger.info("Root module from %s: %s", path, module_path)
    return module_path


def run_go_mod_graph(
    workdir: Optional[Union[str, Path]] = None,
    *,
    go_binary: str = "go",
    timeout: int = 120,
) -> str:
    """Run ``go mod graph`` and return its output.

    Args:
        workdir: Module directory to run in (defaults to the current one).
        go_binary: Go executable name or path.
        timeout: Seconds to wait before giving up.

    Returns:
        Edge-list text printed by the go tool.

    Raises:
        GoCommandError: If the go tool is missing, fails or times out.
    """
    cmd = [go_binary, "mod", "graph"]
    cwd = str(workdir) if workdir is not None else None
    logger.info("Running %s (cwd=%s)", " ".join(cmd), cwd or ".")

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise GoCommandError(f"go executable not found: {go_binary}") from e
    except subprocess.TimeoutExpired as e:
        logger.error("'go mod graph' timed out after %ds", timeout)
        raise GoCommandError(f"'go mod graph' timed out after {timeout}s") from e
    except subprocess.CalledProcessError as e:
        logger.error("'go mod graph' failed: %s", e.stderr)
        raise GoCommandError(
            f"'go mod graph' exited with status {e.returncode}", stderr=e.stderr
        ) from e

    logger.info("'go mod graph' produced %d line(s)", result.stdout.count("\n"))
    return result.stdout


__all__ = ["parse_module_path", "read_module_path", "run_go_mod_graph"]
