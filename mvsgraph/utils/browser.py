"""Write HTML to a temporary file and open it in the default browser."""

import logging
import tempfile
import webbrowser
from pathlib import Path

logger = logging.getLogger("mvsgraph.utils.browser")


def write_temp_html(content: str, prefix: str = "dependency_tree_") -> Path:
    """Write HTML content to a new temporary file and return its path."""
    with tempfile.NamedTemporaryFile(
        "w", prefix=prefix, suffix=".html", delete=False, encoding="utf-8"
    ) as f:
        f.write(content)
    logger.debug("Wrote temporary HTML file: %s", f.name)
    return Path(f.name)


def open_in_browser(path: Path) -> None:
    """Open a local file in the default browser.

    Raises:
        RuntimeError: If no browser could be launched.
    """
    url = path.resolve().as_uri()
    logger.info("Opening %s in the default browser", url)
    if not webbrowser.open(url):
        raise RuntimeError(f"No browser available to open {url}")
