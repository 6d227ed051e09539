"""Tests for temporary HTML files and browser opening."""

from pathlib import Path

import pytest

from mvsgraph.utils import browser


def test_write_temp_html(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Content is written to a new .html file."""
    monkeypatch.setattr(browser.tempfile, "tempdir", str(tmp_path))

    path = browser.write_temp_html("<html></html>")

    assert path.parent == tmp_path
    assert path.name.startswith("dependency_tree_")
    assert path.suffix == ".html"
    assert path.read_text(encoding="utf-8") == "<html></html>"


def test_open_in_browser_uses_file_uri(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The file is opened by URI."""
    opened = []
    monkeypatch.setattr(browser.webbrowser, "open", lambda url: opened.append(url) or True)
    page = tmp_path / "page.html"
    page.write_text("x", encoding="utf-8")

    browser.open_in_browser(page)

    assert opened == [page.resolve().as_uri()]


def test_open_in_browser_without_browser(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing browser raises RuntimeError."""
    monkeypatch.setattr(browser.webbrowser, "open", lambda url: False)

    with pytest.raises(RuntimeError, match="No browser"):
        browser.open_in_browser(tmp_path / "page.html")
