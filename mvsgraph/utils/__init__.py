"""Utility helpers for mvsgraph."""

from .browser import open_in_browser, write_temp_html

__all__ = ["open_in_browser", "write_temp_html"]
