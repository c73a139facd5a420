"""Markdown document parsers."""

from docstyle.parsers.markdown_parser import DocumentParser, render_headings

__all__ = ["DocumentParser", "render_headings"]
