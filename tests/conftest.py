"""Shared fixtures for the style checker tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from docstyle.config.loader import clear_cache

# A document that passes every rule with the default configuration.
CLEAN_LINES = [
    "# Java Strings",
    "",
    "Strings hold text in Java.",
    "",
    "## Basic string creation",
    "",
    "You can create a string from a literal.",
    "",
    "```java",
    'String greeting = "Hello";',
    "```",
    "",
    "The variable greeting refers to a string literal.  ",
    "Literals are stored in the string pool.",
]


def doc(*lines: str) -> str:
    """Join lines into document text (trailing spaces are kept verbatim)."""
    return "\n".join(lines) + "\n"


CLEAN_DOC = doc(*CLEAN_LINES)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Fresh config cache and no per-user config file for every test."""
    monkeypatch.setattr(
        "docstyle.config.loader.user_config_path",
        lambda: tmp_path / "no-user-config" / "config.json",
    )
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """An empty corpus directory."""
    path = tmp_path / "corpus"
    path.mkdir()
    return path
