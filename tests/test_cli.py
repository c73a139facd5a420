"""Tests for the docstyle command-line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from rich.logging import RichHandler
from typer.testing import CliRunner

from conftest import CLEAN_DOC, doc
from docstyle.presentation.cli.app import _setup_logging, app

runner = CliRunner()

NUMBERED = doc(
    "# Strings",
    "## 1. Basic string creation",
    "```java",
    'String s = "a";',
    "```",
    "Creates a string.",
)
LONG_LINE = doc(
    "# Strings",
    "## Creation",
    "```java",
    'String s = "a";',
    "```",
    "w" * 94 + ".",
)
UNTERMINATED = doc("# Broken", "## Section", "```java", "int x = 1;")


def _corpus(tmp_path: Path, **files: str) -> Path:
    root = tmp_path / "docs"
    root.mkdir()
    for name, text in files.items():
        (root / f"{name}.md").write_text(text, encoding="utf-8")
    return root


def _json(result) -> dict:
    return json.loads(result.stdout)


# ---------------------------------------------------------------------------
# docstyle validate
# ---------------------------------------------------------------------------


class TestValidate:
    def test_clean_corpus_exits_zero(self, tmp_path):
        root = _corpus(tmp_path, arrays=CLEAN_DOC, loops=CLEAN_DOC, maps=CLEAN_DOC)
        result = runner.invoke(app, ["validate", str(root)])
        assert result.exit_code == 0, result.output
        assert "3 document(s) checked: 0 error(s), 0 warning(s)" in result.output

    def test_numbered_heading(self, tmp_path):
        root = _corpus(tmp_path, strings=NUMBERED)
        result = runner.invoke(app, ["validate", str(root)])
        assert result.exit_code == 1
        assert "SECTION_TITLE_NO_NUMBERING" in result.output
        assert "strings.md" in result.output

    def test_long_line_reported_once(self, tmp_path):
        root = _corpus(tmp_path, strings=LONG_LINE)
        result = runner.invoke(
            app, ["validate", str(root), "--max-line-width", "80", "--format", "json"]
        )
        assert result.exit_code == 1
        data = _json(result)
        line_width = [f for f in data["findings"] if f["rule"] == "LINE_WIDTH"]
        assert len(line_width) == 1
        assert line_width[0]["line"] == 6

    def test_wider_limit_accepts_line(self, tmp_path):
        root = _corpus(tmp_path, strings=LONG_LINE)
        result = runner.invoke(app, ["validate", str(root), "--max-line-width", "120"])
        assert result.exit_code == 0

    def test_unterminated_fence_keeps_other_documents(self, tmp_path):
        root = _corpus(tmp_path, broken=UNTERMINATED, strings=NUMBERED)
        result = runner.invoke(app, ["validate", str(root), "--format", "json"])
        assert result.exit_code == 1
        data = _json(result)
        assert data["documents"] == ["broken.md", "strings.md"]
        parse_errors = [f for f in data["findings"] if f["rule"] == "PARSE_ERROR"]
        assert len(parse_errors) == 1
        assert parse_errors[0]["severity"] == "error"
        assert any(f["document"] == "strings.md" for f in data["findings"])

    def test_rule_selection(self, tmp_path):
        root = _corpus(tmp_path, strings=NUMBERED)
        result = runner.invoke(app, ["validate", str(root), "--rules", "LINE_WIDTH"])
        assert result.exit_code == 0

    def test_min_explanation_sentences(self, tmp_path):
        code = [f"int v{i} = {i};" for i in range(10)]
        text = doc("# T", "## S", "```java", *code, "```", "One sentence only.")
        root = _corpus(tmp_path, t=text)
        strict = runner.invoke(app, ["validate", str(root), "--format", "json"])
        relaxed = runner.invoke(
            app, ["validate", str(root), "--format", "json", "--min-explanation-sentences", "1"]
        )
        assert _json(strict)["summary"]["by_rule"] == {"EXPLANATION_MIN_LENGTH": 1}
        assert _json(relaxed)["summary"]["by_rule"] == {}

    def test_parallel_jobs(self, tmp_path):
        root = _corpus(tmp_path, a=CLEAN_DOC, b=NUMBERED, c=CLEAN_DOC)
        result = runner.invoke(app, ["validate", str(root), "--jobs", "3", "--format", "json"])
        assert result.exit_code == 1
        assert _json(result)["documents"] == ["a.md", "b.md", "c.md"]


class TestValidateFatal:
    def test_negative_width(self, tmp_path):
        root = _corpus(tmp_path, a=CLEAN_DOC)
        result = runner.invoke(app, ["validate", str(root), "--max-line-width", "-3"])
        assert result.exit_code == 2

    def test_unknown_rule(self, tmp_path):
        root = _corpus(tmp_path, a=CLEAN_DOC)
        result = runner.invoke(app, ["validate", str(root), "--rules", "NOT_A_RULE"])
        assert result.exit_code == 2

    def test_missing_corpus(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing")])
        assert result.exit_code == 2

    def test_missing_config(self, tmp_path):
        root = _corpus(tmp_path, a=CLEAN_DOC)
        result = runner.invoke(app, ["validate", str(root), "-c", str(tmp_path / "x.json")])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# docstyle rules / config
# ---------------------------------------------------------------------------


class TestInfoCommands:
    def test_rules_lists_ids(self):
        result = runner.invoke(app, ["rules"])
        assert result.exit_code == 0
        assert "LINE_WIDTH" in result.output
        assert "CODE_FENCE_LANGUAGE_TAG" in result.output

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "max_line_width" in result.output

    def test_config_path(self):
        result = runner.invoke(app, ["config", "path"])
        assert result.exit_code == 0
        assert "not found" in result.output

    def test_config_init_and_validate(self, tmp_path):
        dest = tmp_path / "docstyle.json"
        init = runner.invoke(app, ["config", "init", "--output", str(dest)])
        assert init.exit_code == 0
        assert dest.exists()
        check = runner.invoke(app, ["config", "validate", str(dest)])
        assert check.exit_code == 0

    def test_config_validate_rejects(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"formatting": {"max_line_width": 0}}), encoding="utf-8")
        result = runner.invoke(app, ["config", "validate", str(bad)])
        assert result.exit_code == 2


class TestLogging:
    def test_verbose_replaces_existing_handlers(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [logging.NullHandler()])
        monkeypatch.setattr(root, "level", logging.WARNING)
        _setup_logging(verbose=True)
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [RichHandler]
