"""Tests for corpus validation (discovery, parse errors, parallel runs)."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import CLEAN_DOC, doc
from docstyle.bootstrap import Container
from docstyle.config.models import CheckerConfig
from docstyle.domain.errors import ConfigurationError, CorpusError
from docstyle.domain.models.enums import RuleId, Severity

UNTERMINATED = doc("# Broken", "## Section", "```java", "int x = 1;")
NUMBERED = doc(
    "# Numbers",
    "## 1. Basic string creation",
    "```java",
    "int x = 1;",
    "```",
    "Explained.",
)


def _write(corpus: Path, name: str, text: str) -> Path:
    path = corpus / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def use_case():
    return Container().validate_corpus()


class TestDiscovery:
    def test_sorted_and_recursive(self, use_case, corpus):
        _write(corpus, "b.md", CLEAN_DOC)
        _write(corpus, "a.md", CLEAN_DOC)
        _write(corpus, "guides/c.md", CLEAN_DOC)
        _write(corpus, "notes.txt", "ignored")
        report = use_case.execute(corpus)
        assert report.documents == ("a.md", "b.md", "guides/c.md")

    def test_missing_directory(self, use_case, tmp_path):
        with pytest.raises(CorpusError):
            use_case.execute(tmp_path / "nope")

    def test_empty_corpus(self, use_case, corpus):
        report = use_case.execute(corpus)
        assert report.documents == ()
        assert report.total == 0


class TestCorpusValidation:
    def test_clean_corpus(self, use_case, corpus):
        for name in ("arrays.md", "loops.md", "maps.md"):
            _write(corpus, name, CLEAN_DOC)
        report = use_case.execute(corpus)
        assert len(report.documents) == 3
        assert report.error_count == 0
        assert not report.has_errors

    def test_parse_error_does_not_stop_the_run(self, use_case, corpus):
        _write(corpus, "a_broken.md", UNTERMINATED)
        _write(corpus, "b_numbered.md", NUMBERED)
        report = use_case.execute(corpus)

        assert report.documents == ("a_broken.md", "b_numbered.md")
        broken = report.findings_for("a_broken.md")
        assert len(broken) == 1
        assert broken[0].rule is RuleId.PARSE_ERROR
        assert broken[0].severity is Severity.ERROR
        assert broken[0].location.line == 3
        rules = {f.rule for f in report.findings_for("b_numbered.md")}
        assert RuleId.SECTION_TITLE_NO_NUMBERING in rules

    def test_undecodable_file(self, use_case, corpus):
        (corpus / "latin1.md").write_bytes("# Caf\xe9\n".encode("latin-1"))
        report = use_case.execute(corpus)
        assert [f.rule for f in report.findings] == [RuleId.PARSE_ERROR]

    def test_parallel_matches_sequential(self, use_case, corpus):
        for i in range(6):
            _write(corpus, f"doc{i}.md", NUMBERED if i % 2 else CLEAN_DOC)
        _write(corpus, "doc9.md", UNTERMINATED)
        sequential = use_case.execute(corpus, jobs=1)
        parallel = use_case.execute(corpus, jobs=4)
        assert parallel.documents == sequential.documents
        assert parallel.findings == sequential.findings

    def test_custom_glob(self, use_case, corpus):
        _write(corpus, "a.md", CLEAN_DOC)
        _write(corpus, "b.markdown", CLEAN_DOC)
        assert use_case.execute(corpus, "*.markdown").documents == ("b.markdown",)


class TestContainer:
    def test_rule_selection(self):
        container = Container(rule_ids=[RuleId.LINE_WIDTH])
        assert container.validator.rule_ids == [RuleId.LINE_WIDTH]

    def test_selection_outside_enabled_rules(self):
        cfg = CheckerConfig.model_validate({"enabled_rules": ["LINE_WIDTH"]})
        with pytest.raises(ConfigurationError):
            Container(cfg, rule_ids=[RuleId.TRAILING_MARKER])

    def test_parse_error_severity_from_config(self, corpus):
        cfg = CheckerConfig.model_validate({"severities": {"PARSE_ERROR": "warning"}})
        _write(corpus, "broken.md", UNTERMINATED)
        report = Container(cfg).validate_corpus().execute(corpus)
        assert report.warning_count == 1
        assert not report.has_errors
