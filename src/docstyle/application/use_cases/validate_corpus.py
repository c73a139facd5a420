"""Use Case: Validate a corpus of topic documents.

Discovers the Markdown files of a corpus directory, parses and validates
each one, and aggregates the findings into a single Report. A document
that cannot be parsed contributes one ``PARSE_ERROR`` finding and does
not stop the rest of the corpus from being checked.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from docstyle.domain.errors import CorpusError, ParseError
from docstyle.domain.models.enums import RuleId, Severity
from docstyle.domain.models.finding import Finding, Location
from docstyle.domain.models.report import Report
from docstyle.parsers.markdown_parser import DocumentParser
from docstyle.validation.report_builder import build_report
from docstyle.validation.validator import Validator

logger = logging.getLogger(__name__)


class ValidateCorpusUseCase:
    """Orchestrate validation of every document in a corpus."""

    def __init__(
        self,
        parser: DocumentParser,
        validator: Validator,
        parse_error_severity: Severity = Severity.ERROR,
    ) -> None:
        self._parser = parser
        self._validator = validator
        self._parse_error_severity = parse_error_severity

    def execute(self, corpus_dir: Path, pattern: str = "*.md", jobs: int = 1) -> Report:
        """Validate every file matching *pattern* under *corpus_dir*.

        Args:
            corpus_dir: Directory holding the topic documents.
            pattern: Glob matched recursively against file names.
            jobs: Number of worker threads; ``1`` validates sequentially.

        Returns:
            A Report listing documents in sorted path order.

        Raises:
            CorpusError: If the directory does not exist or a file cannot be read.
        """
        files = self.discover(corpus_dir, pattern)
        logger.info("Found %d document(s) in %s", len(files), corpus_dir)

        if jobs > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=jobs) as pool:
                results = list(pool.map(lambda path: self.check_file(path, corpus_dir), files))
        else:
            results = [self.check_file(path, corpus_dir) for path in files]

        report = build_report(results)
        logger.info(report.summary())
        return report

    def discover(self, corpus_dir: Path, pattern: str = "*.md") -> list[Path]:
        """List the corpus files, sorted by their path relative to *corpus_dir*."""
        if not corpus_dir.is_dir():
            raise CorpusError(f"Corpus directory does not exist: {corpus_dir}")
        try:
            files = [path for path in corpus_dir.rglob(pattern) if path.is_file()]
        except OSError as exc:
            raise CorpusError(f"Cannot read corpus directory {corpus_dir}: {exc}") from exc
        return sorted(files, key=lambda path: path.relative_to(corpus_dir).as_posix())

    def check_file(self, file_path: Path, corpus_dir: Path) -> tuple[str, list[Finding]]:
        """Parse and validate one file.

        Returns:
            ``(document id, findings)``; a parse failure yields one
            ``PARSE_ERROR`` finding.
        """
        doc_id = file_path.relative_to(corpus_dir).as_posix()
        try:
            document = self._parser.parse_file(file_path, corpus_dir)
        except ParseError as exc:
            logger.warning("Failed to parse %s: %s", doc_id, exc)
            return doc_id, [self._parse_error(doc_id, exc.message, exc.line)]
        except UnicodeDecodeError as exc:
            logger.warning("Failed to decode %s: %s", doc_id, exc)
            return doc_id, [self._parse_error(doc_id, "Document is not valid UTF-8", None)]
        except OSError as exc:
            raise CorpusError(f"Cannot read {file_path}: {exc}") from exc

        findings = self._validator.validate(document)
        logger.debug("%s: %d finding(s)", doc_id, len(findings))
        return doc_id, findings

    def _parse_error(self, doc_id: str, message: str, line: int | None) -> Finding:
        return Finding(
            rule=RuleId.PARSE_ERROR,
            location=Location(document=doc_id, line=line),
            message=message,
            severity=self._parse_error_severity,
        )
