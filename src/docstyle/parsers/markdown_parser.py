"""Parser for Markdown topic documents.

Splits raw text into the ``Document`` → ``Section`` → ``CodeExample``
structure. Parsing is permissive: content problems such as a code block
without an explanation are left for the rules to report. Only structure
that cannot be recovered raises ``ParseError``:

  • a code fence that is never closed (end of input, or a section heading
    appears while the fence is still open)
  • a malformed heading (``##Heading`` or a heading with no text)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from docstyle.config.models import ParsingSettings
from docstyle.domain.errors import ParseError
from docstyle.domain.models.document import CodeExample, Document, Line, Section

logger = logging.getLogger(__name__)

_HEADING = re.compile(r"^(#{1,6})[ \t]+(\S.*?)[ \t]*$")
_GLUED_HEADING = re.compile(r"^#{2,6}[^#\s]")
_EMPTY_HEADING = re.compile(r"^#{1,6}[ \t]*$")
_FENCE_OPEN = re.compile(r"^ {0,3}```[ \t]*([^`]*?)[ \t]*$")
_FENCE_CLOSE = re.compile(r"^ {0,3}```[ \t]*$")


# ---------------------------------------------------------------------------
# Mutable builders (only live while a document is being parsed)
# ---------------------------------------------------------------------------


@dataclass
class _ExampleDraft:
    language: str
    line: int
    source: list[Line] = field(default_factory=list)
    explanation: list[Line] = field(default_factory=list)

    def build(self) -> CodeExample:
        return CodeExample(
            language=self.language,
            line=self.line,
            source=tuple(self.source),
            explanation=_strip_blank(self.explanation),
        )


@dataclass
class _SectionDraft:
    heading: str
    heading_line: str
    line: int
    summary: list[Line] = field(default_factory=list)
    examples: list[_ExampleDraft] = field(default_factory=list)

    def build(self, index: int) -> Section:
        return Section(
            index=index,
            heading=self.heading,
            heading_line=self.heading_line,
            line=self.line,
            summary=_strip_blank(self.summary),
            examples=tuple(e.build() for e in self.examples),
        )


def _strip_blank(lines: list[Line]) -> tuple[Line, ...]:
    """Drop leading and trailing blank lines."""
    start, end = 0, len(lines)
    while start < end and lines[start].is_blank:
        start += 1
    while end > start and lines[end - 1].is_blank:
        end -= 1
    return tuple(lines[start:end])


def title_from_id(doc_id: str) -> str:
    """Fallback title derived from a document id such as ``java-arrays.md``."""
    title = Path(doc_id).stem.replace("-", " ").replace("_", " ").strip()
    return title.title() if title else "Untitled"


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class DocumentParser:
    """Parses Markdown topic documents into the structural model."""

    def __init__(self, settings: Optional[ParsingSettings] = None) -> None:
        self.settings = settings or ParsingSettings()

    def parse_file(self, file_path: Path, base_path: Path) -> Document:
        """Read a UTF-8 Markdown file and parse it.

        Args:
            file_path: Path to the Markdown file.
            base_path: Corpus root; the document id is the path relative to it.

        Returns:
            Parsed Document.

        Raises:
            ParseError: If the document structure cannot be recovered.
            UnicodeDecodeError: If the file is not valid UTF-8.
            OSError: If the file cannot be read.
        """
        doc_id = file_path.relative_to(base_path).as_posix()
        text = file_path.read_text(encoding="utf-8")
        return self.parse(text, doc_id)

    def parse(self, text: str, doc_id: str) -> Document:
        """Parse raw Markdown *text* into a Document.

        Args:
            text: Raw document text.
            doc_id: Identifier used in findings (usually a relative path).

        Returns:
            Parsed Document.

        Raises:
            ParseError: On an unterminated code fence or a malformed heading.
        """
        title: Optional[str] = None
        introduction: list[Line] = []
        intro_examples: list[_ExampleDraft] = []
        sections: list[_SectionDraft] = []

        prose = introduction  # where the next prose line goes
        fence: Optional[_ExampleDraft] = None

        for number, raw in enumerate(text.splitlines(), start=1):
            line = Line(number=number, text=raw)

            if fence is not None:
                if _FENCE_CLOSE.match(raw):
                    prose = fence.explanation
                    fence = None
                elif self._section_heading(raw) is not None:
                    raise ParseError(
                        "Unterminated code fence before the next heading",
                        doc_id=doc_id,
                        line=fence.line,
                    )
                else:
                    fence.source.append(line)
                continue

            opening = _FENCE_OPEN.match(raw)
            if opening:
                info = opening.group(1).split()
                fence = _ExampleDraft(language=info[0] if info else "", line=number)
                if sections:
                    sections[-1].examples.append(fence)
                else:
                    intro_examples.append(fence)
                continue

            heading = _HEADING.match(raw)
            if heading:
                marker, heading_text = heading.group(1), heading.group(2)
                if marker == self.settings.section_marker:
                    section = _SectionDraft(heading=heading_text, heading_line=raw, line=number)
                    sections.append(section)
                    prose = section.summary
                    continue
                if marker == self.settings.title_marker and title is None and not sections:
                    title = heading_text
                    prose = introduction
                    continue
                # Deeper headings are part of the surrounding prose
                prose.append(line)
                continue

            if _GLUED_HEADING.match(raw):
                raise ParseError(
                    "Malformed heading: missing space after the heading marker",
                    doc_id=doc_id,
                    line=number,
                )
            if _EMPTY_HEADING.match(raw):
                raise ParseError("Malformed heading: heading has no text", doc_id=doc_id, line=number)

            prose.append(line)

        if fence is not None:
            raise ParseError(
                "Unterminated code fence at end of document",
                doc_id=doc_id,
                line=fence.line,
            )

        if title is None:
            title = title_from_id(doc_id)
            logger.debug("%s has no title heading, using %r", doc_id, title)

        return Document(
            doc_id=doc_id,
            title=title,
            introduction=_strip_blank(introduction),
            introduction_examples=tuple(e.build() for e in intro_examples),
            sections=tuple(s.build(i) for i, s in enumerate(sections)),
        )

    def _section_heading(self, raw: str) -> Optional[str]:
        heading = _HEADING.match(raw)
        if heading and heading.group(1) == self.settings.section_marker:
            return heading.group(2)
        return None


def render_headings(document: Document) -> list[str]:
    """Re-serialise the section heading lines of *document* in order."""
    return [section.heading_line for section in document.sections]
