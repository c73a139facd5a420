"""Pydantic models for the structure of a topic document.

A ``Document`` owns its ``Section``s and each ``Section`` owns its
``CodeExample``s. Every model is frozen, so rules can read them without
being able to change them.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


class Line(_Frozen):
    """One source line and its 1-based line number."""

    number: int = Field(..., ge=1)
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def paragraphs(lines: tuple[Line, ...]) -> list[list[Line]]:
    """Split *lines* into paragraphs separated by blank lines."""
    result: list[list[Line]] = []
    current: list[Line] = []
    for line in lines:
        if line.is_blank:
            if current:
                result.append(current)
                current = []
        else:
            current.append(line)
    if current:
        result.append(current)
    return result


def join_text(lines: tuple[Line, ...]) -> str:
    """Join the non-blank lines of a block into a single string."""
    return " ".join(line.text.strip() for line in lines if not line.is_blank)


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class CodeExample(_Frozen):
    """A fenced code block and the explanation that follows it."""

    language: str = Field("", description="Info string of the opening fence")
    line: int = Field(..., ge=1, description="Line number of the opening fence")
    source: tuple[Line, ...] = ()
    explanation: tuple[Line, ...] = ()

    @property
    def line_count(self) -> int:
        return len(self.source)


class Section(_Frozen):
    """One ``##`` section with its summary and code examples."""

    index: int = Field(..., ge=0)
    heading: str = Field(..., min_length=1)
    heading_line: str = Field(..., description="Raw heading line as written in the source")
    line: int = Field(..., ge=1)
    summary: tuple[Line, ...] = ()
    examples: tuple[CodeExample, ...] = ()

    def prose(self) -> tuple[tuple[Line, ...], ...]:
        """The summary and each explanation, as separate blocks in source order."""
        return (self.summary,) + tuple(example.explanation for example in self.examples)


class Document(_Frozen):
    """A parsed topic document."""

    doc_id: str
    title: str = Field(..., min_length=1)
    introduction: tuple[Line, ...] = ()
    introduction_examples: tuple[CodeExample, ...] = Field(
        (), description="Code blocks that appear before the first section"
    )
    sections: tuple[Section, ...] = ()

    def prose(self) -> Iterator[tuple[Optional[int], tuple[Line, ...]]]:
        """Yield ``(section_index, block)`` for every prose block.

        Blocks are separated by headings or code fences, so inline code
        never spans two of them. Introduction blocks have no section index.
        """
        yield None, self.introduction
        for example in self.introduction_examples:
            yield None, example.explanation
        for section in self.sections:
            for block in section.prose():
                yield section.index, block

    @property
    def examples(self) -> tuple[CodeExample, ...]:
        return self.introduction_examples + tuple(
            example for section in self.sections for example in section.examples
        )
