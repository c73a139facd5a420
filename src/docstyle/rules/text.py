"""Text heuristics shared by the prose rules."""

from __future__ import annotations

import re

_INLINE_CODE = re.compile(r"(`+)(.+?)\1", re.DOTALL)
_ABBREVIATIONS = re.compile(r"\b(e\.g|i\.e|etc|vs|cf)\.", re.IGNORECASE)
_SENTENCE_END = re.compile(r"[.!?]+(?=\s|$)")
_WORDLIKE = re.compile(r"\w")
_NOT_NEWLINE = re.compile(r"[^\n]")


def strip_inline_code(text: str) -> str:
    """Replace inline code spans with a neutral placeholder."""
    return _INLINE_CODE.sub("code", text)


def mask_inline_code(text: str) -> str:
    """Blank out inline code spans, keeping every offset and newline.

    Spans may wrap across lines, so callers pass a whole paragraph joined
    with ``\\n`` and map match offsets back to lines by counting newlines.
    """
    return _INLINE_CODE.sub(lambda m: _NOT_NEWLINE.sub(" ", m.group(0)), text)


def count_sentences(text: str) -> int:
    """Count sentences in a block of prose.

    Inline code is neutralised first so ``list.size()`` does not end a
    sentence, and a few common abbreviations are ignored. Any remaining
    fragment containing a letter or digit counts, so an explanation with
    no final period still counts as one sentence.
    """
    text = _ABBREVIATIONS.sub(r"\1", strip_inline_code(text))
    fragments = _SENTENCE_END.split(text)
    return sum(1 for fragment in fragments if _WORDLIKE.search(fragment))
