"""Line tokenizer for raw lyrics.

This module splits pasted or scraped lyric text into the ordered list of
candidate lines the matcher works on. Filtering is purely structural; no
syllables are counted here.
"""

from __future__ import annotations

import re

from lyric_haiku.models import LyricLine

# Whole-line annotations: [Verse 1], [Chorus], (instrumental)
BRACKET_ANNOTATION_RE = re.compile(r"^\[.*\]$")
PAREN_ANNOTATION_RE = re.compile(r"^\(.*\)$")


def preprocess(text: str) -> list[str]:
    """Split input text into raw lines.

    Normalizes line endings before splitting.

    Parameters
    ----------
    text : str
        The raw input text.

    Returns
    -------
    list[str]
        List of lines without newline characters.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def is_annotation(line: str) -> bool:
    """Check whether a trimmed line is entirely a structural annotation.

    Parameters
    ----------
    line : str
        A line with surrounding whitespace already removed.

    Returns
    -------
    bool
        True if the whole line is bracketed or parenthesized.

    Examples
    --------
    >>> is_annotation("[Chorus]")
    True
    >>> is_annotation("(instrumental)")
    True
    >>> is_annotation("Hold on (hold on)")
    False
    """
    return bool(BRACKET_ANNOTATION_RE.match(line) or PAREN_ANNOTATION_RE.match(line))


def tokenize_lyrics(text: str | None) -> list[LyricLine]:
    """Tokenize raw lyrics into candidate lines.

    Each line is trimmed; blank lines and whole-line annotations are
    dropped. Surviving lines are indexed by their position in the output.

    Parameters
    ----------
    text : str | None
        The raw lyrics. ``None`` and non-string values yield no lines.

    Returns
    -------
    list[LyricLine]
        Candidate lines in their original order.

    Examples
    --------
    >>> lines = tokenize_lyrics("[Verse 1]\\nReal lyric line one\\n\\n(instrumental)")
    >>> [(line.index, line.text) for line in lines]
    [(0, 'Real lyric line one')]
    """
    if not isinstance(text, str):
        return []

    lines: list[LyricLine] = []
    for raw in preprocess(text):
        line = raw.strip()
        if not line:
            continue
        if is_annotation(line):
            continue
        lines.append(LyricLine(text=line, index=len(lines)))

    return lines
