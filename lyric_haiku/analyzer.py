"""Diagnostic syllable listing for raw lyrics."""

from __future__ import annotations

from lyric_haiku.models import LineAnalysis
from lyric_haiku.syllables import count_syllables
from lyric_haiku.tokenizer import tokenize_lyrics


def analyze_lyrics(lyrics: str | None) -> list[LineAnalysis]:
    """Report the estimated syllable count of every tokenized line.

    Parameters
    ----------
    lyrics : str | None
        Raw lyric text.

    Returns
    -------
    list[LineAnalysis]
        One entry per candidate line, in source order. Empty when the
        lyrics contain no usable lines.

    Examples
    --------
    >>> [a.syllable_count for a in analyze_lyrics("[Intro]\\nhold me close\\nwe dance all night")]
    [3, 4]
    """
    return [
        LineAnalysis(text=line.text, syllable_count=count_syllables(line.text))
        for line in tokenize_lyrics(lyrics)
    ]
