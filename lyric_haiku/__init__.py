"""Turn song lyrics into a 5-7-5 haiku.

This library picks three lines from a song's lyrics whose estimated
syllable counts fit the 5-7-5 haiku pattern, falling back to the closest
available lines when no exact haiku exists.

Examples
--------
>>> from lyric_haiku import generate_best_haiku
>>> lyrics = '''[Verse 1]
... the sun goes down slow
... and all the stars come out now
... I hold your hand tight
... '''
>>> result = generate_best_haiku(lyrics)
>>> print(result.format())
the sun goes down slow
and all the stars come out now
I hold your hand tight
>>> result.is_exact
True
"""

from lyric_haiku.analyzer import analyze_lyrics
from lyric_haiku.matcher import (
    FALLBACK_MAX_SYLLABLES,
    FALLBACK_MIN_SYLLABLES,
    HAIKU_PATTERN,
    build_candidates,
    generate_best_haiku,
    generate_closest_haiku,
    generate_haiku,
    normalize_text,
    select_line,
)
from lyric_haiku.models import (
    FailureReason,
    HaikuLine,
    HaikuResult,
    LineAnalysis,
    LyricLine,
    MatchCandidate,
    SelectionMode,
)
from lyric_haiku.syllables import count_syllables, has_syllables, normalize_for_counting
from lyric_haiku.tokenizer import tokenize_lyrics

__all__ = [
    "FALLBACK_MAX_SYLLABLES",
    "FALLBACK_MIN_SYLLABLES",
    "HAIKU_PATTERN",
    "FailureReason",
    "HaikuLine",
    "HaikuResult",
    "LineAnalysis",
    "LyricLine",
    "MatchCandidate",
    "SelectionMode",
    "analyze_lyrics",
    "build_candidates",
    "count_syllables",
    "generate_best_haiku",
    "generate_closest_haiku",
    "generate_haiku",
    "has_syllables",
    "normalize_for_counting",
    "normalize_text",
    "select_line",
    "tokenize_lyrics",
]
