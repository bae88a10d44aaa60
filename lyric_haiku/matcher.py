"""Haiku selection over tokenized lyric lines.

Both public entry points run the same routine: for each target of the
5-7-5 pattern, scan the lines in source order and take the first unused
line with exactly that many syllables. The closest-match entry point falls
back, per target, to the unused line whose count is nearest the target.
A chosen line's index and normalized text are both marked used, so a
repeated lyric can never fill two slots.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from lyric_haiku.models import (
    FailureReason,
    HaikuLine,
    HaikuResult,
    LyricLine,
    MatchCandidate,
    SelectionMode,
)
from lyric_haiku.syllables import count_syllables
from lyric_haiku.tokenizer import tokenize_lyrics

logger = logging.getLogger(__name__)

HAIKU_PATTERN: tuple[int, int, int] = (5, 7, 5)

# Closest-match fallback only considers lines in this inclusive range
FALLBACK_MIN_SYLLABLES = 2
FALLBACK_MAX_SYLLABLES = 12

# Failure reported by the exact entry point, by slot position
EXACT_FAILURES: tuple[FailureReason, FailureReason, FailureReason] = (
    "NO_FIVE_SYLLABLE_LINE",
    "NO_SEVEN_SYLLABLE_LINE",
    "NO_SECOND_FIVE_SYLLABLE_LINE",
)

_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize_text(text: str) -> str:
    """Normalize a line for duplicate detection.

    Parameters
    ----------
    text : str
        The line text.

    Returns
    -------
    str
        Lowercased text without punctuation, trimmed. Internal whitespace
        is left as is.

    Examples
    --------
    >>> normalize_text("  Hold ON, hold on! ")
    'hold on hold on'
    """
    return _NON_WORD_RE.sub("", text.lower()).strip()


def build_candidates(lines: Sequence[LyricLine]) -> list[MatchCandidate]:
    """Compute syllable counts and normalized text once for a matching run.

    Parameters
    ----------
    lines : Sequence[LyricLine]
        Tokenized lyric lines.

    Returns
    -------
    list[MatchCandidate]
        One candidate per line, in the same order.
    """
    return [
        MatchCandidate(
            line=line,
            syllables=count_syllables(line.text),
            normalized=normalize_text(line.text),
        )
        for line in lines
    ]


def _is_available(
    candidate: MatchCandidate,
    used_indices: set[int] | frozenset[int],
    used_texts: set[str] | frozenset[str],
) -> bool:
    return candidate.index not in used_indices and candidate.normalized not in used_texts


def select_line(
    candidates: Sequence[MatchCandidate],
    target: int,
    used_indices: set[int] | frozenset[int],
    used_texts: set[str] | frozenset[str],
    mode: SelectionMode,
) -> MatchCandidate | None:
    """Select a line for one syllable target.

    Lines whose index or normalized text is already used are skipped.

    Parameters
    ----------
    candidates : Sequence[MatchCandidate]
        Candidates in source order.
    target : int
        The syllable target for this slot.
    used_indices : set[int]
        Source indices already placed in the haiku.
    used_texts : set[str]
        Normalized texts already placed in the haiku.
    mode : SelectionMode
        ``"exact"`` returns the first line with exactly ``target``
        syllables. ``"closest"`` returns the line with the smallest
        distance to ``target`` among lines counted between
        ``FALLBACK_MIN_SYLLABLES`` and ``FALLBACK_MAX_SYLLABLES``; ties go
        to the earliest line.

    Returns
    -------
    MatchCandidate | None
        The selected candidate, or None if no line qualifies.

    Raises
    ------
    ValueError
        If ``mode`` is not a known selection mode.
    """
    if mode == "exact":
        for candidate in candidates:
            if not _is_available(candidate, used_indices, used_texts):
                continue
            if candidate.syllables == target:
                return candidate
        return None

    if mode == "closest":
        best: MatchCandidate | None = None
        best_diff = 0
        for candidate in candidates:
            if not _is_available(candidate, used_indices, used_texts):
                continue
            if not FALLBACK_MIN_SYLLABLES <= candidate.syllables <= FALLBACK_MAX_SYLLABLES:
                continue
            diff = abs(candidate.syllables - target)
            # Strict comparison keeps the earliest line on ties
            if best is None or diff < best_diff:
                best = candidate
                best_diff = diff
        return best

    msg = f"Unknown selection mode: {mode}"
    raise ValueError(msg)


def _match(lines: Sequence[LyricLine], allow_closest: bool) -> HaikuResult:
    """Fill the 5-7-5 slots in order, marking each choice as used."""
    candidates = build_candidates(lines)
    used_indices: set[int] = set()
    used_texts: set[str] = set()
    chosen: list[MatchCandidate] = []

    for position, target in enumerate(HAIKU_PATTERN):
        match = select_line(candidates, target, used_indices, used_texts, "exact")
        if match is None and allow_closest:
            match = select_line(candidates, target, used_indices, used_texts, "closest")

        if match is None:
            reason: FailureReason = (
                "NO_CANDIDATE_AVAILABLE" if allow_closest else EXACT_FAILURES[position]
            )
            logger.debug("No line for slot %d (target %d): %s", position + 1, target, reason)
            return HaikuResult.failure(reason)

        logger.debug(
            "Slot %d (target %d): line %d with %d syllables",
            position + 1,
            target,
            match.index,
            match.syllables,
        )
        used_indices.add(match.index)
        used_texts.add(match.normalized)
        chosen.append(match)

    is_exact = all(
        match.syllables == target for match, target in zip(chosen, HAIKU_PATTERN)
    )
    return HaikuResult(
        success=True,
        is_exact=is_exact,
        lines=tuple(
            HaikuLine(text=match.text, syllable_count=match.syllables, index=match.index)
            for match in chosen
        ),
    )


def generate_haiku(lyrics: str | None) -> HaikuResult:
    """Build an exact 5-7-5 haiku from lyrics.

    Parameters
    ----------
    lyrics : str | None
        Raw lyric text.

    Returns
    -------
    HaikuResult
        On success ``is_exact`` is always True. On failure the reason
        names the first slot that could not be filled.

    Examples
    --------
    >>> result = generate_haiku(
    ...     "the sun goes down slow\\nand all the stars come out now\\nI hold your hand tight"
    ... )
    >>> result.success, result.is_exact
    (True, True)
    """
    return _match(tokenize_lyrics(lyrics), allow_closest=False)


def generate_closest_haiku(lyrics: str | None) -> HaikuResult:
    """Build the closest available haiku from lyrics.

    Each slot takes an exact match when one is left, otherwise the nearest
    line by syllable count. ``is_exact`` reports whether all three chosen
    lines happen to hit their targets.

    Parameters
    ----------
    lyrics : str | None
        Raw lyric text.

    Returns
    -------
    HaikuResult
        Fails with ``TOO_FEW_LINES`` when fewer than three lines survive
        tokenization, or ``NO_CANDIDATE_AVAILABLE`` when a slot cannot be
        filled.
    """
    lines = tokenize_lyrics(lyrics)
    if len(lines) < len(HAIKU_PATTERN):
        logger.debug("Only %d usable lines: TOO_FEW_LINES", len(lines))
        return HaikuResult.failure("TOO_FEW_LINES")
    return _match(lines, allow_closest=True)


def generate_best_haiku(lyrics: str | None) -> HaikuResult:
    """Try an exact haiku first and fall back to the closest one.

    The closest-match search is only run when no exact haiku exists, so an
    exact result is never traded for an approximate one.
    """
    result = generate_haiku(lyrics)
    if result.success:
        return result
    logger.debug("Exact haiku failed (%s), trying closest match", result.failure_reason)
    return generate_closest_haiku(lyrics)
