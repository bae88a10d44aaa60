"""Data models for lyric-to-haiku matching.

This module defines the structures passed between the tokenizer, the
syllable estimator and the matcher, plus the result returned to callers.
All of them are created fresh for each call and never shared.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

SelectionMode = Literal["exact", "closest"]

FailureReason = Literal[
    "NO_FIVE_SYLLABLE_LINE",
    "NO_SEVEN_SYLLABLE_LINE",
    "NO_SECOND_FIVE_SYLLABLE_LINE",
    "TOO_FEW_LINES",
    "NO_CANDIDATE_AVAILABLE",
]


@dataclass(frozen=True)
class LyricLine:
    """A candidate line extracted from raw lyrics.

    Parameters
    ----------
    text : str
        The trimmed surface form of the line.
    index : int
        Position in the tokenized sequence (0-indexed).
    """

    text: str
    index: int


@dataclass(frozen=True)
class MatchCandidate:
    """A lyric line paired with the values the matcher compares.

    Parameters
    ----------
    line : LyricLine
        The source line.
    syllables : int
        Estimated syllable count of the line.
    normalized : str
        Duplicate-detection form of the line text.
    """

    line: LyricLine
    syllables: int
    normalized: str

    @property
    def index(self) -> int:
        return self.line.index

    @property
    def text(self) -> str:
        return self.line.text


@dataclass(frozen=True)
class HaikuLine:
    """One chosen line of a haiku.

    Parameters
    ----------
    text : str
        The original line text.
    syllable_count : int
        The estimated syllable count of the line.
    index : int
        Source position of the line in the tokenized lyrics.
    """

    text: str
    syllable_count: int
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {"originalText": self.text, "syllableCount": self.syllable_count}


@dataclass(frozen=True)
class HaikuResult:
    """Outcome of a haiku generation attempt.

    Parameters
    ----------
    success : bool
        Whether three lines were obtained.
    is_exact : bool
        True only when every chosen line hits its 5-7-5 target.
    lines : tuple[HaikuLine, ...]
        The three chosen lines in 5, 7, 5 order, or empty on failure.
    failure_reason : FailureReason | None
        Why generation failed, None on success.

    Examples
    --------
    >>> result = HaikuResult.failure("TOO_FEW_LINES")
    >>> result.success, result.haiku_text
    (False, ())
    """

    success: bool
    is_exact: bool
    lines: tuple[HaikuLine, ...] = ()
    failure_reason: FailureReason | None = None

    @classmethod
    def failure(cls, reason: FailureReason) -> HaikuResult:
        """Build an unsuccessful result carrying ``reason``."""
        return cls(success=False, is_exact=False, lines=(), failure_reason=reason)

    @property
    def haiku_text(self) -> tuple[str, ...]:
        """The chosen line texts in first-5, 7, second-5 order."""
        return tuple(line.text for line in self.lines)

    def format(self) -> str:
        """Return the haiku as newline-separated text (empty on failure)."""
        return "\n".join(self.haiku_text)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data: dict[str, Any] = {
            "success": self.success,
            "isExact": self.is_exact,
            "lines": [line.to_dict() for line in self.lines],
            "haikuText": list(self.haiku_text),
        }
        if self.failure_reason is not None:
            data["failureReason"] = self.failure_reason
        return data


@dataclass(frozen=True)
class LineAnalysis:
    """Diagnostic syllable count for one tokenized line.

    Parameters
    ----------
    text : str
        The tokenized line text.
    syllable_count : int
        The estimated syllable count.
    """

    text: str
    syllable_count: int

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "syllableCount": self.syllable_count}
