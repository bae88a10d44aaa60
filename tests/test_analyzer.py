"""Tests for the lyrics analyzer."""

from pathlib import Path

import pytest

from lyric_haiku import analyze_lyrics

TESTDATA_DIR = Path(__file__).parent.parent / "testdata"


class TestAnalyzeLyrics:
    """Diagnostic listing tests."""

    def test_every_line_counted(self) -> None:
        """Test each tokenized line appears once with its count."""
        text = (TESTDATA_DIR / "evening_song.txt").read_text()
        analysis = analyze_lyrics(text)
        assert [(a.text, a.syllable_count) for a in analysis] == [
            ("the sun goes down slow", 5),
            ("we dance all night", 4),
            ("and all the stars come out now", 7),
            ("I hold your hand tight", 5),
            ("The sun goes down slow!", 5),
            ("hold me close", 3),
        ]

    @pytest.mark.parametrize("value", ["", None, "[Chorus]\n(instrumental)"])
    def test_empty(self, value: str | None) -> None:
        """Test no usable lines gives an empty listing."""
        assert analyze_lyrics(value) == []

    def test_to_dict(self) -> None:
        """Test the JSON shape of an entry."""
        (entry,) = analyze_lyrics("hold me close")
        assert entry.to_dict() == {"text": "hold me close", "syllableCount": 3}
