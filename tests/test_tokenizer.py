"""Tests for the lyric line tokenizer."""

import pytest

from lyric_haiku.tokenizer import is_annotation, preprocess, tokenize_lyrics


class TestPreprocess:
    """Line splitting tests."""

    def test_unix_newlines(self) -> None:
        """Test plain newline splitting."""
        assert preprocess("a\nb") == ["a", "b"]

    def test_windows_newlines(self) -> None:
        """Test CRLF and bare CR are normalized."""
        assert preprocess("a\r\nb\rc") == ["a", "b", "c"]

    def test_bare_carriage_return_splits(self) -> None:
        """Test a lone CR starts a new lyric line."""
        lines = tokenize_lyrics("one line\rtwo line")
        assert [line.text for line in lines] == ["one line", "two line"]


class TestIsAnnotation:
    """Whole-line annotation detection."""

    @pytest.mark.parametrize(
        "line",
        ["[Verse 1]", "[Chorus]", "[]", "(instrumental)", "(x2)", "[Chorus] [x2]"],
    )
    def test_annotations(self, line: str) -> None:
        """Test lines that are entirely bracketed or parenthesized."""
        assert is_annotation(line)

    @pytest.mark.parametrize(
        "line",
        ["Hold on (hold on)", "[Chorus] sing along", "(oh) baby", "plain line"],
    )
    def test_partial_annotations_kept(self, line: str) -> None:
        """Test annotations inside a longer line do not count."""
        assert not is_annotation(line)


class TestTokenizeLyrics:
    """Tokenizer contract tests."""

    def test_structural_noise_removed(self) -> None:
        """Test section headers and parenthesized lines are dropped."""
        text = "[Verse 1]\nReal lyric line one\n(instrumental)\nReal lyric line two"
        lines = tokenize_lyrics(text)
        assert [line.text for line in lines] == ["Real lyric line one", "Real lyric line two"]

    def test_indices_follow_output_order(self) -> None:
        """Test indices count surviving lines only."""
        lines = tokenize_lyrics("[Intro]\nfirst\n\nsecond\n(ooh)\nthird")
        assert [(line.index, line.text) for line in lines] == [
            (0, "first"),
            (1, "second"),
            (2, "third"),
        ]

    def test_lines_are_trimmed(self) -> None:
        """Test surrounding whitespace is removed."""
        lines = tokenize_lyrics("   hello world  \n\t tab line\t")
        assert [line.text for line in lines] == ["hello world", "tab line"]

    def test_indented_annotation_removed(self) -> None:
        """Test annotations are detected after trimming."""
        assert tokenize_lyrics("   [Chorus]   \n  (fade out) ") == []

    def test_blank_lines_removed(self) -> None:
        """Test whitespace-only lines are dropped."""
        assert tokenize_lyrics("\n   \n\t\n") == []

    def test_only_annotations(self) -> None:
        """Test all-annotation input yields nothing."""
        assert tokenize_lyrics("[Chorus]\n(instrumental)") == []

    @pytest.mark.parametrize("value", ["", None, 42, ["a line"]])
    def test_empty_or_invalid_input(self, value: object) -> None:
        """Test empty and non-string input yield no lines."""
        assert tokenize_lyrics(value) == []  # type: ignore[arg-type]

    def test_idempotent(self) -> None:
        """Test tokenizing the same text twice gives identical results."""
        text = "[Verse]\nline a\n(x)\nline b\nline a"
        assert tokenize_lyrics(text) == tokenize_lyrics(text)

    def test_duplicates_are_kept(self) -> None:
        """Test repeated lyric lines survive tokenization."""
        lines = tokenize_lyrics("same line\nsame line")
        assert len(lines) == 2
        assert lines[0].index != lines[1].index
