"""Tests for the glued chord label tokenizer."""

import pytest

from chord_chart.layout.segmenter import render_chord_label
from chord_chart.layout.tokenizer import clean_chord_label, tokenize_chord_label


class TestCleanChordLabel:
    """Modifier reattachment before tokenizing."""

    def test_detached_flat_five(self) -> None:
        assert clean_chord_label("Bm7 b5") == "Bm7b5"

    def test_detached_sharp_nine(self) -> None:
        assert clean_chord_label("C7 #9") == "C7#9"

    def test_detached_trailing_accidental(self) -> None:
        assert clean_chord_label("B b") == "Bb"

    def test_strips_edges(self) -> None:
        assert clean_chord_label("  Am  ") == "Am"

    def test_empty(self) -> None:
        assert clean_chord_label("") == ""

    @pytest.mark.parametrize(
        "label, expected",
        [("C7(b9)", "C7b9)"), ("Am7 (b5)", "Am7b5)"), ("Bm7,b5", "Bm7b5"), ("(C) b", "(Cb")],
    )
    def test_modifier_after_parenthesis_or_comma(self, label: str, expected: str) -> None:
        assert clean_chord_label(label) == expected

    def test_separate_chords_untouched(self) -> None:
        """Whitespace before a new chord root is kept."""
        assert clean_chord_label("Am G") == "Am G"


class TestTokenizeGlued:
    """Splitting concatenated chord labels."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("E7Am", ["E7", "Am"]),
            ("AmDm", ["Am", "Dm"]),
            ("CGAmF", ["C", "G", "Am", "F"]),
            ("F#mBb", ["F#m", "Bb"]),
            ("E7am", ["E7", "am"]),
            ("Asus4)d", ["Asus4", "d"]),
        ],
    )
    def test_glued(self, label: str, expected: list[str]) -> None:
        assert tokenize_chord_label(label) == expected

    def test_single_chord(self) -> None:
        assert tokenize_chord_label("Am7") == ["Am7"]

    def test_flat_modifier_is_not_a_root(self) -> None:
        """A lowercase b followed by a digit stays a modifier."""
        assert tokenize_chord_label("Bm7b5") == ["Bm7b5"]

    def test_detached_modifier(self) -> None:
        assert tokenize_chord_label("Bm7 b5") == ["Bm7b5"]

    def test_lowercase_after_letter_extends(self) -> None:
        """Lowercase a-g only splits after a digit or closing parenthesis."""
        assert tokenize_chord_label("Cadd9") == ["Cadd9"]
        assert tokenize_chord_label("Cdim") == ["Cdim"]

    def test_accidental_after_root(self) -> None:
        assert tokenize_chord_label("C#m") == ["C#m"]
        assert tokenize_chord_label("E♭7") == ["E♭7"]


class TestTokenizeSlash:
    """Slash bass notes stay with their chord."""

    def test_slash_chord(self) -> None:
        assert tokenize_chord_label("C/G") == ["C/G"]

    def test_slash_chord_with_accidental_bass(self) -> None:
        assert tokenize_chord_label("C#m7/G#") == ["C#m7/G#"]

    def test_slash_chord_glued(self) -> None:
        assert tokenize_chord_label("C/GAm") == ["C/G", "Am"]

    def test_dangling_slash_kept(self) -> None:
        assert tokenize_chord_label("C/") == ["C/"]


class TestTokenizeSeparators:
    """Separators and noise."""

    def test_whitespace(self) -> None:
        assert tokenize_chord_label("Am  G") == ["Am", "G"]

    def test_parentheses_and_commas(self) -> None:
        assert tokenize_chord_label("(Am, G)") == ["Am", "G"]

    def test_bidi_controls(self) -> None:
        """Right-to-left marks from Hebrew pages separate chords."""
        assert tokenize_chord_label("Am\u200fG") == ["Am", "G"]
        assert tokenize_chord_label("\u202bE7\u202c") == ["E7"]

    def test_noise_dropped(self) -> None:
        assert tokenize_chord_label("Am*") == ["Am"]
        assert tokenize_chord_label("G.") == ["G"]

    def test_modifier_symbols_kept(self) -> None:
        assert tokenize_chord_label("C7#9") == ["C7#9"]
        assert tokenize_chord_label("Am7-5") == ["Am7-5"]
        assert tokenize_chord_label("C+") == ["C+"]

    def test_empty_input(self) -> None:
        assert tokenize_chord_label("") == []
        assert tokenize_chord_label("   ") == []

    def test_fallback_to_whitespace_split(self) -> None:
        """Input producing no tokens is never silently lost."""
        assert tokenize_chord_label("* *") == ["*", "*"]


class TestTokenizeIdempotence:
    """Tokenizing joined tokens gives the same tokens again."""

    @pytest.mark.parametrize(
        "label",
        [
            "E7Am",
            "AmDm",
            "Bm7 b5",
            "C/GAm",
            "(Am, G)",
            "E7am",
            "Am\u200fG",
            "C7#9",
            "N.C.",
            "* *",
            "F#mBb",
            "C7(b9)",
            "Am7(b5)",
            "Bm7,b5",
            "(C) b",
            "jbAj,\u266d2",
        ],
    )
    def test_idempotent(self, label: str) -> None:
        tokens = tokenize_chord_label(label)
        assert tokenize_chord_label(" ".join(tokens)) == tokens


class TestParenthesisedModifiers:
    """Modifiers written in parentheses or after a comma stay with their chord."""

    @pytest.mark.parametrize(
        "label, expected",
        [("C7(b9)", ["C7b9"]), ("Am7(b5)", ["Am7b5"]), ("Bm7,b5", ["Bm7b5"]), ("C7(#9)Am", ["C7#9", "Am"])],
    )
    def test_single_chord(self, label: str, expected: list[str]) -> None:
        assert tokenize_chord_label(label) == expected

    def test_render_keeps_modifier(self) -> None:
        assert render_chord_label("Am7(b5)", 2) == "Bm7b5"
