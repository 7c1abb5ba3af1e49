"""Tests for input normalization."""


import pytest

from scam_guard.sanitize import (
    MAX_TEXT_LENGTH,
    replace_homoglyphs,
    sanitize,
    strip_invisible,
)


@pytest.mark.parametrize(
    "text",
    [
        "plain ascii text",
        "e\u0301 and caf\u00e9",
        "se\u200bnd mo\u200dney",
        "\u0455end money",
        "\uff11\uff10\uff10 dollars",
        "chapter \u2173",
        "\ufb01nancial",
        "\u0000\u001f\u007f\u009f",
        "",
    ],
)
def test_sanitize_is_idempotent(text: str) -> None:
    """Sanitizing twice should equal sanitizing once."""
    once = sanitize(text)
    assert sanitize(once) == once


def test_strip_invisible_removes_controls_and_zero_width() -> None:
    """Control characters, zero-width characters and BOM should be removed."""
    assert strip_invisible("a\u0000b\u200bc\u200cd\u200de\ufeff\u0085f") == "abcdef"


def test_strip_invisible_keeps_tab_newline_and_carriage_return() -> None:
    """Ordinary whitespace controls survive so word boundaries hold."""
    assert strip_invisible("a\tb\nc\rd") == "a\tb\nc\rd"


def test_replace_homoglyphs_maps_cyrillic_to_latin() -> None:
    """Cyrillic look-alikes should fold onto ASCII letters."""
    assert replace_homoglyphs("\u0455\u0435nd m\u043en\u0435y") == "send money"
    assert replace_homoglyphs("\u0420\u0410Y") == "PAY"


def test_sanitize_folds_fullwidth_and_compatibility_forms() -> None:
    """NFKC should fold fullwidth letters and ligatures."""
    assert sanitize("\uff37\uff49\uff52\uff45") == "Wire"
    assert sanitize("\ufb01ne") == "fine"


def test_sanitize_joins_words_split_by_zero_width_characters() -> None:
    """Zero-width characters inside a word should not break matching."""
    assert sanitize("ur\u200bgent") == "urgent"


def test_sanitize_truncates_to_max_length() -> None:
    """Output should never exceed the maximum processed length."""
    assert len(sanitize("a" * (MAX_TEXT_LENGTH + 500))) == MAX_TEXT_LENGTH


def test_sanitize_truncates_after_normalization_expands_text() -> None:
    """Compatibility expansion past the limit is cut back to the limit."""
    # each U+FDFA expands to 18 code points under NFKC
    text = "\ufdfa" * 3000
    assert len(text) < MAX_TEXT_LENGTH
    assert len(sanitize(text)) == MAX_TEXT_LENGTH


def test_sanitize_keeps_unrelated_unicode() -> None:
    """Characters outside the homoglyph table are left alone."""
    assert sanitize("na\u00efve \u65e5\u672c") == "na\u00efve \u65e5\u672c"


def test_sanitize_passes_lone_surrogate_through() -> None:
    """Unpaired surrogates are kept as single code points."""
    assert sanitize("x\ud800y") == "x\ud800y"
