"""Text normalization against simple evasion tricks.

Strings are processed per code point, so ``MAX_TEXT_LENGTH`` counts code
points and lone surrogates pass through untouched.
"""


import re
import unicodedata

MAX_TEXT_LENGTH = 50_000

_INVISIBLE_RE = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f\u200b-\u200d\ufeff]"
)

HOMOGLYPH_MAP: dict[str, str] = {
    # Cyrillic
    "\u0430": "a",
    "\u0435": "e",
    "\u043e": "o",
    "\u0440": "p",
    "\u0441": "c",
    "\u0443": "y",
    "\u0445": "x",
    "\u0455": "s",
    "\u0456": "i",
    "\u0458": "j",
    "\u04bb": "h",
    "\u04cf": "l",
    "\u0501": "d",
    "\u051b": "q",
    "\u051d": "w",
    "\u0410": "A",
    "\u0412": "B",
    "\u0415": "E",
    "\u041a": "K",
    "\u041c": "M",
    "\u041d": "H",
    "\u041e": "O",
    "\u0420": "P",
    "\u0421": "C",
    "\u0422": "T",
    "\u0425": "X",
    "\u0405": "S",
    "\u0406": "I",
    "\u0408": "J",
    # Fullwidth digits
    "\uff10": "0",
    "\uff11": "1",
    "\uff12": "2",
    "\uff13": "3",
    "\uff14": "4",
    "\uff15": "5",
    "\uff16": "6",
    "\uff17": "7",
    "\uff18": "8",
    "\uff19": "9",
    # Small Roman numerals
    "\u2170": "i",
    "\u2171": "ii",
    "\u2172": "iii",
    "\u2173": "iv",
    "\u2174": "v",
}

_HOMOGLYPH_TABLE = str.maketrans(HOMOGLYPH_MAP)


def strip_invisible(text: str) -> str:
    """Remove control, zero-width, and byte-order-mark characters."""
    return _INVISIBLE_RE.sub("", text)


def replace_homoglyphs(text: str) -> str:
    """Map look-alike characters onto their plain ASCII equivalents."""
    return text.translate(_HOMOGLYPH_TABLE)


def sanitize(text: str) -> str:
    """Normalize raw input into the form every pattern rule matches against.

    Truncates to ``MAX_TEXT_LENGTH``, applies NFKC, strips invisible
    characters, folds homoglyphs, and truncates again. NFKC runs a second time
    after folding so a stripped joiner or a folded letter cannot leave a
    composable sequence behind, which keeps ``sanitize`` idempotent.
    """
    sanitized = text[:MAX_TEXT_LENGTH]
    sanitized = unicodedata.normalize("NFKC", sanitized)
    sanitized = strip_invisible(sanitized)
    sanitized = replace_homoglyphs(sanitized)
    sanitized = unicodedata.normalize("NFKC", sanitized)
    return sanitized[:MAX_TEXT_LENGTH]
