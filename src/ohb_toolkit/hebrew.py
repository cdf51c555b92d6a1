"""
Hebrew text normalization: markup artifacts, cantillation, tokenization.

Every raw string coming out of the markup tree goes through the same
pipeline before it becomes a word:

1. remove the morpheme separator ``/`` left by the source markup
2. optionally strip cantillation (a pipeline-wide policy, never per word)
3. split on runs of whitespace
4. drop tokens made of a bare maqqef
"""
import re


# =====================================================================
# Constants
# =====================================================================

MAQQEF = "\u05be"
SOF_PASUQ = "\u05c3"
PETUCHAH = "\u05e4"   # פ open paragraph marker
SETUMAH = "\u05e1"    # ס closed paragraph marker

# Chant notation only: accents U+0591-U+05AF plus meteg, rafe, paseq,
# sof pasuq and the inverted nun. Vowel points are kept.
CANTILLATION_CODEPOINTS = (
    set(range(0x0591, 0x05B0)) | {0x05BD, 0x05BF, 0x05C0, 0x05C3, 0x05C6}
)

HEBREW_BLOCK_RE = re.compile(r"[\u0590-\u05ff]")
MORPHEME_SEPARATOR = "/"


# =====================================================================
# Normalization
# =====================================================================

def strip_cantillation(text: str) -> str:
    """Remove cantillation marks, leaving consonants and vowel points."""
    return "".join(ch for ch in text if ord(ch) not in CANTILLATION_CODEPOINTS)


def normalize_text(raw: str, strip_marks: bool = False) -> str:
    """Remove separators (and optionally cantillation) from a raw string."""
    text = (raw or "").replace(MORPHEME_SEPARATOR, "")
    if strip_marks:
        text = strip_cantillation(text)
    return text.strip()


def tokenize(raw: str, strip_marks: bool = False) -> list[str]:
    """Normalize a raw string and split it into word tokens.

    Bare maqqef tokens are punctuation joining two words, never a word.
    """
    text = normalize_text(raw, strip_marks)
    return [tok for tok in text.split() if tok != MAQQEF]


def has_hebrew(text: str) -> bool:
    """True if text holds at least one character of the Hebrew block."""
    return bool(HEBREW_BLOCK_RE.search(text or ""))


def is_paragraph_marker(text: str) -> bool:
    return text in (PETUCHAH, SETUMAH)
