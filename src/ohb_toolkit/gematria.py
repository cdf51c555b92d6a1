"""
Gematria: numeric readings of Hebrew words.

Two readings are computed from the consonants alone, skipping vowel
points, cantillation and maqqef:

- standard: traditional values, 1-9, 10-90 by tens, 100-400
- ordinal: position of the letter in the alphabet, 1-22

Final forms count as their base letter in both readings.
"""
from dataclasses import replace

from .models import VerseData


# =====================================================================
# Letter tables
# =====================================================================

ALPHABET = [
    '\u05D0',   # א aleph
    '\u05D1',   # ב bet
    '\u05D2',   # ג gimel
    '\u05D3',   # ד dalet
    '\u05D4',   # ה he
    '\u05D5',   # ו vav
    '\u05D6',   # ז zayin
    '\u05D7',   # ח chet
    '\u05D8',   # ט tet
    '\u05D9',   # י yod
    '\u05DB',   # כ kaf
    '\u05DC',   # ל lamed
    '\u05DE',   # מ mem
    '\u05E0',   # נ nun
    '\u05E1',   # ס samekh
    '\u05E2',   # ע ayin
    '\u05E4',   # פ pe
    '\u05E6',   # צ tsade
    '\u05E7',   # ק qof
    '\u05E8',   # ר resh
    '\u05E9',   # ש shin/sin
    '\u05EA',   # ת tav
]

FINAL_FORMS = {
    '\u05DA': '\u05DB',   # ך kaf sofit
    '\u05DD': '\u05DE',   # ם mem sofit
    '\u05DF': '\u05E0',   # ן nun sofit
    '\u05E3': '\u05E4',   # ף pe sofit
    '\u05E5': '\u05E6',   # ץ tsade sofit
}

ORDINAL_VALUES = {letter: i + 1 for i, letter in enumerate(ALPHABET)}

STANDARD_VALUES = {
    letter: (i % 9 + 1) * 10 ** (i // 9)
    for i, letter in enumerate(ALPHABET)
}

GEMATRIA_KEYS = ("standard", "ordinal")


# =====================================================================
# Per-word and per-verse values
# =====================================================================

def consonants(word: str) -> list[str]:
    """Base consonants of a word, final forms folded, everything else dropped."""
    letters = []
    for ch in word:
        base = FINAL_FORMS.get(ch, ch)
        if base in ORDINAL_VALUES:
            letters.append(base)
    return letters


def compute_gematria(word: str) -> dict[str, int]:
    """Standard and ordinal gematria of one word (0 when it has no letters)."""
    letters = consonants(word)
    return {
        "standard": sum(STANDARD_VALUES[ch] for ch in letters),
        "ordinal": sum(ORDINAL_VALUES[ch] for ch in letters),
    }


def verse_gematria(words) -> dict[str, int]:
    """Sum word-level gematria over a verse's final word list."""
    totals = dict.fromkeys(GEMATRIA_KEYS, 0)
    for word in words:
        values = word.gematria or compute_gematria(word.text)
        for key in GEMATRIA_KEYS:
            totals[key] += values[key]
    return totals


def enrich_verse(verse: VerseData) -> VerseData:
    """Return a copy of the verse with word and verse totals attached."""
    words = [replace(w, gematria=compute_gematria(w.text)) for w in verse.words]
    return replace(verse, words=words, gematria=verse_gematria(words))
