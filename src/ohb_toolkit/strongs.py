"""
Strong's number extraction from OSHB lemma attributes.

OSHB lemmas chain grammatical prefixes and a lexical number with slashes,
e.g. ``b/7225``, ``c/b/929``, ``m/1004 b``. Prefix letters carry no
lexical number; a trailing letter after a space disambiguates homographs
and is not part of the number.
"""
import re


STRONGS_RE = re.compile(r"(?:strongs?:)?([HG]?)(\d{1,5})", re.IGNORECASE)
DIGIT_RE = re.compile(r"\d")

DEFAULT_PREFIX = "H"


def extract_strongs(lemma: str | None) -> list[str]:
    """Return canonical codes (``H7225``) found in a lemma, in order.

    >>> extract_strongs("c/b/929")
    ['H929']
    >>> extract_strongs("c/l")
    []
    """
    if not lemma:
        return []

    codes = []
    for m in STRONGS_RE.finditer(lemma):
        prefix = m.group(1).upper() or DEFAULT_PREFIX
        codes.append(f"{prefix}{int(m.group(2))}")
    return codes


def is_prefix_only(lemma: str | None) -> bool:
    """True for lemmas made only of prefix letters (``l``, ``c/l``)."""
    return bool(lemma) and not DIGIT_RE.search(lemma)
