"""
OSIS book parsing: from MorphHB XML to verse records.

Each ``<verse osisID="Book.Chapter.Verse">`` is converted into the generic
markup tree, walked, filtered and optionally enriched with gematria.
"""
import xml.etree.ElementTree as ET
from dataclasses import dataclass

import click

from .gematria import enrich_verse
from .markup import from_xml, strip_ns
from .models import VerseData
from .postfilter import build_verse
from .walker import walk_verse


@dataclass(frozen=True)
class ParsedVerse:
    book: str
    chapter: int
    number: int
    verse: VerseData

    @property
    def osis_id(self) -> str:
        return f"{self.book}.{self.chapter}.{self.number}"


def parse_ref(osis_id: str):
    """Split ``Gen.1.1`` into (book, chapter, verse); None if malformed."""
    parts = (osis_id or "").split(".")
    if len(parts) != 3 or not parts[1].isdigit() or not parts[2].isdigit():
        return None
    return parts[0], int(parts[1]), int(parts[2])


def transform_verse(node, strip_marks: bool = False, gematria: bool = True) -> VerseData | None:
    """Full per-verse pipeline; None when the verse holds no words at all."""
    raw_words = walk_verse(node, strip_marks)
    if not raw_words:
        return None
    verse = build_verse(raw_words)
    if gematria:
        verse = enrich_verse(verse)
    return verse


def _parse_root(xml_text: str, label: str) -> ET.Element:
    try:
        return ET.fromstring(xml_text.lstrip("\ufeff").strip())
    except ET.ParseError as e:
        raise click.ClickException(f"Malformed OSIS XML in {label}: {e}")


def iter_verse_elements(root: ET.Element):
    for el in root.iter():
        if strip_ns(el.tag) == "verse" and el.get("osisID"):
            yield el


def parse_osis(xml_text: str, strip_marks: bool = False, gematria: bool = True,
               label: str = "<string>") -> list[ParsedVerse]:
    """Parse every verse of an OSIS document."""
    root = _parse_root(xml_text, label)

    verses = []
    for el in iter_verse_elements(root):
        ref = parse_ref(el.get("osisID"))
        if ref is None:
            continue
        verse = transform_verse(from_xml(el), strip_marks, gematria)
        if verse is None:
            continue
        book, chapter, number = ref
        verses.append(ParsedVerse(book, chapter, number, verse))
    return verses


def parse_verse_xml(xml_text: str, strip_marks: bool = False,
                    gematria: bool = True) -> ParsedVerse:
    """Parse a standalone ``<verse>`` snippet (single-verse rebuilds)."""
    verses = parse_osis(xml_text, strip_marks, gematria, label="verse snippet")
    if len(verses) != 1:
        raise click.ClickException(
            f"Expected exactly one verse in snippet, found {len(verses)}"
        )
    return verses[0]
