"""
Import step: download MorphHB WLC books and store one JSON file per verse.

Raw book XML is cached under ``config.source_dir``; a cached book is never
downloaded twice.
"""
from pathlib import Path

import click
import requests
from tqdm import tqdm

from .config import ToolkitConfig
from .osis import ParsedVerse, parse_osis, parse_verse_xml
from .source import METADATA
from .utils import print_header, print_step, timer, write_json


BOOKS = [
    "Gen", "Exod", "Lev", "Num", "Deut",
    "Josh", "Judg", "Ruth",
    "1Sam", "2Sam", "1Kgs", "2Kgs",
    "1Chr", "2Chr", "Ezra", "Neh", "Esth",
    "Job", "Ps", "Prov", "Eccl", "Song",
    "Isa", "Jer", "Lam", "Ezek", "Dan",
    "Hos", "Joel", "Amos", "Obad", "Jonah",
    "Mic", "Nah", "Hab", "Zeph", "Hag",
    "Zech", "Mal",
]


# =====================================================================
# Download
# =====================================================================

def download_book(config: ToolkitConfig, book: str) -> str:
    """Return the OSIS XML of a book, from cache or from MorphHB."""
    xml_path = config.source_dir / f"{book}.xml"
    if xml_path.exists():
        return xml_path.read_text(encoding="utf-8")

    url = f"{config.base_url}{book}.xml"
    headers = {"User-Agent": config.user_agent}
    try:
        response = requests.get(url, headers=headers, timeout=config.request_timeout)
    except requests.RequestException as e:
        raise click.ClickException(f"Failed to download {book}.xml: {e}")
    if response.status_code != 200:
        raise click.ClickException(
            f"Failed to download {book}.xml: HTTP {response.status_code}"
        )

    response.encoding = "utf-8"
    xml = response.text
    xml_path.parent.mkdir(parents=True, exist_ok=True)
    xml_path.write_text(xml, encoding="utf-8")
    return xml


# =====================================================================
# Storage
# =====================================================================

def verse_path(config: ToolkitConfig, parsed: ParsedVerse) -> Path:
    return config.edition_dir / parsed.book / str(parsed.chapter) / f"{parsed.number}.json"


def save_verse(config: ToolkitConfig, parsed: ParsedVerse) -> Path:
    path = verse_path(config, parsed)
    write_json(path, parsed.verse.to_dict())
    return path


def save_metadata(config: ToolkitConfig) -> Path:
    write_json(config.metadata_path, METADATA)
    return config.metadata_path


@timer
def import_books(config: ToolkitConfig, books: list[str]) -> int:
    """Download, parse and store the given books; returns verses written."""
    total = 0
    for book in tqdm(books, desc="  Books", unit="book"):
        xml = download_book(config, book)
        verses = parse_osis(
            xml,
            strip_marks=config.strip_cantillation,
            gematria=config.gematria,
            label=f"{book}.xml",
        )
        for parsed in verses:
            save_verse(config, parsed)
        total += len(verses)
    return total


def rebuild_verses(config: ToolkitConfig, xml_snippets) -> list[Path]:
    """Re-import standalone ``<verse>`` snippets over the stored edition."""
    written = []
    for snippet in xml_snippets:
        parsed = parse_verse_xml(
            snippet,
            strip_marks=config.strip_cantillation,
            gematria=config.gematria,
        )
        written.append(save_verse(config, parsed))
        n_null = sum(1 for w in parsed.verse.words if w.lemma is None)
        print(f"    {parsed.osis_id}: {len(parsed.verse.words)} words, "
              f"{n_null} without lemma")
    return written


# =====================================================================
# Entry point
# =====================================================================

def run(config: ToolkitConfig, force: bool = False, books: list[str] | None = None) -> None:
    """Entry point for the import step."""
    print_header("OHB TOOLKIT - MorphHB Import")

    selected = books or BOOKS
    unknown = [b for b in selected if b not in BOOKS]
    if unknown:
        raise click.ClickException(f"Unknown OSIS book id(s): {', '.join(unknown)}")

    if books is None and config.metadata_path.exists() and not force:
        print("  Edition already imported, skip (use --force to re-run)")
        return

    config.ensure_dirs()

    print_step(f"Importing {len(selected)} books...")
    total = import_books(config, selected)

    print_step("Writing edition metadata...")
    save_metadata(config)

    print(f"\n  Imported {total} verses to {config.edition_dir}")
