"""
Read access to the imported openscriptures-OHB edition.

Verses are stored one JSON file each under
``<data_dir>/openscriptures-OHB/<OsisBook>/<chapter>/<verse>.json``.
"""
import json

import click

from .config import ToolkitConfig


METADATA = {
    "abbreviation": "openscriptures-OHB",
    "name": "Open Scriptures Hebrew Bible",
    "language": "Hebrew",
    "license": "CC BY 4.0",
    "source": "Open Scriptures Hebrew Bible Project",
    "urls": ["https://github.com/openscriptures/morphhb"],
}

BOOK_TO_OSIS = {
    "Genesis": "Gen", "Exodus": "Exod", "Leviticus": "Lev", "Numbers": "Num",
    "Deuteronomy": "Deut", "Joshua": "Josh", "Judges": "Judg", "Ruth": "Ruth",
    "1 Samuel": "1Sam", "2 Samuel": "2Sam", "1 Kings": "1Kgs", "2 Kings": "2Kgs",
    "1 Chronicles": "1Chr", "2 Chronicles": "2Chr", "Ezra": "Ezra", "Nehemiah": "Neh",
    "Esther": "Esth", "Job": "Job", "Psalms": "Ps", "Proverbs": "Prov",
    "Ecclesiastes": "Eccl", "Song of Solomon": "Song", "Isaiah": "Isa", "Jeremiah": "Jer",
    "Lamentations": "Lam", "Ezekiel": "Ezek", "Daniel": "Dan", "Hosea": "Hos",
    "Joel": "Joel", "Amos": "Amos", "Obadiah": "Obad", "Jonah": "Jonah",
    "Micah": "Mic", "Nahum": "Nah", "Habakkuk": "Hab", "Zephaniah": "Zeph",
    "Haggai": "Hag", "Zechariah": "Zech", "Malachi": "Mal",
}


def to_osis(book: str) -> str:
    """English book name to OSIS id; unknown names pass through."""
    return BOOK_TO_OSIS.get(book, book)


def list_books() -> list[str]:
    return list(BOOK_TO_OSIS)


def _read_json(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_verse(config: ToolkitConfig, book: str, chapter: int, verse: int) -> dict:
    path = config.edition_dir / to_osis(book) / str(chapter) / f"{verse}.json"
    try:
        return _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(
            f"Verse {book} {chapter}:{verse} not found in {config.edition}"
        ) from e


def load_chapter(config: ToolkitConfig, book: str, chapter: int) -> list[dict]:
    """All stored verses of a chapter, in numeric verse order."""
    chapter_dir = config.edition_dir / to_osis(book) / str(chapter)
    files = sorted(
        (p for p in chapter_dir.glob("*.json") if p.stem.isdigit()),
        key=lambda p: int(p.stem),
    )
    if not files:
        raise click.ClickException(
            f"Chapter {book} {chapter} not found in {config.edition}"
        )
    try:
        return [_read_json(p) for p in files]
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(
            f"Chapter {book} {chapter} not found in {config.edition}"
        ) from e


def load_cache(config: ToolkitConfig, name: str) -> dict:
    path = config.cache_dir / f"{name}.json"
    try:
        return _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(f"Cache '{name}' not found") from e
