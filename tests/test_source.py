#!/usr/bin/env python3
import json
import tempfile
import unittest
from pathlib import Path

import click

from ohb_toolkit import source
from ohb_toolkit.config import ToolkitConfig


class SourceTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config = ToolkitConfig(data_dir=Path(self.tmp.name))
        chapter_dir = self.config.edition_dir / "Gen" / "1"
        chapter_dir.mkdir(parents=True)
        for n in (1, 2, 10):
            payload = {"text": f"verse {n}", "words": []}
            (chapter_dir / f"{n}.json").write_text(json.dumps(payload), encoding="utf-8")

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_verse_by_english_name(self):
        self.assertEqual(source.load_verse(self.config, "Genesis", 1, 2)["text"], "verse 2")

    def test_load_verse_by_osis_id(self):
        self.assertEqual(source.load_verse(self.config, "Gen", 1, 10)["text"], "verse 10")

    def test_missing_verse_names_reference(self):
        with self.assertRaises(click.ClickException) as ctx:
            source.load_verse(self.config, "Genesis", 1, 31)
        self.assertEqual(ctx.exception.message,
                         "Verse Genesis 1:31 not found in openscriptures-OHB")

    def test_malformed_verse_is_reported(self):
        bad = self.config.edition_dir / "Gen" / "1" / "3.json"
        bad.write_text("{not json", encoding="utf-8")
        with self.assertRaises(click.ClickException):
            source.load_verse(self.config, "Genesis", 1, 3)

    def test_load_chapter_numeric_order(self):
        verses = source.load_chapter(self.config, "Genesis", 1)
        self.assertEqual([v["text"] for v in verses], ["verse 1", "verse 2", "verse 10"])

    def test_missing_chapter(self):
        with self.assertRaises(click.ClickException) as ctx:
            source.load_chapter(self.config, "Exodus", 40)
        self.assertIn("Chapter Exodus 40", ctx.exception.message)

    def test_load_cache(self):
        self.config.cache_dir.mkdir(parents=True)
        (self.config.cache_dir / "lemmas.json").write_text('{"3318": 2}', encoding="utf-8")
        self.assertEqual(source.load_cache(self.config, "lemmas"), {"3318": 2})
        with self.assertRaises(click.ClickException) as ctx:
            source.load_cache(self.config, "missing")
        self.assertEqual(ctx.exception.message, "Cache 'missing' not found")


class BookListTests(unittest.TestCase):
    def test_list_books(self):
        books = source.list_books()
        self.assertEqual(len(books), 39)
        self.assertEqual(books[0], "Genesis")
        self.assertIn("Song of Solomon", books)

    def test_to_osis(self):
        self.assertEqual(source.to_osis("1 Samuel"), "1Sam")
        self.assertEqual(source.to_osis("Ps"), "Ps")


if __name__ == "__main__":
    unittest.main()
