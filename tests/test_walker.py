#!/usr/bin/env python3
import unittest
import xml.etree.ElementTree as ET
from pathlib import Path

from ohb_toolkit.markup import from_mapping, from_xml
from ohb_toolkit.walker import CHILD_ROLES, ChildRole, walk_verse

DATA = Path(__file__).resolve().parent / "data"


def walk_file(name: str):
    root = ET.parse(DATA / name).getroot()
    return walk_verse(from_xml(root))


def walk_xml(xml_text: str):
    return walk_verse(from_xml(ET.fromstring(xml_text)))


class KetivQereTests(unittest.TestCase):
    def test_ketiv_and_qere_both_emitted_with_lemma(self):
        words = walk_file("gen_8_17.xml")
        tagged = [w for w in words if w.lemma == "3318"]
        self.assertEqual(len(tagged), 2)
        self.assertEqual([w.variant for w in tagged], ["ketiv", "qere"])
        self.assertEqual(tagged[0].text, "הוצא")
        self.assertEqual(tagged[0].morph, "HVhv2ms")
        self.assertEqual(tagged[1].strongs, ("H3318",))

    def test_catch_word_not_duplicated(self):
        words = walk_file("gen_8_17.xml")
        self.assertEqual(len(words), 23)
        self.assertEqual([w.text for w in words].count("הוצא"), 1)
        self.assertTrue(all(w.lemma for w in words))

    def test_words_after_note_are_not_qere(self):
        words = walk_file("gen_8_17.xml")
        qere_index = next(i for i, w in enumerate(words) if w.variant == "qere")
        self.assertEqual(words[qere_index - 1].variant, "ketiv")
        self.assertTrue(all(w.variant is None for w in words[qere_index + 1:]))
        self.assertEqual(words[qere_index + 1].lemma, "854")

    def test_variant_tags_are_exclusive(self):
        words = walk_file("gen_8_17.xml")
        self.assertTrue(all(w.variant in (None, "ketiv", "qere") for w in words))

    def test_source_attributes_preserved(self):
        words = walk_file("gen_8_17.xml")
        ketiv = next(w for w in words if w.variant == "ketiv")
        self.assertEqual(ketiv.source, {"lemma": "3318", "morph": "HVhv2ms", "type": "x-ketiv"})


class ReadingAdmissionTests(unittest.TestCase):
    def test_accent_alternatives_contribute_nothing(self):
        words = walk_file("exod_20_2.xml")
        self.assertEqual(len(words), 9)
        self.assertTrue(all(w.lemma for w in words))
        self.assertTrue(all(w.variant is None for w in words))

    def test_accent_reading_outside_note_is_discarded(self):
        words = walk_xml(
            '<verse osisID="Exod.20.2"><w lemma="595">אנכי</w>'
            '<rdg type="x-accent">אנכי</rdg></verse>'
        )
        self.assertEqual([w.text for w in words], ["אנכי"])

    def test_unknown_reading_type_is_discarded(self):
        words = walk_xml('<verse osisID="Gen.1.1"><rdg type="x-other"><w lemma="1">אב</w></rdg></verse>')
        self.assertEqual(words, [])

    def test_note_prose_is_discarded(self):
        words = walk_xml(
            '<verse osisID="Gen.1.1"><w lemma="430">אלהים</w>'
            '<note type="exegesis">We read one accent differently</note></verse>'
        )
        self.assertEqual([w.text for w in words], ["אלהים"])

    def test_text_only_qere_reading(self):
        node = from_mapping({
            "@_osisID": "Gen.8.17",
            "note": {"catchWord": "הוצא", "rdg": {"@_type": "x-qere", "#text": "היצא"}},
        }, tag="verse")
        words = walk_verse(node)
        self.assertEqual(len(words), 1)
        self.assertEqual(words[0].variant, "qere")
        self.assertIsNone(words[0].lemma)

    def test_every_reading_in_note_is_followed(self):
        words = walk_xml(
            '<verse osisID="Gen.1.1"><w lemma="1">אב</w>'
            '<note><rdg type="x-qere"><w lemma="2">גד</w></rdg>'
            '<catchWord>הו</catchWord>'
            '<rdg type="x-qere"><w lemma="3">זח</w></rdg></note></verse>'
        )
        self.assertEqual([w.lemma for w in words], ["1", "2", "3"])
        self.assertEqual([w.variant for w in words], [None, "qere", "qere"])

    def test_bare_text_in_qere_reading_is_untagged(self):
        words = walk_xml(
            '<verse osisID="Gen.8.17"><note><rdg type="x-qere">'
            '<w>היצא</w></rdg></note></verse>'
        )
        self.assertEqual([(w.text, w.variant) for w in words], [("היצא", None)])


class SegmentTests(unittest.TestCase):
    def test_sof_pasuq_segment_skipped(self):
        words = walk_xml(
            '<verse osisID="Gen.1.1"><w lemma="7225" morph="HNcfsa">בראשית</w>'
            '<seg type="x-sof-pasuq">׃</seg></verse>'
        )
        self.assertEqual(len(words), 1)
        self.assertEqual(words[0].text, "בראשית")

    def test_segment_children_not_descended(self):
        words = walk_xml('<verse osisID="Gen.1.1"><seg type="x-pe">פ<w lemma="1">אב</w></seg></verse>')
        self.assertEqual(words, [])

    def test_untyped_leaf_emits_bare_word(self):
        words = walk_xml('<verse osisID="Gen.1.1"><seg>ס</seg></verse>')
        self.assertEqual(len(words), 1)
        self.assertIsNone(words[0].lemma)
        self.assertIsNone(words[0].morph)

    def test_unknown_wrapper_is_walked(self):
        words = walk_xml('<verse osisID="Gen.1.1"><foo bar="1"><w lemma="1">אב</w></foo></verse>')
        self.assertEqual([w.lemma for w in words], ["1"])


class DispatchTableTests(unittest.TestCase):
    def test_roles(self):
        self.assertIs(CHILD_ROLES["catchWord"], ChildRole.SKIP)
        self.assertIs(CHILD_ROLES["rdg"], ChildRole.READING)
        self.assertIs(CHILD_ROLES["note"], ChildRole.NOTE)
        self.assertNotIn("w", CHILD_ROLES)


if __name__ == "__main__":
    unittest.main()
