"""
Recursive walk of one verse's markup tree into raw words.

The walk is a generator: words come out in document order, and the only
state besides the output is the ``inside_qere`` flag, passed down by value
so it covers exactly the subtree of an admitted qere reading.

Child keys with a special meaning are dispatched through ``CHILD_ROLES``:

- ``catchWord``: a cross-reference echo of the ketiv text, never walked
- ``rdg``: an alternate reading, walked only when admitted
- ``note``: apparatus; only its nested readings are considered

Every other child key is walked as ordinary content.
"""
from enum import Enum

from .hebrew import tokenize
from .markup import Element, NodeList, Text, iter_nodes
from .models import RawWord
from .strongs import extract_strongs
from .variants import admitted_readings, is_segment, word_variant


class ChildRole(Enum):
    WALK = "walk"
    SKIP = "skip"
    READING = "reading"
    NOTE = "note"


CHILD_ROLES = {
    "catchWord": ChildRole.SKIP,
    "rdg": ChildRole.READING,
    "note": ChildRole.NOTE,
}

SOURCE_ATTRS = ("lemma", "morph", "type")


def walk_verse(node, strip_marks: bool = False) -> list[RawWord]:
    """Walk a verse subtree and return its raw words in document order."""
    return list(_walk(node, False, strip_marks))


def _walk(node, inside_qere: bool, strip_marks: bool):
    if isinstance(node, Text):
        # bare text has no attributes, so it never carries a variant
        for token in tokenize(node.value, strip_marks):
            yield RawWord(text=token)
    elif isinstance(node, NodeList):
        for item in node.items:
            yield from _walk(item, inside_qere, strip_marks)
    elif isinstance(node, Element):
        yield from _walk_element(node, inside_qere, strip_marks)


def _walk_element(elem: Element, inside_qere: bool, strip_marks: bool):
    elem_type = elem.get("type")

    if elem.text:
        if is_segment(elem_type):
            return
        yield from _element_words(elem, elem_type, inside_qere, strip_marks)

    for key, child in elem.children:
        role = CHILD_ROLES.get(key, ChildRole.WALK)
        if role is ChildRole.SKIP:
            continue
        if role is ChildRole.READING:
            yield from _walk_readings(child, strip_marks)
        elif role is ChildRole.NOTE:
            for note in iter_nodes(child):
                if isinstance(note, Element):
                    for rdg in note.children_of("rdg"):
                        yield from _walk_readings(rdg, strip_marks)
        else:
            yield from _walk(child, inside_qere, strip_marks)


def _walk_readings(node, strip_marks: bool):
    for rdg in admitted_readings(node):
        yield from _walk(rdg, True, strip_marks)


def _element_words(elem: Element, elem_type, inside_qere: bool, strip_marks: bool):
    lemma = elem.get("lemma") or None
    morph = elem.get("morph") or None
    strongs = tuple(extract_strongs(lemma))
    variant = word_variant(elem_type, inside_qere)
    source = {name: elem.get(name) for name in SOURCE_ATTRS if elem.get(name)}

    for token in tokenize(elem.text, strip_marks):
        yield RawWord(
            text=token,
            lemma=lemma,
            morph=morph,
            strongs=strongs,
            variant=variant,
            source=source,
        )
