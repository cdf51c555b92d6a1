"""
Generic markup tree handed to the verse transform.

A node is exactly one of three shapes:

- ``Text``: a bare text leaf
- ``NodeList``: sibling nodes sharing one child key, in document order
- ``Element``: attributes, inline text and child nodes keyed by tag name

Attributes and inline text live in their own fields, so they can never be
mistaken for child elements. Consecutive siblings with the same tag become
a single ``NodeList`` entry, so a singleton and a repeated child are walked
the same way, and document order is kept across different tags.
"""
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field


ATTRIBUTE_PREFIX = "@_"
TEXT_KEY = "#text"


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class NodeList:
    items: tuple = ()


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: dict = field(default_factory=dict)
    text: str = ""
    # (child key, node) pairs in document order
    children: tuple = ()

    def get(self, name: str, default=None):
        return self.attrs.get(name, default)

    def child(self, key: str):
        for name, node in self.children:
            if name == key:
                return node
        return None

    def children_of(self, key: str):
        """Yield every node stored under key, across all of its runs."""
        for name, node in self.children:
            if name == key:
                yield from iter_nodes(node)


Node = Text | NodeList | Element


def iter_nodes(node):
    """Yield the nodes held by a single node or a NodeList."""
    if node is None:
        return
    if isinstance(node, NodeList):
        yield from node.items
    else:
        yield node


# =====================================================================
# Builders
# =====================================================================

def strip_ns(tag: str) -> str:
    return tag.split("}", 1)[-1]


def _group(pairs) -> tuple:
    """Collapse consecutive children with the same key into one NodeList."""
    runs = []
    for key, node in pairs:
        if runs and runs[-1][0] == key:
            runs[-1][1].append(node)
        else:
            runs.append((key, [node]))
    return tuple(
        (key, nodes[0] if len(nodes) == 1 else NodeList(tuple(nodes)))
        for key, nodes in runs
    )


def from_xml(el: ET.Element) -> Node:
    """Convert an ElementTree element into a markup node.

    The element text is its own text plus the tails of its children, so
    whitespace between child elements is kept. An element without
    attributes and without children collapses into a ``Text`` leaf.
    """
    attrs = {strip_ns(k): v for k, v in el.attrib.items()}
    kids = list(el)
    text = (el.text or "") + "".join(kid.tail or "" for kid in kids)

    if not attrs and not kids:
        return Text(text)

    children = _group((strip_ns(kid.tag), from_xml(kid)) for kid in kids)
    return Element(tag=strip_ns(el.tag), attrs=attrs, text=text, children=children)


def from_mapping(value, tag: str = "") -> Node:
    """Convert a parsed-XML mapping (``@_`` attributes, ``#text``) into nodes.

    Accepts the dict/list/str trees produced by attribute-preserving XML to
    JSON converters.
    """
    if isinstance(value, list):
        return NodeList(tuple(from_mapping(item, tag) for item in value))
    if isinstance(value, dict):
        attrs = {}
        text = ""
        pairs = []
        for key, child in value.items():
            if key.startswith(ATTRIBUTE_PREFIX):
                attrs[key[len(ATTRIBUTE_PREFIX):]] = str(child)
            elif key == TEXT_KEY:
                text = str(child)
            else:
                pairs.append((key, from_mapping(child, key)))
        return Element(tag=tag, attrs=attrs, text=text, children=tuple(pairs))
    if value is None:
        return Text("")
    return Text(str(value))
