"""
Ketiv/qere handling and alternate-reading admission.

OSHB marks the written form with ``type="x-ketiv"`` on the word itself and
the read form inside ``<note><rdg type="x-qere">``. Accent-only
alternatives (``x-accent``) repeat an already emitted word with different
cantillation and must contribute nothing.
"""
from .markup import Element, iter_nodes
from .models import KETIV, QERE


SEGMENT_PREFIX = "x-"
KETIV_TYPE = "x-ketiv"
QERE_TYPE = "x-qere"
ACCENT_TYPE = "x-accent"

# x- types that still carry words; any other x- type is a segment marker
WORD_TYPES = frozenset({KETIV_TYPE, QERE_TYPE})

# rdg type -> followed; unknown types are not followed
READING_TYPES = {
    QERE_TYPE: True,
    ACCENT_TYPE: False,
}


def is_segment(elem_type: str | None) -> bool:
    """True for typed non-lexical segments (sof pasuq, paragraph, ...)."""
    return (
        bool(elem_type)
        and elem_type.startswith(SEGMENT_PREFIX)
        and elem_type not in WORD_TYPES
    )


def admitted_readings(node):
    """Yield the reading elements whose content belongs to the verse."""
    for rdg in iter_nodes(node):
        if isinstance(rdg, Element) and READING_TYPES.get(rdg.get("type"), False):
            yield rdg


def word_variant(elem_type: str | None, inside_qere: bool) -> str | None:
    if elem_type == KETIV_TYPE:
        return KETIV
    if inside_qere:
        return QERE
    return None
