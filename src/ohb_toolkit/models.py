"""
Word and verse records produced by the transform.
"""
from dataclasses import dataclass, field


KETIV = "ketiv"
QERE = "qere"


@dataclass(frozen=True)
class RawWord:
    """A word as emitted by the tree walk, before filtering and numbering."""

    text: str
    lemma: str | None = None
    morph: str | None = None
    strongs: tuple[str, ...] = ()
    variant: str | None = None
    source: dict = field(default_factory=dict)


@dataclass(frozen=True)
class WordEntry:
    position: int
    text: str
    lemma: str | None = None
    morph: str | None = None
    strongs: tuple[str, ...] = ()
    variant: str | None = None
    metadata: dict = field(default_factory=dict)
    source: dict = field(default_factory=dict)
    gematria: dict | None = None

    @property
    def is_prefix_only(self) -> bool:
        return bool(self.metadata.get("isPrefixOnly"))

    def to_dict(self) -> dict:
        """JSON shape stored per word; empty optional fields are omitted."""
        data = {
            "position": self.position,
            "text": self.text,
            "lemma": self.lemma,
            "morph": self.morph,
        }
        if self.strongs:
            data["strongs"] = list(self.strongs)
        if self.variant:
            data["variant"] = self.variant
        data["metadata"] = dict(self.metadata)
        if self.source:
            data["source"] = dict(self.source)
        if self.gematria is not None:
            data["gematria"] = dict(self.gematria)
        return data


@dataclass(frozen=True)
class VerseData:
    text: str
    words: list[WordEntry]
    gematria: dict | None = None

    def to_dict(self) -> dict:
        data = {
            "text": self.text,
            "words": [w.to_dict() for w in self.words],
        }
        if self.gematria is not None:
            data["gematria"] = dict(self.gematria)
        return data
