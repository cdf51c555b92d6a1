"""
Post-walk filtering of apparatus noise and final verse assembly.
"""
from .hebrew import has_hebrew, is_paragraph_marker
from .models import RawWord, VerseData, WordEntry
from .strongs import is_prefix_only


def is_textual_note(word: RawWord) -> bool:
    """Footnote prose (e.g. accent remarks in English) shaped like a word."""
    if word.lemma or word.morph:
        return False
    return not has_hebrew(word.text)


def is_paragraph_break(word: RawWord) -> bool:
    """Petuchah/setumah markers, written as a lone peh or samekh."""
    if word.lemma or word.morph:
        return False
    return is_paragraph_marker(word.text)


def filter_words(raw_words) -> list[WordEntry]:
    """Drop apparatus noise, renumber from 1 and flag prefix-only lemmas."""
    entries = []
    for word in raw_words:
        if is_textual_note(word) or is_paragraph_break(word):
            continue

        metadata = {}
        strongs = word.strongs
        if is_prefix_only(word.lemma):
            metadata["isPrefixOnly"] = True
            strongs = ()

        entries.append(WordEntry(
            position=len(entries) + 1,
            text=word.text,
            lemma=word.lemma,
            morph=word.morph,
            strongs=strongs,
            variant=word.variant,
            metadata=metadata,
            source=dict(word.source),
        ))
    return entries


def build_verse(raw_words) -> VerseData:
    words = filter_words(raw_words)
    return VerseData(text=" ".join(w.text for w in words), words=words)
