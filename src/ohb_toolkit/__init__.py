"""Open Scriptures Hebrew Bible toolkit: MorphHB verses to word records."""

__version__ = "0.1.0"
