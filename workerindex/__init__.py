"""Worker record matching: string and phonetic similarity, component matchers, scoring and matchers."""

__version__ = "0.2.0"