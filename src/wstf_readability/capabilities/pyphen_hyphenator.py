from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

import pyphen

from ..errors import ResourceLoadError
from .base import Hyphenator

LOGGER = logging.getLogger(__name__)


class PyphenHyphenator(Hyphenator):
    """
    Hyphenator backed by a pyphen (TeX/Hunspell) pattern dictionary.

    pyphen only memoizes results after loading, so concurrent reads are safe.
    """

    def __init__(self, dictionary: Any) -> None:
        if not hasattr(dictionary, "positions"):
            raise TypeError("dictionary must provide positions(word).")
        self._dictionary = dictionary

    @classmethod
    def from_language(
        cls, language: str, *, left: int = 2, right: int = 2
    ) -> "PyphenHyphenator":
        """Load one of the pattern tables bundled with pyphen (e.g. 'de_DE')."""
        if pyphen.language_fallback(language) is None:
            raise ResourceLoadError(
                f"No hyphenation patterns bundled for '{language}'."
            )
        try:
            dictionary = pyphen.Pyphen(lang=language, left=left, right=right)
        except (LookupError, OSError, ValueError) as exc:
            raise ResourceLoadError(
                f"Hyphenation patterns for '{language}' could not be loaded: {exc}"
            ) from exc
        LOGGER.info("Loaded hyphenation patterns '%s'", language)
        return cls(dictionary)

    @classmethod
    def from_file(
        cls, path: str | Path, *, left: int = 2, right: int = 2
    ) -> "PyphenHyphenator":
        """Load a hyphenation pattern table from a .dic file."""
        pattern_path = Path(path)
        if not pattern_path.is_file():
            raise ResourceLoadError(f"Hyphenation pattern file not found: {pattern_path}")
        try:
            dictionary = pyphen.Pyphen(filename=str(pattern_path), left=left, right=right)
        except (LookupError, OSError, ValueError) as exc:
            raise ResourceLoadError(
                f"Hyphenation pattern file {pattern_path} is malformed: {exc}"
            ) from exc
        LOGGER.info("Loaded hyphenation patterns from %s", pattern_path)
        return cls(dictionary)

    def hyphenate(self, word: str) -> List[str]:
        if not word:
            return []
        positions = [int(position) for position in self._dictionary.positions(word)]
        bounds = [0, *positions, len(word)]
        return [
            word[start:end] for start, end in zip(bounds, bounds[1:]) if end > start
        ]
