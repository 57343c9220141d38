from __future__ import annotations

import re
from typing import Dict, List

from wstf_readability.capabilities.base import Hyphenator, SentenceSplitter
from wstf_readability.engine import ReadabilityEngine
from wstf_readability.languages import LanguageProfile
from wstf_readability.models import Sentence
from wstf_readability.tokenization import RegexWordSegmenter

SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*")


class PunctuationSentenceSplitter(SentenceSplitter):
    """Deterministic splitter that breaks after ., ! and ?."""

    def split(self, text: str) -> List[Sentence]:
        sentences: List[Sentence] = []
        for match in SENTENCE_RE.finditer(text):
            raw = match.group()
            stripped = raw.strip()
            if not stripped:
                continue
            start = match.start() + (len(raw) - len(raw.lstrip()))
            sentences.append(Sentence(stripped, start, start + len(stripped)))
        return sentences


class TableHyphenator(Hyphenator):
    """Hyphenates from a lookup table such as {"katze": "Kat-ze"}; unknown words are one syllable."""

    def __init__(self, table: Dict[str, str] | None = None) -> None:
        self.table = {key.lower(): value for key, value in (table or {}).items()}
        self.calls: list[str] = []

    def hyphenate(self, word: str) -> List[str]:
        self.calls.append(word)
        hyphenated = self.table.get(word.lower())
        if hyphenated is None:
            return [word]
        return hyphenated.split("-")


def make_profile(table: Dict[str, str] | None = None, code: str = "de") -> LanguageProfile:
    return LanguageProfile(
        code=code,
        sentence_splitter=PunctuationSentenceSplitter(),
        word_segmenter=RegexWordSegmenter(),
        hyphenator=TableHyphenator(table),
        aliases=("german", "deutsch"),
    )


def make_engine(table: Dict[str, str] | None = None) -> ReadabilityEngine:
    """Build an engine on stub capabilities so counts are fully predictable."""
    return ReadabilityEngine(make_profile(table))
