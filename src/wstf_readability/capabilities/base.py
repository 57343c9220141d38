from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models import Sentence, WordToken


class SentenceSplitter(ABC):
    """
    Splits a text into ordered, non-overlapping sentence spans.

    Implementations must be deterministic and safe for concurrent read-only use.
    """

    @abstractmethod
    def split(self, text: str) -> List[Sentence]:
        raise NotImplementedError


class WordSegmenter(ABC):
    """Splits a sentence into tokens tagged with a TokenKind."""

    @abstractmethod
    def segment(self, sentence_text: str) -> List[WordToken]:
        raise NotImplementedError


class Hyphenator(ABC):
    """
    Splits a word into syllable fragments whose concatenation is the word.

    Implementations must be deterministic and safe for concurrent read-only use.
    """

    @abstractmethod
    def hyphenate(self, word: str) -> List[str]:
        raise NotImplementedError
