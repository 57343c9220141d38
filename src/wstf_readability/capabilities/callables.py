from __future__ import annotations

from typing import Callable, Iterable, List

from ..models import Sentence
from .base import Hyphenator, SentenceSplitter


class CallableSentenceSplitter(SentenceSplitter):
    """Adapt a callable returning sentence strings into the SentenceSplitter interface."""

    def __init__(self, func: Callable[[str], Iterable[str]]) -> None:
        self._func = func

    def split(self, text: str) -> List[Sentence]:
        sentences: List[Sentence] = []
        cursor = 0
        for piece in self._func(text):
            if not piece.strip():
                continue
            start = text.find(piece, cursor)
            if start < 0:
                start = cursor
            end = start + len(piece)
            sentences.append(Sentence(text=piece, start_char=start, end_char=end))
            cursor = end
        return sentences


class CallableHyphenator(Hyphenator):
    """Adapt an arbitrary callable into the Hyphenator interface."""

    def __init__(self, func: Callable[[str], Iterable[str]]) -> None:
        self._func = func

    def hyphenate(self, word: str) -> List[str]:
        return [fragment for fragment in self._func(word) if fragment]
