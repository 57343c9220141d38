from __future__ import annotations

from .base import Hyphenator, SentenceSplitter, WordSegmenter
from .callables import CallableHyphenator, CallableSentenceSplitter
from .punkt_splitter import PunktSentenceSplitter
from .pyphen_hyphenator import PyphenHyphenator

__all__ = [
    "SentenceSplitter",
    "WordSegmenter",
    "Hyphenator",
    "CallableSentenceSplitter",
    "CallableHyphenator",
    "PunktSentenceSplitter",
    "PyphenHyphenator",
]
