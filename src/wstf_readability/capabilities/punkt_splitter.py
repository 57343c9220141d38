from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

from nltk.data import FileSystemPathPointer
from nltk.tokenize.punkt import PunktSentenceTokenizer, PunktTokenizer, load_punkt_params

from ..errors import ResourceLoadError
from ..models import Sentence
from .base import SentenceSplitter

LOGGER = logging.getLogger(__name__)


class PunktSentenceSplitter(SentenceSplitter):
    """
    Sentence splitter backed by a trained nltk Punkt tokenizer.

    The Punkt parameters are only read after construction, so one instance can
    be shared between threads.
    """

    def __init__(self, tokenizer: Any) -> None:
        if not hasattr(tokenizer, "span_tokenize"):
            raise TypeError("tokenizer must provide span_tokenize(text).")
        self._tokenizer = tokenizer

    @classmethod
    def from_language(cls, language: str) -> "PunktSentenceSplitter":
        """Load the punkt_tab model for an nltk language name (e.g. 'german')."""
        try:
            tokenizer = PunktTokenizer(language)
        except LookupError as exc:
            raise ResourceLoadError(
                f"Punkt sentence model for '{language}' is not installed. "
                "Run `python -m nltk.downloader punkt_tab` or set punkt_model_path."
            ) from exc
        except (OSError, ValueError) as exc:
            raise ResourceLoadError(
                f"Punkt sentence model for '{language}' could not be read: {exc}"
            ) from exc
        LOGGER.info("Loaded Punkt sentence model '%s'", language)
        return cls(tokenizer)

    @classmethod
    def from_directory(cls, path: str | Path) -> "PunktSentenceSplitter":
        """Load Punkt parameters from a punkt_tab language directory."""
        model_dir = Path(path)
        if not model_dir.is_dir():
            raise ResourceLoadError(f"Punkt model directory not found: {model_dir}")
        try:
            params = load_punkt_params(FileSystemPathPointer(str(model_dir.resolve())))
        except (LookupError, OSError, ValueError) as exc:
            raise ResourceLoadError(
                f"Punkt model directory {model_dir} is malformed: {exc}"
            ) from exc
        LOGGER.info("Loaded Punkt sentence model from %s", model_dir)
        return cls(PunktSentenceTokenizer(params))

    def split(self, text: str) -> List[Sentence]:
        sentences: List[Sentence] = []
        for start, end in self._tokenizer.span_tokenize(text):
            sentence_text = text[start:end]
            if sentence_text.strip():
                sentences.append(Sentence(text=sentence_text, start_char=start, end_char=end))
        return sentences
