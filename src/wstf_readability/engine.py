from __future__ import annotations

import logging
import unicodedata
from typing import Dict

from .config import ReadabilityConfig, load_config
from .errors import UnsupportedLanguage
from .formulas import FormulaVariant, evaluate_formula, parse_variant
from .languages import LanguageProfile, load_language_profile
from .models import ReadabilityCounts, ReadabilityMetrics, ReadabilityResult

LOGGER = logging.getLogger(__name__)

LONG_WORD_MIN_CHARS = 7
POLYSYLLABIC_MIN_SYLLABLES = 3


class ReadabilityEngine:
    """
    Computes the Wiener Sachtextformel for texts in the bound language.

    The engine holds no per-call state, so one instance can serve concurrent
    callers as long as the profile's capabilities are read-only.
    """

    def __init__(self, profile: LanguageProfile, *, normalize_unicode: bool = True) -> None:
        self._profile = profile
        self._normalize_unicode = normalize_unicode

    @property
    def profile(self) -> LanguageProfile:
        return self._profile

    @property
    def language(self) -> str:
        return self._profile.code

    def count(self, text: str) -> ReadabilityCounts:
        """Accumulate sentence, word and syllable-bucket counts over the whole text."""
        if self._normalize_unicode:
            text = unicodedata.normalize("NFC", text)
        counts = ReadabilityCounts()
        profile = self._profile

        for sentence in profile.sentence_splitter.split(text):
            for token in profile.word_segmenter.segment(sentence.text):
                if not token.is_word:
                    continue
                syllables = len(profile.hyphenator.hyphenate(token.text))
                if syllables >= POLYSYLLABIC_MIN_SYLLABLES:
                    counts.polysyllabic_words += 1
                elif syllables == 1:
                    counts.monosyllabic_words += 1
                if len(token.text) >= LONG_WORD_MIN_CHARS:
                    counts.long_words += 1
                counts.words += 1
            counts.sentences += 1

        return counts

    def measure(self, text: str) -> ReadabilityMetrics:
        """Return MS, SL, IW and ES for the text; raises EmptyInput when nothing is countable."""
        return ReadabilityMetrics.from_counts(self.count(text))

    def evaluate(
        self,
        text: str,
        variant: FormulaVariant | str | int = FormulaVariant.WSTF1,
        language: str | None = None,
    ) -> ReadabilityResult:
        """Score the text and return the score together with its counts and metrics."""
        self._check_language(language)
        resolved = parse_variant(variant)
        counts = self.count(text)
        metrics = ReadabilityMetrics.from_counts(counts)
        score = evaluate_formula(resolved, metrics)
        LOGGER.debug(
            "Scored %s=%.4f sentences=%d words=%d polysyllabic=%d monosyllabic=%d long=%d",
            resolved.value,
            score,
            counts.sentences,
            counts.words,
            counts.polysyllabic_words,
            counts.monosyllabic_words,
            counts.long_words,
        )
        return ReadabilityResult(variant=resolved, score=score, counts=counts, metrics=metrics)

    def evaluate_all(self, text: str, language: str | None = None) -> Dict[FormulaVariant, float]:
        """Score the text under every variant from a single counting pass."""
        self._check_language(language)
        metrics = self.measure(text)
        return {variant: evaluate_formula(variant, metrics) for variant in FormulaVariant}

    def score(
        self,
        text: str,
        variant: FormulaVariant | str | int = FormulaVariant.WSTF1,
        language: str | None = None,
    ) -> float:
        """
        Return the readability score of text for one formula variant.

        Raises UnsupportedLanguage when language is given and does not match the
        bound profile, InvalidVariant for an unknown selector, and EmptyInput
        when no sentence or word could be extracted.
        """
        return self.evaluate(text, variant, language).score

    def _check_language(self, language: str | None) -> None:
        if language is None:
            return
        if not self._profile.matches(language):
            raise UnsupportedLanguage(
                f"Engine is bound to '{self._profile.code}' and cannot score "
                f"text in '{language}'."
            )


def build_engine(
    config: ReadabilityConfig | None = None, language: str | None = None
) -> ReadabilityEngine:
    """Load the configured language profile and wrap it in an engine."""
    cfg = config if config is not None else load_config()
    language = language or cfg.language
    profile = load_language_profile(language, cfg)
    return ReadabilityEngine(profile, normalize_unicode=cfg.normalize_unicode)
