from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Tuple

from .capabilities import (
    Hyphenator,
    PunktSentenceSplitter,
    PyphenHyphenator,
    SentenceSplitter,
    WordSegmenter,
)
from .errors import UnsupportedLanguage
from .tokenization import RegexWordSegmenter

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .config import ReadabilityConfig

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageResources:
    """Names of the resources backing one supported language."""

    code: str
    punkt_language: str
    hyphenation_language: str
    aliases: Tuple[str, ...] = ()


LANGUAGE_TABLE: Dict[str, LanguageResources] = {
    "de": LanguageResources(
        code="de",
        punkt_language="german",
        hyphenation_language="de_DE",
        aliases=("german", "deutsch"),
    ),
}


def _normalize_tag(language: str) -> str:
    return language.strip().lower().replace("_", "-")


def _matches(code: str, aliases: Tuple[str, ...], language: str) -> bool:
    tag = _normalize_tag(language)
    if not tag:
        return False
    if tag == code or tag in aliases:
        return True
    return tag.split("-", 1)[0] == code


@dataclass(frozen=True, slots=True)
class LanguageProfile:
    """A language bound to its sentence splitter, word segmenter and hyphenator."""

    code: str
    sentence_splitter: SentenceSplitter
    word_segmenter: WordSegmenter
    hyphenator: Hyphenator
    aliases: Tuple[str, ...] = ()

    def matches(self, language: str) -> bool:
        """Return True for the code, an alias, or a region tag such as 'de-AT'."""
        return _matches(self.code, self.aliases, language)


def supported_languages() -> List[str]:
    return sorted(LANGUAGE_TABLE)


def resolve_language(language: str) -> LanguageResources:
    """Find the table entry for a language code, alias or region tag."""
    for resources in LANGUAGE_TABLE.values():
        if _matches(resources.code, resources.aliases, language):
            return resources
    raise UnsupportedLanguage(
        f"Language '{language}' is not supported. "
        f"Supported languages: {', '.join(supported_languages())}."
    )


def load_language_profile(
    language: str, config: "ReadabilityConfig | None" = None
) -> LanguageProfile:
    """
    Load the sentence model and hyphenation patterns for a language.

    Missing or malformed resources raise ResourceLoadError; a profile is only
    returned once every resource has loaded.
    """
    resources = resolve_language(language)
    punkt_model_path = config.punkt_model_path if config else None
    hyphenation_path = config.hyphenation_path if config else None
    left = config.hyphenation_left_min if config else 2
    right = config.hyphenation_right_min if config else 2

    if punkt_model_path:
        splitter = PunktSentenceSplitter.from_directory(punkt_model_path)
    else:
        splitter = PunktSentenceSplitter.from_language(resources.punkt_language)

    if hyphenation_path:
        hyphenator = PyphenHyphenator.from_file(hyphenation_path, left=left, right=right)
    else:
        hyphenator = PyphenHyphenator.from_language(
            resources.hyphenation_language, left=left, right=right
        )

    LOGGER.info("Language profile '%s' ready", resources.code)
    return LanguageProfile(
        code=resources.code,
        sentence_splitter=splitter,
        word_segmenter=RegexWordSegmenter(),
        hyphenator=hyphenator,
        aliases=resources.aliases,
    )
