from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .errors import EmptyInput

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .formulas import FormulaVariant


@dataclass(frozen=True, slots=True)
class Sentence:
    """A sentence span and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


class TokenKind(str, Enum):
    LETTER = "letter"
    NUMBER = "number"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class WordToken:
    """A token produced by a word segmenter, tagged with its kind."""

    text: str
    kind: TokenKind
    start_char: int = 0
    end_char: int = 0

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.LETTER


@dataclass(slots=True)
class ReadabilityCounts:
    """Aggregate linguistic counts for one scored text."""

    sentences: int = 0
    words: int = 0
    polysyllabic_words: int = 0
    monosyllabic_words: int = 0
    long_words: int = 0

    def to_dict(self) -> dict[str, int]:
        return dict(asdict(self))


@dataclass(frozen=True, slots=True)
class ReadabilityMetrics:
    """
    Sub-metrics of the Wiener Sachtextformel.

    ms: percentage of words with three or more syllables.
    sl: mean sentence length in words.
    iw: percentage of words longer than six characters.
    es: percentage of words with exactly one syllable.
    """

    ms: float
    sl: float
    iw: float
    es: float

    @classmethod
    def from_counts(cls, counts: ReadabilityCounts) -> "ReadabilityMetrics":
        """Derive the document-level ratios from final totals."""
        if counts.sentences <= 0:
            raise EmptyInput("No sentences could be extracted from the text.")
        if counts.words <= 0:
            raise EmptyInput("No words could be extracted from the text.")
        words = float(counts.words)
        return cls(
            ms=100.0 * counts.polysyllabic_words / words,
            sl=words / counts.sentences,
            iw=100.0 * counts.long_words / words,
            es=100.0 * counts.monosyllabic_words / words,
        )

    def to_dict(self) -> dict[str, float]:
        return dict(asdict(self))


@dataclass(frozen=True, slots=True)
class ReadabilityResult:
    """Score of one formula variant together with the inputs that produced it."""

    variant: "FormulaVariant"
    score: float
    counts: ReadabilityCounts
    metrics: ReadabilityMetrics

    def to_dict(self) -> dict[str, Any]:
        return {
            "variant": self.variant.value,
            "score": self.score,
            "counts": self.counts.to_dict(),
            "metrics": self.metrics.to_dict(),
        }
