from __future__ import annotations

import re
from typing import List

from .capabilities.base import WordSegmenter
from .models import TokenKind, WordToken

# Letter/digit runs may be joined by an inner apostrophe or period ("geht's",
# "z.B", "3.5"), close to the UAX #29 MidLetter/MidNumLet rules.
TOKEN_PATTERN = re.compile(
    r"(?P<word>[^\W_]+(?:['’.][^\W_]+)*)|(?P<space>\s+)|(?P<other>.)",
    re.UNICODE | re.DOTALL,
)


def classify_token(text: str) -> TokenKind:
    """Classify a token as a letter-word, a number, or anything else."""
    if any(ch.isalpha() for ch in text):
        return TokenKind.LETTER
    if any(ch.isdigit() for ch in text):
        return TokenKind.NUMBER
    return TokenKind.OTHER


class RegexWordSegmenter(WordSegmenter):
    """Unicode-aware word segmenter; whitespace runs are dropped."""

    def segment(self, sentence_text: str) -> List[WordToken]:
        tokens: List[WordToken] = []
        for match in TOKEN_PATTERN.finditer(sentence_text):
            if match.lastgroup == "space":
                continue
            text = match.group()
            tokens.append(
                WordToken(
                    text=text,
                    kind=classify_token(text),
                    start_char=match.start(),
                    end_char=match.end(),
                )
            )
        return tokens


def tokenize_words(text: str) -> List[WordToken]:
    """Return only the letter-word tokens of text, with character offsets."""
    return [token for token in RegexWordSegmenter().segment(text) if token.is_word]
