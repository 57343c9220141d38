from wstf_readability.models import TokenKind
from wstf_readability.tokenization import RegexWordSegmenter, tokenize_words


def test_tokenize_words_returns_offsets():
    text = "Der Hund läuft, geht's weiter?"
    tokens = tokenize_words(text)

    assert [token.text for token in tokens] == ["Der", "Hund", "läuft", "geht's", "weiter"]
    assert tokens[0].start_char == 0
    assert tokens[0].end_char == 3
    assert text[tokens[2].start_char : tokens[2].end_char] == "läuft"


def test_segmenter_tags_every_token_kind():
    tokens = RegexWordSegmenter().segment("Am 3.5. kam z.B. Jörg!")
    kinds = [(token.text, token.kind) for token in tokens]

    assert ("Am", TokenKind.LETTER) in kinds
    assert ("3.5", TokenKind.NUMBER) in kinds
    assert ("z.B", TokenKind.LETTER) in kinds
    assert ("Jörg", TokenKind.LETTER) in kinds
    assert ("!", TokenKind.OTHER) in kinds
    assert all(token.text.strip() for token in tokens)


def test_only_letter_tokens_are_words():
    tokens = RegexWordSegmenter().segment("1999 - Straße")
    assert [token.is_word for token in tokens] == [False, False, True]
