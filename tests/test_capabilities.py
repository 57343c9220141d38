from pathlib import Path

import pytest
from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer, save_punkt_params

from wstf_readability.capabilities import (
    CallableHyphenator,
    CallableSentenceSplitter,
    PunktSentenceSplitter,
    PyphenHyphenator,
)
from wstf_readability.errors import ResourceLoadError


def test_punkt_splitter_returns_spans_in_order():
    """An untrained Punkt tokenizer still breaks after full stops."""
    text = "Der Hund läuft. Die Katze schläft."
    splitter = PunktSentenceSplitter(PunktSentenceTokenizer())
    sentences = splitter.split(text)

    assert [s.text for s in sentences] == ["Der Hund läuft.", "Die Katze schläft."]
    for sentence in sentences:
        assert text[sentence.start_char : sentence.end_char] == sentence.text


def test_punkt_splitter_rejects_objects_without_spans():
    with pytest.raises(TypeError):
        PunktSentenceSplitter(object())


def test_punkt_unknown_language_fails_to_load():
    with pytest.raises(ResourceLoadError):
        PunktSentenceSplitter.from_language("klingon")


def test_punkt_missing_directory_fails_to_load(tmp_path: Path):
    with pytest.raises(ResourceLoadError):
        PunktSentenceSplitter.from_directory(tmp_path / "missing")


def test_punkt_splitter_loads_parameters_from_directory(tmp_path: Path):
    """Abbreviations stored in a punkt_tab directory suppress the break after them."""
    params = PunktParameters()
    params.abbrev_types = {"usw"}
    model_dir = tmp_path / "german"
    save_punkt_params(params, dir=str(model_dir))

    splitter = PunktSentenceSplitter.from_directory(model_dir)
    sentences = splitter.split("Wir kaufen Brot usw. und gehen heim. Dann essen wir.")

    assert [s.text for s in sentences] == [
        "Wir kaufen Brot usw. und gehen heim.",
        "Dann essen wir.",
    ]


def test_punkt_directory_without_model_files_fails_to_load(tmp_path: Path):
    with pytest.raises(ResourceLoadError):
        PunktSentenceSplitter.from_directory(tmp_path)


def test_pyphen_fragments_rebuild_the_word():
    hyphenator = PyphenHyphenator.from_language("de_DE")
    for word in ("Hund", "Katze", "Donaudampfschifffahrt", "Sachtextformel"):
        fragments = hyphenator.hyphenate(word)
        assert "".join(fragments) == word
        assert len(fragments) >= 1

    assert hyphenator.hyphenate("Hund") == ["Hund"]
    assert len(hyphenator.hyphenate("Donaudampfschifffahrt")) >= 3
    assert hyphenator.hyphenate("") == []


def test_pyphen_default_minimums_keep_single_letter_syllables_attached():
    """With two-letter minimums a leading or trailing vowel is never split off."""
    hyphenator = PyphenHyphenator.from_language("de_DE")
    for word in ("über", "Oma", "Ufer", "aber"):
        assert hyphenator.hyphenate(word) == [word]


def test_pyphen_unknown_language_fails_to_load():
    with pytest.raises(ResourceLoadError):
        PyphenHyphenator.from_language("xx_XX")


def test_pyphen_missing_pattern_file_fails_to_load(tmp_path: Path):
    with pytest.raises(ResourceLoadError):
        PyphenHyphenator.from_file(tmp_path / "hyph_de_DE.dic")


@pytest.mark.parametrize("contents", [b"", b"this is not a pattern file\n"])
def test_pyphen_malformed_pattern_file_fails_to_load(tmp_path: Path, contents: bytes):
    pattern_file = tmp_path / "hyph_de_DE.dic"
    pattern_file.write_bytes(contents)
    with pytest.raises(ResourceLoadError):
        PyphenHyphenator.from_file(pattern_file)


def test_pyphen_fragments_follow_positions():
    class FixedDictionary:
        def positions(self, word):
            return [3]

    assert PyphenHyphenator(FixedDictionary()).hyphenate("Katze") == ["Kat", "ze"]


def test_callable_adapters():
    splitter = CallableSentenceSplitter(lambda text: text.split("|"))
    sentences = splitter.split("Eins.|Zwei.| ")
    assert [(s.text, s.start_char) for s in sentences] == [("Eins.", 0), ("Zwei.", 6)]

    hyphenator = CallableHyphenator(lambda word: word.split("-"))
    assert hyphenator.hyphenate("Kat-ze") == ["Kat", "ze"]
