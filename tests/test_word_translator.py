import re

import pytest

from app.models.word import DictionaryEntry
from app.service.translation_index import TranslationIndex, build_index
from app.service.word_translator import tokenize, translate


@pytest.fixture
def water_index():
    return build_index([DictionaryEntry(id="1", english="water", ju_hoansi="glu", afrikaans="water")])


def test_translates_case_insensitively(water_index) -> None:
    assert translate("Water", "english", "ju_hoansi", water_index) == "glu"


def test_unknown_word_is_kept_as_typed(water_index) -> None:
    assert translate("Fire", "english", "afrikaans", water_index) == "Fire"


def test_known_word_without_target_gets_marker() -> None:
    index = build_index([DictionaryEntry(id="1", english="fire", ju_hoansi="da'a", afrikaans="")])

    assert translate("fire", "english", "afrikaans", index) == "fire (*no afrikaans translation)"
    assert translate("Fire water", "english", "afrikaans", index) == "Fire (*no afrikaans translation) water"


def test_empty_dictionary_returns_input_unchanged() -> None:
    assert translate("anything", "english", "afrikaans", build_index([])) == "anything"
    assert translate("anything", "english", "afrikaans", TranslationIndex.empty()) == "anything"


@pytest.mark.parametrize("text", ["", "water", "  Water  fire\n", "glu\tglu"])
def test_same_language_is_identity(water_index, text) -> None:
    for lang in ("english", "ju_hoansi", "afrikaans"):
        assert translate(text, lang, lang, water_index) == text


def test_missing_language_codes_return_input(water_index) -> None:
    assert translate("water", "", "ju_hoansi", water_index) == "water"
    assert translate("water", "english", "", water_index) == "water"


def test_whitespace_runs_are_preserved(water_index) -> None:
    text = "  water \t\tWATER\n\nfire   "
    out = translate(text, "english", "ju_hoansi", water_index)

    assert out == "  glu \t\tglu\n\nfire   "
    assert re.findall(r"\s+", out) == re.findall(r"\s+", text)


def test_dictionary_casing_is_used_verbatim() -> None:
    index = build_index([DictionaryEntry(id="1", english="elephant", ju_hoansi="Ιχό", afrikaans="olifant")])

    assert translate("ELEPHANT", "english", "ju_hoansi", index) == "Ιχό"
    assert translate("ιχό", "ju_hoansi", "english", index) == "elephant"


def test_round_trip_for_unambiguous_words(sample_entries) -> None:
    index = build_index(sample_entries)

    assert translate("fire", "english", "ju_hoansi", index) == "da'a"
    assert translate("father", "english", "ju_hoansi", index) == "ba"
    assert translate("ba", "ju_hoansi", "afrikaans", index) == "pa"


def test_tokenize_reassembles_exactly() -> None:
    text = " a  b\tc "
    assert "".join(tokenize(text)) == text
    assert tokenize("a b") == ["a", " ", "b"]
