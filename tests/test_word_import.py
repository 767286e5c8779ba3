import json

import pytest

from app.data.kv_repo import KeyValueRepo
from app.data.word_file import WordFileSource
from app.data.word_repo import WordRepo
from app.populate_db import main as populate_main
from app.service.storage import SqliteStore
from app.service.word_import_service import WordImportService

ROWS = [
    {"id": 150, "english_word": "water", "jul'hoan_word": "glu", "afrikaans": "water"},
    {"id": 154, "english_word": "Fire", "jul'hoan_word": "da'a", "afrikaans": None},
    {"id": 1, "english_word": "arrow", "jul'hoan_word": "tchi", "afrikaans": "pyl"},
    {},
]


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(ROWS), encoding="utf-8")
    return path


def test_file_source_maps_spreadsheet_keys(words_file) -> None:
    entries = WordFileSource(words_file).list_words()

    assert entries[0].id == "150"
    assert entries[0].ju_hoansi == "glu"
    assert entries[1].afrikaans == ""
    assert entries[3].id == "4"


def test_file_source_rejects_non_array(tmp_path) -> None:
    path = tmp_path / "words.json"
    path.write_text('{"words": []}', encoding="utf-8")

    with pytest.raises(ValueError):
        WordFileSource(path).list_words()


def test_import_skips_empty_rows_and_lists_alphabetically(scratch_db) -> None:
    repo = WordRepo()
    count = WordImportService(repo).import_rows(ROWS)

    assert count == 3
    assert repo.count() == 3
    words = repo.list_words()
    assert [w.english for w in words] == ["arrow", "Fire", "water"]
    assert words[1].id == "154"
    assert words[1].afrikaans == ""


def test_import_file_replace(scratch_db, words_file) -> None:
    repo = WordRepo()
    service = WordImportService(repo)
    service.import_file(words_file)
    service.import_file(words_file, replace=True)

    assert repo.count() == 3


def test_seed_if_empty(scratch_db, words_file, tmp_path) -> None:
    service = WordImportService(WordRepo())

    assert service.seed_if_empty(tmp_path / "missing.json") == 0
    assert service.seed_if_empty(words_file) == 3
    assert service.seed_if_empty(words_file) == 0


def test_populate_command(scratch_db, words_file, tmp_path) -> None:
    assert populate_main([str(words_file)]) == 0
    assert WordRepo().count() == 3
    assert populate_main([str(tmp_path / "nope.json")]) == 1


def test_sqlite_store_is_scoped(scratch_db) -> None:
    repo = KeyValueRepo()
    alice = SqliteStore(repo, scope="client:a")
    bob = SqliteStore(repo, scope="client:b")

    alice.set_item("translatorAppHistory", "[1]")
    alice.set_item("translatorAppHistory", "[2]")

    assert alice.get_item("translatorAppHistory") == "[2]"
    assert bob.get_item("translatorAppHistory") is None
