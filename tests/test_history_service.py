import json
from itertools import count

import pytest

from app.models.history import HistoryDraft
from app.service.history_service import HistoryManager
from app.service.storage import MemoryStore

KEY = "translatorAppHistory"


def _clock():
    ticks = count(1_700_000_000)
    return lambda: float(next(ticks))


def _draft(n: int = 0, original: str | None = None, translated: str | None = None) -> HistoryDraft:
    return HistoryDraft(
        source_lang="english",
        target_lang="ju_hoansi",
        original_text=original if original is not None else f"word{n}",
        translated_text=translated if translated is not None else f"glu{n}",
    )


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def history(store):
    return HistoryManager(store, clock=_clock())


def test_add_prepends_and_persists(history, store) -> None:
    first = history.add(_draft(1))
    second = history.add(_draft(2))

    assert [e.id for e in history.entries] == [second.id, first.id]
    assert first.saved is False
    stored = json.loads(store.get_item(KEY))
    assert stored[0] == {
        "id": second.id, "from": "english", "to": "ju_hoansi",
        "original": "word2", "translated": "glu2", "saved": False,
    }


def test_blank_text_is_ignored(history, store) -> None:
    assert history.add(_draft(original="  ")) is None
    assert history.add(_draft(translated="\n\t")) is None
    assert history.entries == []
    assert store.get_item(KEY) is None


def test_duplicates_anywhere_are_ignored(history) -> None:
    history.add(_draft(1))
    history.add(_draft(2))
    assert history.add(_draft(1)) is None
    assert len(history.entries) == 2

    other_pair = HistoryDraft("english", "afrikaans", "word1", "glu1")
    assert history.add(other_pair) is not None


def test_identical_adds_yield_one_entry(history) -> None:
    history.add(_draft(7))
    history.add(_draft(7))
    assert len(history.entries) == 1


def test_capped_at_ten_most_recent(history) -> None:
    for n in range(15):
        history.add(_draft(n))

    entries = history.entries
    assert len(entries) == 10
    assert [e.original_text for e in entries] == [f"word{n}" for n in range(14, 4, -1)]


def test_eviction_ignores_saved_flag(history) -> None:
    oldest = history.add(_draft(0))
    history.toggle_saved(oldest.id)
    for n in range(1, 11):
        history.add(_draft(n))

    assert oldest.id not in [e.id for e in history.entries]


def test_ids_are_monotonic_even_with_a_stuck_clock(store) -> None:
    history = HistoryManager(store, clock=lambda: 1.0)
    a = history.add(_draft(1))
    b = history.add(_draft(2))
    assert b.id > a.id


def test_toggle_saved(history, store) -> None:
    entry = history.add(_draft(1))

    history.toggle_saved(entry.id)
    assert history.entries[0].saved is True
    assert json.loads(store.get_item(KEY))[0]["saved"] is True

    history.toggle_saved(entry.id)
    assert history.entries[0].saved is False


def test_toggle_and_remove_unknown_id_are_noops(history, store) -> None:
    history.add(_draft(1))
    before = store.get_item(KEY)

    history.toggle_saved(42)
    history.remove(42)

    assert store.get_item(KEY) == before
    assert len(history.entries) == 1


def test_remove(history, store) -> None:
    a = history.add(_draft(1))
    b = history.add(_draft(2))

    history.remove(a.id)

    assert [e.id for e in history.entries] == [b.id]
    assert [e["id"] for e in json.loads(store.get_item(KEY))] == [b.id]


def test_clear(history, store) -> None:
    history.add(_draft(1))
    history.clear()
    assert history.entries == []
    assert store.get_item(KEY) == "[]"


def test_state_survives_a_new_session(store) -> None:
    first = HistoryManager(store, clock=_clock())
    entry = first.add(_draft(1))
    first.toggle_saved(entry.id)

    second = HistoryManager(store)
    assert second.entries == first.entries
    assert second.entries[0].saved is True


@pytest.mark.parametrize("raw", [
    "not json",
    '{"id": 1}',
    '[{"id": 1}]',
    '[1, 2, 3]',
    '[{"id": "x", "from": "english", "to": "afrikaans", "original": "a", "translated": "b"}]',
])
def test_corrupt_storage_loads_empty(raw) -> None:
    store = MemoryStore({KEY: raw})
    history = HistoryManager(store)

    assert history.load() == []
    assert history.entries == []


def test_reads_browser_format_snapshot() -> None:
    raw = json.dumps([
        {"id": 1717000000000, "from": "afrikaans", "to": "english", "original": "vuur", "translated": "fire", "saved": True},
    ])
    history = HistoryManager(MemoryStore({KEY: raw}))

    entry = history.entries[0]
    assert entry.source_lang == "afrikaans"
    assert entry.translated_text == "fire"
    assert entry.saved is True
