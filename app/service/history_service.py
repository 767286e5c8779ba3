from __future__ import annotations

import json
import logging
import time
from dataclasses import replace
from typing import Callable, List, Optional

from app.models.history import HistoryDraft, HistoryEntry
from app.service.storage import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_KEY = "translatorAppHistory"
DEFAULT_LIMIT = 10


class StorageCorrupt(Exception):
    """Stored history could not be parsed."""


def _parse(raw: str) -> List[HistoryEntry]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageCorrupt(f"History is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise StorageCorrupt("History must be a JSON array.")
    try:
        return [HistoryEntry.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise StorageCorrupt(f"Malformed history item: {e}") from e


class HistoryManager:
    """Bounded, de-duplicated, newest-first translation history.

    State lives in a KeyValueStore under a single key as a JSON array and is
    rewritten after every mutation. Eviction at the limit is purely
    positional: saved entries are dropped like any other.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_HISTORY_KEY,
        limit: int = DEFAULT_LIMIT,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.key = key
        self.limit = limit
        self.clock = clock
        self._entries: List[HistoryEntry] = []
        self.load()

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def load(self) -> List[HistoryEntry]:
        raw = self.store.get_item(self.key)
        entries: List[HistoryEntry] = []
        if raw:
            try:
                entries = _parse(raw)
            except StorageCorrupt as e:
                logger.warning("Discarding stored history: %s", e)
                entries = []
        self._entries = entries[: self.limit]
        return self.entries

    def add(self, draft: HistoryDraft) -> Optional[HistoryEntry]:
        if not draft.original_text.strip() or not draft.translated_text.strip():
            return None
        if any(e.key() == draft.key() for e in self._entries):
            return None
        entry = HistoryEntry(
            id=self._next_id(),
            source_lang=draft.source_lang,
            target_lang=draft.target_lang,
            original_text=draft.original_text,
            translated_text=draft.translated_text,
            saved=False,
        )
        self._entries = [entry, *self._entries][: self.limit]
        self._persist()
        return entry

    def toggle_saved(self, entry_id: int) -> None:
        changed = False
        entries = []
        for e in self._entries:
            if e.id == entry_id:
                e = replace(e, saved=not e.saved)
                changed = True
            entries.append(e)
        if changed:
            self._entries = entries
            self._persist()

    def remove(self, entry_id: int) -> None:
        entries = [e for e in self._entries if e.id != entry_id]
        if len(entries) != len(self._entries):
            self._entries = entries
            self._persist()

    def clear(self) -> None:
        self._entries = []
        self._persist()

    def _next_id(self) -> int:
        # Millisecond timestamp, bumped past existing ids so ids stay unique and increasing.
        candidate = int(self.clock() * 1000)
        if self._entries:
            candidate = max(candidate, max(e.id for e in self._entries) + 1)
        return candidate

    def _persist(self) -> None:
        self.store.set_item(self.key, json.dumps([e.to_dict() for e in self._entries], ensure_ascii=False))
