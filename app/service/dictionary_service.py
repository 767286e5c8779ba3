from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Protocol

from app.models.word import DictionaryEntry
from app.service.storage import KeyValueStore
from app.service.translation_index import MergePolicy, TranslationIndex, build_index

logger = logging.getLogger(__name__)

DEFAULT_CACHE_KEY = "dictionaryCache"


class DictionaryUnavailable(Exception):
    pass


class WordSource(Protocol):
    def list_words(self) -> List[DictionaryEntry]: ...


@dataclass(frozen=True)
class DictionarySnapshot:
    entries: tuple[DictionaryEntry, ...]
    index: TranslationIndex


_EMPTY = DictionarySnapshot(entries=(), index=TranslationIndex.empty())


class DictionaryService:
    """Owns the current dictionary snapshot.

    Readers grab ``snapshot`` without locking; refresh builds a complete new
    snapshot and swaps the reference, so a reader never sees a half-built index.
    """

    def __init__(
        self,
        source: WordSource,
        cache: KeyValueStore | None = None,
        cache_key: str = DEFAULT_CACHE_KEY,
        policy: MergePolicy = MergePolicy.LAST_WINS,
    ):
        self.source = source
        self.cache = cache
        self.cache_key = cache_key
        self.policy = policy
        self.error: Optional[str] = None
        self._snapshot = _EMPTY
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> DictionarySnapshot:
        return self._snapshot

    @property
    def index(self) -> TranslationIndex:
        return self._snapshot.index

    @property
    def is_ready(self) -> bool:
        return self._loaded

    def entries(self) -> List[DictionaryEntry]:
        return list(self._snapshot.entries)

    def load(self) -> DictionarySnapshot:
        """Refresh from the source, falling back to the cached word list if the source fails."""
        try:
            return self.refresh()
        except DictionaryUnavailable:
            cached = self._read_cache()
            if cached is None:
                raise
            logger.warning("Using cached dictionary (%d entries) after refresh failure.", len(cached))
            return self._swap(cached)

    def refresh(self) -> DictionarySnapshot:
        try:
            entries = self.source.list_words()
        except Exception as e:
            self.error = f"Failed to fetch words: {e}"
            logger.error("Dictionary refresh failed: %s", e)
            raise DictionaryUnavailable(self.error) from e

        self._write_cache(entries)
        snapshot = self._swap(entries)
        logger.info("Dictionary refreshed: %d entries, index %r.", len(entries), snapshot.index)
        return snapshot

    def _swap(self, entries: List[DictionaryEntry]) -> DictionarySnapshot:
        snapshot = DictionarySnapshot(entries=tuple(entries), index=build_index(entries, self.policy))
        with self._lock:
            self._snapshot = snapshot
            self._loaded = True
            self.error = None
        return snapshot

    def _read_cache(self) -> Optional[List[DictionaryEntry]]:
        if self.cache is None:
            return None
        raw = self.cache.get_item(self.cache_key)
        if not raw:
            return None
        try:
            data = json.loads(raw)
            words = data["words"]
            if not isinstance(words, list):
                raise ValueError("'words' is not a list")
            return [DictionaryEntry.from_dict(w) for w in words]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable dictionary cache: %s", e)
            return None

    def _write_cache(self, entries: List[DictionaryEntry]) -> None:
        if self.cache is None:
            return
        payload = json.dumps({"words": [e.to_dict() for e in entries]}, ensure_ascii=False)
        self.cache.set_item(self.cache_key, payload)
