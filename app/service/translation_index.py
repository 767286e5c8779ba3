from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from app.models.word import LANGUAGES, DictionaryEntry

logger = logging.getLogger(__name__)


class MergePolicy(str, Enum):
    """How a word that appears in several entries is resolved.

    The policy is applied per target language and to all three buckets alike.
    An empty value never overwrites a non-empty one.
    """
    FIRST_WINS = "first"
    LAST_WINS = "last"


class TranslationIndex:
    """Read-only lookup: language -> lower-cased word -> {other language: word}.

    Instances are never mutated after construction; a dictionary refresh
    builds a new one.
    """

    def __init__(self, buckets: Mapping[str, Mapping[str, Mapping[str, str]]], entry_count: int = 0):
        self._buckets = MappingProxyType({
            lang: MappingProxyType({w: MappingProxyType(dict(t)) for w, t in words.items()})
            for lang, words in buckets.items()
        })
        self.entry_count = entry_count

    @classmethod
    def empty(cls) -> "TranslationIndex":
        return cls({})

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._buckets.keys())

    def has_language(self, lang: str) -> bool:
        return lang in self._buckets

    def bucket(self, lang: str) -> Optional[Mapping[str, Mapping[str, str]]]:
        return self._buckets.get(lang)

    def lookup(self, lang: str, word: str) -> Optional[Mapping[str, str]]:
        words = self._buckets.get(lang)
        if words is None:
            return None
        return words.get(word.lower())

    def word_count(self, lang: str) -> int:
        return len(self._buckets.get(lang, {}))

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        counts = ", ".join(f"{lang}={len(words)}" for lang, words in self._buckets.items())
        return f"TranslationIndex({counts})"


def build_index(entries: Iterable[DictionaryEntry], policy: MergePolicy = MergePolicy.LAST_WINS) -> TranslationIndex:
    buckets: dict[str, dict[str, dict[str, str]]] = {}
    count = 0
    for entry in entries:
        count += 1
        for lang in LANGUAGES:
            word = entry.word(lang).strip()
            if not word:
                continue
            slot = buckets.setdefault(lang, {}).setdefault(word.lower(), {})
            for other in LANGUAGES:
                if other == lang:
                    continue
                value = entry.word(other)
                if not value.strip():
                    continue
                if policy is MergePolicy.LAST_WINS or other not in slot:
                    slot[other] = value

    if count == 0:
        logger.warning("Dictionary is empty; translation index will be empty.")
    return TranslationIndex(buckets, entry_count=count)
