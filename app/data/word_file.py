from __future__ import annotations

import json
from pathlib import Path
from typing import List

from app.models.word import DictionaryEntry

# words.json rows use the spreadsheet column names.
_FILE_KEYS = {
    "english": ("english_word", "english"),
    "ju_hoansi": ("jul'hoan_word", "ju_hoansi"),
    "afrikaans": ("afrikaans",),
}


def _pick(row: dict, names: tuple[str, ...]) -> str:
    for name in names:
        v = row.get(name)
        if v:
            return str(v).strip()
    return ""


def entry_from_row(row: dict, fallback_id: str = "") -> DictionaryEntry:
    raw_id = row.get("id")
    return DictionaryEntry(
        id=str(raw_id) if raw_id not in (None, "") else fallback_id,
        english=_pick(row, _FILE_KEYS["english"]),
        ju_hoansi=_pick(row, _FILE_KEYS["ju_hoansi"]),
        afrikaans=_pick(row, _FILE_KEYS["afrikaans"]),
    )


def read_rows(path: Path) -> list[dict]:
    """Raw rows of a words.json file. Raises ValueError if it is not a JSON array of objects."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise ValueError(f"{path} must contain a JSON array of objects.")
    return data


class WordFileSource:
    """Dictionary store backed by a local words.json file."""

    def __init__(self, path: Path):
        self.path = path

    def list_words(self) -> List[DictionaryEntry]:
        rows = read_rows(self.path)
        return [entry_from_row(r, fallback_id=str(i + 1)) for i, r in enumerate(rows)]
