from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from app.data.word_file import entry_from_row, read_rows
from app.data.word_repo import WordRepo

logger = logging.getLogger(__name__)


class WordImportService:
    """Loads words.json rows into the words table.

    Rows are inserted one at a time; a failing row is logged and skipped.
    """

    def __init__(self, repo: WordRepo):
        self.repo = repo

    def import_rows(self, rows: list[dict]) -> int:
        inserted = 0
        total = len(rows)
        for i, row in enumerate(rows):
            entry = entry_from_row(row)
            label = entry.english or entry.ju_hoansi or f"Entry {i + 1}"
            if not (entry.english or entry.ju_hoansi or entry.afrikaans):
                logger.warning("(%d/%d) Skipped empty row.", i + 1, total)
                continue
            try:
                self.repo.insert(entry.id or None, entry.english or None, entry.ju_hoansi or None, entry.afrikaans or None)
            except sqlite3.Error as e:
                logger.error("Failed to insert word (%s): %s", label, e)
                continue
            inserted += 1
            logger.debug("(%d/%d) Inserted: %s", i + 1, total, label)
        logger.info("Imported %d of %d words.", inserted, total)
        return inserted

    def import_file(self, path: Path, replace: bool = False) -> int:
        rows = read_rows(path)
        if replace:
            self.repo.delete_all()
        return self.import_rows(rows)

    def seed_if_empty(self, path: Path) -> int:
        if self.repo.count() > 0:
            return 0
        if not path.exists():
            logger.warning("Words table is empty and %s does not exist; nothing to seed.", path)
            return 0
        logger.info("Seeding words table from %s", path)
        return self.import_file(path)
