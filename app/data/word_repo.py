from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from app.db.database import get_conn
from app.models.word import DictionaryEntry

class WordRepo:
    def list_words(self) -> List[DictionaryEntry]:
        with get_conn() as conn:
            rows = conn.execute(
                """SELECT id, original_id, english, ju_hoansi, afrikaans
                     FROM words ORDER BY english COLLATE NOCASE ASC, id ASC"""
            ).fetchall()
        return [DictionaryEntry(
            id=r["original_id"] or str(r["id"]),
            english=r["english"] or "",
            ju_hoansi=r["ju_hoansi"] or "",
            afrikaans=r["afrikaans"] or "",
        ) for r in rows]

    def count(self) -> int:
        with get_conn() as conn:
            row = conn.execute("SELECT COUNT(*) AS n FROM words").fetchone()
        return int(row["n"])

    def insert(self, original_id: str | None, english: str | None, ju_hoansi: str | None, afrikaans: str | None) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with get_conn() as conn:
            conn.execute(
                """INSERT INTO words (original_id, english, ju_hoansi, afrikaans, created_at)
                     VALUES (?, ?, ?, ?, ?)""",
                (original_id, english, ju_hoansi, afrikaans, now),
            )

    def delete_all(self) -> None:
        with get_conn() as conn:
            conn.execute("DELETE FROM words")
