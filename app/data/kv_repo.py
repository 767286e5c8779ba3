from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from app.db.database import get_conn

class KeyValueRepo:
    """String values keyed by (scope, key). Scope is a client id or "global"."""

    def get(self, scope: str, key: str) -> Optional[str]:
        with get_conn() as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE scope = ? AND key = ?",
                (scope, key),
            ).fetchone()
        if not row:
            return None
        return row["value"]

    def set(self, scope: str, key: str, value: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with get_conn() as conn:
            conn.execute(
                """INSERT INTO kv_store (scope, key, value, updated_at)
                     VALUES (?, ?, ?, ?)
                     ON CONFLICT(scope, key)
                     DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at""",
                (scope, key, value, now),
            )

