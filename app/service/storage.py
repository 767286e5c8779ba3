from __future__ import annotations

from typing import Optional, Protocol

from app.data.kv_repo import KeyValueRepo

GLOBAL_SCOPE = "global"


class KeyValueStore(Protocol):
    """Durable string storage, the server-side stand-in for browser localStorage."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class SqliteStore:
    """KeyValueStore over the kv_store table, isolated per scope (one scope per client)."""

    def __init__(self, repo: KeyValueRepo, scope: str = GLOBAL_SCOPE):
        self.repo = repo
        self.scope = scope

    def get_item(self, key: str) -> Optional[str]:
        return self.repo.get(self.scope, key)

    def set_item(self, key: str, value: str) -> None:
        self.repo.set(self.scope, key, value)
