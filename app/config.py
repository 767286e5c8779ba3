from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent
MERGE_POLICIES = {"first", "last"}

def _env(key: str, default: str) -> str:
    v = os.getenv(key)
    return default if v is None else v

def _env_bool(key: str, default: bool) -> bool:
    v = os.getenv(key)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}

@dataclass(frozen=True)
class Settings:
    DB_PATH: Path = field(default_factory=lambda: Path(_env("TRANSLATOR_DB_PATH", str(_ROOT / "app.db"))))
    WORDS_JSON_PATH: Path = field(default_factory=lambda: Path(_env("TRANSLATOR_WORDS_JSON", str(_ROOT / "data" / "words.json"))))
    DICT_SOURCE: str = field(default_factory=lambda: _env("TRANSLATOR_DICT_SOURCE", "db"))
    SEED_ON_STARTUP: bool = field(default_factory=lambda: _env_bool("TRANSLATOR_SEED_ON_STARTUP", True))
    SENTENCE_SERVICE_URL: str = field(default_factory=lambda: _env("TRANSLATOR_SENTENCE_URL", "http://127.0.0.1:8000/translate"))
    SENTENCE_TIMEOUT: float = field(default_factory=lambda: float(_env("TRANSLATOR_SENTENCE_TIMEOUT", "30")))
    INDEX_MERGE_POLICY: str = field(default_factory=lambda: _env("TRANSLATOR_MERGE_POLICY", "last"))
    LOG_LEVEL: str = field(default_factory=lambda: _env("TRANSLATOR_LOG_LEVEL", "INFO"))
    HISTORY_LIMIT: int = 10
    MAX_TEXT_LENGTH: int = 5000
    CLIENT_COOKIE_NAME: str = "translator_client"
    HISTORY_STORAGE_KEY: str = "translatorAppHistory"
    DICTIONARY_CACHE_KEY: str = "dictionaryCache"

    def __post_init__(self) -> None:
        if self.INDEX_MERGE_POLICY not in MERGE_POLICIES:
            raise ValueError(
                f"TRANSLATOR_MERGE_POLICY must be one of {sorted(MERGE_POLICIES)}, got {self.INDEX_MERGE_POLICY!r}."
            )

settings = Settings()
