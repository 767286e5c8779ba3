from __future__ import annotations
import secrets
from pathlib import Path
from typing import Tuple
from fastapi import Request
from fastapi.templating import Jinja2Templates
from fastapi.responses import Response
from app.config import settings
from app.data.kv_repo import KeyValueRepo
from app.data.word_file import WordFileSource
from app.data.word_repo import WordRepo
from app.service.dictionary_service import DictionaryService, WordSource
from app.service.history_service import HistoryManager
from app.service.sentence_service import SentenceTranslator
from app.service.storage import SqliteStore
from app.service.translation_index import MergePolicy

WEB_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))

kv_repo = KeyValueRepo()
word_repo = WordRepo()

def _word_source() -> WordSource:
    if settings.DICT_SOURCE == "file":
        return WordFileSource(settings.WORDS_JSON_PATH)
    return word_repo

dictionary_service = DictionaryService(
    _word_source(),
    cache=SqliteStore(kv_repo),
    cache_key=settings.DICTIONARY_CACHE_KEY,
    policy=MergePolicy(settings.INDEX_MERGE_POLICY),
)
sentence_translator = SentenceTranslator(settings.SENTENCE_SERVICE_URL, timeout=settings.SENTENCE_TIMEOUT)

def get_client_id(request: Request) -> Tuple[str, bool]:
    """Return (client_id, is_new). New ids must be sent back with remember_client()."""
    token = request.cookies.get(settings.CLIENT_COOKIE_NAME)
    if token:
        return token, False
    return secrets.token_urlsafe(16), True

def remember_client(response: Response, client_id: str, is_new: bool) -> Response:
    if is_new:
        response.set_cookie(settings.CLIENT_COOKIE_NAME, client_id, max_age=60 * 60 * 24 * 365, httponly=True, samesite="lax")
    return response

def get_history(client_id: str) -> HistoryManager:
    store = SqliteStore(kv_repo, scope=f"client:{client_id}")
    return HistoryManager(store, key=settings.HISTORY_STORAGE_KEY, limit=settings.HISTORY_LIMIT)
