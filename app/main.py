from __future__ import annotations
import logging
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.db.database import init_db
from app.service.dictionary_service import DictionaryUnavailable
from app.service.word_import_service import WordImportService
from app.web.dependencies import WEB_DIR, dictionary_service, word_repo
from app.web.routers import api, history, translator

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Ju/'hoansi Multilingual Translator")

@app.on_event("startup")
def on_startup() -> None:
    init_db()
    if settings.SEED_ON_STARTUP and settings.DICT_SOURCE == "db":
        WordImportService(word_repo).seed_if_empty(settings.WORDS_JSON_PATH)
    try:
        dictionary_service.load()
    except DictionaryUnavailable as e:
        logger.error("Starting without a dictionary: %s", e)

app.mount("/static", StaticFiles(directory=str(WEB_DIR / "static")), name="static")

app.include_router(translator.router)
app.include_router(history.router)
app.include_router(api.router)
