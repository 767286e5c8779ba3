from __future__ import annotations
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.models.word import ENGLISH, JU_HOANSI, LANGUAGES
from app.service.dictionary_service import DictionaryUnavailable
from app.service.sentence_service import SentenceServiceFailure, SentenceServiceTimeout
from app.service.word_translator import translate
from app.web.dependencies import dictionary_service, get_client_id, get_history, remember_client, sentence_translator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class SentenceRequest(BaseModel):
    input: str = ""


@router.get("/words")
def list_words():
    """All dictionary entries, English-alphabetical, as {id, english, ju_hoansi, afrikaans}."""
    if not dictionary_service.is_ready:
        try:
            dictionary_service.refresh()
        except DictionaryUnavailable:
            return JSONResponse({"error": "Failed to fetch words."}, status_code=500)
    return {"words": [e.to_dict() for e in dictionary_service.entries()]}


@router.post("/sentences")
def translate_sentence(body: SentenceRequest):
    try:
        translation = sentence_translator.translate_sentence(body.input)
    except SentenceServiceTimeout:
        return JSONResponse({"error": "Translation service timed out."}, status_code=504)
    except SentenceServiceFailure as e:
        logger.error("Translation API error: %s", e)
        return JSONResponse({"error": "Failed to translate sentence."}, status_code=500)
    return {"translation": translation}


@router.get("/translate")
def translate_words(text: str = "", source: str = ENGLISH, target: str = JU_HOANSI):
    if source not in LANGUAGES or target not in LANGUAGES:
        return JSONResponse({"error": "Unknown language."}, status_code=400)
    if not dictionary_service.is_ready:
        return JSONResponse({"error": dictionary_service.error or "Dictionary is not loaded."}, status_code=503)
    return {"translation": translate(text, source, target, dictionary_service.index)}


@router.get("/history")
def list_history(request: Request):
    client_id, is_new = get_client_id(request)
    entries = get_history(client_id).entries
    response = JSONResponse({"history": [e.to_dict() for e in entries]})
    return remember_client(response, client_id, is_new)
