from __future__ import annotations
from fastapi import APIRouter, Request, Form
from fastapi.responses import RedirectResponse

from app.models.history import HistoryDraft
from app.models.word import ENGLISH, JU_HOANSI, LANGUAGES
from app.web.dependencies import get_client_id, get_history, remember_client
from app.web.routers.translator import page_url

router = APIRouter()

def _back(client_id: str, is_new: bool, mode: str, source_lang: str, target_lang: str, text: str = ""):
    response = RedirectResponse(url=page_url(mode, source_lang, target_lang, text), status_code=303)
    return remember_client(response, client_id, is_new)

@router.post("/history/save")
def save_to_history(
    request: Request,
    original: str = Form(""),
    translated: str = Form(""),
    source_lang: str = Form(ENGLISH),
    target_lang: str = Form(JU_HOANSI),
    mode: str = Form("words"),
):
    """Commit the current translation. Blank or duplicate pairs are ignored."""
    client_id, is_new = get_client_id(request)
    if source_lang in LANGUAGES and target_lang in LANGUAGES:
        get_history(client_id).add(HistoryDraft(
            source_lang=source_lang,
            target_lang=target_lang,
            original_text=original,
            translated_text=translated,
        ))
    return _back(client_id, is_new, mode, source_lang, target_lang, original if mode == "words" else "")

@router.post("/history/{item_id}/toggle")
def toggle_item(request: Request, item_id: int, source_lang: str = Form(ENGLISH), target_lang: str = Form(JU_HOANSI), mode: str = Form("words")):
    client_id, is_new = get_client_id(request)
    get_history(client_id).toggle_saved(item_id)
    return _back(client_id, is_new, mode, source_lang, target_lang)

@router.post("/history/{item_id}/delete")
def delete_item(request: Request, item_id: int, source_lang: str = Form(ENGLISH), target_lang: str = Form(JU_HOANSI), mode: str = Form("words")):
    client_id, is_new = get_client_id(request)
    get_history(client_id).remove(item_id)
    return _back(client_id, is_new, mode, source_lang, target_lang)

@router.post("/history/clear")
def clear_all(request: Request, source_lang: str = Form(ENGLISH), target_lang: str = Form(JU_HOANSI), mode: str = Form("words")):
    client_id, is_new = get_client_id(request)
    get_history(client_id).clear()
    return _back(client_id, is_new, mode, source_lang, target_lang)
