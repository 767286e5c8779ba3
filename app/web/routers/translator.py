from __future__ import annotations
from typing import Optional, Tuple
from urllib.parse import urlencode

from fastapi import APIRouter, Request, Form
from fastapi.responses import HTMLResponse, RedirectResponse

from app.config import settings
from app.models.word import ENGLISH, JU_HOANSI, LANGUAGES, LANGUAGE_NAMES
from app.service.dictionary_service import DictionaryUnavailable
from app.service.sentence_service import SentenceServiceFailure, SentenceServiceTimeout
from app.service.word_translator import translate
from app.web.dependencies import (
    dictionary_service, get_client_id, get_history, remember_client, sentence_translator, templates,
)

router = APIRouter()

MODES = ("words", "sentences")


def _lang(value: str | None, default: str) -> str:
    return value if value in LANGUAGES else default


def _mode(value: str | None) -> str:
    return value if value in MODES else "words"


def page_url(mode: str, source_lang: str, target_lang: str, text: str = "") -> str:
    params = {"mode": mode, "source_lang": source_lang, "target_lang": target_lang}
    if text:
        params["text"] = text
    return "/?" + urlencode(params)


def translate_words(text: str, source_lang: str, target_lang: str) -> Tuple[str, Optional[str]]:
    if not dictionary_service.is_ready:
        return "", dictionary_service.error or "Dictionary is not loaded yet."
    if not text.strip():
        return "", None
    return translate(text, source_lang, target_lang, dictionary_service.index), None


def translate_sentences(text: str) -> Tuple[str, Optional[str]]:
    if not text.strip():
        return "", None
    try:
        return sentence_translator.translate_sentence(text), None
    except SentenceServiceTimeout:
        return "", "The translation service timed out. Please try again."
    except SentenceServiceFailure as e:
        return "", f"Failed to translate sentence: {e}"


def _render(request: Request, *, mode: str, source_lang: str, target_lang: str,
            text: str = "", output: str = "", error: str | None = None, status_code: int = 200) -> HTMLResponse:
    client_id, is_new = get_client_id(request)
    history = get_history(client_id).entries
    response = templates.TemplateResponse(
        request,
        "translator.html",
        {
            "mode": mode,
            "modes": MODES,
            "languages": [(code, LANGUAGE_NAMES[code]) for code in LANGUAGES],
            "language_names": LANGUAGE_NAMES,
            "source_lang": source_lang,
            "target_lang": target_lang,
            "text": text,
            "output": output,
            "error": error,
            "dictionary_ready": dictionary_service.is_ready,
            "dictionary_error": dictionary_service.error,
            "word_count": len(dictionary_service.snapshot.entries),
            "history": history,
            "max_length": settings.MAX_TEXT_LENGTH,
        },
        status_code=status_code,
    )
    return remember_client(response, client_id, is_new)


@router.get("/", response_class=HTMLResponse)
def translator_home(request: Request, mode: str = "words", source_lang: str = ENGLISH,
                    target_lang: str = JU_HOANSI, text: str = ""):
    """Translator page. Word mode translates ``text`` straight away; sentence mode waits for POST /translate."""
    mode = _mode(mode)
    source_lang = _lang(source_lang, ENGLISH)
    target_lang = _lang(target_lang, JU_HOANSI)
    text = text[: settings.MAX_TEXT_LENGTH]
    output, error = ("", None)
    if mode == "words" and text:
        output, error = translate_words(text, source_lang, target_lang)
    return _render(request, mode=mode, source_lang=source_lang, target_lang=target_lang,
                   text=text, output=output, error=error)


@router.post("/translate", response_class=HTMLResponse)
def translate_submit(
    request: Request,
    text: str = Form(""),
    source_lang: str = Form(ENGLISH),
    target_lang: str = Form(JU_HOANSI),
    mode: str = Form("words"),
):
    mode = _mode(mode)
    source_lang = _lang(source_lang, ENGLISH)
    target_lang = _lang(target_lang, JU_HOANSI)

    if len(text) > settings.MAX_TEXT_LENGTH:
        return _render(request, mode=mode, source_lang=source_lang, target_lang=target_lang, text=text,
                       error=f"Text is too long (max {settings.MAX_TEXT_LENGTH} characters).", status_code=400)

    if mode == "sentences":
        output, error = translate_sentences(text)
    else:
        output, error = translate_words(text, source_lang, target_lang)
    return _render(request, mode=mode, source_lang=source_lang, target_lang=target_lang,
                   text=text, output=output, error=error)


@router.post("/swap")
def swap_languages(
    text: str = Form(""),
    output: str = Form(""),
    source_lang: str = Form(ENGLISH),
    target_lang: str = Form(JU_HOANSI),
    mode: str = Form("words"),
):
    """Swap source and target; the current translation becomes the new input."""
    new_text = output if output.strip() else text
    return RedirectResponse(
        url=page_url(_mode(mode), _lang(target_lang, JU_HOANSI), _lang(source_lang, ENGLISH), new_text),
        status_code=303,
    )


@router.post("/dictionary/refresh")
def refresh_dictionary(
    source_lang: str = Form(ENGLISH),
    target_lang: str = Form(JU_HOANSI),
):
    try:
        dictionary_service.refresh()
    except DictionaryUnavailable:
        # The banner on the page shows dictionary_service.error.
        pass
    return RedirectResponse(url=page_url("words", _lang(source_lang, ENGLISH), _lang(target_lang, JU_HOANSI)), status_code=303)
