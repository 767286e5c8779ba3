from __future__ import annotations

import logging
import re

from app.service.translation_index import TranslationIndex

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"(\s+)")


def untranslated_marker(target_lang: str) -> str:
    return f" (*no {target_lang} translation)"


def tokenize(text: str) -> list[str]:
    """Split into words and whitespace runs; "".join(tokens) == text."""
    return _WHITESPACE_RUN.split(text)


def translate(text: str, source_lang: str, target_lang: str, index: TranslationIndex) -> str:
    """Word-by-word dictionary substitution.

    Unknown words are kept as typed. Known words with no entry for the
    target language keep their spelling and get the untranslated marker.
    Known words are replaced by the dictionary's spelling.
    """
    if not text or not source_lang or not target_lang or source_lang == target_lang:
        return text
    if not index.has_language(source_lang):
        logger.debug("No %s words in the translation index; returning input unchanged.", source_lang)
        return text

    out = []
    for token in tokenize(text):
        if not token or token.isspace():
            out.append(token)
            continue
        translations = index.lookup(source_lang, token)
        if translations is None:
            out.append(token)
        elif translations.get(target_lang):
            out.append(translations[target_lang])
        else:
            out.append(token + untranslated_marker(target_lang))
    return "".join(out)
