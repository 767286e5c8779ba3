from __future__ import annotations

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class SentenceServiceFailure(Exception):
    """The external sentence translator returned an error or could not be reached."""


class SentenceServiceTimeout(SentenceServiceFailure):
    pass


def _error_detail(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("error")
        if detail:
            return str(detail)
    return None


class SentenceTranslator:
    """Thin client for the external whole-sentence translation endpoint.

    One POST per call, no retries.
    """

    def __init__(self, url: str, timeout: float = 30.0, transport: httpx.BaseTransport | None = None):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def translate_sentence(self, text: str) -> str:
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.url, json={"text": text})
        except httpx.TimeoutException as e:
            logger.error("Sentence translation timed out after %ss: %s", self.timeout, e)
            raise SentenceServiceTimeout("Translation service timed out.") from e
        except httpx.HTTPError as e:
            logger.error("Sentence translation request failed: %s", e)
            raise SentenceServiceFailure("Translation service unreachable.") from e

        if not response.is_success:
            detail = _error_detail(response) or "Translation service error"
            logger.error("Sentence translation failed (%s): %s", response.status_code, detail)
            raise SentenceServiceFailure(detail)

        try:
            data = response.json()
        except ValueError as e:
            raise SentenceServiceFailure("Translation service returned invalid JSON.") from e
        if not isinstance(data, dict) or not isinstance(data.get("translation"), str):
            raise SentenceServiceFailure("Translation service response has no translation.")
        return data["translation"]
