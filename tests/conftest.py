import os
import tempfile
from pathlib import Path

import pytest

# Settings are read once at import time, so point them at a scratch database first.
_TMP = Path(tempfile.mkdtemp(prefix="translator-tests-"))
ROOT = Path(__file__).resolve().parent.parent
os.environ["TRANSLATOR_DB_PATH"] = str(_TMP / "app.db")
os.environ["TRANSLATOR_WORDS_JSON"] = str(ROOT / "data" / "words.json")
os.environ["TRANSLATOR_DICT_SOURCE"] = "db"
os.environ["TRANSLATOR_SEED_ON_STARTUP"] = "1"

from app.config import Settings  # noqa: E402
from app.models.word import DictionaryEntry  # noqa: E402


@pytest.fixture
def scratch_db(tmp_path, monkeypatch):
    """Point repositories at an empty per-test database."""
    from app.db import database

    monkeypatch.setattr(database, "settings", Settings(DB_PATH=tmp_path / "scratch.db"))
    database.init_db()
    return tmp_path / "scratch.db"


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_entries():
    return [
        DictionaryEntry(id="22", english="night", ju_hoansi="glu", afrikaans="nag"),
        DictionaryEntry(id="150", english="water", ju_hoansi="glu", afrikaans="water"),
        DictionaryEntry(id="154", english="fire", ju_hoansi="da'a", afrikaans="vuur"),
        DictionaryEntry(id="56", english="father", ju_hoansi="ba", afrikaans="pa"),
    ]
