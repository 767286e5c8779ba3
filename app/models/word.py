from __future__ import annotations

from dataclasses import dataclass

ENGLISH = "english"
JU_HOANSI = "ju_hoansi"
AFRIKAANS = "afrikaans"

LANGUAGES: tuple[str, ...] = (ENGLISH, JU_HOANSI, AFRIKAANS)

LANGUAGE_NAMES: dict[str, str] = {
    ENGLISH: "English",
    JU_HOANSI: "Ju/’hoansi",
    AFRIKAANS: "Afrikaans",
}


@dataclass(frozen=True)
class DictionaryEntry:
    """One word across the three supported languages.

    Missing words are stored as empty strings.
    """
    id: str
    english: str = ""
    ju_hoansi: str = ""
    afrikaans: str = ""

    def word(self, lang: str) -> str:
        return getattr(self, lang, "") or ""

    def to_dict(self) -> dict:
        return {"id": self.id, ENGLISH: self.english, JU_HOANSI: self.ju_hoansi, AFRIKAANS: self.afrikaans}

    @classmethod
    def from_dict(cls, data: dict) -> "DictionaryEntry":
        return cls(
            id=str(data.get("id", "") or ""),
            english=str(data.get(ENGLISH) or ""),
            ju_hoansi=str(data.get(JU_HOANSI) or ""),
            afrikaans=str(data.get(AFRIKAANS) or ""),
        )
