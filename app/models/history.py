from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryDraft:
    """What the user asked to keep: a language pair plus both texts."""
    source_lang: str
    target_lang: str
    original_text: str
    translated_text: str

    def key(self) -> tuple[str, str, str, str]:
        return (self.source_lang, self.target_lang, self.original_text, self.translated_text)


@dataclass(frozen=True)
class HistoryEntry:
    """A committed history item.

    Serialized with the short keys (from/to/original/translated) used by
    browser-side storage so old snapshots still load.
    """
    id: int
    source_lang: str
    target_lang: str
    original_text: str
    translated_text: str
    saved: bool = False

    def key(self) -> tuple[str, str, str, str]:
        return (self.source_lang, self.target_lang, self.original_text, self.translated_text)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "from": self.source_lang,
            "to": self.target_lang,
            "original": self.original_text,
            "translated": self.translated_text,
            "saved": self.saved,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        return cls(
            id=int(data["id"]),
            source_lang=str(data["from"]),
            target_lang=str(data["to"]),
            original_text=str(data["original"]),
            translated_text=str(data["translated"]),
            saved=bool(data.get("saved", False)),
        )
