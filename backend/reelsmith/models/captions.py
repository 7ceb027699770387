"""
Caption data contracts.

Word and batch times are segment-relative seconds.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Word:
    text: str
    start: float
    end: float

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Word":
        # Transcription payloads name the field "word"
        text = data.get("text", data.get("word", ""))
        return cls(text=str(text), start=float(data["start"]), end=float(data["end"]))


@dataclass(frozen=True)
class WordBatch:
    """A group of consecutively spoken words displayed together."""

    text: str
    start: float
    end: float
    words: List[Word] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "words": [w.to_dict() for w in self.words],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordBatch":
        return cls(
            text=data.get("text", ""),
            start=float(data["start"]),
            end=float(data["end"]),
            words=[Word.from_dict(w) for w in data.get("words", [])],
        )


@dataclass(frozen=True)
class CaptionWord:
    text: str
    is_active: bool
    is_completed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "is_active": self.is_active, "is_completed": self.is_completed}


@dataclass(frozen=True)
class CaptionFrame:
    """What to draw for one rendered frame."""

    display_text: str
    words: List[CaptionWord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"display_text": self.display_text, "words": [w.to_dict() for w in self.words]}


__all__ = ["Word", "WordBatch", "CaptionWord", "CaptionFrame"]
