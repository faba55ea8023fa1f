"""The Record entry type and its mapping form as stored in log.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

MOOD_LEVELS = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class Record:
    """One logged regret. Never mutated once written."""

    timestamp: str
    text: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    mood: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "text": self.text,
            "tags": list(self.tags),
            "mood": self.mood,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Record:
        """
        Strict decode of one stored mapping.
        Raises ValueError on anything that is not a well-formed entry;
        a missing mood means skipped, missing tags means none.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"entry is not a mapping: {raw!r}")

        ts = raw.get("timestamp")
        text = raw.get("text")
        if isinstance(ts, datetime):
            # hand-edited files may carry an unquoted timestamp
            ts = ts.isoformat()
        if not isinstance(ts, str):
            raise ValueError(f"bad timestamp: {ts!r}")
        if not isinstance(text, str):
            raise ValueError(f"bad text: {text!r}")

        tags = raw.get("tags")
        if tags is None:
            tags = []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError(f"bad tags: {tags!r}")

        mood = raw.get("mood")
        # bool is an int subclass; yaml turns `yes` into True
        if mood is not None and (
            not isinstance(mood, int) or isinstance(mood, bool) or mood not in MOOD_LEVELS
        ):
            raise ValueError(f"bad mood: {mood!r}")

        return cls(timestamp=ts, text=text, tags=tuple(tags), mood=mood)
