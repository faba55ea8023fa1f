from __future__ import annotations

from datetime import datetime

from ._util import _iso, _now_iso
from .models import Record
from .storage import LogStore

MOOD_CHOICES = ("1 (Terrible)", "2", "3", "4", "5 (Neutral)", "Skip")
SKIP_INDEX = len(MOOD_CHOICES) - 1


def parse_tags(raw: str | None) -> list[str]:
    """Comma-separated -> trimmed lowercase tags. Keeps order and duplicates."""
    if not raw:
        return []
    out: list[str] = []
    for chunk in raw.split(","):
        t = chunk.strip().lower()
        if t:
            out.append(t)
    return out


def mood_from_choice(index: int) -> int | None:
    if not (0 <= index < len(MOOD_CHOICES)):
        raise ValueError(f"mood choice must be 0–{SKIP_INDEX}, got {index}")
    if index == SKIP_INDEX:
        return None
    return index + 1


def new_record(
    text: str,
    tags_raw: str | None,
    mood: int | None,
    now: datetime | None = None,
) -> Record:
    ts = _iso(now) if now is not None else _now_iso()
    return Record(timestamp=ts, text=text, tags=tuple(parse_tags(tags_raw)), mood=mood)


def append_record(store: LogStore, record: Record) -> list[Record]:
    log = store.load()
    log.append(record)
    store.save(log)
    return log
