"""Read-only views over the full log: recent entries and tag/mood frequency."""

from __future__ import annotations

from .models import MOOD_LEVELS, Record

RECENT_LIMIT = 5
TOP_TAGS_LIMIT = 10


def recent(log: list[Record], limit: int = RECENT_LIMIT) -> list[Record]:
    """Last `limit` records, newest first."""
    if limit <= 0:
        return []
    return list(reversed(log[-limit:]))


def tally(log: list[Record]) -> tuple[dict[str, int], dict[int, int]]:
    """
    Single pass over the log.
    Returns (tag -> occurrences, mood level -> records); the mood table
    always carries all five levels.
    """
    tag_counts: dict[str, int] = {}
    mood_counts: dict[int, int] = {m: 0 for m in MOOD_LEVELS}

    for r in log:
        for t in r.tags:
            tag_counts[t] = tag_counts.get(t, 0) + 1
        if r.mood is not None:
            mood_counts[r.mood] = mood_counts.get(r.mood, 0) + 1

    return tag_counts, mood_counts


def top_tags(tag_counts: dict[str, int], limit: int = TOP_TAGS_LIMIT) -> list[tuple[str, int]]:
    return sorted(tag_counts.items(), key=lambda x: (-x[1], x[0]))[:limit]


def _fmt_record(r: Record) -> str:
    tags = ", ".join(r.tags) if r.tags else "-"
    mood = str(r.mood) if r.mood is not None else "-"
    return f"[{r.timestamp}] {r.text}\n  tags: {tags}  mood: {mood}"


def format_recent(log: list[Record]) -> str:
    if not log:
        return "No regrets logged yet."
    return "\n\n".join(_fmt_record(r) for r in recent(log))


def format_stats(log: list[Record]) -> str:
    if not log:
        return "No regrets to analyze."

    tag_counts, mood_counts = tally(log)

    lines = ["Top Tags:"]
    for t, c in top_tags(tag_counts):
        lines.append(f"  {t}: {c}")

    lines.append("")
    lines.append("Mood Frequency:")
    for m in MOOD_LEVELS:
        lines.append(f"  {m}: {mood_counts[m]}")

    return "\n".join(lines)
