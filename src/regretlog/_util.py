"""Shared low-level time helpers."""

from __future__ import annotations

from datetime import datetime


def _now_local() -> datetime:
    return datetime.now().astimezone()


def _iso(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_now_local().tzinfo)
    return dt.isoformat(timespec="seconds")


def _now_iso() -> str:
    return _iso(_now_local())
