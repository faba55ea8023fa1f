from __future__ import annotations

import os
import sys
import time
from pathlib import Path

import yaml

from .models import Record


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _decode(txt: str) -> list[Record]:
    data = yaml.safe_load(txt)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"expected a sequence of entries, got {type(data).__name__}")
    return [Record.from_dict(item) for item in data]


class LogStore:
    """Whole-file persistence of the regret log at one configured path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Record]:
        """
        Safe load:
        - creates the parent dir
        - if missing/empty -> []
        - if corrupt (bad utf-8, bad yaml, bad entries) -> backs up raw bytes,
          resets the log to empty, returns []
        A backup that cannot be written only warns; the log is then left as is.
        """
        _ensure_parent(self.path)

        if not self.path.exists():
            return []

        raw = self.path.read_bytes()
        if not raw.strip():
            return []

        try:
            return _decode(raw.decode("utf-8"))
        except (yaml.YAMLError, ValueError) as e:
            print(f"⚠️ Could not read {self.path}: {e}", file=sys.stderr)
            self._quarantine(raw)
            return []

    def _quarantine(self, raw: bytes) -> None:
        # corruption guard: backup then reset
        backup = self.path.with_name(f"{self.path.stem}.corrupt-{int(time.time())}.yaml")
        try:
            backup.write_bytes(raw)
        except OSError as e:
            print(f"   Could not back it up ({e}); leaving it in place.", file=sys.stderr)
            return

        try:
            self.save([])
        except OSError as e:
            print(f"   Saved a copy to {backup} but could not reset the log: {e}", file=sys.stderr)
            return
        print(f"   Saved a copy to {backup}; starting from an empty log.", file=sys.stderr)

    def save(self, log: list[Record]) -> None:
        """
        Whole-log rewrite, entries keep timestamp/text/tags/mood key order:
        - write to temp file in same directory
        - flush + fsync
        - os.replace to target
        - chmod 0600 best-effort
        """
        _ensure_parent(self.path)

        tmp = self.path.with_name(self.path.name + ".tmp")

        payload = yaml.safe_dump(
            [r.to_dict() for r in log],
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

        with open(tmp, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp, self.path)

        try:
            os.chmod(self.path, 0o600)
        except OSError:
            pass
