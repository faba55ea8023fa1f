from __future__ import annotations

import os
from pathlib import Path

ENV_VAR = "REGRET_LOG_DATA"


def default_data_path() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise SystemExit("❌ Could not find home directory (pass --data or set REGRET_LOG_DATA)") from e
    return home / ".regret-log" / "log.yaml"


def resolve_data_source(data_arg: str | None) -> tuple[Path, str]:
    """Active log path plus a short reason it was chosen."""
    if data_arg and data_arg.strip():
        return Path(data_arg).expanduser().resolve(), "because you passed --data"
    env = os.environ.get(ENV_VAR, "").strip()
    if env:
        return Path(env).expanduser().resolve(), f"because {ENV_VAR} is set"
    return default_data_path().expanduser().resolve(), "default location"


def resolve_data_path(data_arg: str | None) -> Path:
    return resolve_data_source(data_arg)[0]
