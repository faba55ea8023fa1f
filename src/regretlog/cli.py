from __future__ import annotations

import argparse

from .paths import ENV_VAR, resolve_data_source
from .recorder import MOOD_CHOICES, SKIP_INDEX, append_record, mood_from_choice, new_record
from .reporter import format_recent, format_stats
from .storage import LogStore


# -------------------------
# Prompt helpers
# -------------------------

def _ask(prompt: str) -> str:
    try:
        return input(f"{prompt}: ")
    except (EOFError, KeyboardInterrupt) as e:
        raise SystemExit("\nCancelled, nothing logged.") from e


def _parse_choice(raw: str) -> int:
    """
    1-based menu answer -> 0-based index into MOOD_CHOICES.
    Blank -> Skip. Raises SystemExit on anything else.
    """
    s = raw.strip()
    if not s:
        return SKIP_INDEX
    if s.isdigit() and 1 <= int(s) <= len(MOOD_CHOICES):
        return int(s) - 1
    raise SystemExit(f"Mood must be a number 1–{len(MOOD_CHOICES)} (got {raw!r})")


def _ask_mood() -> int | None:
    print("Mood?")
    for i, label in enumerate(MOOD_CHOICES, start=1):
        print(f"  {i}) {label}")
    idx = _parse_choice(_ask(f"Choose 1–{len(MOOD_CHOICES)} [{SKIP_INDEX + 1}]"))
    return mood_from_choice(idx)


# -------------------------
# Commands
# -------------------------

def cmd_now(args: argparse.Namespace) -> None:
    text = _ask("What happened?")
    tags_raw = _ask("Optional tags (comma-separated)")
    mood = _ask_mood()

    append_record(args.store, new_record(text, tags_raw, mood))
    print("✅ Logged.")


def cmd_review(args: argparse.Namespace) -> None:
    print(format_recent(args.store.load()))


def cmd_stats(args: argparse.Namespace) -> None:
    print(format_stats(args.store.load()))


def cmd_where(args: argparse.Namespace) -> None:
    print(args.store.path)
    print(f"↳ using {args.data_reason}")


def main(argv=None) -> None:
    p = argparse.ArgumentParser(prog="regret-log", description="Log and review regrets in your terminal")
    p.add_argument("--data", default=None, help=f"Path to log YAML (overrides {ENV_VAR}/default)")

    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("now", help="Log a new regret").set_defaults(func=cmd_now)
    sub.add_parser("review", help="Review recent regrets").set_defaults(func=cmd_review)
    sub.add_parser("stats", help="Show stats (tags and mood frequency)").set_defaults(func=cmd_stats)
    sub.add_parser("where", help="Show which log file is active and why").set_defaults(func=cmd_where)

    args = p.parse_args(argv)
    data_path, args.data_reason = resolve_data_source(args.data)
    args.store = LogStore(data_path)

    try:
        args.func(args)
    except OSError as e:
        raise SystemExit(f"❌ Could not access {args.store.path}: {e}") from e


if __name__ == "__main__":
    main()
