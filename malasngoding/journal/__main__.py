#!/usr/bin/env python3
"""
Command line front end for the complaint journal.

Run: python -m malasngoding.journal add "Meeting molor dua jam" --feeling kesel
     python -m malasngoding.journal list --feeling kesel --feeling capek
     python -m malasngoding.journal list --timeframe week
     python -m malasngoding.journal stats
     python -m malasngoding.journal chart
     python -m malasngoding.journal theme toggle
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime

from malasngoding.config import settings
from malasngoding.journal import analytics
from malasngoding.journal.storage import JsonFileStorage
from malasngoding.journal.store import ComplaintStore
from malasngoding.schemas.complaint_schemas import Feeling, Theme, Timeframe, to_local_naive
from malasngoding.utils.logger import configure_logging

FEELINGS = [f.value for f in Feeling]


def local_datetime(value: str) -> datetime:
    """ISO date/time from the command line as naive local time (a trailing Z or an offset is converted)."""
    return to_local_naive(datetime.fromisoformat(value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ngeluh", description="Personal complaint journal.")
    parser.add_argument("--storage", default=settings.JOURNAL_STORAGE_PATH, help="Storage file (default from JOURNAL_STORAGE_PATH)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Write a complaint")
    add.add_argument("text")
    add.add_argument("--feeling", "-f", choices=FEELINGS, required=True)

    ls = sub.add_parser("list", help="List complaints, newest first")
    ls.add_argument("--feeling", "-f", choices=FEELINGS, action="append", default=[])
    ls.add_argument("--since", type=local_datetime, default=None, help="ISO date/time, inclusive")
    ls.add_argument("--until", type=local_datetime, default=None, help="ISO date/time, inclusive")
    ls.add_argument("--timeframe", "-t", choices=[t.value for t in Timeframe], default=Timeframe.ALL.value)

    rm = sub.add_parser("delete", help="Delete one complaint")
    rm.add_argument("id")

    sub.add_parser("clear", help="Delete every complaint")
    sub.add_parser("stats", help="Totals for today, yesterday and the last 7 days")
    sub.add_parser("chart", help="Feeling counts and the 7-day mood breakdown")

    theme = sub.add_parser("theme", help="Show or change the theme")
    theme.add_argument("value", nargs="?", choices=[t.value for t in Theme] + ["toggle"])
    return parser


def _emit(args: argparse.Namespace, payload, text: str) -> None:
    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(text)


def _weekly_line(weekly) -> str:
    feeling = weekly.most_frequent_feeling.value if weekly.most_frequent_feeling else "-"
    return f"7 hari terakhir: total={weekly.total} mood_terbanyak={feeling} hari_paling_emosional={weekly.most_emotional_day or '-'}"


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    store = ComplaintStore(JsonFileStorage(args.storage))
    now = datetime.now()

    if args.command == "add":
        c = store.add(args.text, Feeling(args.feeling))
        _emit(args, c.model_dump(mode="json", by_alias=True), f"Saved {c.id} [{c.feeling.value}]")

    elif args.command == "list":
        items = store.filter_by_feelings(args.feeling)
        items = analytics.filter_by_timeframe(items, Timeframe(args.timeframe), now)
        if args.since or args.until:
            start = args.since or datetime.min
            end = args.until or now
            items = [c for c in items if start <= c.created_at <= end]
        lines = [f"{c.created_at:%Y-%m-%d %H:%M}  {c.feeling.value:<8} {c.text}  ({c.id})" for c in items]
        _emit(args, [c.model_dump(mode="json", by_alias=True) for c in items], "\n".join(lines) or "No complaints yet.")

    elif args.command == "delete":
        if not store.delete(args.id):
            print(f"No complaint with id {args.id}", file=sys.stderr)
            return 1
        _emit(args, {"deleted": args.id}, f"Deleted {args.id}")

    elif args.command == "clear":
        store.delete_all()
        _emit(args, {"deleted": "all"}, "All complaints deleted")

    elif args.command == "stats":
        stats = analytics.complaint_stats(store.complaints, now)
        weekly = analytics.weekly_summary(store.complaints, now)
        most = stats.most_frequent_feeling.value if stats.most_frequent_feeling else "-"
        text = (
            f"total={stats.total} today={stats.today} yesterday={stats.yesterday} "
            f"week={stats.week} most_frequent={most}"
        )
        text += "\n" + _weekly_line(weekly)
        payload = stats.model_dump(mode="json", by_alias=True)
        payload["weekly"] = weekly.model_dump(mode="json", by_alias=True)
        _emit(args, payload, text)

    elif args.command == "chart":
        counts = analytics.feeling_counts(store.complaints)
        days = analytics.daily_mood_breakdown(store.complaints, now)
        weekly = analytics.weekly_summary(store.complaints, now)
        lines = [f"{fc.feeling.value:<8} {'#' * fc.count} {fc.count}" for fc in counts]
        lines.append("")
        lines.append("hari          " + " ".join(f"{f:>7}" for f in FEELINGS))
        for d in days:
            lines.append(f"{d.date:<13} " + " ".join(f"{getattr(d, f):>7}" for f in FEELINGS))
        lines.append("")
        lines.append(_weekly_line(weekly))
        payload = {
            "feelingCounts": [fc.model_dump(mode="json", by_alias=True) for fc in counts],
            "daily": [d.model_dump(mode="json", by_alias=True) for d in days],
            "weekly": weekly.model_dump(mode="json", by_alias=True),
        }
        _emit(args, payload, "\n".join(lines))

    elif args.command == "theme":
        if args.value == "toggle":
            theme = store.toggle_theme()
        elif args.value:
            theme = store.set_theme(Theme(args.value))
        else:
            theme = store.theme
        _emit(args, {"theme": theme.value}, theme.value)

    return 0


def main() -> int:
    configure_logging(log_dir=settings.LOG_DIR, log_file="journal.log", level=settings.LOG_LEVEL, console=False)
    return run()


if __name__ == "__main__":
    sys.exit(main())
