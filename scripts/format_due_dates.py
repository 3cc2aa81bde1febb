#!/usr/bin/env python3
"""Rewrite task due-date labels in a saved page to yyyy/M/d (曜).

"金曜日" -> "2025/2/14 (金)", "明日" -> "2025/2/10 (月)",
"3月 15日" + " – 20日" -> "2025/3/15 (土)" + " - 2025/3/20 (木)".

Usage:
  PYTHONPATH=. python3 scripts/format_due_dates.py --in page.html --out page.out.html
  PYTHONPATH=. python3 scripts/format_due_dates.py --in page.html --watch
  PYTHONPATH=. python3 scripts/format_due_dates.py --url https://example.com/tasks --today 2025-02-09

Settings (selector, converted class, range marker, timeouts) come from
--config JSON and/or DUEDATE_* env vars (.env is honored).
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

from duedate_formatter.cycle import convert_file, watch_file
from duedate_formatter.fetch import fetch_html
from duedate_formatter.page import convert_html
from duedate_formatter.settings import load_settings


def parse_today(s: str | None) -> date | None:
    if not s:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise SystemExit(f"Invalid --today (want YYYY-MM-DD): {s}") from None


def main() -> None:
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="HTML file to convert.")
    src.add_argument("--url", help="Fetch and convert a page (output to --out or stdout).")
    ap.add_argument("--out", help="Output path (default: rewrite --in in place).")
    ap.add_argument("--today", help="Reference date YYYY-MM-DD (default: local today).")
    ap.add_argument("--config", help="JSON settings file.")
    ap.add_argument("--watch", action="store_true", help="Keep running; reconvert when --in changes.")
    args = ap.parse_args()

    try:
        settings = load_settings(Path(args.config) if args.config else None)
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(str(e)) from None

    fixed_today = parse_today(args.today)

    def today_fn() -> date:
        return fixed_today or date.today()

    if args.url:
        if args.watch:
            raise SystemExit("--watch needs --in")
        try:
            html = fetch_html(args.url, timeout_s=settings.timeout_s)
        except Exception as e:
            raise SystemExit(str(e)) from None
        out, n = convert_html(html, today_fn(), settings)
        if args.out:
            Path(args.out).write_text(out, encoding="utf-8")
            print(f"OK: {args.url} -> {args.out} (converted={n})")
        else:
            sys.stdout.write(out)
        return

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp
    if not inp.exists():
        raise SystemExit(f"Missing: {inp}")

    if args.watch:
        print(f"Watching {inp} (every {settings.poll_interval_s}s, Ctrl-C to stop)")
        try:
            watch_file(
                inp,
                outp,
                settings,
                today_fn=today_fn,
                on_cycle=lambda n: print(f"OK: {inp} -> {outp} (converted={n})"),
            )
        except KeyboardInterrupt:
            pass
        return

    n = convert_file(inp, outp, today_fn(), settings)
    print(f"OK: {inp} -> {outp} (converted={n})")


if __name__ == "__main__":
    main()
