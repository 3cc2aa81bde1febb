from __future__ import annotations

import time
from collections.abc import Callable
from datetime import date
from pathlib import Path

from .page import convert_html
from .settings import FormatterSettings


def convert_file(src: Path, dst: Path, today: date, settings: FormatterSettings | None = None) -> int:
    """One discovery -> scan -> render pass over an HTML file. Returns segments converted.

    In-place runs (dst == src) leave the file untouched when nothing changed.
    """
    html = src.read_text(encoding="utf-8")
    out, n = convert_html(html, today, settings)
    if n or dst.resolve() != src.resolve():
        dst.parent.mkdir(parents=True, exist_ok=True)
        dst.write_text(out, encoding="utf-8")
    return n


def watch_file(
    src: Path,
    dst: Path,
    settings: FormatterSettings | None = None,
    *,
    today_fn: Callable[[], date] = date.today,
    max_cycles: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
    on_cycle: Callable[[int], None] | None = None,
) -> int:
    """Convert once, then again whenever `src` changes (mtime polling).

    `today` is taken fresh each cycle so a long-running watch rolls over at midnight.
    Returns the number of cycles run (only returns when `max_cycles` is set).
    """
    settings = settings or FormatterSettings()
    cycles = 0
    last_mtime: int | None = None

    while True:
        try:
            mtime = src.stat().st_mtime_ns
            if mtime != last_mtime:
                n = convert_file(src, dst, today_fn(), settings)
                cycles += 1
                if on_cycle:
                    on_cycle(n)
                # An in-place write bumps the mtime; don't treat it as an outside change.
                last_mtime = src.stat().st_mtime_ns
                if max_cycles is not None and cycles >= max_cycles:
                    return cycles
        except FileNotFoundError:
            # Deleted, or mid save-by-replace: convert whatever shows up next.
            last_mtime = None
        sleep(settings.poll_interval_s)
