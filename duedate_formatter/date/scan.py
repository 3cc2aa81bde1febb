from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from .format import format_outcome
from .parsers import resolve
from .types import ResolvedDate, ScanEntry, ScanToken

# Written in front of a range's second date, whatever connector the page used.
RANGE_SEPARATOR = " - "


def scan_entries(tokens: Iterable[ScanToken | tuple[str, bool]], today: date | datetime) -> list[ScanEntry]:
    """Resolve and format tokens in document order.

    A range continuation resolves against the last date resolved in this scan
    (so "3月 30日" followed by " – 2日" can land in the right month). Pass-through
    tokens don't reset that context. Nothing is carried between calls.
    """

    out: list[ScanEntry] = []
    prev: ResolvedDate | None = None

    for tok in tokens:
        tok = ScanToken(*tok)
        outcome = resolve(tok.text, today, prev if tok.is_range_continuation else None)

        text = format_outcome(outcome)
        if tok.is_range_continuation:
            text = RANGE_SEPARATOR + text

        if isinstance(outcome, ResolvedDate):
            prev = outcome

        out.append(ScanEntry(token=tok, outcome=outcome, output=text))

    return out


def scan(tokens: Iterable[ScanToken | tuple[str, bool]], today: date | datetime) -> list[str]:
    """Return the formatted string for each token (same length, same order)."""
    return [e.output for e in scan_entries(tokens, today)]
