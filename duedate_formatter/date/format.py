from __future__ import annotations

from datetime import date

from .types import ParseOutcome, PassThrough, ResolvedDate


def format_outcome(outcome: ParseOutcome | date) -> str:
    """Render a resolved date as `yyyy/M/d (曜)`; pass-through text is returned as-is."""
    if isinstance(outcome, PassThrough):
        return outcome.text
    if isinstance(outcome, date):
        outcome = ResolvedDate(outcome)
    return f"{outcome.year}/{outcome.month}/{outcome.day} ({outcome.weekday_name[0]})"
