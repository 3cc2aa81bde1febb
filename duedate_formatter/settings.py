from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DUEDATE_"


@dataclass(frozen=True)
class FormatterSettings:
    """Where due-date labels live in the page and how the rescan loop behaves.

    Defaults match the task list's due-date widget:
    - each date is a `span.DueDate-noWrapSegment`
    - the second date of a range starts with " – "
    - converted spans get the `convertedDateFormat` class so they are skipped next time
    """

    selector: str = "span.DueDate-noWrapSegment"
    converted_class: str = "convertedDateFormat"
    range_marker: str = " – "

    # Fetching / watching
    timeout_s: int = 30
    poll_interval_s: float = 1.0

    def updated(self, values: dict) -> "FormatterSettings":
        """Return a copy with known keys overridden (unknown keys are ignored)."""
        known = {f.name for f in fields(self)}
        kwargs = {}
        for k, v in values.items():
            if k not in known or v is None:
                continue
            kwargs[k] = _coerce(k, getattr(self, k), v)
        return replace(self, **kwargs)

    @classmethod
    def from_env(cls, base: "FormatterSettings | None" = None) -> "FormatterSettings":
        """Overlay DUEDATE_* env vars (and .env) on top of `base` (or the defaults)."""
        load_dotenv()
        base = base or cls()
        values = {}
        for f in fields(base):
            raw = os.environ.get(ENV_PREFIX + f.name.upper())
            if raw is not None and raw != "":
                values[f.name] = raw
        return base.updated(values)


def _coerce(name: str, current: object, value: object) -> object:
    if not isinstance(current, (int, float)):
        return str(value)
    try:
        num = int(value) if isinstance(current, int) else float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value for {name}: {value!r}") from None
    # timeouts and intervals; 0 would busy-loop the watcher
    if num <= 0:
        raise ValueError(f"Invalid value for {name}: {value!r} (must be > 0)")
    return num


def load_settings(config_path: Path | None = None) -> FormatterSettings:
    """Defaults <- JSON config file (optional) <- environment."""
    settings = FormatterSettings()
    if config_path:
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")
        obj = json.loads(config_path.read_text(encoding="utf-8"))
        if not isinstance(obj, dict):
            raise ValueError(f"Config must be a JSON object: {config_path}")
        settings = settings.updated(obj)
    return FormatterSettings.from_env(settings)
