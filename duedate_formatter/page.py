from __future__ import annotations

from datetime import date, datetime

from bs4 import BeautifulSoup, Tag

from .date import ScanToken, scan
from .settings import FormatterSettings


def find_segments(soup: BeautifulSoup, settings: FormatterSettings) -> list[Tag]:
    """Due-date elements not yet converted, in document order."""
    out: list[Tag] = []
    for el in soup.select(settings.selector):
        if settings.converted_class in (el.get("class") or []):
            continue
        out.append(el)
    return out


def segment_token(text: str, settings: FormatterSettings) -> ScanToken:
    """Split off the range connector ("3月 15日 – 20日" renders " – 20日" as its own segment)."""
    if settings.range_marker and text.startswith(settings.range_marker):
        return ScanToken(text.replace(settings.range_marker, "", 1), True)
    return ScanToken(text, False)


def mark_converted(el: Tag, text: str, settings: FormatterSettings) -> None:
    el.string = text
    classes = list(el.get("class") or [])
    if settings.converted_class not in classes:
        classes.append(settings.converted_class)
    el["class"] = classes


def convert_soup(soup: BeautifulSoup, today: date | datetime, settings: FormatterSettings | None = None) -> int:
    """Rewrite every unconverted due-date segment in place. Returns the number converted."""
    settings = settings or FormatterSettings()

    segments = find_segments(soup, settings)
    if not segments:
        return 0

    tokens = [segment_token(el.get_text(), settings) for el in segments]
    for el, text in zip(segments, scan(tokens, today)):
        mark_converted(el, text, settings)

    return len(segments)


def convert_html(html: str, today: date | datetime, settings: FormatterSettings | None = None) -> tuple[str, int]:
    soup = BeautifulSoup(html, "html.parser")
    n = convert_soup(soup, today, settings)
    return str(soup), n
