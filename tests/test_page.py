from __future__ import annotations

from datetime import date

from bs4 import BeautifulSoup

from duedate_formatter.page import convert_html, convert_soup, find_segments, segment_token
from duedate_formatter.settings import FormatterSettings

TODAY = date(2025, 2, 9)

PAGE = (
    "<div class='row'>"
    "<span class='DueDate-noWrapSegment'>3月 15日</span>"
    "<span class='DueDate-noWrapSegment'> – 20日</span>"
    "</div>"
    "<div class='row'><span class='DueDate-noWrapSegment'>明日</span></div>"
    "<div class='row'><span class='DueDate-noWrapSegment'>未定</span></div>"
    "<div class='row'><span class='Other'>3月 1日</span></div>"
)


def _texts(html: str) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    return [el.get_text() for el in soup.select("span.DueDate-noWrapSegment")]


def test_segment_token_detects_range_marker() -> None:
    s = FormatterSettings()
    assert segment_token(" – 20日", s) == ("20日", True)
    assert segment_token("3月 15日", s) == ("3月 15日", False)
    # a plain hyphen isn't the page's connector
    assert segment_token(" - 20日", s) == (" - 20日", False)


def test_convert_html_rewrites_segments_in_order() -> None:
    out, n = convert_html(PAGE, TODAY)
    assert n == 4
    assert _texts(out) == ["2025/3/15 (土)", " - 2025/3/20 (木)", "2025/2/10 (月)", "未定"]
    # unrelated spans are untouched
    assert "<span class=\"Other\">3月 1日</span>" in out


def test_converted_segments_are_marked_and_skipped() -> None:
    soup = BeautifulSoup(PAGE, "html.parser")
    assert convert_soup(soup, TODAY) == 4

    for el in soup.select("span.DueDate-noWrapSegment"):
        assert "convertedDateFormat" in el["class"]
    assert find_segments(soup, FormatterSettings()) == []

    before = str(soup)
    assert convert_soup(soup, TODAY) == 0
    assert str(soup) == before


def test_only_new_segments_are_converted_on_rescan() -> None:
    soup = BeautifulSoup(PAGE, "html.parser")
    convert_soup(soup, TODAY)

    new = BeautifulSoup("<span class='DueDate-noWrapSegment'>金曜日</span>", "html.parser").span
    soup.append(new)

    assert convert_soup(soup, TODAY) == 1
    assert _texts(str(soup))[-1] == "2025/2/14 (金)"


def test_custom_selector_and_class() -> None:
    s = FormatterSettings(selector="td.due", converted_class="done", range_marker=" ~ ")
    html = "<table><tr><td class='due'>1月 30日</td><td class='due'> ~ 2日</td></tr></table>"
    out, n = convert_html(html, TODAY, s)
    soup = BeautifulSoup(out, "html.parser")
    assert n == 2
    assert [el.get_text() for el in soup.select("td.due")] == ["2025/1/30 (木)", " - 2025/1/2 (木)"]
    assert all("done" in el["class"] for el in soup.select("td.due"))


def test_no_segments() -> None:
    out, n = convert_html("<p>nothing here</p>", TODAY)
    assert n == 0
    assert out == "<p>nothing here</p>"
