from __future__ import annotations

import requests


def fetch_html(url: str, *, timeout_s: int = 30) -> str:
    """Fetch a page's HTML (the caller decides what to do with it)."""
    r = requests.get(url, timeout=timeout_s)
    if r.status_code != 200:
        raise RuntimeError(f"Fetch failed ({r.status_code}): {url}")
    # Servers often omit the charset; the labels are Japanese, so don't fall back to latin-1.
    if not r.encoding or r.encoding.lower() == "iso-8859-1":
        r.encoding = r.apparent_encoding or "utf-8"
    return r.text
