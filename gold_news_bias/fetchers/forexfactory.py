"""Fetcher for the ForexFactory weekly calendar XML.

``nfs.faireconomy.media/ff_calendar_thisweek.xml`` is free, needs no auth and
covers the current week only.
"""

from __future__ import annotations

import os
import urllib.request

from .base import BaseFetcher

FF_XML_URL = "https://nfs.faireconomy.media/ff_calendar_thisweek.xml"
REQUEST_TIMEOUT = 30

_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept": "application/xml, text/xml",
}


class ForexFactoryFetcher(BaseFetcher):
    """Download this week's calendar from ForexFactory."""

    def __init__(self, url: str | None = None, timeout: float = REQUEST_TIMEOUT) -> None:
        self.url = url or os.environ.get("NEWS_FEED_URL") or FF_XML_URL
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "forexfactory"

    def fetch(self) -> str:
        try:
            req = urllib.request.Request(self.url, headers=_HEADERS)
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:  # noqa: S310
                raw = resp.read()
            # FF serves windows-1252; undecodable bytes are replaced rather than fatal.
            return raw.decode("windows-1252", errors="replace")
        except Exception as exc:  # noqa: BLE001
            print(f"[forexfactory] FF XML fetch failed: {exc}")
            return ""
