"""Parser for the ForexFactory weekly calendar feed.

The feed is scanned with regular expressions rather than an XML parser so a
single broken entry (unescaped ``&``, missing closing tag) costs only that
entry, never the whole week.  Only USD events of High or Medium impact are
kept.
"""

from __future__ import annotations

import html
import re
from collections.abc import Iterable
from datetime import date, datetime, timezone

from .models import KEPT_IMPACTS, TARGET_CURRENCY, NewsEvent

# ForexFactory XML wraps entries in <event>; RSS-style feeds use <item>.
# An entry ends at its closing tag, or at the next opening tag when the
# closing tag is missing, so fields never leak between neighbours.
_ITEM_RE = re.compile(
    r"<(event|item)(?:\s[^>]*)?>"
    r"((?:(?!<(?:event|item)[\s>]).)*?)"
    r"(?:</\1\s*>|(?=<(?:event|item)[\s>])|\Z)",
    re.DOTALL | re.IGNORECASE,
)

# Formats seen in calendar feeds, tried in order after ISO-8601.
_DATE_FORMATS = (
    "%m-%d-%Y",            # 10-16-2026 (ForexFactory XML)
    "%m/%d/%Y",
    "%A %B %d, %Y",        # Friday February 27, 2026
    "%A, %B %d, %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%a, %d %b %Y",        # Fri, 27 Feb 2026
    "%a %b %d %Y",
)


def _extract_tag(item: str, tag: str) -> str:
    """Return the trimmed text of ``<tag>`` in *item* or ``""``.

    Accepts both ``<tag><![CDATA[...]]></tag>`` and plain inline text.
    """
    pattern = (
        rf"<{tag}(?:\s[^>]*)?>\s*<!\[CDATA\[(.*?)\]\]>\s*</{tag}>"
        rf"|<{tag}(?:\s[^>]*)?>(.*?)</{tag}>"
    )
    match = re.search(pattern, item, re.DOTALL | re.IGNORECASE)
    if not match:
        return ""
    if match.group(1) is not None:
        return match.group(1).strip()
    return html.unescape(match.group(2) or "").strip()


def _parse_date(date_str: str) -> date | None:
    """Normalise a feed date to a UTC calendar date.

    Handles ISO-8601 (aware values are converted to UTC, naive ones are
    taken as UTC), the numeric ``MM-DD-YYYY`` form and locale-rendered
    strings like ``Friday February 27, 2026``.
    """
    if not date_str:
        return None
    text = " ".join(date_str.split())
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        pass
    else:
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return dt.date()

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _normalise_impact(raw: str) -> str:
    return raw.strip().capitalize()


def parse(feed_text: str | None) -> list[NewsEvent]:
    """Extract USD High/Medium events from raw feed markup, in feed order."""
    if not feed_text:
        return []

    events: list[NewsEvent] = []
    for match in _ITEM_RE.finditer(feed_text):
        item = match.group(2)
        currency = (_extract_tag(item, "country") or _extract_tag(item, "currency")).upper()
        impact = _normalise_impact(_extract_tag(item, "impact"))
        if currency != TARGET_CURRENCY or impact not in KEPT_IMPACTS:
            continue
        events.append(
            NewsEvent(
                title=_extract_tag(item, "title"),
                date=_parse_date(_extract_tag(item, "date")),
                time=_extract_tag(item, "time"),
                impact=impact,
                currency=currency,
                forecast=_extract_tag(item, "forecast"),
                previous=_extract_tag(item, "previous"),
                actual=_extract_tag(item, "actual"),
            )
        )
    return events


def filter_today(events: Iterable[NewsEvent] | None, current_utc_date: date) -> list[NewsEvent]:
    """Keep events scheduled on *current_utc_date*.

    Events whose date could not be parsed never match.
    """
    if isinstance(current_utc_date, datetime):
        if current_utc_date.tzinfo is not None:
            current_utc_date = current_utc_date.astimezone(timezone.utc)
        current_utc_date = current_utc_date.date()
    return [ev for ev in (events or []) if ev.date is not None and ev.date == current_utc_date]


def has_released(events: Iterable[NewsEvent] | None) -> bool:
    """True if at least one event already carries an actual value."""
    return any(ev.is_released for ev in (events or []))


def group_by_date(events: Iterable[NewsEvent] | None) -> dict[date, list[NewsEvent]]:
    """Bucket events by calendar date, dates in ascending order."""
    grouped: dict[date, list[NewsEvent]] = {}
    for ev in events or []:
        if ev.date is None:
            continue
        grouped.setdefault(ev.date, []).append(ev)
    return dict(sorted(grouped.items()))
