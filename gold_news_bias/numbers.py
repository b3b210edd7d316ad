"""Parse calendar display values ("156K", "2.9%", "-1.2B") into floats."""

from __future__ import annotations

import re

# Case-sensitive: only upper-case suffixes carry a magnitude.
_SUFFIX_MULTIPLIER: dict[str, float] = {
    "K": 1e3,
    "M": 1e6,
    "B": 1e9,
}

_LEADING_NUMBER = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)")


def parse_number(text: str | None) -> float | None:
    """Return the numeric value of *text*, or ``None`` if there is none.

    Percent signs, thousands separators and whitespace are removed first,
    then a trailing ``K``/``M``/``B`` scales the leading number.  Anything
    after the leading number other than a suffix is ignored.
    """
    if not text:
        return None
    cleaned = re.sub(r"[%,\s]", "", str(text))
    if not cleaned:
        return None

    multiplier = _SUFFIX_MULTIPLIER.get(cleaned[-1], 1.0)
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return None
    return float(match.group(0)) * multiplier
