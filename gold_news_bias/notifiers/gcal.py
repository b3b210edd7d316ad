"""Record the daily gold bias as an all-day Google Calendar event.

One event per day is kept: re-running the same day updates it in place,
found through a private extended property.  Requires ``GOOGLE_SA_JSON``
(service-account key as JSON) and ``GOOGLE_CALENDAR_ID``.
"""

from __future__ import annotations

import json
import os
from datetime import date, timedelta

from google.oauth2 import service_account
from googleapiclient.discovery import build

from ..models import BIAS_BUY, BIAS_SELL, BIAS_SLIGHT_BUY, BIAS_SLIGHT_SELL, AnalysisResult
from .base import BaseNotifier

SCOPES = ["https://www.googleapis.com/auth/calendar"]

# Extended property key used for de-duplication in Google Calendar.
_EXT_PROP_KEY = "gold_bias_date"

# Google Calendar colorId: 10=Basil (green) buy side, 11=Tomato (red) sell side
_BIAS_COLOR: dict[str, str] = {
    BIAS_BUY: "10",
    BIAS_SLIGHT_BUY: "2",     # Sage
    BIAS_SELL: "11",
    BIAS_SLIGHT_SELL: "6",    # Tangerine
}

# Calendar descriptions are capped well above any brief we produce.
_MAX_DESCRIPTION = 8000


def build_calendar_service():
    """Return an authenticated Google Calendar service using a service account."""
    sa_json = os.environ["GOOGLE_SA_JSON"]
    sa_info = json.loads(sa_json)
    credentials = service_account.Credentials.from_service_account_info(
        sa_info, scopes=SCOPES,
    )
    return build("calendar", "v3", credentials=credentials)


def build_bias_event(result: AnalysisResult, day: date, description: str) -> dict:
    """Convert an analysis into a Google Calendar all-day event body."""
    summary = f"Gold bias: {result.bias} ({result.confidence})"
    gcal: dict = {
        "summary": summary,
        "description": description[:_MAX_DESCRIPTION],
        "start": {"date": day.isoformat()},
        "end": {"date": (day + timedelta(days=1)).isoformat()},
        "extendedProperties": {
            "private": {
                _EXT_PROP_KEY: day.isoformat(),
            }
        },
    }
    color_id = _BIAS_COLOR.get(result.bias)
    if color_id:
        gcal["colorId"] = color_id
    return gcal


def find_existing_event(service, calendar_id: str, day: date) -> str | None:
    """Return the Google Calendar event id already holding *day*'s bias."""
    result = (
        service.events()
        .list(
            calendarId=calendar_id,
            privateExtendedProperty=f"{_EXT_PROP_KEY}={day.isoformat()}",
            singleEvents=True,
        )
        .execute()
    )
    items = result.get("items", [])
    return items[0]["id"] if items else None


def upsert_event(service, calendar_id: str, gcal_event: dict, existing_id: str | None) -> str:
    """Create or update the day's event.  Returns ``'created'`` or ``'updated'``."""
    if existing_id:
        service.events().update(
            calendarId=calendar_id,
            eventId=existing_id,
            body=gcal_event,
        ).execute()
        return "updated"
    service.events().insert(
        calendarId=calendar_id,
        body=gcal_event,
    ).execute()
    return "created"


class GoogleCalendarNotifier(BaseNotifier):
    """Upsert one all-day "gold bias" event per day."""

    def __init__(self, calendar_id: str | None = None, service=None) -> None:
        self.calendar_id = calendar_id or os.environ.get("GOOGLE_CALENDAR_ID", "")
        self._service = service

    @property
    def name(self) -> str:
        return "gcal"

    @property
    def service(self):
        if self._service is None:
            self._service = build_calendar_service()
        return self._service

    def send(
        self,
        message: str,
        *,
        result: AnalysisResult | None = None,
        day: date | None = None,
    ) -> bool:
        if result is None or day is None:
            print("[gcal] No analysis attached – nothing to record.")
            return False
        if not self.calendar_id:
            print("[gcal] GOOGLE_CALENDAR_ID not set – skipping.")
            return False

        try:
            gcal_event = build_bias_event(result, day, message)
            existing_id = find_existing_event(self.service, self.calendar_id, day)
            action = upsert_event(self.service, self.calendar_id, gcal_event, existing_id)
        except Exception as exc:  # noqa: BLE001
            print(f"[gcal] Calendar update failed: {exc}")
            return False

        print(f"[gcal] [{action}] {gcal_event['summary']} on {day.isoformat()}")
        return True
