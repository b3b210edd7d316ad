"""Abstract base class for outbound notifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ..models import AnalysisResult


class BaseNotifier(ABC):
    """Interface that every delivery channel must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for this channel (e.g. ``'discord'``)."""

    @abstractmethod
    def send(
        self,
        message: str,
        *,
        result: AnalysisResult | None = None,
        day: date | None = None,
    ) -> bool:
        """Deliver *message*; return ``True`` on success.

        *result* and *day* are passed along for channels that store the
        verdict in structured form; text-only channels ignore them.
        Delivery failures are reported, not raised.
        """
