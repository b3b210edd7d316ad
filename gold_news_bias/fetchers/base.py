"""Abstract base class for calendar feed fetchers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseFetcher(ABC):
    """Interface that every feed source must implement.

    ``fetch`` must never raise: transport failures are reported and turned
    into an empty string, which parses to zero events.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for this source (e.g. ``'forexfactory'``)."""

    @abstractmethod
    def fetch(self) -> str:
        """Return the raw feed markup for the current week, or ``""``."""
