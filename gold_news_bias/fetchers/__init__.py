"""Calendar feed fetchers."""

from __future__ import annotations

from .base import BaseFetcher
from .forexfactory import ForexFactoryFetcher
from .local import FileFetcher

__all__ = ["BaseFetcher", "FileFetcher", "ForexFactoryFetcher", "get_fetcher"]

# Registry of available fetchers – add new sources here.
_FETCHERS: dict[str, type[BaseFetcher]] = {
    "forexfactory": ForexFactoryFetcher,
    "file": FileFetcher,
}


def get_fetcher(name: str) -> BaseFetcher:
    """Return a fetcher instance by name.

    Raises ``KeyError`` if *name* is not registered.
    Available names: forexfactory, file
    """
    try:
        cls = _FETCHERS[name]
    except KeyError:
        available = ", ".join(sorted(_FETCHERS))
        raise KeyError(
            f"Unknown fetcher '{name}'. Available: {available}"
        ) from None
    return cls()
