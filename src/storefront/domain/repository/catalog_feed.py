"""Abstract source of raw catalog feed text."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CatalogFeed(ABC):

    @abstractmethod
    def fetch(self) -> str:
        """Return the raw CSV text of the feed.

        Raises FeedError on any transport failure or non-success response.
        """
