"""Port for user-facing feedback emitted by the cart.

The cart does not know how messages are shown; the CLI prints them,
a web front end would render a toast and refresh a badge.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.application.dto import Notification


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show a confirmation message to the shopper."""

    @abstractmethod
    def update_item_count(self, count: int) -> None:
        """Refresh the visible cart counter."""


class SilentNotifier(Notifier):
    """Discards everything. Used when no UI is attached."""

    def notify(self, notification: Notification) -> None:
        pass

    def update_item_count(self, count: int) -> None:
        pass
