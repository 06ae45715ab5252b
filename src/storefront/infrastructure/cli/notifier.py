"""Terminal implementation of the Notifier port."""

from __future__ import annotations

import click

from storefront.application.dto import Notification
from storefront.application.notifications import Notifier

_COLORS = {"success": "green", "error": "red", "warning": "yellow"}


class ClickNotifier(Notifier):
    """Prints notifications as they happen; a terminal has no badge to refresh,
    so the latest counter value is kept for the command to display."""

    def __init__(self) -> None:
        self.item_count = 0

    def notify(self, notification: Notification) -> None:
        click.secho(notification.message, fg=_COLORS.get(notification.kind))

    def update_item_count(self, count: int) -> None:
        self.item_count = count
