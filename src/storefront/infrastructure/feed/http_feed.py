"""HTTP implementation of CatalogFeed for published spreadsheet CSVs."""

from __future__ import annotations

import requests

from storefront.domain.exceptions import FeedError
from storefront.domain.repository.catalog_feed import CatalogFeed
from storefront.logger import get_logger

logger = get_logger(__name__)

USER_AGENT = "storefront-catalog/0.1"


class HttpCatalogFeed(CatalogFeed):
    """Single GET of the configured feed URL, no retries."""

    def __init__(
        self,
        url: str,
        timeout: float | None = 30,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url.strip()
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})

    def fetch(self) -> str:
        if not self._url.startswith(("http://", "https://")):
            raise FeedError(f"Feed URL is not configured: {self._url!r}")

        logger.info("Fetching catalog feed from %s", self._url)
        try:
            r = self._session.get(self._url, timeout=self._timeout)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise FeedError(f"Failed to fetch catalog feed: {exc}") from exc

        # Published sheets are UTF-8 but often served without a charset;
        # utf-8-sig also drops a leading byte-order mark.
        if "charset" not in r.headers.get("Content-Type", "").lower():
            r.encoding = "utf-8-sig"
        return r.text
