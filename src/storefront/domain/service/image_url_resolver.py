"""Domain service: turn share links into directly embeddable image URLs.

Product sheets are usually maintained by hand, and people paste whatever
link the file host's "share" button gives them. Those links open a
viewer page, not an image, so they are rewritten to the host's
thumbnail endpoint before rendering.
"""

from __future__ import annotations

import re

SHARE_HOST = "drive.google.com"
DEFAULT_WIDTH = 800

# Highest precedence first.
_ID_PATTERNS = (
    re.compile(r"/uc\?.*id=([^&]+)"),     # https://drive.google.com/uc?export=view&id=ID
    re.compile(r"[?&]id=([^&]+)"),        # https://drive.google.com/open?id=ID
    re.compile(r"/file/d/([^/]+)"),       # https://drive.google.com/file/d/ID/view
)


class ImageUrlResolver:
    """Stateless resolver; ``width`` sets the thumbnail preview size."""

    def __init__(self, width: int = DEFAULT_WIDTH) -> None:
        self._width = width

    def resolve(self, reference: str | None) -> str:
        if not reference:
            return ""

        if SHARE_HOST not in reference:
            return reference

        file_id = self.extract_file_id(reference)
        if file_id is None:
            return reference

        return f"https://{SHARE_HOST}/thumbnail?id={file_id}&sz=w{self._width}"

    @staticmethod
    def extract_file_id(reference: str) -> str | None:
        for pattern in _ID_PATTERNS:
            match = pattern.search(reference)
            if match:
                return match.group(1)
        return None
