"""Unit tests for share-link image URL resolution."""

import pytest

from storefront.domain.service.image_url_resolver import ImageUrlResolver

THUMB = "https://drive.google.com/thumbnail?id={}&sz=w800"


class TestImageUrlResolver:

    def test_path_embedded_file_id(self):
        url = "https://drive.google.com/file/d/ABC123/view?usp=sharing"
        assert ImageUrlResolver().resolve(url) == THUMB.format("ABC123")

    def test_open_id_query_parameter(self):
        url = "https://drive.google.com/open?id=XYZ789"
        assert ImageUrlResolver().resolve(url) == THUMB.format("XYZ789")

    def test_direct_content_form(self):
        url = "https://drive.google.com/uc?export=view&id=UC456"
        assert ImageUrlResolver().resolve(url) == THUMB.format("UC456")

    def test_query_id_takes_precedence_over_path(self):
        url = "https://drive.google.com/file/d/PATHID/view?id=QUERYID"
        assert ImageUrlResolver().resolve(url) == THUMB.format("QUERYID")

    def test_custom_width(self):
        url = "https://drive.google.com/file/d/ABC123/view"
        assert ImageUrlResolver(width=400).resolve(url).endswith("&sz=w400")

    @pytest.mark.parametrize("url", [
        "https://images.unsplash.com/photo-1?w=600",
        "https://cdn.example.com/file/d/ABC123/view",
        "/static/tee.jpg",
    ])
    def test_other_urls_pass_through(self, url):
        assert ImageUrlResolver().resolve(url) == url

    def test_share_link_without_id_is_unchanged(self):
        url = "https://drive.google.com/drive/folders"
        assert ImageUrlResolver().resolve(url) == url

    @pytest.mark.parametrize("ref", ["", None])
    def test_empty_reference(self, ref):
        assert ImageUrlResolver().resolve(ref) == ""
