"""Shared fixtures for the SEO audit tests."""

import pytest

from seo_audit.models import (
    Heading,
    ImageInfo,
    LinkInfo,
    OpenGraphTag,
    PageData,
    SeoData,
    TwitterTag,
)

PAGE_URL = "https://example.com/products/widgets"

# 30 characters
OPTIMIZED_TITLE = "Handmade Widgets for Every Job"
# 100 characters
OPTIMIZED_DESCRIPTION = ("Handmade widgets built to last. " * 4)[:100]


@pytest.fixture
def optimized_page():
    """A page that passes every check of every analyzer."""
    return PageData(
        url=PAGE_URL,
        title=OPTIMIZED_TITLE,
        meta_description=OPTIMIZED_DESCRIPTION,
        canonical=PAGE_URL,
        robots=None,
        open_graph=(
            OpenGraphTag("og:title", OPTIMIZED_TITLE),
            OpenGraphTag("og:description", OPTIMIZED_DESCRIPTION),
            OpenGraphTag("og:image", "https://example.com/widgets.jpg"),
        ),
        twitter=(
            TwitterTag("twitter:card", "summary_large_image"),
            TwitterTag("twitter:title", OPTIMIZED_TITLE),
            TwitterTag("twitter:description", OPTIMIZED_DESCRIPTION),
            TwitterTag("twitter:image", "https://example.com/widgets.jpg"),
        ),
        status_code=200,
        redirects=(),
        load_time=800,
        font_size=18,
        seo_data=SeoData(viewport="width=device-width, initial-scale=1"),
        word_count=650,
        paragraph_count=6,
        headings=(
            Heading("h1", "Handmade Widgets"),
            Heading("h2", "Materials"),
            Heading("h3", "Oak"),
            Heading("h2", "Shipping"),
        ),
        images=(
            ImageInfo(src="/img/oak.jpg", alt="Oak widget"),
            ImageInfo(src="/img/pine.jpg", alt="Pine widget"),
        ),
        links=(
            LinkInfo(href="/about", text="About us"),
            LinkInfo(href="https://example.com/contact", text="Contact"),
            LinkInfo(href="https://woodworking.org/guide", text="Woodworking guide"),
        ),
    )
