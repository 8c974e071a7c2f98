"""Build PageData records from already-fetched HTML."""

import logging
from typing import Iterable, Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from seo_audit.exceptions import ExtractionError
from seo_audit.models import (
    Heading,
    ImageInfo,
    LinkInfo,
    OpenGraphTag,
    PageData,
    RedirectHop,
    SeoData,
    TwitterTag,
)

logger = logging.getLogger(__name__)

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def extract_page_data(
    url: str,
    html: str,
    status_code: int = 200,
    load_time: float = 0.0,
    redirects: Iterable[RedirectHop] = (),
    font_size: Optional[float] = None,
) -> PageData:
    """Extract the fields the analyzers need from page markup.

    Args:
        url: The page URL
        html: HTML content
        status_code: HTTP status code of the fetch
        load_time: Page load time in milliseconds
        redirects: Redirect hops followed during the fetch
        font_size: Computed base font size in pixels, if the crawler measured it

    Returns:
        PageData for the page

    Raises:
        ExtractionError: If the markup cannot be parsed
    """
    try:
        soup = BeautifulSoup(html, "lxml")
    except ParserRejectedMarkup as e:
        raise ExtractionError(f"Could not parse HTML for {url}: {e}") from e

    # Title
    title = soup.find("title")
    title_text = title.get_text(strip=True) if title else None

    # Meta description
    description_tag = soup.find("meta", attrs={"name": "description"})
    description = description_tag.get("content") if description_tag else None

    # Canonical URL
    canonical_tag = soup.find("link", attrs={"rel": "canonical"})
    canonical = canonical_tag.get("href") if canonical_tag else None

    # Robots meta, kept raw
    robots_tag = soup.find("meta", attrs={"name": "robots"})
    robots = robots_tag.get("content", "").lower() if robots_tag else None

    # Open Graph
    open_graph = [
        OpenGraphTag(meta["property"], meta.get("content", ""))
        for meta in soup.find_all("meta", property=True)
        if meta["property"].startswith("og:")
    ]

    # Twitter Card
    twitter = [
        TwitterTag(meta["name"], meta.get("content", ""))
        for meta in soup.find_all(
            "meta", attrs={"name": lambda x: x and x.startswith("twitter:")}
        )
    ]

    # Viewport meta tag
    viewport_tag = soup.find("meta", attrs={"name": "viewport"})
    viewport = viewport_tag.get("content") if viewport_tag else None

    # Headings, in document order
    headings = [
        Heading(tag=el.name, text=el.get_text(strip=True))
        for el in soup.find_all(HEADING_TAGS)
    ]

    # Images
    images = [
        ImageInfo(src=img.get("src", ""), alt=img.get("alt"), loading=img.get("loading"))
        for img in soup.find_all("img")
    ]

    # Links
    links = []
    for anchor in soup.find_all("a", href=True):
        rel = anchor.get("rel")
        links.append(LinkInfo(
            href=anchor["href"],
            text=anchor.get_text(strip=True),
            rel=" ".join(rel) if isinstance(rel, list) else rel,
        ))

    # Word count over the visible body text
    word_count = 0
    if soup.body is not None:
        for element in soup.body.find_all(["script", "style", "noscript"]):
            element.decompose()
        word_count = len(soup.body.get_text(separator=" ", strip=True).split())

    page = PageData(
        url=url,
        title=title_text,
        meta_description=description,
        canonical=canonical,
        robots=robots,
        # A page without any tag in a group has no group at all
        open_graph=open_graph or None,
        twitter=twitter or None,
        status_code=status_code,
        redirects=tuple(redirects),
        load_time=load_time,
        font_size=font_size,
        seo_data=SeoData(viewport=viewport),
        word_count=word_count,
        paragraph_count=len(soup.find_all("p")),
        headings=headings,
        images=images,
        links=links,
    )

    logger.debug(
        f"Extracted page data for {url}: {word_count} words, "
        f"{len(headings)} headings, {len(images)} images, {len(links)} links"
    )
    return page
