"""Content analyzer: word count, headings, image alt text and links.

Checks, in order, with their maxScore weights. A check whose signal the
crawler did not supply (None) is skipped but keeps its weight.

1. Word count (3): ``no_content`` when there are no words, otherwise
   ``thin_content`` below MIN_WORD_COUNT.
2. H1 (3): ``missing_h1`` or ``multiple_h1``.
3. Heading hierarchy (1): ``skipped_heading_level`` for the first jump of
   more than one level down (h1 -> h3).
4. Image alt text (2): ``missing_image_alt``, medium impact when coverage is
   below MIN_ALT_COVERAGE_PERCENT, low otherwise.
5. Links (2): ``no_internal_links`` and ``empty_link_text``, independently.
"""

from typing import Optional
from urllib.parse import urlparse

from seo_audit.base import BaseAnalyzer
from seo_audit.constants import (
    H1_WEIGHT,
    HEADING_HIERARCHY_WEIGHT,
    IMAGE_ALT_WEIGHT,
    LINKS_WEIGHT,
    MIN_ALT_COVERAGE_PERCENT,
    MIN_WORD_COUNT,
    WORD_COUNT_WEIGHT,
)
from seo_audit.models import (
    AnalysisResult,
    Heading,
    Impact,
    Issue,
    LinkInfo,
    PageData,
    Recommendation,
)

# Link schemes that point neither inside nor outside the site
NON_NAVIGATIONAL_SCHEMES = ("mailto:", "tel:", "javascript:")


class ContentAnalyzer(BaseAnalyzer):
    """Analyzes body content signals supplied by the crawler."""

    NAME = "content"
    CHECKS = (
        "check_word_count",
        "check_h1",
        "check_heading_hierarchy",
        "check_image_alt_text",
        "check_links",
    )

    def check_word_count(self, page: PageData, results: AnalysisResult) -> None:
        """Check the amount of body text.

        Args:
            page: Page data
            results: Result being built for this call
        """
        results.max_score += WORD_COUNT_WEIGHT
        word_count = page.word_count
        if word_count is None:
            return

        if word_count == 0:
            results.add_issue(
                Issue(
                    type="no_content",
                    message="Page has no text content",
                    impact=Impact.HIGH,
                ),
                Recommendation(
                    type="no_content",
                    message="Add descriptive text content to the page",
                    impact=Impact.HIGH,
                    details="Search engines rely on text to understand what a page is about.",
                ),
            )
        elif word_count < MIN_WORD_COUNT:
            results.add_issue(
                Issue(
                    type="thin_content",
                    message=f"Page content is thin ({word_count} words)",
                    impact=Impact.MEDIUM,
                    details={"wordCount": word_count},
                ),
                Recommendation(
                    type="thin_content",
                    message=f"Expand the page content to at least {MIN_WORD_COUNT} words",
                    impact=Impact.MEDIUM,
                    details="Thin pages rarely rank well and offer little value to visitors.",
                ),
            )

    def check_h1(self, page: PageData, results: AnalysisResult) -> None:
        """Check that the page has exactly one H1."""
        results.max_score += H1_WEIGHT
        if page.headings is None:
            return

        h1_texts = [h.text for h in page.headings if h.tag == "h1"]

        if not h1_texts:
            results.add_issue(
                Issue(
                    type="missing_h1",
                    message="Page is missing an H1 heading",
                    impact=Impact.HIGH,
                ),
                Recommendation(
                    type="missing_h1",
                    message="Add a single H1 heading describing the page",
                    impact=Impact.HIGH,
                    details="The H1 tells visitors and search engines what the page is about.",
                ),
            )
        elif len(h1_texts) > 1:
            results.add_issue(
                Issue(
                    type="multiple_h1",
                    message=f"Page has {len(h1_texts)} H1 headings",
                    impact=Impact.MEDIUM,
                    details={"headings": h1_texts},
                ),
                Recommendation(
                    type="multiple_h1",
                    message="Use a single H1 heading and demote the others",
                    impact=Impact.MEDIUM,
                    details="Several H1 headings make the main topic of the page unclear.",
                ),
            )

    def check_heading_hierarchy(self, page: PageData, results: AnalysisResult) -> None:
        """Check that headings do not skip levels on the way down."""
        results.max_score += HEADING_HIERARCHY_WEIGHT
        if page.headings is None:
            return

        skip = self._find_skipped_level(page.headings)

        if skip is not None:
            previous, current = skip
            results.add_issue(
                Issue(
                    type="skipped_heading_level",
                    message=f"Heading structure skips from {previous.tag} to {current.tag}",
                    impact=Impact.LOW,
                    details={
                        "from": previous.tag,
                        "to": current.tag,
                        "text": current.text,
                    },
                ),
                Recommendation(
                    type="skipped_heading_level",
                    message="Nest headings one level at a time",
                    impact=Impact.LOW,
                    details="A consistent heading outline helps screen readers and crawlers follow the page.",
                ),
            )

    def check_image_alt_text(self, page: PageData, results: AnalysisResult) -> None:
        """Check alt text coverage of images."""
        results.max_score += IMAGE_ALT_WEIGHT
        if not page.images:
            return

        total = len(page.images)
        with_alt = sum(1 for image in page.images if image.has_alt)
        missing = total - with_alt
        if missing == 0:
            return

        coverage = with_alt / total * 100
        impact = Impact.MEDIUM if coverage < MIN_ALT_COVERAGE_PERCENT else Impact.LOW
        results.add_issue(
            Issue(
                type="missing_image_alt",
                message=f"{missing} of {total} images are missing alt text",
                impact=impact,
                details={
                    "missing": missing,
                    "total": total,
                    "coverage": round(coverage, 1),
                    "images": [image.src for image in page.images if not image.has_alt],
                },
            ),
            Recommendation(
                type="missing_image_alt",
                message="Add descriptive alt text to every image",
                impact=impact,
                details="Alt text makes images accessible and lets search engines understand them.",
            ),
        )

    def check_links(self, page: PageData, results: AnalysisResult) -> None:
        """Check for internal links and for links without anchor text."""
        results.max_score += LINKS_WEIGHT
        if page.links is None:
            return

        internal = [link for link in page.links if self._is_internal(link, page.url)]
        if not internal:
            results.add_issue(
                Issue(
                    type="no_internal_links",
                    message="Page has no internal links",
                    impact=Impact.LOW,
                    details={"totalLinks": len(page.links)},
                ),
                Recommendation(
                    type="no_internal_links",
                    message="Link to related pages on the same site",
                    impact=Impact.LOW,
                    details="Internal links help crawlers discover pages and spread link equity.",
                ),
            )

        empty = [link.href for link in page.links if not link.text.strip()]
        if empty:
            results.add_issue(
                Issue(
                    type="empty_link_text",
                    message=f"{len(empty)} links have no anchor text",
                    impact=Impact.LOW,
                    details={"links": empty},
                ),
                Recommendation(
                    type="empty_link_text",
                    message="Give every link descriptive anchor text",
                    impact=Impact.LOW,
                    details="Anchor text tells search engines what the linked page is about.",
                ),
            )

    @staticmethod
    def _find_skipped_level(
        headings: tuple[Heading, ...]
    ) -> Optional[tuple[Heading, Heading]]:
        """Return the first (previous, current) pair that skips a level."""
        previous = None
        for heading in headings:
            if previous is not None and heading.level > previous.level + 1:
                return previous, heading
            previous = heading
        return None

    @staticmethod
    def _is_internal(link: LinkInfo, page_url: str) -> bool:
        href = link.href.strip()
        if not href or href.lower().startswith(NON_NAVIGATIONAL_SCHEMES):
            return False
        if not href.startswith(("http://", "https://", "//")):
            return True
        return urlparse(href).netloc == urlparse(page_url).netloc
