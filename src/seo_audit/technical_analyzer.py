"""Technical analyzer: HTTP status, redirects, URL shape, speed and mobile signals."""

import re

from seo_audit.base import BaseAnalyzer
from seo_audit.constants import (
    HTTP_ERROR_STATUS,
    HTTP_REDIRECT_STATUS,
    HTTP_STATUS_WEIGHT,
    LOAD_TIME_WEIGHT,
    MIN_FONT_SIZE_PX,
    MOBILE_WEIGHT,
    MODERATE_LOAD_TIME_MS,
    REDIRECTS_WEIGHT,
    SLOW_LOAD_TIME_MS,
    URL_STRUCTURE_WEIGHT,
    VIEWPORT_SNIPPET,
)
from seo_audit.models import (
    AnalysisResult,
    Impact,
    Issue,
    PageData,
    Recommendation,
)

ASCII_ONLY = re.compile(r"[\x00-\x7F]*")


def format_ms(value: float) -> str:
    """Render a millisecond value without a trailing .0 or an exponent."""
    return str(int(value)) if float(value).is_integer() else str(value)


class TechnicalAnalyzer(BaseAnalyzer):
    """Analyzes technical aspects of a page."""

    NAME = "technical aspects"
    CHECKS = (
        "check_http_status",
        "check_redirects",
        "check_url_structure",
        "check_load_time",
        "check_mobile_friendliness",
    )

    def check_http_status(self, page: PageData, results: AnalysisResult) -> None:
        """Check the HTTP status code of the page fetch.

        Args:
            page: Page data
            results: Result being built for this call
        """
        results.max_score += HTTP_STATUS_WEIGHT

        if page.status_code >= HTTP_ERROR_STATUS:
            results.add_issue(
                Issue(
                    type="http_error",
                    message=f"Page returned HTTP error code {page.status_code}",
                    impact=Impact.HIGH,
                    details={"code": page.status_code},
                ),
                Recommendation(
                    type="http_error",
                    message="Check and fix the HTTP error code",
                    impact=Impact.HIGH,
                    details="HTTP error codes prevent search engines and users from accessing the page content.",
                ),
            )
        elif page.status_code >= HTTP_REDIRECT_STATUS:
            # No paired recommendation for this branch
            results.add_issue(
                Issue(
                    type="http_redirect",
                    message=f"Page returned HTTP redirect code {page.status_code}",
                    impact=Impact.MEDIUM,
                    details={"code": page.status_code},
                )
            )

    def check_redirects(self, page: PageData, results: AnalysisResult) -> None:
        """Check whether fetching the page went through redirects."""
        results.max_score += REDIRECTS_WEIGHT

        if page.redirects:
            results.add_issue(
                Issue(
                    type="redirects",
                    message=f"Page has {len(page.redirects)} redirects",
                    impact=Impact.MEDIUM,
                    details={"redirects": [hop.to_dict() for hop in page.redirects]},
                ),
                Recommendation(
                    type="redirects",
                    message="Remove or limit the number of redirects to the page.",
                    impact=Impact.MEDIUM,
                    details="Redirects increase load time and can dilute link equity.",
                ),
            )

    def check_url_structure(self, page: PageData, results: AnalysisResult) -> None:
        """Check for query parameters and non-ASCII characters in the URL."""
        results.max_score += URL_STRUCTURE_WEIGHT

        if "?" in page.url:
            results.add_issue(
                Issue(
                    type="query_parameters",
                    message="URL contains query parameters",
                    impact=Impact.LOW,
                    details={"url": page.url},
                ),
                Recommendation(
                    type="query_parameters",
                    message="Consider removing unnecessary query parameters from the URL",
                    impact=Impact.LOW,
                    details="Clean URLs without query parameters are often preferred for SEO.",
                ),
            )

        if not ASCII_ONLY.fullmatch(page.url):
            results.add_issue(
                Issue(
                    type="non_ascii_url",
                    message="URL contains non-ASCII characters",
                    impact=Impact.LOW,
                    details={"url": page.url},
                ),
                Recommendation(
                    type="non_ascii_url",
                    message="Consider using URL-encoded or ASCII-only characters in the URL",
                    impact=Impact.LOW,
                    details="Non-ASCII characters can cause issues with some systems and are not always ideal for sharing.",
                ),
            )

    def check_load_time(self, page: PageData, results: AnalysisResult) -> None:
        """Check page load time in milliseconds."""
        results.max_score += LOAD_TIME_WEIGHT
        load_time = page.load_time

        if load_time > SLOW_LOAD_TIME_MS:
            results.add_issue(
                Issue(
                    type="slow_load_time",
                    message=f"Page load time is slow ({format_ms(load_time)}ms)",
                    impact=Impact.HIGH,
                    details={"loadTime": load_time},
                ),
                Recommendation(
                    type="slow_load_time",
                    message="Optimize the page to improve load time",
                    impact=Impact.HIGH,
                    details="Slow load times can negatively impact user experience and search rankings.",
                ),
            )
        elif load_time > MODERATE_LOAD_TIME_MS:
            results.add_issue(
                Issue(
                    type="moderate_load_time",
                    message=f"Page load time is moderate ({format_ms(load_time)}ms)",
                    impact=Impact.MEDIUM,
                    details={"loadTime": load_time},
                ),
                Recommendation(
                    type="moderate_load_time",
                    message="Improve page load time",
                    impact=Impact.MEDIUM,
                    details="Moderate load times can negatively impact user experience and search rankings.",
                ),
            )

    def check_mobile_friendliness(self, page: PageData, results: AnalysisResult) -> None:
        """Check the viewport meta tag and base font size."""
        results.max_score += MOBILE_WEIGHT

        if not page.seo_data or not page.seo_data.viewport:
            results.add_issue(
                Issue(
                    type="missing_viewport",
                    message="Page is missing viewport meta tag",
                    impact=Impact.HIGH,
                ),
                Recommendation(
                    type="missing_viewport",
                    message="Add a viewport meta tag to enable proper mobile display",
                    impact=Impact.HIGH,
                    details=VIEWPORT_SNIPPET,
                ),
            )

        # Unknown font size is not reported
        if page.font_size is not None and page.font_size < MIN_FONT_SIZE_PX:
            results.add_issue(
                Issue(
                    type="small_font_size",
                    message="Page has a small font size",
                    impact=Impact.MEDIUM,
                    details={"fontSize": page.font_size},
                ),
                Recommendation(
                    type="small_font_size",
                    message="Increase the font size to improve mobile readability",
                    impact=Impact.MEDIUM,
                    details="Small font sizes can make it difficult to read content on mobile devices.",
                ),
            )
