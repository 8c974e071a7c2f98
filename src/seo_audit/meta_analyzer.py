"""Meta tag analyzer: title, description, canonical, robots and social tags."""

from typing import Optional

from seo_audit.base import BaseAnalyzer
from seo_audit.constants import (
    CANONICAL_WEIGHT,
    META_DESCRIPTION_MAX_LENGTH,
    META_DESCRIPTION_MIN_LENGTH,
    META_DESCRIPTION_WEIGHT,
    OPEN_GRAPH_WEIGHT,
    REQUIRED_OPEN_GRAPH_PROPERTIES,
    REQUIRED_TWITTER_NAMES,
    ROBOTS_WEIGHT,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
    TITLE_WEIGHT,
    TWITTER_WEIGHT,
)
from seo_audit.models import (
    AnalysisResult,
    Impact,
    Issue,
    PageData,
    Recommendation,
)


class MetaAnalyzer(BaseAnalyzer):
    """Analyzes page meta tags for SEO best practices."""

    NAME = "meta"
    CHECKS = (
        "check_title",
        "check_meta_description",
        "check_canonical",
        "check_robots_meta",
        "check_open_graph_tags",
        "check_twitter_tags",
    )

    # Why each social tag matters, keyed by tag name
    OPEN_GRAPH_DETAILS = {
        "og:title": "The og:title tag specifies the title of the page when shared on social media.",
        "og:description": "The og:description tag specifies the description of the page when shared on social media.",
        "og:image": "The og:image tag specifies the image that should be displayed when the page is shared on social media.",
    }
    TWITTER_DETAILS = {
        "twitter:card": "The twitter:card tag specifies the type of card to use when the page is shared on Twitter.",
        "twitter:title": "The twitter:title tag specifies the title of the page when shared on Twitter.",
        "twitter:description": "The twitter:description tag specifies the description of the page when shared on Twitter.",
        "twitter:image": "The twitter:image tag specifies the image that should be displayed when the page is shared on Twitter.",
    }

    def calculate_score(self, results: AnalysisResult) -> int:
        # No floor at zero: a page can collect more issues than maxScore
        return min(results.max_score - len(results.issues), results.max_score)

    def check_title(self, page: PageData, results: AnalysisResult) -> None:
        """Check the title tag.

        Args:
            page: Page data
            results: Result being built for this call
        """
        results.max_score += TITLE_WEIGHT

        if not page.title:
            results.add_issue(
                Issue(
                    type="missing_title",
                    message="Page is missing a title tag",
                    impact=Impact.HIGH,
                ),
                Recommendation(
                    type="missing_title",
                    message="Add a title tag to the page",
                    impact=Impact.HIGH,
                    details="The title tag is a crucial element for both SEO and accessibility.",
                ),
            )
        elif len(page.title) < TITLE_MIN_LENGTH:
            results.add_issue(
                Issue(
                    type="short_title",
                    message=f"Page title is too short ({len(page.title)} characters)",
                    impact=Impact.MEDIUM,
                    details={"title": page.title, "length": len(page.title)},
                ),
                Recommendation(
                    type="short_title",
                    message=f"Make the title tag longer than {TITLE_MIN_LENGTH} characters",
                    impact=Impact.MEDIUM,
                    details="Titles should be descriptive and should properly describe the content of the page.",
                ),
            )
        elif len(page.title) > TITLE_MAX_LENGTH:
            results.add_issue(
                Issue(
                    type="long_title",
                    message=f"Page title is too long ({len(page.title)} characters)",
                    impact=Impact.MEDIUM,
                    details={"title": page.title, "length": len(page.title)},
                ),
                Recommendation(
                    type="long_title",
                    message=f"Make the title tag shorter than {TITLE_MAX_LENGTH} characters",
                    impact=Impact.MEDIUM,
                    details="Long titles can be truncated in search results, losing key context.",
                ),
            )

    def check_meta_description(self, page: PageData, results: AnalysisResult) -> None:
        """Check the meta description."""
        results.max_score += META_DESCRIPTION_WEIGHT
        description = page.meta_description

        if not description:
            results.add_issue(
                Issue(
                    type="missing_meta_description",
                    message="Page is missing a meta description",
                    impact=Impact.MEDIUM,
                ),
                Recommendation(
                    type="missing_meta_description",
                    message="Add a meta description to the page",
                    impact=Impact.MEDIUM,
                    details="A good meta description can improve click-through rates from search results.",
                ),
            )
        elif len(description) < META_DESCRIPTION_MIN_LENGTH:
            results.add_issue(
                Issue(
                    type="short_meta_description",
                    message=f"Meta description is too short ({len(description)} characters)",
                    impact=Impact.LOW,
                    details={"metaDescription": description},
                ),
                Recommendation(
                    type="short_meta_description",
                    message=f"Make the meta description longer than {META_DESCRIPTION_MIN_LENGTH} characters",
                    impact=Impact.LOW,
                    details="Short descriptions provide limited context to potential visitors.",
                ),
            )
        elif len(description) > META_DESCRIPTION_MAX_LENGTH:
            results.add_issue(
                Issue(
                    type="long_meta_description",
                    message=f"Meta description is too long ({len(description)} characters)",
                    impact=Impact.LOW,
                    details={"metaDescription": description},
                ),
                Recommendation(
                    type="long_meta_description",
                    message=f"Make the meta description shorter than {META_DESCRIPTION_MAX_LENGTH} characters",
                    impact=Impact.LOW,
                    details="Long descriptions can be truncated in search results, losing key context.",
                ),
            )

    def check_canonical(self, page: PageData, results: AnalysisResult) -> None:
        """Check the canonical link against the page URL."""
        results.max_score += CANONICAL_WEIGHT

        if page.canonical and page.canonical != page.url:
            results.add_issue(
                Issue(
                    type="incorrect_canonical",
                    message=f"Canonical tag ({page.canonical}) does not match page URL",
                    impact=Impact.LOW,
                    details={"canonical": page.canonical, "url": page.url},
                ),
                Recommendation(
                    type="incorrect_canonical",
                    message="Make sure the canonical tag matches the page URL or remove it",
                    impact=Impact.LOW,
                    details="An incorrect canonical tag can lead to duplicate content issues.",
                ),
            )
        elif not page.canonical:
            results.add_issue(
                Issue(
                    type="missing_canonical",
                    message="Page is missing a canonical tag",
                    impact=Impact.LOW,
                ),
                Recommendation(
                    type="missing_canonical",
                    message="Add a canonical tag to the page",
                    impact=Impact.LOW,
                    details="The canonical tag helps avoid duplicate content issues.",
                ),
            )

    def check_robots_meta(self, page: PageData, results: AnalysisResult) -> None:
        """Check robots directives. noindex and nofollow are reported independently."""
        results.max_score += ROBOTS_WEIGHT
        robots = page.robots

        if robots and "noindex" in robots:
            results.add_issue(
                Issue(
                    type="noindex",
                    message="Page has a noindex directive",
                    impact=Impact.HIGH,
                    details={"robots": robots},
                ),
                Recommendation(
                    type="noindex",
                    message="Remove the noindex directive if you want the page to be indexed",
                    impact=Impact.HIGH,
                    details="A noindex directive prevents search engines from indexing the page.",
                ),
            )

        if robots and "nofollow" in robots:
            results.add_issue(
                Issue(
                    type="nofollow",
                    message="Page has a nofollow directive",
                    impact=Impact.LOW,
                    details={"robots": robots},
                ),
                Recommendation(
                    type="nofollow",
                    message="Review the use of the nofollow directive",
                    impact=Impact.LOW,
                    details="A nofollow directive prevents search engines from following links on the page.",
                ),
            )

    def check_open_graph_tags(self, page: PageData, results: AnalysisResult) -> None:
        """Check Open Graph tags.

        The per-tag checks only run when the page has an Open Graph group at
        all (an empty group still counts as present).
        """
        results.max_score += OPEN_GRAPH_WEIGHT

        if not page.open_graph:
            results.add_issue(
                Issue(
                    type="missing_open_graph",
                    message="Page is missing Open Graph tags",
                    impact=Impact.LOW,
                ),
                Recommendation(
                    type="missing_open_graph",
                    message="Add Open Graph tags to the page",
                    impact=Impact.LOW,
                    details="Open Graph tags improve how the page is displayed when shared on social media.",
                ),
            )

        if page.open_graph is None:
            return

        present = {tag.property for tag in page.open_graph}
        for prop in REQUIRED_OPEN_GRAPH_PROPERTIES:
            if prop not in present:
                self._add_missing_tag(results, prop, self.OPEN_GRAPH_DETAILS.get(prop))

    def check_twitter_tags(self, page: PageData, results: AnalysisResult) -> None:
        """Check Twitter card tags, matched by name."""
        results.max_score += TWITTER_WEIGHT

        if not page.twitter:
            results.add_issue(
                Issue(
                    type="missing_twitter_tags",
                    message="Page is missing Twitter tags",
                    impact=Impact.LOW,
                ),
                Recommendation(
                    type="missing_twitter_tags",
                    message="Add Twitter tags to the page",
                    impact=Impact.LOW,
                    details="Twitter tags improve how the page is displayed when shared on Twitter.",
                ),
            )

        if page.twitter is None:
            return

        present = {tag.name for tag in page.twitter}
        for name in REQUIRED_TWITTER_NAMES:
            if name not in present:
                self._add_missing_tag(results, name, self.TWITTER_DETAILS.get(name))

    @staticmethod
    def _add_missing_tag(
        results: AnalysisResult, tag: str, details: Optional[str]
    ) -> None:
        # og:title -> missing_og_title, twitter:card -> missing_twitter_card
        issue_type = "missing_" + tag.replace(":", "_")
        results.add_issue(
            Issue(
                type=issue_type,
                message=f"Page is missing {tag} tag",
                impact=Impact.LOW,
            ),
            Recommendation(
                type=issue_type,
                message=f"Add the {tag} tag to the page",
                impact=Impact.LOW,
                details=details,
            ),
        )
