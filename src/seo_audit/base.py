"""Shared check-and-accumulate machinery for the page analyzers."""

import logging
from typing import Optional

from seo_audit.models import (
    AnalysisResult,
    Impact,
    Issue,
    PageData,
    round_half_up,
)


class BaseAnalyzer:
    """Runs a fixed, ordered list of checks against one page.

    Subclasses name their check methods in ``CHECKS``. Every check receives
    the page and the result being built for the current call. Nothing is
    stored on the instance, so a single analyzer can serve many threads.
    """

    # Used in log lines and in the degenerate error message
    NAME: str = "page"
    CHECKS: tuple[str, ...] = ()

    def analyze(self, page: PageData, options: Optional[dict] = None) -> AnalysisResult:
        """Analyze a page.

        Args:
            page: Page data from the crawler
            options: Analysis options, passed through unchanged by the
                aggregator

        Returns:
            AnalysisResult. Failures inside a check are reported as a single
            ``error`` issue instead of being raised.
        """
        logger = logging.getLogger(type(self).__module__)
        url = getattr(page, "url", None)

        try:
            results = AnalysisResult()

            for check_name in self.CHECKS:
                getattr(self, check_name)(page, results)

            results.score = self.calculate_score(results)
            results.percentage = self.calculate_percentage(results)

            logger.debug(
                f"{self.NAME.capitalize()} analysis for {url}: "
                f"score={results.score} maxScore={results.max_score} "
                f"issues={len(results.issues)}"
            )
            return results
        except Exception as e:
            logger.exception(f"Error analyzing {self.NAME} for {url}")
            return self.error_result(e)

    def calculate_score(self, results: AnalysisResult) -> int:
        """Each issue costs one point, floored at zero."""
        return max(0, results.max_score - len(results.issues))

    @staticmethod
    def calculate_percentage(results: AnalysisResult) -> int:
        if results.max_score > 0:
            return round_half_up(results.score / results.max_score * 100)
        return 100

    def error_result(self, error: Exception) -> AnalysisResult:
        return AnalysisResult(
            issues=[
                Issue(
                    type="error",
                    message=f"Error analyzing {self.NAME}: {error}",
                    impact=Impact.HIGH,
                )
            ],
            score=0,
            max_score=1,
            percentage=0,
        )
