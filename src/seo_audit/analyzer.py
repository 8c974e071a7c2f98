"""SEO analyzer that combines the content, meta and technical analyzers."""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from seo_audit.constants import ANALYZER_COUNT, COMMON_ISSUES_LIMIT
from seo_audit.content_analyzer import ContentAnalyzer
from seo_audit.meta_analyzer import MetaAnalyzer
from seo_audit.models import (
    AggregateReport,
    AnalysisFailure,
    PageData,
    PageReport,
    SiteReport,
    round_half_up,
)
from seo_audit.technical_analyzer import TechnicalAnalyzer

logger = logging.getLogger(__name__)


class SeoAnalyzer:
    """Main SEO analyzer for web pages."""

    def __init__(
        self,
        content_analyzer: Optional[ContentAnalyzer] = None,
        meta_analyzer: Optional[MetaAnalyzer] = None,
        technical_analyzer: Optional[TechnicalAnalyzer] = None,
    ):
        """Initialize the SEO analyzer.

        Args:
            content_analyzer: Content analyzer to use
            meta_analyzer: Meta tag analyzer to use
            technical_analyzer: Technical analyzer to use
        """
        self.content_analyzer = content_analyzer or ContentAnalyzer()
        self.meta_analyzer = meta_analyzer or MetaAnalyzer()
        self.technical_analyzer = technical_analyzer or TechnicalAnalyzer()

    def analyze(self, page: PageData, options: Optional[dict] = None) -> PageReport:
        """Analyze a page.

        Args:
            page: Page data from the crawler
            options: Analysis options forwarded to each analyzer

        Returns:
            AggregateReport, or AnalysisFailure if something escaped the
            analyzers' own error handling
        """
        options = options or {}
        url = getattr(page, "url", None)

        try:
            content = self.content_analyzer.analyze(page, options)
            meta = self.meta_analyzer.analyze(page, options)
            technical = self.technical_analyzer.analyze(page, options)

            report = AggregateReport(
                url=page.url,
                title=page.title,
                description=page.meta_description,
                content=content,
                meta=meta,
                technical=technical,
                score=round_half_up(
                    (content.score + meta.score + technical.score) / ANALYZER_COUNT
                ),
            )

            logger.debug(
                f"SEO analysis for {url}: score={report.score} "
                f"content={content.score} meta={meta.score} technical={technical.score}"
            )
            return report
        except Exception as e:
            logger.exception(f"Error analyzing page {url}")
            return AnalysisFailure(url=url, error=f"Error analyzing page: {e}")

    def analyze_many(
        self,
        pages: Iterable[PageData],
        options: Optional[dict] = None,
        max_workers: Optional[int] = None,
    ) -> list[PageReport]:
        """Analyze several pages in parallel.

        Args:
            pages: Pages to analyze
            options: Analysis options forwarded to every call
            max_workers: Thread pool size (None lets the executor decide)

        Returns:
            One report per page, in input order
        """
        pages = list(pages)
        if not pages:
            return []

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda page: self.analyze(page, options), pages))

    def analyze_site(
        self,
        pages: Iterable[PageData],
        options: Optional[dict] = None,
        max_workers: Optional[int] = None,
    ) -> SiteReport:
        """Analyze the pages of a site and summarize the results.

        Args:
            pages: Pages to analyze
            options: Analysis options forwarded to every call
            max_workers: Thread pool size

        Returns:
            SiteReport with the average score and the most common issues
        """
        reports = self.analyze_many(pages, options=options, max_workers=max_workers)
        site = SiteReport(total_pages=len(reports), pages=reports)

        scores = []
        issue_counts: Counter = Counter()
        for report in reports:
            if isinstance(report, AnalysisFailure):
                site.failed_pages.append(report.url)
                continue

            scores.append(report.score)
            # Count each issue type once per page
            issue_counts.update(dict.fromkeys(
                issue.type
                for result in (report.content, report.meta, report.technical)
                for issue in result.issues
            ).keys())

        if scores:
            site.average_score = round_half_up(sum(scores) / len(scores))
        site.common_issues = dict(issue_counts.most_common(COMMON_ISSUES_LIMIT))

        logger.info(
            f"Analyzed {site.total_pages} pages: average score {site.average_score}, "
            f"{len(site.failed_pages)} failed"
        )
        return site
