"""Tests for the aggregate SEO analyzer."""

import json
from collections import Counter
from dataclasses import replace
from unittest.mock import Mock

import pytest

from seo_audit.analyzer import SeoAnalyzer
from seo_audit.models import (
    AggregateReport,
    AnalysisFailure,
    PageData,
    SeoData,
    SiteReport,
    round_half_up,
)


class TestSeoAnalyzer:
    """Test cases for SeoAnalyzer."""

    @pytest.fixture
    def analyzer(self):
        return SeoAnalyzer()

    @pytest.fixture
    def bare_page(self):
        """A short-titled page with a query string and little else."""
        return PageData(
            url="https://ex.com/?q=1",
            title="Short",
            status_code=200,
            load_time=500,
            font_size=16,
            seo_data=SeoData(viewport="width=device-width"),
        )

    def test_optimized_page(self, analyzer, optimized_page):
        report = analyzer.analyze(optimized_page)

        assert isinstance(report, AggregateReport)
        for result in (report.content, report.meta, report.technical):
            assert result.issues == []
            assert result.score == result.max_score
            assert result.percentage == 100
        assert report.score == round_half_up((11 + 12 + 12) / 3)
        assert report.score == 12

    def test_report_copies_page_identity(self, analyzer, optimized_page):
        report = analyzer.analyze(optimized_page)

        assert report.url == optimized_page.url
        assert report.title == optimized_page.title
        assert report.description == optimized_page.meta_description

    def test_bare_page(self, analyzer, bare_page):
        report = analyzer.analyze(bare_page)

        assert report.meta.score == 7
        assert report.technical.issue_types == ["query_parameters"]
        assert report.technical.score == 11
        assert report.technical.percentage == 92
        # Content signals were not supplied
        assert report.content.issues == []
        assert report.content.score == 11
        # (11 + 7 + 11) / 3 = 9.67
        assert report.score == 10

    def test_bare_page_with_empty_social_groups(self, analyzer, bare_page):
        report = analyzer.analyze(replace(bare_page, open_graph=(), twitter=()))

        assert report.meta.score == 0
        assert report.meta.percentage == 0
        # (11 + 0 + 11) / 3 = 7.33
        assert report.score == 7

    def test_score_rounds_half_up(self, analyzer, optimized_page):
        # 11 + 12 + 11 = 34 -> 11.33
        page = replace(optimized_page, load_time=1500)
        assert analyzer.analyze(page).score == 11

        # 10.5 must round to 11, not to the even 10
        content = Mock(score=10)
        meta = Mock(score=11)
        technical = Mock(score=10.5 * 3 - 21)
        analyzer.content_analyzer = Mock(analyze=Mock(return_value=content))
        analyzer.meta_analyzer = Mock(analyze=Mock(return_value=meta))
        analyzer.technical_analyzer = Mock(analyze=Mock(return_value=technical))
        assert analyzer.analyze(page).score == 11

    def test_http_error_page(self, analyzer, optimized_page):
        report = analyzer.analyze(replace(optimized_page, status_code=404))

        assert report.technical.issue_types == ["http_error"]
        assert report.meta.issues == []
        assert report.content.issues == []

    def test_options_are_forwarded(self, optimized_page):
        content = Mock()
        content.analyze.return_value = Mock(score=1)
        meta = Mock()
        meta.analyze.return_value = Mock(score=1)
        technical = Mock()
        technical.analyze.return_value = Mock(score=1)

        analyzer = SeoAnalyzer(content, meta, technical)
        analyzer.analyze(optimized_page, {"depth": 1})

        for mock in (content, meta, technical):
            mock.analyze.assert_called_once_with(optimized_page, {"depth": 1})

    def test_analyzer_failure_returns_minimal_report(self, analyzer, optimized_page):
        analyzer.meta_analyzer = Mock()
        analyzer.meta_analyzer.analyze.side_effect = RuntimeError("boom")

        report = analyzer.analyze(optimized_page)

        assert isinstance(report, AnalysisFailure)
        assert report.to_dict() == {
            "url": optimized_page.url,
            "score": 0,
            "error": "Error analyzing page: boom",
        }

    def test_non_page_input_does_not_raise(self, analyzer):
        report = analyzer.analyze(None)

        assert isinstance(report, AnalysisFailure)
        assert report.url is None
        assert report.score == 0

    def test_recommendations_pair_with_issues(self, analyzer):
        page = PageData(
            url="https://example.com/café?q=1",
            robots="noindex, nofollow",
            open_graph=(),
            twitter=(),
            status_code=302,
            load_time=2000,
            font_size=12,
        )
        report = analyzer.analyze(page)

        for result in (report.content, report.meta, report.technical):
            paired = Counter(t for t in result.issue_types if t != "http_redirect")
            assert Counter(r.type for r in result.recommendations) == paired
        assert "http_redirect" in report.technical.issue_types

    def test_analysis_is_deterministic(self, analyzer, bare_page):
        first = analyzer.analyze(bare_page)
        second = analyzer.analyze(bare_page)

        assert first == second
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_page_is_not_mutated(self, analyzer, optimized_page):
        before = optimized_page.to_dict()
        analyzer.analyze(optimized_page)

        assert optimized_page.to_dict() == before

    def test_to_dict_uses_wire_names(self, analyzer, bare_page):
        data = analyzer.analyze(bare_page).to_dict()

        assert set(data) == {"url", "title", "description", "content", "meta", "technical", "score"}
        assert set(data["meta"]) == {"issues", "score", "maxScore", "percentage", "recommendations"}
        assert data["meta"]["issues"][0] == {
            "type": "short_title",
            "message": "Page title is too short (5 characters)",
            "impact": "medium",
            "details": {"title": "Short", "length": 5},
        }
        # Issues without details leave the key out
        assert "details" not in data["meta"]["issues"][1]


class TestBatchAnalysis:
    """Test cases for analyzing many pages."""

    @pytest.fixture
    def analyzer(self):
        return SeoAnalyzer()

    @pytest.fixture
    def pages(self, optimized_page):
        return [
            optimized_page,
            replace(optimized_page, url="https://example.com/slow", load_time=5000),
            replace(optimized_page, url="https://example.com/gone", status_code=410, load_time=5000),
        ]

    def test_analyze_many_preserves_order(self, analyzer, pages):
        reports = analyzer.analyze_many(pages, max_workers=3)

        assert [r.url for r in reports] == [p.url for p in pages]

    def test_analyze_many_matches_single_calls(self, analyzer, pages):
        reports = analyzer.analyze_many(pages, max_workers=2)

        assert reports == [analyzer.analyze(page) for page in pages]

    def test_analyze_many_empty(self, analyzer):
        assert analyzer.analyze_many([]) == []

    def test_analyze_site(self, analyzer, pages):
        site = analyzer.analyze_site(pages)

        assert isinstance(site, SiteReport)
        assert site.total_pages == 3
        assert site.failed_pages == []
        # Scores 12, 11 and 11
        assert site.average_score == 11
        assert site.common_issues == {"slow_load_time": 2, "http_error": 1}

    def test_analyze_site_reports_failures(self, analyzer, pages):
        site = analyzer.analyze_site(pages + [None])

        assert site.total_pages == 4
        assert site.failed_pages == [None]
        assert site.average_score == 11

    def test_site_report_to_dict(self, analyzer, pages):
        data = analyzer.analyze_site(pages).to_dict()

        assert data["totalPages"] == 3
        assert data["averageScore"] == 11
        assert len(data["pages"]) == 3
        assert data["pages"][0]["url"] == pages[0].url
