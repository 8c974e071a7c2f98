"""Tests for the content analyzer."""

from dataclasses import replace

import pytest

from seo_audit.analyzer import SeoAnalyzer
from seo_audit.constants import MIN_WORD_COUNT
from seo_audit.content_analyzer import ContentAnalyzer
from seo_audit.models import Heading, ImageInfo, Impact, LinkInfo, PageData


class TestContentAnalyzer:
    """Test suite for ContentAnalyzer."""

    @pytest.fixture
    def analyzer(self):
        return ContentAnalyzer()

    def test_optimized_page_has_no_issues(self, analyzer, optimized_page):
        result = analyzer.analyze(optimized_page)

        assert result.issues == []
        assert result.max_score == 11
        assert result.score == 11
        assert result.percentage == 100

    @pytest.mark.parametrize("word_count, expected", [
        (0, ["no_content"]),
        (120, ["thin_content"]),
        (MIN_WORD_COUNT - 1, ["thin_content"]),
        (MIN_WORD_COUNT, []),
    ])
    def test_word_count_branches_are_exclusive(self, analyzer, optimized_page, word_count, expected):
        result = analyzer.analyze(replace(optimized_page, word_count=word_count))

        assert result.issue_types == expected

    def test_thin_content_details(self, analyzer, optimized_page):
        result = analyzer.analyze(replace(optimized_page, word_count=120))

        assert result.issues[0].impact == Impact.MEDIUM
        assert result.issues[0].details == {"wordCount": 120}

    def test_missing_h1(self, analyzer, optimized_page):
        headings = (Heading("h2", "Materials"), Heading("h3", "Oak"))
        result = analyzer.analyze(replace(optimized_page, headings=headings))

        assert result.issue_types == ["missing_h1"]
        assert result.issues[0].impact == Impact.HIGH

    def test_multiple_h1(self, analyzer, optimized_page):
        headings = (Heading("h1", "Widgets"), Heading("h2", "Oak"), Heading("h1", "More widgets"))
        result = analyzer.analyze(replace(optimized_page, headings=headings))

        assert result.issue_types == ["multiple_h1"]
        assert result.issues[0].details == {"headings": ["Widgets", "More widgets"]}

    def test_skipped_heading_level(self, analyzer, optimized_page):
        headings = (Heading("h1", "Widgets"), Heading("h3", "Oak"), Heading("h5", "Grain"))
        result = analyzer.analyze(replace(optimized_page, headings=headings))

        assert result.issue_types == ["skipped_heading_level"]
        assert result.issues[0].details == {"from": "h1", "to": "h3", "text": "Oak"}

    def test_moving_back_up_is_not_a_skip(self, analyzer, optimized_page):
        headings = (
            Heading("h1", "Widgets"),
            Heading("h2", "Materials"),
            Heading("h3", "Oak"),
            Heading("h2", "Shipping"),
        )
        result = analyzer.analyze(replace(optimized_page, headings=headings))

        assert result.issues == []

    def test_no_images_is_not_an_issue(self, analyzer, optimized_page):
        result = analyzer.analyze(replace(optimized_page, images=()))

        assert result.issues == []

    def test_few_missing_alts_are_low_impact(self, analyzer, optimized_page):
        images = (
            ImageInfo(src="/a.jpg", alt="Oak"),
            ImageInfo(src="/b.jpg", alt="Pine"),
            ImageInfo(src="/c.jpg", alt="  "),
        )
        result = analyzer.analyze(replace(optimized_page, images=images))

        assert result.issue_types == ["missing_image_alt"]
        issue = result.issues[0]
        assert issue.impact == Impact.LOW
        assert issue.details["missing"] == 1
        assert issue.details["coverage"] == 66.7
        assert issue.details["images"] == ["/c.jpg"]

    def test_mostly_missing_alts_are_medium_impact(self, analyzer, optimized_page):
        images = (
            ImageInfo(src="/a.jpg", alt="Oak"),
            ImageInfo(src="/b.jpg"),
            ImageInfo(src="/c.jpg", alt=""),
        )
        result = analyzer.analyze(replace(optimized_page, images=images))

        assert result.issues[0].impact == Impact.MEDIUM
        assert result.recommendations[0].impact == Impact.MEDIUM

    def test_only_external_links(self, analyzer, optimized_page):
        links = (LinkInfo(href="https://other.org/", text="Other site"),)
        result = analyzer.analyze(replace(optimized_page, links=links))

        assert result.issue_types == ["no_internal_links"]

    def test_same_host_absolute_link_is_internal(self, analyzer, optimized_page):
        links = (LinkInfo(href="https://example.com/about", text="About"),)
        result = analyzer.analyze(replace(optimized_page, links=links))

        assert result.issues == []

    def test_mailto_link_is_not_internal(self, analyzer, optimized_page):
        links = (LinkInfo(href="mailto:sales@example.com", text="Email us"),)
        result = analyzer.analyze(replace(optimized_page, links=links))

        assert result.issue_types == ["no_internal_links"]

    def test_link_checks_are_independent(self, analyzer, optimized_page):
        links = (LinkInfo(href="https://other.org/", text=""),)
        result = analyzer.analyze(replace(optimized_page, links=links))

        assert result.issue_types == ["no_internal_links", "empty_link_text"]
        assert result.issues[1].details == {"links": ["https://other.org/"]}

    def test_empty_page(self, analyzer):
        page = PageData(url="https://example.com/", word_count=0, headings=(), images=(), links=())
        result = analyzer.analyze(page)

        assert result.issue_types == ["no_content", "missing_h1", "no_internal_links"]
        assert result.score == 8
        assert result.percentage == 73

    def test_invalid_heading_tag_is_absorbed(self, analyzer, optimized_page):
        headings = (Heading("h1", "Widgets"), Heading("header", "Oops"))
        result = analyzer.analyze(replace(optimized_page, headings=headings))

        assert result.issue_types == ["error"]
        assert result.issues[0].message.startswith("Error analyzing content: ")

    def test_unsupplied_signals_are_skipped(self, analyzer):
        result = analyzer.analyze(PageData(url="https://example.com/"))

        assert result.issues == []
        assert result.max_score == 11
        assert result.score == 11
        assert result.percentage == 100

    @pytest.mark.parametrize("field", ["word_count", "headings", "images", "links"])
    def test_each_unsupplied_signal_keeps_its_weight(self, analyzer, optimized_page, field):
        result = analyzer.analyze(replace(optimized_page, **{field: None}))

        assert result.issues == []
        assert result.max_score == 11

    def test_core_record_without_content_signals(self, analyzer):
        record = {
            "url": "https://example.com/products/widgets",
            "title": "Handmade Widgets for Every Job",
            "metaDescription": ("Handmade widgets built to last. " * 4)[:100],
            "canonical": "https://example.com/products/widgets",
            "robots": "",
            "openGraph": [
                {"property": "og:title", "content": "Handmade Widgets"},
                {"property": "og:description", "content": "Built to last."},
                {"property": "og:image", "content": "https://example.com/widgets.jpg"},
            ],
            "twitter": [
                {"name": "twitter:card", "content": "summary"},
                {"name": "twitter:title", "content": "Handmade Widgets"},
                {"name": "twitter:description", "content": "Built to last."},
                {"name": "twitter:image", "content": "https://example.com/widgets.jpg"},
            ],
            "statusCode": 200,
            "redirects": [],
            "loadTime": 800,
            "seoData": {"viewport": "width=device-width, initial-scale=1"},
            "fontSize": 18,
        }
        page = PageData.from_dict(record)

        assert analyzer.analyze(page).issues == []
        report = SeoAnalyzer().analyze(page)
        for result in (report.content, report.meta, report.technical):
            assert result.issues == []
            assert result.percentage == 100
