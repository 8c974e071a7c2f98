"""Rule-based SEO analysis engine for crawled pages."""

__version__ = "0.1.0"

from seo_audit.analyzer import SeoAnalyzer
from seo_audit.content_analyzer import ContentAnalyzer
from seo_audit.meta_analyzer import MetaAnalyzer
from seo_audit.technical_analyzer import TechnicalAnalyzer
from seo_audit.extractor import extract_page_data
from seo_audit.exceptions import SeoAuditError, PageDataError, ExtractionError
from seo_audit.models import (
    Impact,
    PageData,
    OpenGraphTag,
    TwitterTag,
    RedirectHop,
    SeoData,
    Heading,
    ImageInfo,
    LinkInfo,
    Issue,
    Recommendation,
    AnalysisResult,
    AggregateReport,
    AnalysisFailure,
    SiteReport,
)

__all__ = [
    # Analyzers
    "SeoAnalyzer",
    "ContentAnalyzer",
    "MetaAnalyzer",
    "TechnicalAnalyzer",
    "extract_page_data",
    # Errors
    "SeoAuditError",
    "PageDataError",
    "ExtractionError",
    # Models
    "Impact",
    "PageData",
    "OpenGraphTag",
    "TwitterTag",
    "RedirectHop",
    "SeoData",
    "Heading",
    "ImageInfo",
    "LinkInfo",
    "Issue",
    "Recommendation",
    "AnalysisResult",
    "AggregateReport",
    "AnalysisFailure",
    "SiteReport",
]
