"""Exceptions raised by the SEO audit engine."""


class SeoAuditError(Exception):
    """Base class for all seo_audit errors."""


class PageDataError(SeoAuditError):
    """Raised when a crawler record cannot be turned into PageData."""


class ExtractionError(SeoAuditError):
    """Raised when page markup cannot be parsed into PageData."""
