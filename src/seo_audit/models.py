"""Data models for SEO analysis."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

from seo_audit.exceptions import PageDataError


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (like Math.round)."""
    return int(math.floor(value + 0.5))


class Impact(str, Enum):
    """How much an issue hurts the page."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ============================================================================
# Page Data (crawler output, analyzer input)
# ============================================================================

@dataclass(frozen=True)
class OpenGraphTag:
    """A single <meta property="og:..."> tag."""
    property: str
    content: str = ""


@dataclass(frozen=True)
class TwitterTag:
    """A single <meta name="twitter:..."> tag."""
    name: str
    content: str = ""


@dataclass(frozen=True)
class RedirectHop:
    """One hop of the redirect chain followed while fetching the page."""
    url: str
    status_code: Optional[int] = None

    def to_dict(self) -> dict:
        data = {"url": self.url}
        if self.status_code is not None:
            data["statusCode"] = self.status_code
        return data


@dataclass(frozen=True)
class SeoData:
    """Technical signals collected alongside the page."""
    viewport: Optional[str] = None


@dataclass(frozen=True)
class Heading:
    tag: str  # h1..h6
    text: str = ""

    @property
    def level(self) -> int:
        return int(self.tag[1:])


@dataclass(frozen=True)
class ImageInfo:
    src: str = ""
    alt: Optional[str] = None
    loading: Optional[str] = None

    @property
    def has_alt(self) -> bool:
        return bool(self.alt and self.alt.strip())


@dataclass(frozen=True)
class LinkInfo:
    href: str = ""
    text: str = ""
    rel: Optional[str] = None


@dataclass(frozen=True)
class PageData:
    """Normalized record describing one fetched page.

    ``open_graph`` and ``twitter`` keep three states apart: ``None`` means
    the crawler found no tag group at all, an empty tuple means the group
    exists but is empty, and a non-empty tuple holds the tags found.
    The content sequences keep None apart from empty the same way.
    """

    url: str
    title: Optional[str] = None
    meta_description: Optional[str] = None
    canonical: Optional[str] = None
    robots: Optional[str] = None
    open_graph: Optional[tuple[OpenGraphTag, ...]] = None
    twitter: Optional[tuple[TwitterTag, ...]] = None
    status_code: int = 200
    redirects: tuple[RedirectHop, ...] = ()
    load_time: float = 0.0  # milliseconds
    font_size: Optional[float] = None  # pixels
    seo_data: SeoData = field(default_factory=SeoData)

    # Content signals, None when the crawler did not supply them
    word_count: Optional[int] = None
    paragraph_count: int = 0
    headings: Optional[tuple[Heading, ...]] = None
    images: Optional[tuple[ImageInfo, ...]] = None
    links: Optional[tuple[LinkInfo, ...]] = None

    def __post_init__(self):
        # Sequences are stored as tuples so analyzers cannot mutate them
        object.__setattr__(self, "redirects", tuple(self.redirects or ()))
        for name in ("open_graph", "twitter", "headings", "images", "links"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, tuple(value))

    @classmethod
    def from_dict(cls, data: dict) -> "PageData":
        """Build PageData from a crawler's camelCase JSON record.

        Args:
            data: Decoded crawler record

        Returns:
            PageData instance

        Raises:
            PageDataError: If the record is not an object, has no url, or
                holds values of the wrong type
        """
        if not isinstance(data, dict):
            raise PageDataError(
                f"Page data must be an object, got {type(data).__name__}"
            )

        url = data.get("url")
        if not url or not isinstance(url, str):
            raise PageDataError("Page data is missing a url")

        try:
            return cls(
                url=url,
                title=data.get("title"),
                meta_description=data.get("metaDescription"),
                canonical=data.get("canonical"),
                robots=data.get("robots"),
                open_graph=_parse_tags(data.get("openGraph"), OpenGraphTag, "property"),
                twitter=_parse_tags(data.get("twitter"), TwitterTag, "name"),
                status_code=int(data.get("statusCode", 200)),
                redirects=tuple(
                    _parse_redirect(hop) for hop in data.get("redirects") or ()
                ),
                load_time=float(data.get("loadTime") or 0),
                font_size=(
                    float(data["fontSize"]) if data.get("fontSize") is not None else None
                ),
                seo_data=SeoData(viewport=(data.get("seoData") or {}).get("viewport")),
                word_count=(
                    int(data["wordCount"]) if data.get("wordCount") is not None else None
                ),
                paragraph_count=int(data.get("paragraphCount") or 0),
                headings=_parse_entries(
                    data.get("headings"),
                    lambda h: Heading(tag=str(h.get("tag", "")).lower(), text=h.get("text") or ""),
                ),
                images=_parse_entries(
                    data.get("images"),
                    lambda img: ImageInfo(src=img.get("src") or "", alt=img.get("alt"), loading=img.get("loading")),
                ),
                links=_parse_entries(
                    data.get("links"),
                    lambda link: LinkInfo(href=link.get("href") or "", text=link.get("text") or "", rel=link.get("rel")),
                ),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise PageDataError(f"Malformed page data for {url}: {e}") from e

    def to_dict(self) -> dict:
        """Serialize back to the crawler's camelCase JSON shape."""
        return {
            "url": self.url,
            "title": self.title,
            "metaDescription": self.meta_description,
            "canonical": self.canonical,
            "robots": self.robots,
            "openGraph": (
                None if self.open_graph is None
                else [{"property": t.property, "content": t.content} for t in self.open_graph]
            ),
            "twitter": (
                None if self.twitter is None
                else [{"name": t.name, "content": t.content} for t in self.twitter]
            ),
            "statusCode": self.status_code,
            "redirects": [hop.to_dict() for hop in self.redirects],
            "loadTime": self.load_time,
            "fontSize": self.font_size,
            "seoData": {"viewport": self.seo_data.viewport},
            "wordCount": self.word_count,
            "paragraphCount": self.paragraph_count,
            "headings": (
                None if self.headings is None
                else [{"tag": h.tag, "text": h.text} for h in self.headings]
            ),
            "images": (
                None if self.images is None
                else [{"src": img.src, "alt": img.alt, "loading": img.loading} for img in self.images]
            ),
            "links": (
                None if self.links is None
                else [{"href": link.href, "text": link.text, "rel": link.rel} for link in self.links]
            ),
        }


def _parse_entries(value: Any, build: Callable[[dict], Any]) -> Optional[tuple]:
    """Parse a list of content entries, keeping an absent list as None."""
    if value is None:
        return None
    return tuple(build(entry) for entry in value)


def _parse_tags(value: Any, tag_class: type, key: str) -> Optional[tuple]:
    """Parse an Open Graph / Twitter tag group, keeping None distinct from empty."""
    if value is None:
        return None
    # Some crawlers emit {"og:title": "..."} instead of a list of entries
    if isinstance(value, dict):
        return tuple(tag_class(name, content or "") for name, content in value.items())
    return tuple(tag_class(entry[key], entry.get("content") or "") for entry in value)


def _parse_redirect(hop: Any) -> RedirectHop:
    if isinstance(hop, str):
        return RedirectHop(url=hop)
    status = hop.get("statusCode", hop.get("status"))
    return RedirectHop(
        url=hop.get("url", ""),
        status_code=int(status) if status is not None else None,
    )


# ============================================================================
# Analysis Results
# ============================================================================

@dataclass
class Issue:
    """A detected SEO problem."""
    type: str
    message: str
    impact: Impact
    details: Optional[dict] = None

    def to_dict(self) -> dict:
        data = {"type": self.type, "message": self.message, "impact": self.impact.value}
        if self.details is not None:
            data["details"] = self.details
        return data


@dataclass
class Recommendation:
    """Actionable guidance paired with the issue of the same type."""
    type: str
    message: str
    impact: Impact
    details: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"type": self.type, "message": self.message, "impact": self.impact.value}
        if self.details is not None:
            data["details"] = self.details
        return data


@dataclass
class AnalysisResult:
    """Output shared by the meta, technical and content analyzers."""

    issues: list[Issue] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
    score: int = 0
    max_score: int = 0
    percentage: int = 100

    @property
    def issue_types(self) -> list[str]:
        return [issue.type for issue in self.issues]

    def add_issue(
        self,
        issue: Issue,
        recommendation: Optional[Recommendation] = None,
    ) -> None:
        """Record an issue and, when given, its paired recommendation."""
        self.issues.append(issue)
        if recommendation is not None:
            self.recommendations.append(recommendation)

    def to_dict(self) -> dict:
        return {
            "issues": [issue.to_dict() for issue in self.issues],
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "recommendations": [rec.to_dict() for rec in self.recommendations],
        }


@dataclass
class AggregateReport:
    """Merged report of all three analyzers for one page."""

    url: str
    title: Optional[str]
    description: Optional[str]
    content: AnalysisResult
    meta: AnalysisResult
    technical: AnalysisResult
    score: int = 0

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "content": self.content.to_dict(),
            "meta": self.meta.to_dict(),
            "technical": self.technical.to_dict(),
            "score": self.score,
        }


@dataclass
class AnalysisFailure:
    """Minimal report returned when the aggregator itself fails."""

    url: Optional[str]
    error: str
    score: int = 0

    def to_dict(self) -> dict:
        return {"url": self.url, "score": self.score, "error": self.error}


PageReport = Union[AggregateReport, AnalysisFailure]


@dataclass
class SiteReport:
    """Summary of analyzing many pages of one site."""

    total_pages: int = 0
    average_score: int = 0
    failed_pages: list[str] = field(default_factory=list)
    common_issues: dict[str, int] = field(default_factory=dict)  # issue type: page count
    pages: list[PageReport] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalPages": self.total_pages,
            "averageScore": self.average_score,
            "failedPages": self.failed_pages,
            "commonIssues": self.common_issues,
            "pages": [page.to_dict() for page in self.pages],
        }
