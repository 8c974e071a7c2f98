"""Command-line interface for the SEO audit engine."""

import argparse
import io
import json
import sys
from contextlib import redirect_stdout
from pathlib import Path
from typing import Optional

from seo_audit.analyzer import SeoAnalyzer
from seo_audit.config import Config
from seo_audit.exceptions import SeoAuditError
from seo_audit.extractor import extract_page_data
from seo_audit.logging_config import get_logger, setup_logging
from seo_audit.models import (
    AnalysisFailure,
    AnalysisResult,
    PageData,
    PageReport,
    SiteReport,
)

logger = get_logger(__name__)

HTML_SUFFIXES = {".html", ".htm"}
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def load_pages(path: str, url: Optional[str] = None, status_code: int = 200,
               load_time: float = 0.0) -> list[PageData]:
    """Load page data from a crawler JSON file or an HTML file.

    A JSON file may hold a single page record or a list of them. HTML files
    need the URL they were fetched from.

    Args:
        path: File to read
        url: URL of the page, required for HTML input
        status_code: HTTP status code to record for HTML input
        load_time: Load time in milliseconds to record for HTML input

    Returns:
        List of PageData records
    """
    file_path = Path(path)

    if file_path.suffix.lower() in HTML_SUFFIXES:
        if not url:
            raise SeoAuditError(f"--url is required to analyze HTML file {path}")
        html = file_path.read_text(encoding="utf-8", errors="replace")
        return [extract_page_data(url, html, status_code=status_code, load_time=load_time)]

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    records = data if isinstance(data, list) else [data]
    if not records:
        raise SeoAuditError(f"No page records in {path}")
    return [PageData.from_dict(record) for record in records]


def _print_result(name: str, result: AnalysisResult) -> None:
    print(f"\n{name}: {result.score}/{result.max_score} ({result.percentage}%)")
    for issue in result.issues:
        print(f"  • [{issue.impact.value}] {issue.message}")
    if result.recommendations:
        print("  Recommendations:")
        for rec in result.recommendations:
            print(f"    - {rec.message}")


def print_report(report: PageReport) -> None:
    """Print a page report in a formatted way.

    Args:
        report: AggregateReport or AnalysisFailure
    """
    if isinstance(report, AnalysisFailure):
        print(f"\n❌ Failed to analyze {report.url}: {report.error}")
        return

    print(f"\n{'=' * 60}")
    print(f"SEO Analysis for: {report.url}")
    print(f"{'=' * 60}")
    print(f"\n📊 Overall Score: {report.score}")

    _print_result("Content", report.content)
    _print_result("Meta", report.meta)
    _print_result("Technical", report.technical)

    print(f"\n{'=' * 60}\n")


def print_site_report(site: SiteReport) -> None:
    """Print a site summary followed by each page report."""
    print(f"\n{'=' * 60}")
    print(f"Site Summary: {site.total_pages} pages")
    print(f"{'=' * 60}")
    print(f"\n📊 Average Score: {site.average_score}")

    if site.failed_pages:
        print(f"\n❌ Failed pages:")
        for url in site.failed_pages:
            print(f"  • {url}")

    if site.common_issues:
        print(f"\n⚠️  Most common issues:")
        for issue_type, count in site.common_issues.items():
            print(f"  • {issue_type}: {count} pages")

    for report in site.pages:
        print_report(report)


def _write_output(output: str, output_file: Optional[str]) -> None:
    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"\nReport written to {output_file}")
    else:
        print(output)


def _write_text(printer, report, output_file: Optional[str]) -> None:
    if not output_file:
        printer(report)
        return

    buffer = io.StringIO()
    with redirect_stdout(buffer):
        printer(report)
    _write_output(buffer.getvalue(), output_file)


def analyze_command(args, config: Config) -> None:
    """Analyze one or more page data files."""
    html_files = [p for p in args.files if Path(p).suffix.lower() in HTML_SUFFIXES]
    if len(html_files) > 1:
        raise SeoAuditError("Only one HTML file can be analyzed at a time; use page data JSON for batches")

    pages = []
    for path in args.files:
        pages.extend(load_pages(
            path,
            url=args.url,
            status_code=args.status_code,
            load_time=args.load_time,
        ))

    analyzer = SeoAnalyzer()

    if len(pages) == 1:
        report = analyzer.analyze(pages[0])
        if args.output == "json":
            _write_output(json.dumps(report.to_dict(), indent=2), args.output_file)
        else:
            _write_text(print_report, report, args.output_file)
        return

    site = analyzer.analyze_site(pages, max_workers=config.max_workers)
    if args.output == "json":
        _write_output(json.dumps(site.to_dict(), indent=2), args.output_file)
    else:
        _write_text(print_site_report, site, args.output_file)


def extract_command(args, config: Config) -> None:
    """Extract page data from an HTML file and print it as JSON."""
    pages = load_pages(
        args.file,
        url=args.url,
        status_code=args.status_code,
        load_time=args.load_time,
    )
    _write_output(json.dumps(pages[0].to_dict(), indent=2), args.output_file)


def _add_html_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--url",
        help="URL the HTML was fetched from (required for HTML input)",
    )
    parser.add_argument(
        "--status-code",
        type=int,
        default=200,
        help="HTTP status code of the fetch, for HTML input (default: 200)",
    )
    parser.add_argument(
        "--load-time",
        type=float,
        default=0.0,
        help="Page load time in milliseconds, for HTML input (default: 0)",
    )
    parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file instead of stdout",
    )


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SEO Audit - Score pages for SEO quality from crawler output"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=config.log_level if config.log_level in LOG_LEVELS else "INFO",
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=config.log_file,
        help="Write logs to file in addition to console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze page data (JSON) or HTML files."
    )
    analyze_parser.add_argument(
        "files", nargs="+", help="Page data JSON files or HTML files"
    )
    analyze_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    _add_html_arguments(analyze_parser)
    analyze_parser.set_defaults(func=analyze_command)

    extract_parser = subparsers.add_parser(
        "extract", help="Extract page data JSON from an HTML file."
    )
    extract_parser.add_argument("file", help="HTML file")
    _add_html_arguments(extract_parser)
    extract_parser.set_defaults(func=extract_command)

    return parser


def main(argv: Optional[list[str]] = None):
    """Main CLI entry point."""
    config = Config.from_env()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    # Configure logging based on flags
    setup_logging(
        level=args.log_level,
        log_file=args.log_file,
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        args.func(args, config)
    except (SeoAuditError, OSError, json.JSONDecodeError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
