# src/seo_audit/constants.py
"""Centralized constants for the SEO analysis engine.

Every threshold and check weight used by the analyzers lives here so tests
can refer to them by name.
"""

# =============================================================================
# Meta Analyzer Constants
# =============================================================================

# Title length bounds (characters)
TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 60

# Meta description length bounds (characters)
META_DESCRIPTION_MIN_LENGTH = 50
META_DESCRIPTION_MAX_LENGTH = 160

# Check weights (added to maxScore before each check runs)
TITLE_WEIGHT = 3
META_DESCRIPTION_WEIGHT = 3
CANONICAL_WEIGHT = 2
ROBOTS_WEIGHT = 2
OPEN_GRAPH_WEIGHT = 1
TWITTER_WEIGHT = 1

# Social tags that must be present when the tag group exists
REQUIRED_OPEN_GRAPH_PROPERTIES = ("og:title", "og:description", "og:image")
REQUIRED_TWITTER_NAMES = (
    "twitter:card",
    "twitter:title",
    "twitter:description",
    "twitter:image",
)


# =============================================================================
# Technical Analyzer Constants
# =============================================================================

HTTP_ERROR_STATUS = 400
HTTP_REDIRECT_STATUS = 300

# Load time thresholds (milliseconds)
SLOW_LOAD_TIME_MS = 3000
MODERATE_LOAD_TIME_MS = 1000

# Minimum base font size for mobile readability (pixels)
MIN_FONT_SIZE_PX = 16

# Suggested viewport markup for pages without one
VIEWPORT_SNIPPET = '<meta name="viewport" content="width=device-width, initial-scale=1.0">'

HTTP_STATUS_WEIGHT = 3
REDIRECTS_WEIGHT = 2
URL_STRUCTURE_WEIGHT = 2
LOAD_TIME_WEIGHT = 3
MOBILE_WEIGHT = 2


# =============================================================================
# Content Analyzer Constants
# =============================================================================

# Pages below this word count are thin
MIN_WORD_COUNT = 300

# Alt text coverage below this percentage escalates missing_image_alt
MIN_ALT_COVERAGE_PERCENT = 50

WORD_COUNT_WEIGHT = 3
H1_WEIGHT = 3
HEADING_HIERARCHY_WEIGHT = 1
IMAGE_ALT_WEIGHT = 2
LINKS_WEIGHT = 2


# =============================================================================
# Aggregation Constants
# =============================================================================

# Number of analyzers averaged into the overall score
ANALYZER_COUNT = 3

# Issue types listed in a site report summary
COMMON_ISSUES_LIMIT = 10

