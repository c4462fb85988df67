"""Module holding constants used across ghvis."""

from .. import __version__

GRAPHQL_ENDPOINT = "https://api.github.com/graphql"
API_BASE = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
USER_AGENT = f"ghvis/{__version__}"
HTTP_TIMEOUT_SEC = 30
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 100  # GitHub caps `first:` at 100
DEFAULT_MAX_PAGES = 5000

# table layout
VISIBILITY_WIDTH = 10
DESCRIPTION_WIDTH = 50
