"""ghvis exception classes."""


class GitHubError(RuntimeError):
    """Base exception for all ghvis errors."""


class UsageError(GitHubError):
    """Raised on an invalid command-line invocation."""


class ConfigError(GitHubError):
    """Raised when required configuration (the access token) is missing or invalid."""


class ValidationError(GitHubError):
    """Raised when a `name:visibility` change token cannot be parsed."""

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"invalid change request {token!r}: {reason}")


class PaginationLimitError(GitHubError):
    """Raised when the server keeps reporting more pages past the configured cap."""

    def __init__(self, max_pages: int) -> None:
        self.max_pages = max_pages
        super().__init__(f"gave up after {max_pages} pages; server still reports more")


class TransportError(GitHubError):
    """Base for failures talking to the API."""

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class ConnectionFailure(TransportError):
    """Raised when the request never got a response (DNS, refused, timeout)."""


class HTTPStatusError(TransportError):
    """Raised on a non-2xx response."""

    def __init__(self, status: int, message: str, url: str | None = None) -> None:
        self.status = status
        super().__init__(f"HTTP {status}: {message}", url)


class DecodeError(TransportError):
    """Raised when a response body is not JSON or does not have the expected shape."""


class GraphQLError(TransportError):
    """Raised when a GraphQL response carries `errors` and no usable data."""

    def __init__(self, messages: list[str], url: str | None = None) -> None:
        self.messages = messages
        super().__init__("GraphQL error: " + "; ".join(messages), url)
