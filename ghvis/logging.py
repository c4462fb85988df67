"""
ghvis logging utilities.

Loggers live under the `ghvis` namespace; HTTP traffic goes to `ghvis.http`
at DEBUG. Tokens and Authorization headers are never written out.
"""

import logging
from typing import Any

_logger = logging.getLogger("ghvis")
_http_logger = logging.getLogger("ghvis.http")

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_SENSITIVE_KEYS = {"authorization", "token", "secret", "password"}


def configure_logging(
    level: int | str = logging.WARNING,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure ghvis logging.

    Args:
        level: Log level for the `ghvis` logger tree (int or name like "DEBUG")
        handler: Custom handler (default: StreamHandler to stderr)
        format_string: Custom format string

    Calling it again replaces the handler installed by a previous call.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    handler._ghvis = True  # type: ignore[attr-defined]

    for h in list(_logger.handlers):
        if getattr(h, "_ghvis", False):
            _logger.removeHandler(h)
    _logger.addHandler(handler)
    _logger.setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the `ghvis` logger, or the `ghvis.<name>` child."""
    if name is None:
        return _logger
    return logging.getLogger(f"ghvis.{name}")


def safe_log_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Copy of `data` with sensitive values replaced by "[REDACTED]"."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(sk in key_lower for sk in _SENSITIVE_KEYS):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value)
        else:
            result[key] = value
    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: dict[str, Any] | None = None,
) -> None:
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    parts = [f"{method} {url}"]
    if headers:
        parts.append(f"headers={safe_log_dict(headers)}")
    if body:
        parts.append(f"body={safe_log_dict(body)}")
    _http_logger.debug(" | ".join(parts))


def log_http_response(status: int, url: str, elapsed_ms: float | None = None) -> None:
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    parts = [f"Response {status} from {url}"]
    if elapsed_ms is not None:
        parts.append(f"elapsed={elapsed_ms:.2f}ms")
    _http_logger.debug(" | ".join(parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
