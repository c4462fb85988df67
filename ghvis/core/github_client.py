"""GitHub API transport: GraphQL listing and REST visibility updates."""

from __future__ import annotations

import base64
import http.client
import json
import time
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError as ShapeError

from ..logging import log_http_request, log_http_response
from .constants import API_BASE, GITHUB_API_ACCEPT, GRAPHQL_ENDPOINT, HTTP_TIMEOUT_SEC, USER_AGENT
from .errors import ConnectionFailure, DecodeError, GraphQLError, HTTPStatusError
from .queries import build_list_query
from .types import Credentials, RepositoryPage, Visibility, VisibilityUpdate


def basic_auth_header(credentials: Credentials) -> str:
    raw = f"{credentials.identity}:{credentials.token}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class GitHubClient:
    """
    Authenticated client for one logical operation.

    Every request carries the same user agent and basic-auth credential.
    Failures surface as ConnectionFailure, HTTPStatusError, DecodeError or
    GraphQLError, each chained to the exception that caused it.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        graphql_endpoint: str = GRAPHQL_ENDPOINT,
        api_base: str = API_BASE,
        timeout: float = HTTP_TIMEOUT_SEC,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.credentials = credentials
        self.graphql_endpoint = graphql_endpoint
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    # ---------- low-level HTTP ----------
    def _request_json(self, method: str, url: str, body: dict[str, Any] | None = None) -> Any:
        headers = {
            "Accept": GITHUB_API_ACCEPT,
            "User-Agent": self.user_agent,
            "Authorization": basic_auth_header(self.credentials),
        }
        data = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"

        req = urllib.request.Request(url, data=data, method=method)
        for k, v in headers.items():
            req.add_header(k, v)

        log_http_request(method, url, headers, body)
        start = time.monotonic()
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                raw = resp.read()
                status = resp.status
        except urllib.error.HTTPError as e:
            log_http_response(e.code, url, (time.monotonic() - start) * 1000)
            raise HTTPStatusError(e.code, _error_message(e), url) from e
        except (urllib.error.URLError, OSError) as e:
            raise ConnectionFailure(f"request to {url} failed: {e}", url) from e
        except http.client.HTTPException as e:
            # malformed status line, truncated body
            raise ConnectionFailure(f"request to {url} failed: {e!r}", url) from e
        log_http_response(status, url, (time.monotonic() - start) * 1000)

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodeError(f"response from {url} is not valid JSON: {e}", url) from e

    # ---------- public API ----------
    def graphql(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a `{"query": ...}` payload and return its `data` object."""
        doc = self._request_json("POST", self.graphql_endpoint, payload)
        if not isinstance(doc, dict):
            raise DecodeError("GraphQL response is not a JSON object", self.graphql_endpoint)

        errors = doc.get("errors") or []
        if not isinstance(errors, list):
            errors = [errors]
        if errors:
            messages = [str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors]
            raise GraphQLError(messages, self.graphql_endpoint)

        data = doc.get("data")
        if not isinstance(data, dict):
            raise DecodeError("GraphQL response has no `data` object", self.graphql_endpoint)
        return data

    def fetch_repositories_page(self, login: str, page_size: int, cursor: str | None = None) -> RepositoryPage:
        """Fetch one page of `login`'s repositories."""
        data = self.graphql(build_list_query(login, page_size, cursor))
        user = data.get("user")
        if not isinstance(user, dict):
            raise DecodeError(f"no user {login!r} in GraphQL response", self.graphql_endpoint)
        try:
            return RepositoryPage.model_validate(user.get("repositories"))
        except ShapeError as e:
            raise DecodeError(f"unexpected repositories shape: {e}", self.graphql_endpoint) from e

    def update_visibility(self, login: str, repo_name: str, visibility: Visibility) -> VisibilityUpdate:
        """Set the visibility of `login/repo_name`; returns the server's view of the repo."""
        url = f"{self.api_base}/repos/{quote(login, safe='')}/{quote(repo_name, safe='')}"
        doc = self._request_json("POST", url, {"visibility": visibility.value})
        try:
            return VisibilityUpdate.model_validate(doc)
        except ShapeError as e:
            raise DecodeError(f"unexpected repository update shape: {e}", url) from e


def _error_message(e: urllib.error.HTTPError) -> str:
    """Best-effort `message` from a GitHub error body, falling back to the reason phrase."""
    try:
        body = json.loads(e.read().decode("utf-8"))
    except (OSError, ValueError, AttributeError, http.client.HTTPException):
        return str(e.reason)
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return str(e.reason)
