"""Jira API client wrapper (REST v3 token-paged search + identity check)."""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Callable, Sequence
from typing import Any

import requests
from jira import JIRA, JIRAError

from .config import MAX_PAGES, SEARCH_PATH
from .errors import JiraAPIError
from .models import SearchResult
from .pagination import PageStatus, PaginationState

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int | None, int | None], None]


def normalize_base_url(url: str) -> str:
    """Drop exactly one trailing slash."""
    return url[:-1] if url.endswith("/") else url


def basic_auth_header(email: str, token: str) -> str:
    raw = f"{email}:{token}".encode()
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


def _parse_error_payload(response: Any) -> tuple[list[str], dict[str, Any]]:
    if response is None:
        return [], {}
    try:
        data = response.json()
    except ValueError:
        return [], {}
    if not isinstance(data, dict):
        return [], {}
    messages = [str(m) for m in data.get("errorMessages") or []]
    errors = data.get("errors") or {}
    return messages, errors if isinstance(errors, dict) else {}


def api_error_from_response(status_code: int | None, response: Any, prefix: str = "Jira API error") -> JiraAPIError:
    reason = getattr(response, "reason", None) or ""
    messages, errors = _parse_error_payload(response)
    text = f"{prefix}: {status_code} {reason}".rstrip()
    if messages:
        text += " - " + ", ".join(messages)
    if errors:
        text += " - " + json.dumps(errors)
    return JiraAPIError(
        text,
        status_code=status_code,
        reason=reason or None,
        error_messages=messages,
        errors=errors,
    )


class JiraAPI:
    def __init__(self, server: str, email: str, token: str):
        self.server = normalize_base_url(server)
        self._auth_header = basic_auth_header(email, token)
        # No server-info round trip on construction; every call is explicit.
        self.client = JIRA(
            basic_auth=(email, token),
            options={"server": self.server, "rest_api_version": "3"},
            get_server_info=False,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": self._auth_header,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def search_paged(
        self,
        jql: str,
        fields: Sequence[str],
        *,
        max_pages: int = MAX_PAGES,
        progress: ProgressCallback | None = None,
    ) -> SearchResult:
        """Run ``jql`` through the token-paged search endpoint.

        Pages are requested strictly in sequence, each carrying the token of
        the previous response. Stops when a page has no ``nextPageToken`` or
        ``max_pages`` pages were read (``truncated=True``). Any failed page
        raises ``JiraAPIError`` and nothing collected so far is returned.
        """
        session = getattr(self.client, "_session", None)
        if session is None:
            raise RuntimeError("JIRA session unavailable")
        url = f"{self.server}{SEARCH_PATH}"
        state = PaginationState(max_pages=max_pages)
        while not state.done:
            body = state.request_body(jql, list(fields))
            page_no = state.pages_fetched + 1
            try:
                resp = session.post(url, data=json.dumps(body), headers=self._headers())
            except JIRAError as exc:
                state.fail()
                logger.debug("Search page %s failed: %s", page_no, exc.status_code)
                raise api_error_from_response(exc.status_code, exc.response) from exc
            except requests.RequestException as exc:
                state.fail()
                raise JiraAPIError(f"Jira API error: {exc}") from exc
            if resp.status_code >= 400:
                state.fail()
                logger.debug("Search page %s failed: %s", page_no, resp.status_code)
                raise api_error_from_response(resp.status_code, resp)
            try:
                payload = resp.json()
            except ValueError as exc:
                state.fail()
                raise JiraAPIError(
                    f"Jira API error: invalid JSON in search page {page_no}",
                    status_code=resp.status_code,
                ) from exc
            if not isinstance(payload, dict):
                state.fail()
                raise JiraAPIError(
                    f"Jira API error: unexpected search payload on page {page_no}",
                    status_code=resp.status_code,
                )
            state.accept(payload)
            logger.debug("Fetched search page %s (%s issues so far)", page_no, len(state.issues))
            if progress:
                progress(f"Fetched page {page_no} ({len(state.issues)} issues)", page_no, None)

        if state.status is PageStatus.TRUNCATED:
            logger.warning("Reached maximum page limit (%s). Stopping pagination.", max_pages)
        logger.info("Fetched %s issues across %s page(s)", len(state.issues), state.pages_fetched)
        return SearchResult(
            issues=state.issues,
            pages_fetched=state.pages_fetched,
            truncated=state.truncated,
        )

    def myself(self) -> dict[str, Any]:
        """Identity of the authenticated account (``GET /rest/api/3/myself``)."""
        try:
            return self.client.myself()
        except JIRAError as exc:
            raise api_error_from_response(exc.status_code, exc.response, prefix="Connection failed") from exc
        except requests.RequestException as exc:
            raise JiraAPIError(f"Connection failed: {exc}") from exc
