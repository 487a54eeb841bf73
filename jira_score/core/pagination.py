"""Cursor pagination state for one search execution.

States and transitions::

    FETCHING --(page ok, token, pages < cap)--> FETCHING
    FETCHING --(page ok, no token)-----------> EXHAUSTED
    FETCHING --(page ok, token, pages == cap)-> TRUNCATED
    FETCHING --(response not ok)-------------> FAILED

A state is created per call and never shared between searches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .config import MAX_PAGES


class PageStatus(str, Enum):
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"
    TRUNCATED = "truncated"
    FAILED = "failed"


@dataclass(slots=True)
class PaginationState:
    max_pages: int = MAX_PAGES
    issues: list[dict[str, Any]] = field(default_factory=list)
    next_page_token: str | None = None
    pages_fetched: int = 0
    status: PageStatus = PageStatus.FETCHING

    def __post_init__(self) -> None:
        if self.max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {self.max_pages}")

    @property
    def done(self) -> bool:
        return self.status is not PageStatus.FETCHING

    @property
    def truncated(self) -> bool:
        return self.status is PageStatus.TRUNCATED

    def request_body(self, jql: str, fields: list[str]) -> dict[str, Any]:
        body: dict[str, Any] = {"jql": jql, "fields": list(fields)}
        if self.next_page_token:
            body["nextPageToken"] = self.next_page_token
        return body

    def accept(self, payload: dict[str, Any]) -> PageStatus:
        """Record one successful page and advance the state."""
        if self.done:
            raise RuntimeError(f"Pagination already finished ({self.status.value})")
        self.pages_fetched += 1
        self.issues.extend(payload.get("issues") or [])
        self.next_page_token = payload.get("nextPageToken") or None
        if not self.next_page_token:
            self.status = PageStatus.EXHAUSTED
        elif self.pages_fetched >= self.max_pages:
            self.status = PageStatus.TRUNCATED
        return self.status

    def fail(self) -> None:
        """Abort the search; accumulated issues are dropped."""
        self.issues = []
        self.next_page_token = None
        self.status = PageStatus.FAILED
