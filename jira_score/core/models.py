"""Domain data models for Jira issues, scoring, and quality reports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .config import FIELD_IDS


class ScoringMethod(str, Enum):
    STORY_POINTS = "storyPoints"
    PRIORITY = "priority"
    CUSTOM = "custom"
    COMPLEXITY = "complexity"


@dataclass(frozen=True, slots=True)
class IssueModel:
    key: str
    summary: str | None
    status: str | None
    priority: str | None
    assignee: str | None
    story_points: float | None
    comment_count: int | None
    subtask_count: int | None
    # Raw Jira ``fields`` block, looked up by the "custom" scoring method
    fields: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    method: ScoringMethod | None = ScoringMethod.PRIORITY
    custom_field_id: str = FIELD_IDS["story_points"]
    priority_weights: Mapping[str, int] | None = None


@dataclass(frozen=True, slots=True)
class ScoredTicket:
    key: str
    summary: str
    status: str
    priority: str
    assignee: str
    story_points: float
    score: float
    is_fixed: bool
    url: str


@dataclass(slots=True)
class PriorityBreakdownEntry:
    priority: str
    points: int
    total_count: int = 0
    fixed_count: int = 0
    total_score: int = 0
    fixed_score: int = 0

    @property
    def open_count(self) -> int:
        return self.total_count - self.fixed_count


@dataclass(slots=True)
class QualityReport:
    breakdown: list[PriorityBreakdownEntry]
    overall_total_score: int
    overall_fixed_score: int
    quality_score_percentage: str
    total_tickets: int
    fixed_tickets: int


@dataclass(slots=True)
class PaginationInfo:
    pages_fetched: int
    had_multiple_pages: bool


@dataclass(slots=True)
class SearchResult:
    issues: list[dict[str, Any]]
    pages_fetched: int
    truncated: bool

    @property
    def pagination_info(self) -> PaginationInfo:
        return PaginationInfo(self.pages_fetched, self.pages_fetched > 1)


@dataclass(slots=True)
class TicketReport:
    tickets: list[ScoredTicket]
    total_tickets: int
    total_score: float
    avg_score: str
    quality_score: QualityReport
    pagination_info: PaginationInfo
    truncated: bool = False
    fetched_at: datetime | None = None


@dataclass(slots=True)
class SupportReport:
    total: int
    status_counts: dict[str, int]
    pagination_info: PaginationInfo
    truncated: bool = False


@dataclass(slots=True)
class DashboardResult:
    tickets: TicketReport
    support: SupportReport | None = None


@dataclass(slots=True)
class ConnectionResult:
    success: bool
    message: str
    display_name: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Credentials:
    jira_url: str | None = None
    jira_email: str | None = None
    jira_api_token: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.jira_url and self.jira_email and self.jira_api_token)
