"""JQL builders for the quality template, support tally, and drill-down links."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from urllib.parse import quote

import pytz

from jira_score.core.config import (
    DEFAULT_DATE_RANGE_DAYS,
    DEFAULT_EXCLUDED_STATUSES,
    DEFAULT_ISSUE_TYPE,
    DEFAULT_PROJECT_KEY,
    DEFAULT_SQUAD,
    DISMISSED_STATUSES,
    FIELD_IDS,
    FIXED_STATUSES,
    SUPPORT_ISSUE_TYPE,
    TIMEZONE,
)

ORDER_CLAUSE = "ORDER BY created DESC"
STATUS_TYPES = ("all", "fixed", "open")


@dataclass(slots=True)
class QueryFilters:
    project: str = ""
    issue_type: str = ""
    start_date: date | str | None = None
    end_date: date | str | None = None
    squad: str = ""
    excluded_statuses: Sequence[str] = field(default_factory=tuple)


def default_filters(today: date | None = None) -> QueryFilters:
    """Template defaults with a trailing date window ending today (local TZ)."""
    if today is None:
        today = datetime.now(pytz.timezone(TIMEZONE)).date()
    return QueryFilters(
        project=DEFAULT_PROJECT_KEY,
        issue_type=DEFAULT_ISSUE_TYPE,
        start_date=today - timedelta(days=DEFAULT_DATE_RANGE_DAYS),
        end_date=today,
        squad=DEFAULT_SQUAD,
        excluded_statuses=tuple(DEFAULT_EXCLUDED_STATUSES),
    )


def _fmt_date(value: date | str | None) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value).strip()


def _quote_value(value: str) -> str:
    return f'"{value}"' if " " in value else value


def _status_list(statuses: Sequence[str]) -> str:
    return ", ".join(_quote_value(s) for s in statuses)


def _scope_parts(filters: QueryFilters, *, issue_type: str | None) -> list[str]:
    parts: list[str] = []
    project = (filters.project or "").strip()
    if project:
        parts.append(f'project = "{project}"')
    start = _fmt_date(filters.start_date)
    if start:
        parts.append(f'created >= "{start}"')
    end = _fmt_date(filters.end_date)
    if end:
        parts.append(f'created <= "{end}"')
    if issue_type:
        parts.append(f"type = {issue_type}")
    squad = (filters.squad or "").strip()
    if squad:
        parts.append(f"{FIELD_IDS['squad']} = {squad}")
    return parts


def _finish(parts: list[str]) -> str:
    if not parts:
        return ORDER_CLAUSE
    return " AND ".join(parts) + " " + ORDER_CLAUSE


def build_quality_query(filters: QueryFilters) -> str:
    parts = _scope_parts(filters, issue_type=(filters.issue_type or "").strip())
    if filters.excluded_statuses:
        parts.append(f"status NOT IN ({', '.join(filters.excluded_statuses)})")
    return _finish(parts)


def build_support_query(filters: QueryFilters) -> str:
    return _finish(_scope_parts(filters, issue_type=SUPPORT_ISSUE_TYPE))


def build_priority_query(filters: QueryFilters, priority: str, status_type: str = "all") -> str:
    """Drill-down query for one breakdown cell.

    ``priority`` of "all" drops the priority clause. ``status_type`` picks
    fixed tickets, open tickets (neither fixed nor dismissed), or the
    template's own status exclusions.
    """
    if status_type not in STATUS_TYPES:
        raise ValueError(f"status_type must be one of {STATUS_TYPES}, got {status_type!r}")
    parts = _scope_parts(filters, issue_type=(filters.issue_type or "").strip())
    if priority != "all":
        parts.append(f"priority = {_quote_value(priority)}")
    if status_type == "fixed":
        parts.append(f"status IN ({_status_list(FIXED_STATUSES)})")
    elif status_type == "open":
        parts.append(f"status NOT IN ({_status_list(tuple(FIXED_STATUSES) + tuple(DISMISSED_STATUSES))})")
    elif filters.excluded_statuses:
        parts.append(f"status NOT IN ({', '.join(filters.excluded_statuses)})")
    return _finish(parts)


def issues_search_url(base_url: str, jql: str) -> str:
    return f"{base_url.rstrip('/')}/issues/?jql={quote(jql, safe='')}"
