"""Mapping raw Jira issue JSON into models, and reports back into JSON-ready dicts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

import pandas as pd

from .config import (
    BROWSE_PATH,
    DEFAULT_PRIORITY_RANK,
    FIELD_IDS,
    NO_PRIORITY,
    PRIORITY_DISPLAY_RANK,
    UNASSIGNED,
)
from .models import (
    IssueModel,
    PaginationInfo,
    QualityReport,
    ScoredTicket,
    SupportReport,
    TicketReport,
)
from .status import is_fixed


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    return None


def _name(node: Any, attr: str = "name") -> str | None:
    if isinstance(node, dict):
        value = node.get(attr)
        return str(value) if value is not None else None
    return None


def map_issue(raw: dict[str, Any]) -> IssueModel:
    fields = raw.get("fields") or {}
    comment_block = fields.get("comment")
    comment_count = None
    if isinstance(comment_block, dict) and isinstance(comment_block.get("total"), int):
        comment_count = comment_block["total"]
    subtasks = fields.get("subtasks")
    subtask_count = len(subtasks) if isinstance(subtasks, list) else None
    return IssueModel(
        key=str(raw.get("key") or ""),
        summary=fields.get("summary"),
        status=_name(fields.get("status")),
        priority=_name(fields.get("priority")),
        assignee=_name(fields.get("assignee"), "displayName"),
        story_points=_as_number(fields.get(FIELD_IDS["story_points"])),
        comment_count=comment_count,
        subtask_count=subtask_count,
        fields=fields,
    )


def to_scored_ticket(issue: IssueModel, score: float, base_url: str) -> ScoredTicket:
    """Resolve every optional field to its display default.

    Missing priority becomes "None", missing assignee "Unassigned", missing
    story points 0. ``is_fixed`` depends on the status string alone.
    """
    return ScoredTicket(
        key=issue.key,
        summary=issue.summary or "",
        status=issue.status or "",
        priority=issue.priority or NO_PRIORITY,
        assignee=issue.assignee or UNASSIGNED,
        story_points=issue.story_points or 0,
        score=score,
        is_fixed=is_fixed(issue.status),
        url=f"{base_url}{BROWSE_PATH}/{issue.key}",
    )


def priority_rank(priority: str | None) -> int:
    return PRIORITY_DISPLAY_RANK.get(priority or NO_PRIORITY, DEFAULT_PRIORITY_RANK)


def tickets_to_dataframe(tickets: Iterable[ScoredTicket]) -> pd.DataFrame:
    rows = [asdict(t) for t in tickets]
    df = pd.DataFrame(rows)
    if df.empty:
        return df
    df["priority_rank"] = df["priority"].apply(priority_rank)
    return df


def open_tickets(df: pd.DataFrame) -> pd.DataFrame:
    """Unfixed tickets, most urgent priority first (stable within a rank)."""
    if df.empty or "is_fixed" not in df.columns:
        return pd.DataFrame()
    out = df[~df["is_fixed"].astype(bool)]
    if "priority_rank" not in out.columns:
        out = out.assign(priority_rank=out["priority"].apply(priority_rank))
    return out.sort_values(by="priority_rank", kind="stable")


def _pagination_dict(info: PaginationInfo) -> dict[str, Any]:
    return {"pagesFetched": info.pages_fetched, "hadMultiplePages": info.had_multiple_pages}


def quality_to_dict(quality: QualityReport) -> dict[str, Any]:
    return {
        "breakdown": [
            {
                "priority": e.priority,
                "points": e.points,
                "totalCount": e.total_count,
                "fixedCount": e.fixed_count,
                "totalScore": e.total_score,
                "fixedScore": e.fixed_score,
            }
            for e in quality.breakdown
        ],
        "overallTotalScore": quality.overall_total_score,
        "overallFixedScore": quality.overall_fixed_score,
        "qualityScorePercentage": quality.quality_score_percentage,
        "totalTickets": quality.total_tickets,
        "fixedTickets": quality.fixed_tickets,
    }


def report_to_dict(report: TicketReport) -> dict[str, Any]:
    """Camel-cased report payload for presentation clients."""
    return {
        "tickets": [
            {
                "key": t.key,
                "summary": t.summary,
                "status": t.status,
                "priority": t.priority,
                "assignee": t.assignee,
                "storyPoints": t.story_points,
                "score": t.score,
                "isFixed": t.is_fixed,
                "url": t.url,
            }
            for t in report.tickets
        ],
        "totalTickets": report.total_tickets,
        "totalScore": report.total_score,
        "avgScore": report.avg_score,
        "qualityScore": quality_to_dict(report.quality_score),
        "paginationInfo": _pagination_dict(report.pagination_info),
    }


def support_to_dict(report: SupportReport) -> dict[str, Any]:
    return {
        "total": report.total,
        "statusCounts": dict(report.status_counts),
        "paginationInfo": _pagination_dict(report.pagination_info),
    }
