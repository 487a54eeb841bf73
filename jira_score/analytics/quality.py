"""Priority-weighted quality aggregation.

Each priority carries a fixed number of points. A group's total score is
``points * tickets`` and its fixed score ``points * fixed tickets``; the
quality percentage is the fixed share of all points. Two tickets of
different priority therefore weigh differently.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from jira_score.core.config import DEFAULT_PRIORITY_POINTS, NO_PRIORITY, PRIORITY_POINTS
from jira_score.core.models import PriorityBreakdownEntry, QualityReport, ScoredTicket


def priority_points(priority: str | None) -> int:
    return PRIORITY_POINTS.get(priority or NO_PRIORITY, DEFAULT_PRIORITY_POINTS)


def format_percentage(fixed: int, total: int) -> str:
    pct = (fixed / total) * 100 if total > 0 else 0
    return f"{pct:.2f}"


def aggregate(tickets: Iterable[ScoredTicket]) -> QualityReport:
    rows = [{"priority": t.priority or NO_PRIORITY, "is_fixed": bool(t.is_fixed)} for t in tickets]
    if not rows:
        return QualityReport([], 0, 0, format_percentage(0, 0), 0, 0)

    df = pd.DataFrame(rows)
    # sort=False keeps groups in first-seen order so equal-point ties stay stable
    grouped = (
        df.groupby("priority", sort=False)
        .agg(total_count=("is_fixed", "size"), fixed_count=("is_fixed", "sum"))
        .reset_index()
    )
    grouped["points"] = grouped["priority"].apply(priority_points)
    grouped = grouped.sort_values(by="points", ascending=False, kind="stable")

    breakdown: list[PriorityBreakdownEntry] = []
    for row in grouped.itertuples(index=False):
        points = int(row.points)
        total_count = int(row.total_count)
        fixed_count = int(row.fixed_count)
        breakdown.append(
            PriorityBreakdownEntry(
                priority=str(row.priority),
                points=points,
                total_count=total_count,
                fixed_count=fixed_count,
                total_score=points * total_count,
                fixed_score=points * fixed_count,
            )
        )

    overall_total = sum(entry.total_score for entry in breakdown)
    overall_fixed = sum(entry.fixed_score for entry in breakdown)
    return QualityReport(
        breakdown=breakdown,
        overall_total_score=overall_total,
        overall_fixed_score=overall_fixed,
        quality_score_percentage=format_percentage(overall_fixed, overall_total),
        total_tickets=len(df),
        fixed_tickets=int(df["is_fixed"].sum()),
    )


def breakdown_to_dataframe(report: QualityReport) -> pd.DataFrame:
    rows = [
        {
            "priority": e.priority,
            "points": e.points,
            "total_count": e.total_count,
            "total_score": e.total_score,
            "fixed_count": e.fixed_count,
            "fixed_score": e.fixed_score,
            "open_count": e.open_count,
        }
        for e in report.breakdown
    ]
    return pd.DataFrame(rows)
