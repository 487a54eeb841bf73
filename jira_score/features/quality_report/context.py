"""Pure helpers to build quality-report page context for testing (no Streamlit)."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from jira_score.analytics.quality import breakdown_to_dataframe
from jira_score.core.mappers import open_tickets, tickets_to_dataframe
from jira_score.core.models import SupportReport, TicketReport
from jira_score.features.query_builder import QueryFilters, build_priority_query, issues_search_url

TOTAL_LABEL = "Total"


@dataclass(slots=True)
class ReportContext:
    summary: dict[str, str]
    breakdown: pd.DataFrame
    tickets: pd.DataFrame
    open_tickets: pd.DataFrame
    support_counts: pd.DataFrame = field(default_factory=pd.DataFrame)
    support_total: int | None = None


def _with_totals(breakdown: pd.DataFrame) -> pd.DataFrame:
    if breakdown.empty:
        return breakdown
    totals = {
        "priority": TOTAL_LABEL,
        "points": None,
        "total_count": int(breakdown["total_count"].sum()),
        "total_score": int(breakdown["total_score"].sum()),
        "fixed_count": int(breakdown["fixed_count"].sum()),
        "fixed_score": int(breakdown["fixed_score"].sum()),
        "open_count": int(breakdown["open_count"].sum()),
    }
    return pd.concat([breakdown, pd.DataFrame([totals])], ignore_index=True)


def _add_drilldown_links(breakdown: pd.DataFrame, filters: QueryFilters, server: str) -> pd.DataFrame:
    if breakdown.empty:
        return breakdown
    out = breakdown.copy()
    for status_type in ("all", "fixed", "open"):

        def _link(priority: str, status_type=status_type) -> str:
            target = "all" if priority == TOTAL_LABEL else priority
            return issues_search_url(server, build_priority_query(filters, target, status_type))

        out[f"{status_type}_link"] = out["priority"].apply(_link)
    return out


def support_counts_frame(support: SupportReport | None) -> pd.DataFrame:
    """One row, one column per status (columns sorted alphabetically)."""
    if support is None or not support.status_counts:
        return pd.DataFrame()
    statuses = sorted(support.status_counts)
    return pd.DataFrame([{s: support.status_counts[s] for s in statuses}])


def build_report_context(
    report: TicketReport,
    *,
    support: SupportReport | None = None,
    filters: QueryFilters | None = None,
    server: str = "",
) -> ReportContext:
    quality = report.quality_score
    summary = {
        "Quality Score": f"{quality.quality_score_percentage}%",
        "Fixed Tickets": f"{quality.fixed_tickets} / {quality.total_tickets}",
        "Fixed Points": f"{quality.overall_fixed_score} / {quality.overall_total_score}",
        "Average Score": report.avg_score,
    }
    breakdown = _with_totals(breakdown_to_dataframe(quality))
    if filters is not None and server:
        breakdown = _add_drilldown_links(breakdown, filters, server)
    tickets_df = tickets_to_dataframe(report.tickets)
    return ReportContext(
        summary=summary,
        breakdown=breakdown,
        tickets=tickets_df,
        open_tickets=open_tickets(tickets_df),
        support_counts=support_counts_frame(support),
        support_total=support.total if support is not None else None,
    )
