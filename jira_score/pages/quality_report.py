"""Quality report page.

Builds (or accepts) a JQL query, fetches and scores the matching tickets,
then shows the priority-weighted quality breakdown, open tickets, and the
support-ticket status tally.
"""

from __future__ import annotations

import streamlit as st

from jira_score.analytics.scoring import parse_scoring_method
from jira_score.app import get_service, get_store, register_page
from jira_score.core.config import (
    DEFAULT_JQL,
    DEFAULT_PRIORITY_WEIGHTS,
    EXCLUDABLE_STATUSES,
    FIELD_IDS,
    ISSUE_TYPE_OPTIONS,
    SETTINGS,
)
from jira_score.core.errors import JiraScoreError, PreconditionError
from jira_score.core.models import ScoringConfig, ScoringMethod
from jira_score.features.quality_report.context import build_report_context
from jira_score.features.query_builder import (
    QueryFilters,
    build_quality_query,
    build_support_query,
    default_filters,
)
from jira_score.visual.charts import breakdown_chart
from jira_score.visual.progress import ProgressReporter
from jira_score.visual.tables import render_breakdown_table, render_ticket_table

METHOD_LABELS = {
    ScoringMethod.PRIORITY: "Priority weights",
    ScoringMethod.STORY_POINTS: "Story points",
    ScoringMethod.CUSTOM: "Custom field",
    ScoringMethod.COMPLEXITY: "Complexity",
}


def _filters_form() -> QueryFilters:
    defaults = st.session_state.get("query_filters") or default_filters()
    col1, col2, col3 = st.columns(3)
    project = col1.text_input("Project", value=defaults.project)
    type_index = ISSUE_TYPE_OPTIONS.index(defaults.issue_type) if defaults.issue_type in ISSUE_TYPE_OPTIONS else 0
    issue_type = col2.selectbox("Issue type", ISSUE_TYPE_OPTIONS, index=type_index)
    squad = col3.text_input("Squad", value=defaults.squad)
    col4, col5 = st.columns(2)
    start = col4.date_input("Created from", value=defaults.start_date)
    end = col5.date_input("Created to", value=defaults.end_date)
    excluded = st.multiselect(
        "Exclude statuses",
        EXCLUDABLE_STATUSES,
        default=[s for s in defaults.excluded_statuses if s in EXCLUDABLE_STATUSES],
    )
    filters = QueryFilters(
        project=project,
        issue_type=issue_type,
        start_date=start,
        end_date=end,
        squad=squad,
        excluded_statuses=tuple(excluded),
    )
    st.session_state["query_filters"] = filters
    return filters


def _scoring_form() -> ScoringConfig:
    methods = list(METHOD_LABELS)
    method = st.selectbox("Scoring method", methods, format_func=METHOD_LABELS.get)
    custom_field = FIELD_IDS["story_points"]
    weights = None
    if method is ScoringMethod.CUSTOM:
        custom_field = st.text_input("Custom field id", value=custom_field)
    if method is ScoringMethod.PRIORITY:
        with st.expander("Priority weights"):
            weights = {
                name: int(st.number_input(name, min_value=1, value=default, step=1, key=f"weight_{name}"))
                for name, default in DEFAULT_PRIORITY_WEIGHTS.items()
            }
    return ScoringConfig(
        method=parse_scoring_method(method),
        custom_field_id=custom_field,
        priority_weights=weights,
    )


@register_page("Quality Report")
def quality_report_page():
    st.title("Ticket Quality Report")
    store = get_store()
    if not store.is_configured():
        st.warning("Save your Jira credentials on the Setup page first.")
        return

    template = st.radio("Query", ["Template", "Custom JQL"], horizontal=True)
    filters: QueryFilters | None = None
    if template == "Template":
        filters = _filters_form()
        jql = build_quality_query(filters)
        st.code(jql.replace(" AND ", "\nAND ").replace(" ORDER BY", "\nORDER BY"), language="sql")
    else:
        jql = st.text_area("JQL", value=st.session_state.get("custom_jql", DEFAULT_JQL))
        st.session_state["custom_jql"] = jql
    scoring = _scoring_form()

    if st.button("Fetch Tickets", type="primary"):
        reporter = ProgressReporter("Fetching tickets from Jira", expected_total=SETTINGS.max_pages)
        support_jql = build_support_query(filters) if filters is not None else None
        try:
            result = get_service().fetch_dashboard(jql, support_jql, scoring, progress=reporter.callback)
        except PreconditionError as exc:
            reporter.error(str(exc))
            return
        except JiraScoreError as exc:
            reporter.error(f"Failed to fetch tickets: {exc}")
            return
        report = result.tickets
        message = f"Loaded {report.total_tickets} ticket(s)"
        if report.pagination_info.had_multiple_pages:
            message += f" ({report.pagination_info.pages_fetched} pages)"
        reporter.complete(message)
        if report.truncated:
            st.warning(f"Stopped after {report.pagination_info.pages_fetched} pages; results are incomplete.")
        st.session_state["quality_result"] = result
        st.session_state["quality_filters"] = filters

    result = st.session_state.get("quality_result")
    if result is None:
        st.info("No report fetched yet.")
        return

    ctx = build_report_context(
        result.tickets,
        support=result.support,
        filters=st.session_state.get("quality_filters"),
        server=store.get().jira_url or "",
    )
    st.markdown("---")
    cols = st.columns(len(ctx.summary))
    for col, (label, value) in zip(cols, ctx.summary.items()):
        col.metric(label, value)

    st.subheader("Breakdown by priority")
    render_breakdown_table(ctx.breakdown)
    chart = breakdown_chart(ctx.breakdown)
    if chart is not None:
        st.altair_chart(chart, use_container_width=True)

    st.subheader(f"Open tickets ({len(ctx.open_tickets)})")
    if ctx.open_tickets.empty:
        st.info("No open tickets found")
    else:
        render_ticket_table(ctx.open_tickets, limit=SETTINGS.max_table_rows)

    if ctx.support_total is not None and not ctx.support_counts.empty:
        st.subheader(f"Support tickets ({ctx.support_total})")
        st.dataframe(ctx.support_counts, hide_index=True)

    if not ctx.tickets.empty:
        csv = ctx.tickets.drop(columns=["priority_rank"], errors="ignore").to_csv(index=False)
        st.download_button(
            "Download Tickets CSV",
            data=csv.encode(SETTINGS.download_encoding),
            file_name="jira_scored_tickets.csv",
            mime="text/csv",
        )
