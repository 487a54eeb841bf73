"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from jira_score.core.column_config import get_columns

COLUMN_LABELS: dict[str, str] = {
    "summary": "Summary",
    "priority": "Priority",
    "status": "Status",
    "assignee": "Assignee",
    "score": "Score",
    "story_points": "Story Points",
    "points": "Points",
    "total_count": "Total",
    "total_score": "Total Score",
    "fixed_count": "Fixed",
    "fixed_score": "Fixed Score",
    "open_count": "Open",
}

LINK_COLUMNS: dict[str, str] = {
    "all_link": "All ↗",
    "fixed_link": "Fixed ↗",
    "open_link": "Open ↗",
}


def add_ticket_link(df: pd.DataFrame, url_col: str = "url", label: str = "Ticket"):
    if df.empty or url_col not in df.columns:
        return df, {}
    out = df.copy()
    out[label] = out[url_col].fillna("").astype(str)
    cfg = {
        label: st.column_config.LinkColumn(
            label,
            display_text=r"browse/(.*)$",
            help="Open in Jira",
            width="medium",
        )
    }
    return out, cfg


def _labelled(cols: list[str]) -> dict[str, object]:
    return {c: st.column_config.Column(COLUMN_LABELS[c]) for c in cols if c in COLUMN_LABELS}


def prepare_ticket_table(df: pd.DataFrame) -> tuple[pd.DataFrame, list[str], dict[str, object]]:
    if df.empty:
        return df, [], {}
    table, cfg = add_ticket_link(df)
    display_cols = [col for col in get_columns("ticket_list") if col in table.columns]
    if not display_cols:
        display_cols = [col for col in table.columns if col not in ("key", "url")]
    cfg.update(_labelled(display_cols))
    return table, display_cols, cfg


def render_breakdown_table(breakdown: pd.DataFrame) -> None:
    if breakdown.empty:
        st.info("No tickets to break down.")
        return
    display_cols = [col for col in get_columns("breakdown") if col in breakdown.columns]
    cfg = _labelled(display_cols)
    for col, label in LINK_COLUMNS.items():
        if col in breakdown.columns:
            display_cols.append(col)
            cfg[col] = st.column_config.LinkColumn(label, display_text="Open in Jira")
    st.dataframe(breakdown[display_cols], hide_index=True, column_config=cfg)


def render_ticket_table(df: pd.DataFrame, limit: int = 1000) -> None:
    table, cols, cfg = prepare_ticket_table(df)
    if not cols:
        st.info("No tickets to show.")
        return
    st.dataframe(table[cols].head(limit), hide_index=True, column_config=cfg)
