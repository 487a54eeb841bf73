"""Chart builders (Altair) for the quality breakdown."""

from __future__ import annotations

import altair as alt
import pandas as pd

SCORE_COLORS = {"Fixed": "#2ca02c", "Open": "#d62728"}


def breakdown_chart(breakdown: pd.DataFrame):
    """Stacked bar per priority: fixed vs. open points.

    Expects the per-priority rows from ``breakdown_to_dataframe`` (a totals row,
    if present, is skipped). Returns None when there is nothing to plot.
    """
    if breakdown.empty or "priority" not in breakdown.columns:
        return None
    tmp = breakdown[breakdown["points"].notna()].copy()
    if tmp.empty:
        return None
    order = tmp["priority"].tolist()
    tmp["Fixed"] = tmp["fixed_score"].astype(int)
    tmp["Open"] = (tmp["total_score"] - tmp["fixed_score"]).astype(int)
    long = tmp.melt(
        id_vars=["priority", "points"],
        value_vars=["Fixed", "Open"],
        var_name="state",
        value_name="score",
    )
    chart = (
        alt.Chart(long)
        .mark_bar()
        .encode(
            x=alt.X("priority:N", sort=order, title="Priority"),
            y=alt.Y("score:Q", title="Points"),
            color=alt.Color(
                "state:N",
                scale=alt.Scale(domain=list(SCORE_COLORS), range=list(SCORE_COLORS.values())),
                title="",
            ),
            tooltip=[
                alt.Tooltip("priority:N", title="Priority"),
                alt.Tooltip("points:Q", title="Points per ticket"),
                alt.Tooltip("state:N", title="State"),
                alt.Tooltip("score:Q", title="Points"),
            ],
        )
        .properties(height=260)
    )
    return chart
