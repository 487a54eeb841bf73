"""JQL query builder feature module for the quality dashboard."""

from jira_score.features.query_builder.jql import (
    QueryFilters,
    build_priority_query,
    build_quality_query,
    build_support_query,
    default_filters,
    issues_search_url,
)

__all__ = [
    "QueryFilters",
    "build_priority_query",
    "build_quality_query",
    "build_support_query",
    "default_filters",
    "issues_search_url",
]
