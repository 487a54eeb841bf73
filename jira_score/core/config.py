"""Central configuration, constants, scoring tables, and query-builder defaults."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

# =============================================================================
# Jira Connection Settings
# =============================================================================
TIMEZONE = "UTC"
SEARCH_PATH = "/rest/api/3/search/jql"
BROWSE_PATH = "/browse"
DEFAULT_JQL = "order by created DESC"

# Environment variable names accepted by the credential store (first hit wins)
ENV_URL_KEYS: Sequence[str] = ("JIRA_URL", "JIRA_SERVER")
ENV_EMAIL_KEYS: Sequence[str] = ("JIRA_EMAIL",)
ENV_TOKEN_KEYS: Sequence[str] = ("JIRA_API_TOKEN", "JIRA_TOKEN")

# =============================================================================
# Pagination
# =============================================================================
# Hard cap on search pages per query; reaching it truncates the result.
MAX_PAGES: int = 100

# =============================================================================
# Jira Custom Field IDs
# =============================================================================
FIELD_IDS = {
    "story_points": "customfield_10016",
    "squad": '"thrive-squad[dropdown]"',
}

# Fields requested for the scored ticket query
TICKET_FETCH_FIELDS: Sequence[str] = (
    "summary",
    "status",
    "priority",
    "assignee",
    "created",
    "updated",
    FIELD_IDS["story_points"],
    "comment",
    "subtasks",
)

# Reduced field set for the support-ticket status tally
SUPPORT_FETCH_FIELDS: Sequence[str] = ("status", "key", "summary")

# =============================================================================
# Workflow Status Configuration
# =============================================================================
# Statuses that count a ticket as fixed (matched case-insensitively, exact)
FIXED_STATUSES: Sequence[str] = (
    "Ready for Release",
    "Done",
    "Ready to Test",
    "Testing",
    "Closed",
)

# Statuses that are neither fixed nor open (left out of "open" drill-downs)
DISMISSED_STATUSES: Sequence[str] = ("DEFERRED", "Invalid")

# =============================================================================
# Priority Configuration
# =============================================================================
# Default weights for the "priority" scoring method (overridable per query)
DEFAULT_PRIORITY_WEIGHTS: Mapping[str, int] = {
    "Highest": 5,
    "High": 4,
    "Medium": 3,
    "Low": 2,
    "Lowest": 1,
}

# Fixed weights used inside the "complexity" composite; never configurable
COMPLEXITY_PRIORITY_WEIGHTS: Mapping[str, int] = {
    "Highest": 5,
    "High": 4,
    "Medium": 3,
    "Low": 2,
    "Lowest": 1,
}
COMPLEXITY_COMMENT_CAP: int = 10
COMPLEXITY_COMMENT_WEIGHT: float = 0.5
COMPLEXITY_SUBTASK_WEIGHT: int = 2

# Quality points per priority. Independent from the scoring weights above.
PRIORITY_POINTS: Mapping[str, int] = {
    "Urgent": 4,
    "Highest": 4,
    "High": 3,
    "Medium": 2,
    "Low": 1,
    "Lowest": 1,
    "None": 1,
}
DEFAULT_PRIORITY_POINTS: int = 1

# Display rank for open-ticket lists (lower sorts first)
PRIORITY_DISPLAY_RANK: Mapping[str, int] = {
    "Urgent": 1,
    "Highest": 1,
    "High": 2,
    "Medium": 3,
    "Low": 4,
    "Lowest": 4,
    "None": 5,
}
DEFAULT_PRIORITY_RANK: int = 5

NO_PRIORITY = "None"
UNASSIGNED = "Unassigned"

# =============================================================================
# Query Builder Defaults
# =============================================================================
DEFAULT_PROJECT_KEY = "TEG"
DEFAULT_ISSUE_TYPE = "Bug"
DEFAULT_SQUAD = "OKR"
DEFAULT_EXCLUDED_STATUSES: Sequence[str] = ("DEFERRED", "Invalid", "Closed")
EXCLUDABLE_STATUSES: Sequence[str] = ("DEFERRED", "Invalid", "Closed")
ISSUE_TYPE_OPTIONS: Sequence[str] = ("Bug", "Story", "Task", "Support", "")
SUPPORT_ISSUE_TYPE = "Support"
DEFAULT_DATE_RANGE_DAYS: int = 30

# =============================================================================
# Table Columns
# =============================================================================
TICKET_LIST_COLUMNS: Sequence[str] = (
    "Ticket",
    "summary",
    "priority",
    "status",
    "assignee",
    "score",
    "story_points",
)

BREAKDOWN_COLUMNS: Sequence[str] = (
    "priority",
    "points",
    "total_count",
    "total_score",
    "fixed_count",
    "fixed_score",
    "open_count",
)


@dataclass(slots=True)
class AppSettings:
    max_pages: int = MAX_PAGES
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"


SETTINGS = AppSettings()
