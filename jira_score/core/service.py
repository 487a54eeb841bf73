"""IssueService: orchestrates fetching, scoring, and quality aggregation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

import pytz

from jira_score.analytics.quality import aggregate
from jira_score.analytics.scoring import score
from jira_score.analytics.support import count_by_status

from .config import SETTINGS, SUPPORT_FETCH_FIELDS, TICKET_FETCH_FIELDS, TIMEZONE
from .credentials import CredentialStore
from .errors import CredentialsNotConfiguredError, MissingQueryError
from .jira_client import JiraAPI
from .mappers import map_issue, to_scored_ticket
from .models import (
    ConnectionResult,
    DashboardResult,
    ScoringConfig,
    SupportReport,
    TicketReport,
)

DEFAULT_FIELDS: Sequence[str] = tuple(TICKET_FETCH_FIELDS)
ProgressCallback = Callable[[str, int | None, int | None], None]
ApiFactory = Callable[[str, str, str], JiraAPI]

logger = logging.getLogger(__name__)


class IssueService:
    def __init__(
        self,
        store: CredentialStore,
        api_factory: ApiFactory = JiraAPI,
        *,
        max_pages: int | None = None,
    ):
        self.store = store
        self._api_factory = api_factory
        self._max_pages = max_pages or SETTINGS.max_pages
        self._tz = pytz.timezone(TIMEZONE)

    # ------------------ Preconditions ------------------
    def _api(self) -> JiraAPI:
        """Build a client from the credentials stored right now."""
        creds = self.store.get()
        if not creds.is_complete:
            raise CredentialsNotConfiguredError()
        return self._api_factory(creds.jira_url, creds.jira_email, creds.jira_api_token)

    @staticmethod
    def _require_query(jql: str | None) -> str:
        if not jql or not jql.strip():
            raise MissingQueryError()
        return jql

    # ------------------ Fetch Methods ------------------
    def fetch_ticket_report(
        self,
        jql: str,
        scoring: ScoringConfig | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> TicketReport:
        api = self._api()
        jql = self._require_query(jql)
        config = scoring or ScoringConfig()
        if progress:
            progress("Querying tickets", None, None)
        result = api.search_paged(
            jql,
            fields=list(DEFAULT_FIELDS),
            max_pages=self._max_pages,
            progress=progress,
        )
        if progress:
            progress("Scoring tickets", None, None)
        tickets = []
        for raw in result.issues:
            issue = map_issue(raw)
            tickets.append(to_scored_ticket(issue, score(issue, config), api.server))

        total_score = sum(t.score for t in tickets)
        avg_score = total_score / len(tickets) if tickets else 0
        return TicketReport(
            tickets=tickets,
            total_tickets=len(result.issues),
            total_score=total_score,
            avg_score=f"{avg_score:.2f}",
            quality_score=aggregate(tickets),
            pagination_info=result.pagination_info,
            truncated=result.truncated,
            fetched_at=datetime.now(self._tz),
        )

    def fetch_support_report(
        self,
        jql: str,
        *,
        progress: ProgressCallback | None = None,
    ) -> SupportReport:
        api = self._api()
        jql = self._require_query(jql)
        if progress:
            progress("Querying support tickets", None, None)
        result = api.search_paged(
            jql,
            fields=list(SUPPORT_FETCH_FIELDS),
            max_pages=self._max_pages,
            progress=progress,
        )
        issues = [map_issue(raw) for raw in result.issues]
        return SupportReport(
            total=len(issues),
            status_counts=count_by_status(issues),
            pagination_info=result.pagination_info,
            truncated=result.truncated,
        )

    def fetch_dashboard(
        self,
        jql: str,
        support_jql: str | None = None,
        scoring: ScoringConfig | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> DashboardResult:
        """Primary report first, then the best-effort support tally.

        Errors from the primary fetch propagate. A failing support fetch is
        logged and leaves ``support`` as None.
        """
        tickets = self.fetch_ticket_report(jql, scoring, progress=progress)
        support = None
        if support_jql:
            try:
                support = self.fetch_support_report(support_jql, progress=progress)
            except Exception as exc:  # support tally is optional
                logger.warning("Support ticket fetch failed: %s", exc)
        return DashboardResult(tickets=tickets, support=support)

    def test_connection(self, jira_url: str, jira_email: str, jira_api_token: str) -> ConnectionResult:
        """Check explicit credentials against ``/myself`` without storing them."""
        if not (jira_url and jira_email and jira_api_token):
            raise CredentialsNotConfiguredError("All credentials are required for testing")
        api = self._api_factory(jira_url, jira_email, jira_api_token)
        data = api.myself()
        name = data.get("displayName")
        return ConnectionResult(
            success=True,
            message=f"Connected successfully as {name}",
            display_name=name,
            data=data,
        )
