"""Exception hierarchy for the ticket scoring pipeline.

Preconditions are checked before any request is sent; API failures abort the
whole fetch. Scoring and aggregation never raise.
"""

from __future__ import annotations

from typing import Any


class JiraScoreError(Exception):
    """Base exception for the application."""


# -- Preconditions -----------------------------------------------------------


class PreconditionError(JiraScoreError, ValueError):
    """A required input is missing; nothing was sent to Jira."""


class CredentialsNotConfiguredError(PreconditionError):
    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Jira credentials not configured. Please save your credentials in settings."
        )


class MissingQueryError(PreconditionError):
    def __init__(self, message: str | None = None):
        super().__init__(message or "JQL query is required")


# -- Transport / API ---------------------------------------------------------


class JiraAPIError(JiraScoreError, RuntimeError):
    """Non-success response from Jira.

    ``error_messages`` and ``errors`` hold the structured error payload when
    the response body could be parsed.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        error_messages: list[str] | None = None,
        errors: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.error_messages = list(error_messages or [])
        self.errors = dict(errors or {})
