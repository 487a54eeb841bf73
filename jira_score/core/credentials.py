"""Credential store for the Jira connection.

One ``CredentialStore`` is constructed by the host application (the Streamlit
launcher keeps it in ``st.session_state``) and handed to ``IssueService``.
The service reads it on every call, so saving or clearing takes effect on
the next fetch.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any

from .config import ENV_EMAIL_KEYS, ENV_TOKEN_KEYS, ENV_URL_KEYS
from .models import Credentials

logger = logging.getLogger(__name__)


def _first(source: Mapping[str, Any], keys: Sequence[str]) -> str | None:
    for key in keys:
        value = source.get(key)
        if value:
            return str(value)
    return None


class CredentialStore:
    def __init__(self, credentials: Credentials | None = None):
        self._credentials = credentials or Credentials()

    def get(self) -> Credentials:
        return self._credentials

    def save(self, jira_url: str, jira_email: str, jira_api_token: str) -> None:
        self._credentials = Credentials(jira_url, jira_email, jira_api_token)
        logger.info("Credentials saved for %s", jira_email)

    def clear(self) -> None:
        self._credentials = Credentials()
        logger.info("Credentials cleared")

    def is_configured(self) -> bool:
        return self._credentials.is_complete

    def load_from_mapping(self, source: Mapping[str, Any]) -> bool:
        """Load credentials from a flat mapping or one with a ``jira`` section.

        Accepts ``os.environ`` or ``st.secrets``. Only a complete set replaces
        the stored credentials; returns whether that happened.
        """
        section = source.get("jira") or {}
        if not isinstance(section, Mapping):
            section = {}
        url = _first(section, ENV_URL_KEYS) or _first(source, ENV_URL_KEYS)
        email = _first(section, ENV_EMAIL_KEYS) or _first(source, ENV_EMAIL_KEYS)
        token = _first(section, ENV_TOKEN_KEYS) or _first(source, ENV_TOKEN_KEYS)
        if not (url and email and token):
            logger.debug("No complete Jira credentials found in source")
            return False
        self.save(url, email, token)
        return True

    def load_from_env(self, environ: Mapping[str, str] | None = None) -> bool:
        return self.load_from_mapping(os.environ if environ is None else environ)
