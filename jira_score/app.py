"""Application entry point: page registry and router."""

from __future__ import annotations

import streamlit as st

from jira_score.core.credentials import CredentialStore
from jira_score.core.service import IssueService

PAGES = {}


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def get_store() -> CredentialStore:
    """Per-browser-session credential store, created on first use."""
    store = st.session_state.get("credential_store")
    if store is None:
        store = CredentialStore()
        st.session_state["credential_store"] = store
    return store


def get_service() -> IssueService:
    service = st.session_state.get("issue_service")
    if service is None:
        service = IssueService(get_store())
        st.session_state["issue_service"] = service
    return service


def main():
    st.sidebar.title("Jira Score Calculator")
    pages = list(PAGES.keys())
    if not pages:
        st.write("No pages registered yet.")
        return
    preferred_order = [
        "Quality Report",
        "Setup / Connection",
    ]
    ordered = [name for name in preferred_order if name in pages]
    trailing = sorted(name for name in pages if name not in preferred_order)
    pages = ordered + trailing

    # Send first-time users to setup until credentials exist
    if "Setup / Connection" in pages and not get_store().is_configured():
        default = pages.index("Setup / Connection")
    else:
        default = 0
    page = st.sidebar.selectbox("Page", pages, index=default)
    PAGES[page]()


if __name__ == "__main__":
    main()
