"""Connection setup page: collect Jira credentials, test and store them."""

from __future__ import annotations

import streamlit as st

from jira_score.app import get_service, get_store, register_page
from jira_score.core.errors import JiraScoreError


@register_page("Setup / Connection")
def setup_page():
    st.title("Jira Connection Setup")
    st.caption("Enter credentials (use secrets manager in production).")

    store = get_store()
    service = get_service()
    current = store.get()

    server = st.text_input("Jira URL", value=current.jira_url or "", placeholder="https://your-domain.atlassian.net")
    email = st.text_input("Email", value=current.jira_email or "")
    token = st.text_input("API Token", type="password", value=current.jira_api_token or "")

    col_test, col_save, col_clear = st.columns(3)
    test_btn = col_test.button("Test Connection")
    save_btn = col_save.button("Save Credentials", type="primary")
    clear_btn = col_clear.button("Clear")

    if test_btn:
        try:
            result = service.test_connection(server, email, token)
            st.success(result.message)
        except JiraScoreError as exc:
            st.error(str(exc))

    if save_btn:
        if not (server and email and token):
            st.error("All credentials are required")
        else:
            store.save(server, email, token)
            st.success("Credentials saved for this session.")

    if clear_btn:
        store.clear()
        st.info("Credentials cleared.")

    if store.is_configured():
        st.info(f"Connected to {store.get().jira_url} as {store.get().jira_email}.")
    else:
        st.warning("Not configured.")
