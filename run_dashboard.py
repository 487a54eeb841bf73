"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``jira_score/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from jira_score.app import get_store, main

st.set_page_config(layout="wide")
logger = logging.getLogger(__name__)


def _auto_load_credentials():
    """Seed the credential store from Streamlit secrets, then the environment."""
    store = get_store()
    if store.is_configured() or st.session_state.get("credentials_seeded"):
        return
    st.session_state["credentials_seeded"] = True
    try:
        loaded = store.load_from_mapping(st.secrets)
    except FileNotFoundError:
        loaded = False
    if not loaded:
        loaded = store.load_from_env()
    if loaded:
        st.sidebar.success("Jira credentials loaded.")
    else:
        st.sidebar.warning("Jira credentials not found. Please use the Setup page.")


_auto_load_credentials()

PAGES_DIR = Path(__file__).parent / "jira_score" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"jira_score.pages.{py.stem}"
    try:
        import_module(mod_name)
    except ImportError as e:  # pragma: no cover
        logger.error("Failed importing page %s: %s", mod_name, e)

if __name__ == "__main__":
    main()
