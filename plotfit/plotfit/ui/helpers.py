"""Helper utilities for the Streamlit UI (session access, data loading)."""

import logging

import streamlit as st

from plotfit.core.data_model import load_dataset
from plotfit.core.session import Session
from plotfit.utils import DatasetError

LOGGER = logging.getLogger(__name__)

SESSION_KEY = "plotfit_session"


def get_session() -> Session:
    """Return this browser session's Session, creating it on first use."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = Session()
    return st.session_state[SESSION_KEY]


def load_data_sidebar(session: Session) -> Session:
    """Render the CSV uploader in the sidebar and feed the session.

    - No file: the session goes back to NoData and outputs render nothing.
    - Same file as the one loaded (MD5 of content): ``Session.upload`` keeps
      the current dataset and any existing fit.
    - New file: swapped in atomically; the previous fit is cleared.
    - Malformed CSV: reported, the previous state is left untouched.
    """
    file_obj = st.sidebar.file_uploader(
        "Choose a CSV file",
        type=["csv"],
        key="csv_file",
        help="Column headers in the first row; the first two columns are plotted.",
    )
    if file_obj is None:
        if session.dataset is not None:
            LOGGER.info("Upload removed; clearing session data")
            session.clear()
        return session

    try:
        dataset = load_dataset(file_obj)
    except DatasetError as exc:
        st.sidebar.error(str(exc))
        return session
    if dataset is not None and session.upload(dataset):
        st.sidebar.success(
            f"Data loaded: {dataset.rows} rows, {len(dataset.columns)} columns"
        )
    return session


__all__ = ["get_session", "load_data_sidebar", "SESSION_KEY"]
