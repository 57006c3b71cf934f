"""Main-area and sidebar sections.

Each output section renders one session value. Errors from loading or fitting
are shown by the section that owns the failing value (the fit error appears
in the overlay section; the summary then stays empty).
"""
from __future__ import annotations

import logging

import streamlit as st

from plotfit.analysis.fits import DegenerateFitError
from plotfit.core.session import Session, Stage
from plotfit.utils import DatasetError
from plotfit.export.packager import (
    ExportError,
    archive_name,
    collect_charts,
    export_charts,
)

LOGGER = logging.getLogger(__name__)


def _show_error(session: Session, name: str) -> bool:
    err = session.error(name)
    if err is not None:
        st.error(str(err))
        return True
    return False


def sidebar_model_section(session: Session):
    """Model trigger button; refits on every press."""
    pressed = st.sidebar.button(
        "Model Data (Linear Model)",
        key="model_btn",
        disabled=session.stage is Stage.NO_DATA,
    )
    if pressed:
        try:
            session.run_model()
        except (DatasetError, DegenerateFitError) as exc:
            # stored on the session; overlay_section reports it
            LOGGER.warning("Model trigger rejected: %s", exc)


def sidebar_export_section(session: Session):
    """Two-step export: render the archive on request, then offer it."""
    st.sidebar.subheader("Export")
    if session.stage is Stage.NO_DATA:
        st.sidebar.caption("Upload a CSV file to enable export.")
        return
    if session.stage is Stage.DATA_LOADED:
        st.sidebar.caption(
            "Only the scatter plot is exported until the model is run."
        )
    state_key = (
        session.dataset.fingerprint,
        session.graph.get("model_trigger"),
    )
    if st.sidebar.button("Export Plots", key="export_btn"):
        try:
            st.session_state["export_bytes"] = export_charts(
                collect_charts(session)
            )
            st.session_state["export_key"] = state_key
        except ExportError as exc:
            st.sidebar.error(str(exc))
    if st.session_state.get("export_key") == state_key:
        st.sidebar.download_button(
            "Download plots (.zip)",
            data=st.session_state["export_bytes"],
            file_name=archive_name(),
            mime="application/zip",
            key="export_download",
        )


def table_section(session: Session):
    st.subheader("Data")
    ds = session.dataset
    if ds is None:
        st.info("Upload a CSV file to view its contents.")
        return
    st.caption(f"{ds.source}: {ds.rows} rows x {len(ds.columns)} columns")
    st.dataframe(session.get("table"), use_container_width=True)


def scatter_section(session: Session):
    if session.dataset is None or _show_error(session, "scatter"):
        return
    st.plotly_chart(
        session.get("scatter"), use_container_width=True, key="scatter_plot"
    )


def overlay_section(session: Session):
    if _show_error(session, "fit") or _show_error(session, "overlay"):
        return
    fig = session.value("overlay")
    if fig is None:
        if session.dataset is not None:
            st.info("Press 'Model Data (Linear Model)' to fit a line.")
        return
    st.plotly_chart(fig, use_container_width=True, key="overlay_plot")


def summary_section(session: Session):
    """Fit statistics text; empty until a fit succeeds."""
    summary = session.value("summary")
    if summary is None:
        return
    st.text(summary)


__all__ = [
    "sidebar_model_section",
    "sidebar_export_section",
    "table_section",
    "scatter_section",
    "overlay_section",
    "summary_section",
]
