import streamlit as st

from plotfit.constants import APP_TITLE
from plotfit.logging_setup import configure_logging
from plotfit.themes import register_theme
from plotfit.ui.helpers import get_session, load_data_sidebar
from plotfit.ui.sections import (
    overlay_section,
    scatter_section,
    sidebar_export_section,
    sidebar_model_section,
    summary_section,
    table_section,
)

st.set_page_config(page_title=APP_TITLE, layout="wide")
configure_logging()
register_theme()

st.title(APP_TITLE)

session = get_session()

# Sidebar: inputs and triggers (upload, model, export)
load_data_sidebar(session)
sidebar_model_section(session)
sidebar_export_section(session)

# Main area: each output renders nothing until its inputs exist
table_section(session)
scatter_section(session)
overlay_section(session)
summary_section(session)

# streamlit run app.py
