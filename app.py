"""
Drug Sensitivity Database
Streamlit Dashboard: standalone build, the backend core runs in-process.
Usage: `streamlit run app.py`
"""

import streamlit as st
from backend.config import RECORD_COUNT, DISPLAY_LIMIT, SEED, LOG_LEVEL, LOG_FILE
from backend.logging_config import setup_logging
from backend.models import FilterCriteria
from backend.core import generate_drug_sensitivity_data, extract_facets, filter_records, truncate
from backend.io_utils import records_to_frame, write_any_table
from backend.reference import BIO_TOOLS, DATA_SOURCES, database_stats
from frontend import widgets

# --- Streamlit configuration ---
st.set_page_config(page_title="Drug Sensitivity Database", layout="wide")
logger = setup_logging(LOG_LEVEL, LOG_FILE)

# --- Dataset: generated once per session, read-only afterwards ---
if "records" not in st.session_state:
    records = generate_drug_sensitivity_data(RECORD_COUNT, seed=SEED)
    st.session_state["records"] = records
    st.session_state["facets"] = extract_facets(records)
    logger.info("session dataset ready: %d records", len(records))
records = st.session_state["records"]
facets = st.session_state["facets"]

title_col, count_col = st.columns([3, 1])
title_col.title("💊 Drug Sensitivity Database")
count_slot = count_col.empty()

# --- Filters -> result ---
criteria = FilterCriteria(**widgets.filter_controls(facets.model_dump()))
matches = filter_records(records, criteria)
result = truncate(matches, DISPLAY_LIMIT)
count_slot.caption(widgets.showing_caption(result.total, len(records)))

def export(fmt):
    return write_any_table(records_to_frame(matches), fmt)

widgets.results_layout(
    result.model_dump(), criteria.model_dump(),
    tools=[t.model_dump() for t in BIO_TOOLS],
    stats=[s.model_dump() for s in database_stats(records, facets)],
    sources=[s.model_dump() for s in DATA_SOURCES],
    export=export,
)
