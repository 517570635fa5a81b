# frontend/app.py
import os, requests, streamlit as st
from frontend import widgets

st.set_page_config(page_title="Drug Sensitivity Database", layout="wide")

DEFAULT_API_URL = "http://localhost:8000"
try:
    API_URL = st.secrets.get("API_URL", DEFAULT_API_URL)
except FileNotFoundError:  # no secrets.toml
    API_URL = os.getenv("API_URL", DEFAULT_API_URL)

@st.cache_data(show_spinner=False, ttl=600)
def fetch_json(path, params=None):
    r = requests.get(f"{API_URL}{path}", params=params, timeout=60)
    r.raise_for_status()
    return r.json()

@st.cache_data(show_spinner=False, ttl=600)
def fetch_export(fmt, params):
    r = requests.get(f"{API_URL}/export", params={**params, "fmt": fmt}, timeout=120)
    r.raise_for_status()
    return r.content, r.headers.get("content-type", "application/octet-stream"), fmt

def _query_params(criteria):
    # `biomarker` is omitted rather than sent as null
    return {k: v for k, v in criteria.items() if v is not None}

title_col, count_col = st.columns([3, 1])
title_col.title("💊 Drug Sensitivity Database")
count_slot = count_col.empty()

try:
    health = fetch_json("/health")
    facets = fetch_json("/facets")
    tools = fetch_json("/tools")
    stats = fetch_json("/stats")
except requests.RequestException as e:
    st.error(f"Drug sensitivity API unreachable at {API_URL}: {e}")
    st.stop()

criteria = widgets.filter_controls(facets)
params = _query_params(criteria)
with st.spinner("Filtering records…"):
    result = fetch_json("/records", params)
count_slot.caption(widgets.showing_caption(result["total"], health["records"]))

widgets.results_layout(
    result, criteria, tools, stats["stats"], stats["sources"],
    export=lambda fmt: fetch_export(fmt, params),
    docs_url=f"{API_URL}/docs",
)
