# frontend/widgets.py
# Streamlit building blocks shared by the standalone dashboard (app.py) and the API client (frontend/app.py).
# Everything here consumes plain dicts, i.e. JSON from the API or model_dump() of the backend models.
from typing import Callable, Dict, List, Optional, Tuple
import pandas as pd, streamlit as st
import plotly.graph_objects as go

ALL = "all"
HIGHLIGHT_KEY = "highlighted_biomarker"
EXPORT_KEY = "export_file"   # (criteria+format tag, payload, mime, ext)
NO_MATCH_MSG = "No matching records found. Try adjusting your filters."
SEARCH_PLACEHOLDER = "Search by drug name, cell line, or biomarker..."
DATASET_COLORS = {"CCLE": "background-color: #f3e8ff; color: #6b21a8",
                  "GDSC": "background-color: #dcfce7; color: #166534"}
DEFAULT_DATASET_COLOR = "background-color: #dbeafe; color: #1e40af"
TIER_COLORS = {"high": "#22c55e", "medium": "#eab308", "low": "#ef4444"}
BUTTONS_PER_ROW = 9

def _select(col, label, options, key, all_label):
    return col.selectbox(label, [ALL] + list(options), key=key, label_visibility="collapsed",
                         format_func=lambda v: all_label if v == ALL else v)

def _toggle_biomarker(bm):
    current = st.session_state.get(HIGHLIGHT_KEY)
    st.session_state[HIGHLIGHT_KEY] = None if current == bm else bm

def _clear_biomarker():
    st.session_state[HIGHLIGHT_KEY] = None

def biomarker_toggles(biomarkers: List[str]) -> Optional[str]:
    """One button per biomarker; clicking the active one again releases it."""
    active = st.session_state.get(HIGHLIGHT_KEY)
    head, clear = st.columns([5, 1])
    head.markdown("**Filter by Biomarker**")
    if active:
        clear.button("✕ Clear", key="bm_clear", on_click=_clear_biomarker, type="tertiary")
    for start in range(0, len(biomarkers), BUTTONS_PER_ROW):
        cols = st.columns(BUTTONS_PER_ROW)
        for col, bm in zip(cols, biomarkers[start:start + BUTTONS_PER_ROW]):
            col.button(bm, key=f"bm_{bm}", on_click=_toggle_biomarker, args=(bm,),
                       type="primary" if bm == active else "secondary", width="stretch")
    return st.session_state.get(HIGHLIGHT_KEY)

def filter_controls(facets: Dict) -> Dict:
    """Search box, three dropdowns and the biomarker toggles; returns the criteria dict."""
    search = st.text_input("Search", key="search", placeholder=SEARCH_PLACEHOLDER,
                           label_visibility="collapsed")
    c1, c2, c3 = st.columns(3)
    tissue = _select(c1, "Tissue type", facets["tissue_types"], "tissue", "All Tissue Types")
    dataset = _select(c2, "Dataset", facets["datasets"], "dataset", "All Datasets")
    drug_class = _select(c3, "Drug class", facets["drug_classes"], "drug_class", "All Drug Classes")
    biomarker = biomarker_toggles(facets["biomarkers"])
    return dict(search=search, tissue=tissue, dataset=dataset, drug_class=drug_class, biomarker=biomarker)

def showing_caption(matches: int, total: int) -> str:
    return f"Showing {matches:,} of {total:,} records"

def _dataset_style(v): return DATASET_COLORS.get(v, DEFAULT_DATASET_COLOR)

def records_frame(rows: List[Dict], highlighted: Optional[str] = None) -> pd.DataFrame:
    # highlighted biomarker is bracketed, dataframes have no inline badges
    return pd.DataFrame([{
        "Drug": r["drug_name"],
        "Cell Line": r["cell_line"],
        "Dataset": r["dataset"],
        "Sensitivity": r["sensitivity_score"],
        "Biomarkers": ", ".join(f"[{b}]" if b == highlighted else b for b in r["biomarkers"]),
        "IC50 (µM)": r.get("ic50"),
        "Reference": r.get("reference"),
    } for r in rows])

def records_table(result: Dict, highlighted: Optional[str] = None) -> None:
    if not result["records"]:
        st.info(NO_MATCH_MSG)
        return
    df = records_frame(result["records"], highlighted)
    st.dataframe(
        df.style.map(_dataset_style, subset=["Dataset"]),
        hide_index=True, width="stretch",
        column_config={
            "Sensitivity": st.column_config.ProgressColumn("Sensitivity", min_value=0.0, max_value=1.0, format="%.2f"),
            "IC50 (µM)": st.column_config.NumberColumn("IC50 (µM)", format="%.4f"),
        },
    )
    if result["total"] > result["limit"]:
        st.caption(f"Showing first {result['limit']} of {result['total']:,} results")

def match_breakdown(summary: Dict) -> None:
    by_tier, by_dataset = summary.get("by_tier", {}), summary.get("by_dataset", {})
    if not any(by_tier.values()):
        return
    fig = go.Figure()
    fig.add_trace(go.Bar(x=list(by_tier), y=list(by_tier.values()), name="sensitivity tier",
                         marker_color=[TIER_COLORS.get(t, "#94a3b8") for t in by_tier]))
    fig.add_trace(go.Bar(x=list(by_dataset), y=list(by_dataset.values()), name="dataset"))
    fig.update_layout(title="Matches by sensitivity tier and dataset", yaxis_title="records",
                      barmode="group", height=320, margin=dict(t=40, b=20))
    st.plotly_chart(fig, width="stretch")

def bio_tools_panel(tools: List[Dict]) -> None:
    st.subheader("🔗 Quick Bio-Tools")
    for t in tools:
        st.markdown(f"{t.get('icon', '')} [{t['name']}]({t['url']})")

def stats_panel(stats: List[Dict], sources: List[Dict]) -> None:
    st.subheader("ℹ️ Database Stats")
    for start in range(0, len(stats), 2):
        cols = st.columns(2)
        for col, s in zip(cols, stats[start:start + 2]):
            col.metric(s["label"], s["value"])
    st.markdown("**Data Sources**")
    for src in sources:
        st.markdown(f"`{src['code']}` {src['name']}")

def actions_panel(export: Callable[[str], Tuple[bytes, str, str]], export_tag: str = "",
                  docs_url: Optional[str] = None, formats=("csv", "tsv", "json", "xlsx", "parquet")) -> None:
    """
    `export(fmt)` returns (payload, mime type, extension) for the current matches. It only runs when
    "Prepare download" is clicked; the prepared file is offered while criteria and format are unchanged.
    """
    fmt = st.selectbox("Export format", formats, key="export_fmt")
    tag = f"{export_tag}|{fmt}"
    if st.button("Prepare download", key="export_prepare", width="stretch"):
        st.session_state[EXPORT_KEY] = (tag, *export(fmt))
    prepared = st.session_state.get(EXPORT_KEY)
    if prepared and prepared[0] == tag:
        _, data, mime, ext = prepared
        st.download_button("Download Dataset", data, f"drug_sensitivity.{ext}", mime, width="stretch")
    if docs_url:
        st.link_button("API Documentation", docs_url, width="stretch")
    else:
        st.button("API Documentation", disabled=True, width="stretch",
                  help="Start the API (uvicorn backend.main:app) to browse its docs.")

def results_layout(result: Dict, criteria: Dict, tools: List[Dict], stats: List[Dict], sources: List[Dict],
                   export: Callable[[str], Tuple[bytes, str, str]], docs_url: Optional[str] = None) -> None:
    left, middle, right = st.columns([1, 2, 1])
    with left:
        bio_tools_panel(tools)
    with middle:
        records_table(result, criteria.get("biomarker"))
        match_breakdown(result.get("summary", {}))
    with right:
        stats_panel(stats, sources)
        actions_panel(export, repr(sorted(criteria.items())), docs_url)
