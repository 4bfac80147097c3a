"""
Streamlit front-end for quirion imports.

- Accepts one or more uploaded PDFs.
- Writes each to `.tmp_uploads/` using a short content hash for stable names.
- Runs `extract_pages()` -> `can_parse_document()` -> `parse_pages()` per file.
- Shows a per-document table and a combined de-duped table.
- Exposes CSV/JSON downloads (per doc and combined).

A dividend appears in the Kontoauszug and in its own Erträgnisabrechnung;
the combined table keeps it once. All processing happens locally.
"""

from __future__ import annotations

# --- ensure package imports work when launched directly ---
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import hashlib
import json
from pathlib import Path
from typing import List, Dict, Any, Tuple

import pandas as pd
import streamlit as st

# --- Internal modules ---
from quirion_import.services.parse_pdf import extract_pages
from quirion_import.services.extract import can_parse_document, parse_pages
from quirion_import.services.validate import dedupe_activities
from quirion_import.models.schemas import Activity, ParseResult

COLUMNS = [
    "date", "type", "company", "isin",
    "shares", "price", "amount", "fee", "tax",
    "foreign_currency", "fx_rate", "datetime", "broker",
]

# ---------------------------- Page setup ----------------------------

st.set_page_config(page_title="quirion Import (Local)", layout="wide")
st.title("quirion Import (Local)")
st.caption("Parse Kontoauszüge and Erträgnisabrechnungen → buys, sells and dividends.")

with st.sidebar:
    st.header("How it works")
    st.markdown(
        "- Files are processed locally; a temp copy is saved under `.tmp_uploads/`.\n"
        "- Parser: pdfplumber extracts text fragments; extraction walks known anchors.\n"
        "- Statements yield every buy/sell/dividend line; dividend notices yield one dividend.\n"
        "- Foreign currency dividends are converted to EUR with the notice's exchange rate."
    )
    st.divider()
    st.markdown("**Tip:** If a row is missing, open the Debug expander to inspect raw fragments.")

uploaded = st.file_uploader(
    "Upload one or more quirion PDFs",
    type=["pdf"],
    accept_multiple_files=True,
)
run_btn = st.button("Run Extraction", type="primary")


# ---------------------------- Helpers ----------------------------

def file_hash(b: bytes) -> str:
    return hashlib.sha256(b).hexdigest()[:16]


def ensure_tmp_dir() -> Path:
    tmp_dir = Path.cwd() / ".tmp_uploads"
    tmp_dir.mkdir(parents=True, exist_ok=True)
    return tmp_dir


def activities_to_dataframe(activities: List[Activity]) -> pd.DataFrame:
    rows = [a.model_dump(mode="json") for a in activities]
    df = pd.DataFrame(rows)
    for c in COLUMNS:
        if c not in df.columns:
            df[c] = None
    return df[COLUMNS]


# ---------------------------- Main run ----------------------------

results: List[Tuple[str, List[List[str]], ParseResult]] = []

if run_btn and uploaded:
    tmp_dir = ensure_tmp_dir()

    for uf in uploaded:
        data = uf.read()
        doc_id = f"{uf.name}-{file_hash(data)}"
        tmp_path = tmp_dir / f"{doc_id}.pdf"
        with open(tmp_path, "wb") as f:
            f.write(data)

        pages = extract_pages(str(tmp_path))
        if not can_parse_document(pages, "pdf"):
            st.warning(f"{uf.name}: not a quirion Kontoauszug or Erträgnisabrechnung")
            continue
        try:
            results.append((doc_id, pages, parse_pages(pages)))
        except ValueError as e:
            st.error(f"{uf.name}: {e}")

# ---------------------------- Display results ----------------------------

if not results:
    st.info("Upload PDFs and click **Run Extraction** to see results.")
else:
    tabs = st.tabs([doc_id for doc_id, _, _ in results])

    for tab, (doc_id, pages, result) in zip(tabs, results):
        with tab:
            st.subheader(f"Activities (status {result.status})")
            df = activities_to_dataframe(result.activities)
            st.dataframe(df, use_container_width=True)

            col_dl1, col_dl2 = st.columns(2)
            with col_dl1:
                st.download_button(
                    "Download JSON (this doc)",
                    data=json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False),
                    file_name=f"{doc_id}.json",
                    mime="application/json",
                    use_container_width=True
                )
            with col_dl2:
                st.download_button(
                    "Download CSV (this doc)",
                    data=df.to_csv(index=False),
                    file_name=f"{doc_id}.csv",
                    mime="text/csv",
                    use_container_width=True
                )

            with st.expander("Debug: first 60 fragments of page 1"):
                st.write(pages[0][:60] if pages else [])

    st.markdown("## Combined Results (All Documents, De-Duplicated)")
    all_unique = dedupe_activities([a for _, _, r in results for a in r.activities])
    combined_df = activities_to_dataframe(all_unique)
    st.dataframe(combined_df, use_container_width=True)

    col_all1, col_all2 = st.columns(2)
    with col_all1:
        st.download_button(
            "Download CSV (combined unique)",
            data=combined_df.to_csv(index=False),
            file_name="quirion_activities.csv",
            mime="text/csv",
            use_container_width=True
        )
    with col_all2:
        combined: List[Dict[str, Any]] = [a.model_dump(mode="json") for a in all_unique]
        st.download_button(
            "Download JSON (combined unique)",
            data=json.dumps(combined, indent=2, ensure_ascii=False),
            file_name="quirion_activities.json",
            mime="application/json",
            use_container_width=True
        )
