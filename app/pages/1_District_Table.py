import sys
from pathlib import Path
import streamlit as st

# Ensure project root is on path when running via `streamlit run`
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from app.utils import get_pipeline, render_source, source_selector  # noqa: E402
from rainfall.analysis import entries_to_frame, records_to_frame  # noqa: E402
from rainfall.errors import DataLoadError, EmptyDataset  # noqa: E402
from rainfall.ingest import load_records  # noqa: E402


st.set_page_config(page_title="District Table", layout="wide")
st.title("District Table")

pipeline = get_pipeline()
label = source_selector(pipeline)
if label is None:
    st.stop()

surface = render_source(pipeline, label)
if surface is None:
    st.stop()
if surface.is_error:
    st.error(surface.message.text)
    st.stop()

ranking = entries_to_frame(pipeline.entries)

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Districts", len(ranking))
with col2:
    st.metric("Wettest district", ranking.iloc[0]["district"] if not ranking.empty else "-")
with col3:
    st.metric(
        "Highest average",
        f"{ranking.iloc[0]['average_mm']:.1f} {pipeline.settings.unit}" if not ranking.empty else "-",
    )

st.subheader("Ranking by average monthly rainfall")
st.dataframe(ranking, use_container_width=True, hide_index=True)

st.subheader("Monthly values as loaded")
try:
    monthly = records_to_frame(load_records(pipeline.selected.location))
except EmptyDataset:
    st.info(f"{label} has no data rows.")
except DataLoadError as exc:
    st.error(str(exc))
else:
    st.caption("Blank cells are missing or non-numeric in the file and count as zero in the averages.")
    st.dataframe(monthly, use_container_width=True, hide_index=True)
