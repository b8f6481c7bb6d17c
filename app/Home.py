import sys
from pathlib import Path
import streamlit as st

# Ensure project root is on path when running via `streamlit run`
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from app.utils import get_pipeline, render_source, source_selector  # noqa: E402
from rainfall.figures import surface_to_figure  # noqa: E402


st.set_page_config(page_title="Belize Rainfall", layout="wide")

st.title("Belize Rainfall by District")
st.markdown("""
Average monthly rainfall per district, computed from twelve monthly totals in the selected file.
Hover a bar to see the district and its average. Missing or non-numeric months count as zero.
""")

pipeline = get_pipeline()
label = source_selector(pipeline)
if label is None:
    st.stop()

surface = render_source(pipeline, label)
if surface is None:
    # A newer selection superseded this run; Streamlit will rerun with it
    st.stop()

st.plotly_chart(surface_to_figure(surface, pipeline.settings), use_container_width=False)

col1, col2 = st.columns(2)

with col1:
    if st.button("Export SVG"):
        artifact = pipeline.export_vector()
        if artifact is not None:
            st.download_button(
                label=f"Download {artifact.filename}",
                data=artifact.data,
                file_name=artifact.filename,
                mime=artifact.mime,
            )

with col2:
    if st.button("Export JPG"):
        artifact = pipeline.export_raster()
        if artifact is not None:
            st.download_button(
                label=f"Download {artifact.filename}",
                data=artifact.data,
                file_name=artifact.filename,
                mime=artifact.mime,
            )

st.info("""
Run locally:
```
pip install -e .
streamlit run app/Home.py
```
""")
