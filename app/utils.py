import asyncio
from pathlib import Path
from typing import Optional

import streamlit as st

from rainfall.config import ChartSettings, Paths
from rainfall.pipeline import ChartPipeline
from rainfall.render import RenderedSurface
from rainfall.sources import SourceCatalog

ROOT = Path(__file__).resolve().parent.parent


def get_catalog() -> SourceCatalog:
    """Sources from data/raw under the project root."""
    return SourceCatalog.discover(ROOT / Paths().raw)


def get_pipeline() -> ChartPipeline:
    """One pipeline per browser session so its generation counter survives reruns."""
    if "pipeline" not in st.session_state:
        st.session_state["pipeline"] = ChartPipeline(
            get_catalog(),
            ChartSettings(),
            notify=st.error,
        )
    return st.session_state["pipeline"]


def source_selector(pipeline: ChartPipeline) -> Optional[str]:
    """Sidebar data-source selector; None when there is nothing to choose."""
    labels = pipeline.catalog.labels
    if not labels:
        st.warning(f"No CSV files found in {ROOT / Paths().raw}. Add a district rainfall CSV and retry.")
        return None
    current = pipeline.selected.label if pipeline.selected and pipeline.selected.label in labels else labels[-1]
    return st.sidebar.selectbox("Data source", labels, index=labels.index(current))


def render_source(pipeline: ChartPipeline, label: str) -> Optional[RenderedSurface]:
    # Streamlit reruns the script top to bottom; the render itself is async
    return asyncio.run(pipeline.render(label))
