import sys
from pathlib import Path
import streamlit as st

# Ensure project root is on path when running via `streamlit run`
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

st.set_page_config(page_title="Data Dictionary", layout="wide")
st.title("Data Dictionary")

st.markdown("""
**Input files** (`data/raw/*.csv`, one selector entry per file, labelled by file name)
- `District`: district name; must be present, non-blank and unique within a file.
- `Jan` … `Dec`: monthly rainfall in millimetres, one column per calendar month.

**Derived values**
- `average_mm`: sum of the twelve months divided by 12.
- `rank`: dense rank by `average_mm`, wettest first. Ties keep file order in the chart.

**Notes**
- Blank, non-numeric and negative monthly cells count as zero rainfall.
- A file missing `District` or any month column is rejected and the chart shows an error instead.
- The value axis extends 15% above the wettest district so labels fit above the bars.
- Exports are named `belize-rainfall-<file label>.svg` / `.jpg`; JPG exports are rendered at twice the on-screen size.
""")
