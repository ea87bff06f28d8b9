"""Page header and footer."""
from datetime import datetime

import streamlit as st


def render_page_header():
    st.title("📊 Marketing Report Analyzer")
    st.caption("Upload a PDF, CSV or Excel report and get AI-generated insights")


def render_footer(model: str):
    st.markdown("---")
    st.caption(f"© {datetime.now().year} Marketing Analyzer AI. Powered by {model}.")
