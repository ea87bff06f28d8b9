"""Result panels for a parsed analysis."""
import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).resolve().parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from style_utils import panel_html  # noqa: E402

from report_analyzer.models import DocumentVerdict, Language  # noqa: E402
from report_analyzer.rendering import not_marketing_message, render_markdown, result_panels  # noqa: E402


def render_results(result, language: Language):
    """
    Render two (insights) or four (verdict) panels side by side.

    Empty sections show their placeholder instead of an empty list.
    """
    panels = result_panels(result, language)
    if not panels:
        return
    columns = st.columns(2)
    for i, panel in enumerate(panels):
        with columns[i % 2]:
            st.markdown(
                panel_html(panel.key, panel.title, panel.items, panel.placeholder),
                unsafe_allow_html=True,
            )


def render_not_marketing(result: DocumentVerdict, language: Language):
    st.info(not_marketing_message(result, language))


def render_download(result, file_name: str, language: Language):
    stem = Path(file_name).stem or "report"
    st.download_button(
        label="Download analysis (Markdown)",
        data=render_markdown(result, file_name=file_name, language=language),
        file_name=f"{stem}_analysis.md",
        mime="text/markdown",
    )
    with st.expander("Raw JSON"):
        st.json(result.model_dump(by_alias=True, exclude_none=True))
