"""Marketing Report Analyzer - single-page upload and analysis UI"""
import logging
import sys
from pathlib import Path

import streamlit as st

app_dir = Path(__file__).parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from llm_utils import get_settings, render_api_key_banner  # noqa: E402
from ui_components import (  # noqa: E402
    render_download,
    render_footer,
    render_not_marketing,
    render_page_header,
    render_results,
)

from report_analyzer.file_selection import UPLOAD_EXTENSIONS  # noqa: E402
from report_analyzer.models import Language, PromptPolicy  # noqa: E402
from report_analyzer.rendering import escape_markdown  # noqa: E402
from report_analyzer.session import (  # noqa: E402
    STATE_ERROR,
    STATE_NOT_MARKETING,
    STATE_RESULTS,
    AnalysisSession,
)

st.set_page_config(
    page_title="Marketing Report Analyzer",
    page_icon="📊",
    layout="wide"
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

POLICY_LABELS = {
    PromptPolicy.DOCUMENT_CONTENT: "Analyze document content (file is uploaded)",
    PromptPolicy.FILENAME_ONLY: "Quick estimate from filename (file is not uploaded)",
}

LANGUAGE_LABELS = {
    Language.EN: "English",
    Language.PL: "Polski",
}


def get_session() -> AnalysisSession:
    if "analysis_session" not in st.session_state:
        st.session_state.analysis_session = AnalysisSession()
    return st.session_state.analysis_session


def on_file_change():
    session = get_session()
    upload = st.session_state.get("file_upload")
    if upload is None:
        session.clear_file()
    else:
        session.select_file(upload)


def render_sidebar():
    st.sidebar.header("Options")
    language = st.sidebar.radio(
        "Language",
        list(LANGUAGE_LABELS),
        format_func=lambda x: LANGUAGE_LABELS[x],
    )
    policy = st.sidebar.radio(
        "Analysis mode",
        list(POLICY_LABELS),
        format_func=lambda x: POLICY_LABELS[x],
    )
    use_schema = st.sidebar.checkbox(
        "Constrain response with JSON schema",
        value=True,
        help="Asks the model for structured output matching the expected JSON shape.",
    )
    return language, policy, use_schema


def main():
    render_page_header()

    settings = get_settings()
    session = get_session()
    language, policy, use_schema = render_sidebar()

    if not settings.api_key_configured:
        render_api_key_banner()

    st.file_uploader(
        "Click to upload or drag and drop your report",
        type=list(UPLOAD_EXTENSIONS),
        key="file_upload",
        on_change=on_file_change,
        help="Supported file types are PDF, CSV, XLS, and XLSX.",
    )
    if session.selected_file is None:
        st.caption("Supported files: PDF, CSV, Excel")
    else:
        st.caption(f"Selected: **{escape_markdown(session.selected_file.name)}** ({session.selected_file.size:,} bytes)")

    analyze_clicked = st.button(
        "Analyze Report",
        type="primary",
        disabled=not session.can_analyze(settings.api_key_configured),
    )

    if analyze_clicked:
        with st.spinner("Analyzing..."):
            session.analyze(settings, policy=policy, language=language, use_schema=use_schema)

    state = session.view_state
    if state == STATE_ERROR:
        st.error(session.error)
    elif state == STATE_NOT_MARKETING:
        render_not_marketing(session.result, language)
    elif state == STATE_RESULTS:
        render_results(session.result, language)
        render_download(session.result, session.selected_file.name, language)

    render_footer(settings.model)


if __name__ == "__main__":
    main()
