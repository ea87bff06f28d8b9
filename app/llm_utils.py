"""LLM settings for the Streamlit page.

API Key Priority:
1. st.secrets["API_KEY"] / st.secrets["OPENAI_API_KEY"] - user-configured secret
2. os.environ["API_KEY"] / os.environ["OPENAI_API_KEY"] - deployment variable
"""
import streamlit as st

from report_analyzer.config import AnalyzerSettings, load_settings


def _streamlit_secrets():
    try:
        # Touching st.secrets raises when no secrets.toml exists.
        return dict(st.secrets)
    except FileNotFoundError:
        return None


def get_settings() -> AnalyzerSettings:
    """Load analyzer settings, preferring Streamlit secrets over the environment."""
    return load_settings(secrets=_streamlit_secrets())


def render_api_key_banner():
    """Static banner shown while no API key is configured."""
    st.error("""
**API Key is not configured**

Set the `API_KEY` environment variable (or `OPENAI_API_KEY`) in your deployment platform,
or add it to `.streamlit/secrets.toml`, then restart the application.
Analysis is disabled until a key is available.
    """)
