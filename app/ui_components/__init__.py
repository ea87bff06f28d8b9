"""UI components for the Marketing Report Analyzer."""
from .header import render_page_header, render_footer
from .results import render_results, render_not_marketing, render_download

__all__ = [
    "render_page_header",
    "render_footer",
    "render_results",
    "render_not_marketing",
    "render_download",
]
