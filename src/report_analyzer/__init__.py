"""Marketing Report Analyzer.

Uploads a document to a hosted language model and renders the structured
verdict it returns. No document content is parsed locally.
"""

from .models import (
    AnalysisSections,
    DocumentVerdict,
    Language,
    MarketingAnalysis,
    PromptPolicy,
    ResponseShape,
    SelectedFile,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisSections",
    "DocumentVerdict",
    "Language",
    "MarketingAnalysis",
    "PromptPolicy",
    "ResponseShape",
    "SelectedFile",
    "__version__",
]
