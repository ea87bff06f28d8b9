"""Transient per-browser-session state and the two user actions.

Holds the selected file, loading flag, last error and last parsed result.
Nothing is persisted; Streamlit keeps one AnalysisSession in st.session_state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config import AnalyzerSettings
from .errors import ApiKeyMissingError, ReportAnalyzerError
from .file_selection import read_upload
from .llm_client import AnalyzerClient
from .models import AnalysisResult, DocumentVerdict, Language, PromptPolicy, SelectedFile
from .prompts import build_message_content
from .response_parser import parse_response

logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = "Please select a file first."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during analysis."

# View states, mutually exclusive.
STATE_IDLE = "idle"
STATE_LOADING = "loading"
STATE_ERROR = "error"
STATE_NOT_MARKETING = "not_marketing"
STATE_RESULTS = "results"

ClientFactory = Callable[[AnalyzerSettings], Any]


@dataclass
class AnalysisSession:
    selected_file: Optional[SelectedFile] = None
    is_loading: bool = False
    error: Optional[str] = None
    result: Optional[AnalysisResult] = None

    def select_file(self, upload: Any) -> bool:
        """Validate and store an upload. Returns True if it was accepted."""
        try:
            selected = read_upload(upload)
        except ReportAnalyzerError as e:
            self.selected_file = None
            self.result = None
            self.error = e.message
            return False
        self.selected_file = selected
        self.result = None
        self.error = None
        logger.info("Selected %s (%s, %d bytes)", selected.name, selected.mime_type, selected.size)
        return True

    def clear_file(self) -> None:
        self.selected_file = None
        self.result = None
        self.error = None

    def can_analyze(self, api_key_configured: bool) -> bool:
        return self.selected_file is not None and not self.is_loading and api_key_configured

    def analyze(
        self,
        settings: AnalyzerSettings,
        policy: PromptPolicy = PromptPolicy.FILENAME_ONLY,
        language: Language = Language.EN,
        use_schema: bool = True,
        client_factory: ClientFactory = AnalyzerClient.from_settings,
    ) -> Optional[AnalysisResult]:
        """
        Run one analysis attempt for the selected file.

        Errors never propagate: they are stored in `self.error` and the
        attempt ends. The loading flag is always cleared.
        """
        if self.selected_file is None:
            self.error = NO_FILE_MESSAGE
            return None

        if not settings.api_key_configured:
            self.error = ApiKeyMissingError().message
            self.is_loading = False
            return None

        self.is_loading = True
        self.error = None
        self.result = None
        try:
            client = client_factory(settings)
            content = build_message_content(self.selected_file, policy, language)
            raw = client.generate(content, policy.shape, language=language, use_schema=use_schema)
            self.result = parse_response(raw, policy.shape, schema_constrained=use_schema)
        except ReportAnalyzerError as e:
            self.error = e.message
            self.result = None
        except Exception as e:
            logger.exception("Error during analysis")
            self.error = str(e) or UNKNOWN_ERROR_MESSAGE
            self.result = None
        finally:
            self.is_loading = False
        return self.result

    @property
    def view_state(self) -> str:
        if self.is_loading:
            return STATE_LOADING
        if self.error:
            return STATE_ERROR
        if self.result is None:
            return STATE_IDLE
        if isinstance(self.result, DocumentVerdict) and not self.result.is_marketing_data:
            return STATE_NOT_MARKETING
        return STATE_RESULTS
