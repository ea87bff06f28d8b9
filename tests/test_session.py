from __future__ import annotations

import json

from report_analyzer.config import AnalyzerSettings
from report_analyzer.errors import RemoteCallError
from report_analyzer.models import Language, MarketingAnalysis, PromptPolicy, ResponseShape
from report_analyzer.session import (
    NO_FILE_MESSAGE,
    STATE_ERROR,
    STATE_IDLE,
    STATE_NOT_MARKETING,
    STATE_RESULTS,
    AnalysisSession,
)

from conftest import FakeClient, FakeUpload

INSIGHTS_JSON = json.dumps({"insights": ["a"], "recommendations": ["b"]})


def _factory(client: FakeClient):
    return lambda settings: client


def test_invalid_selection_drops_prior_result(settings, csv_upload) -> None:
    session = AnalysisSession()
    session.select_file(csv_upload)
    session.analyze(settings, client_factory=_factory(FakeClient(response=INSIGHTS_JSON)))
    assert session.view_state == STATE_RESULTS

    accepted = session.select_file(FakeUpload(name="photo.png", type="image/png"))
    assert accepted is False
    assert session.selected_file is None
    assert session.result is None
    assert "Invalid file type" in session.error
    assert session.view_state == STATE_ERROR


def test_valid_selection_clears_error_and_result(settings, csv_upload) -> None:
    session = AnalysisSession(error="old", result=MarketingAnalysis(insights=[], recommendations=[]))
    assert session.select_file(csv_upload) is True
    assert session.error is None and session.result is None
    assert session.selected_file.name == "campaign_q3.csv"
    assert session.view_state == STATE_IDLE


def test_analyze_without_file_never_calls_remote(settings) -> None:
    client = FakeClient(response=INSIGHTS_JSON)
    session = AnalysisSession()
    assert session.analyze(settings, client_factory=_factory(client)) is None
    assert session.error == NO_FILE_MESSAGE
    assert client.calls == []


def test_analyze_without_key_never_calls_remote(csv_upload) -> None:
    client = FakeClient(response=INSIGHTS_JSON)
    session = AnalysisSession()
    session.select_file(csv_upload)
    assert session.analyze(AnalyzerSettings(api_key="  "), client_factory=_factory(client)) is None
    assert "not configured" in session.error
    assert session.is_loading is False
    assert client.calls == []
    assert session.can_analyze(api_key_configured=False) is False


def test_successful_analysis(settings, csv_upload) -> None:
    client = FakeClient(response="```json\n" + INSIGHTS_JSON + "\n```")
    session = AnalysisSession()
    session.select_file(csv_upload)
    result = session.analyze(settings, use_schema=False, client_factory=_factory(client))
    assert result == MarketingAnalysis(insights=["a"], recommendations=["b"])
    assert session.is_loading is False
    assert session.error is None
    assert client.calls[0]["shape"] is ResponseShape.INSIGHTS
    assert client.calls[0]["use_schema"] is False


def test_document_content_policy_sends_file(settings, csv_upload) -> None:
    client = FakeClient(response='{"isMarketingData": false, "reasoning": "Just numbers."}')
    session = AnalysisSession()
    session.select_file(csv_upload)
    session.analyze(
        settings,
        policy=PromptPolicy.DOCUMENT_CONTENT,
        language=Language.PL,
        client_factory=_factory(client),
    )
    assert session.view_state == STATE_NOT_MARKETING
    call = client.calls[0]
    assert call["shape"] is ResponseShape.VERDICT
    assert call["language"] is Language.PL
    assert call["content"][1]["type"] == "file"


def test_remote_failure_surfaces_message(settings, csv_upload) -> None:
    client = FakeClient(error=RemoteCallError("Rate limit reached"))
    session = AnalysisSession()
    session.select_file(csv_upload)
    assert session.analyze(settings, client_factory=_factory(client)) is None
    assert session.error == "Rate limit reached"
    assert session.is_loading is False
    assert session.view_state == STATE_ERROR


def test_unexpected_failure_uses_generic_message(settings, csv_upload) -> None:
    session = AnalysisSession()
    session.select_file(csv_upload)
    session.analyze(settings, client_factory=_factory(FakeClient(error=RuntimeError())))
    assert session.error == "An unknown error occurred during analysis."


def test_malformed_response_shows_preview(settings, csv_upload) -> None:
    session = AnalysisSession()
    session.select_file(csv_upload)
    session.analyze(settings, client_factory=_factory(FakeClient(response='{"insights": "oops"}')))
    assert session.result is None
    assert session.error.startswith("Failed to parse analysis data. Raw response: {")


def test_can_analyze_requires_file_and_idle(settings, csv_upload) -> None:
    session = AnalysisSession()
    assert session.can_analyze(True) is False
    session.select_file(csv_upload)
    assert session.can_analyze(True) is True
    session.is_loading = True
    assert session.can_analyze(True) is False
