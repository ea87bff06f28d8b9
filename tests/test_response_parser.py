from __future__ import annotations

import json

import pytest

from report_analyzer.errors import ResponseParseError
from report_analyzer.models import DocumentVerdict, MarketingAnalysis, ResponseShape
from report_analyzer.response_parser import parse_response, unwrap_response

INSIGHTS = {"insights": ["CTR fell 12%"], "recommendations": ["Refresh creatives"]}


def test_unwrap_strips_json_fence() -> None:
    body = json.dumps(INSIGHTS)
    assert unwrap_response(f"```json\n{body}\n```") == body
    assert unwrap_response(f"  ```\n{body}\n```  ") == body
    assert unwrap_response(f"\n{body}\n") == body


def test_unwrap_leaves_partial_fences_alone() -> None:
    text = "Here you go: ```json {} ```"
    assert unwrap_response(text) == text


@pytest.mark.parametrize(
    "wrapper",
    ["{}", "```json\n{}\n```", "```\n{}\n```", "```JSON {}```", "\n\n  {}  \n"],
)
def test_fenced_and_unfenced_parse_identically(wrapper: str) -> None:
    body = json.dumps(INSIGHTS, indent=2)
    plain = parse_response(body, ResponseShape.INSIGHTS)
    wrapped = parse_response(wrapper.replace("{}", body), ResponseShape.INSIGHTS)
    assert wrapped == plain
    assert isinstance(plain, MarketingAnalysis)


def test_empty_arrays_are_valid() -> None:
    res = parse_response('{"insights": [], "recommendations": []}', ResponseShape.INSIGHTS)
    assert res.insights == [] and res.recommendations == []


@pytest.mark.parametrize(
    "payload",
    [
        '{"insights": "not a list", "recommendations": []}',
        '{"insights": [], "recommendations": {"a": 1}}',
        '{"insights": []}',
        '{"insights": [1, 2], "recommendations": []}',
        '[1, 2, 3]',
    ],
)
def test_insights_shape_violations_raise(payload: str) -> None:
    with pytest.raises(ResponseParseError):
        parse_response(payload, ResponseShape.INSIGHTS)


def test_invalid_json_error_has_truncated_preview() -> None:
    raw = "Sorry, I cannot help with that. " * 20
    with pytest.raises(ResponseParseError) as ei:
        parse_response(raw, ResponseShape.INSIGHTS)
    msg = ei.value.message
    assert msg.startswith("Failed to parse analysis data. Raw response: ")
    assert msg.endswith("...")
    assert len(msg) == len("Failed to parse analysis data. Raw response: ") + 200 + 3
    assert ei.value.raw_text == raw.strip()


def test_schema_constrained_does_not_unwrap() -> None:
    fenced = "```json\n" + json.dumps(INSIGHTS) + "\n```"
    with pytest.raises(ResponseParseError):
        parse_response(fenced, ResponseShape.INSIGHTS, schema_constrained=True)
    assert parse_response(json.dumps(INSIGHTS), ResponseShape.INSIGHTS, schema_constrained=True).insights == [
        "CTR fell 12%"
    ]


def test_marketing_verdict_parses_sections() -> None:
    payload = {
        "isMarketingData": True,
        "analysis": {
            "conclusions": ["Email drives 40% of leads"],
            "suggestions": ["Shift budget to email"],
            "risks": ["Paid social CPA rising"],
            "criticalErrors": [],
        },
    }
    res = parse_response(json.dumps(payload), ResponseShape.VERDICT)
    assert isinstance(res, DocumentVerdict)
    assert res.is_marketing_data is True
    assert res.analysis is not None
    assert res.analysis.critical_errors == []
    assert res.reasoning is None


def test_non_marketing_verdict_keeps_reasoning() -> None:
    res = parse_response('{"isMarketingData": false, "reasoning": " An invoice. "}', ResponseShape.VERDICT)
    assert res.is_marketing_data is False
    assert res.reasoning == "An invoice."
    assert res.analysis is None


@pytest.mark.parametrize(
    "payload,reason",
    [
        ({"isMarketingData": True}, "analysis is required"),
        ({"isMarketingData": True, "reasoning": "x"}, "analysis is required"),
        ({"isMarketingData": False}, "reasoning"),
        ({"isMarketingData": False, "reasoning": "   "}, "reasoning"),
        ({"isMarketingData": "yes", "reasoning": "x"}, "isMarketingData must be a boolean"),
        (
            {
                "isMarketingData": True,
                "analysis": {"conclusions": [], "suggestions": [], "risks": "none", "criticalErrors": []},
            },
            "analysis.risks must be an array",
        ),
        (
            {
                "isMarketingData": True,
                "reasoning": "also here",
                "analysis": {"conclusions": [], "suggestions": [], "risks": [], "criticalErrors": []},
            },
            "reasoning must be absent",
        ),
        (
            {
                "isMarketingData": False,
                "reasoning": "An invoice.",
                "analysis": {"conclusions": [], "suggestions": [], "risks": [], "criticalErrors": []},
            },
            "analysis must be absent",
        ),
    ],
)
def test_verdict_inconsistencies_fail_loudly(payload: dict, reason: str) -> None:
    with pytest.raises(ResponseParseError) as ei:
        parse_response(json.dumps(payload), ResponseShape.VERDICT)
    assert reason in ei.value.reason
