from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping

from .errors import ResponseParseError
from .models import (
    AnalysisResult,
    AnalysisSections,
    DocumentVerdict,
    MarketingAnalysis,
    ResponseShape,
)

logger = logging.getLogger(__name__)

# Whole response wrapped in ``` fences, optional language tag.
FENCE_RE = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)

INSIGHTS_FIELDS: tuple[str, ...] = ("insights", "recommendations")
SECTION_FIELDS: tuple[str, ...] = ("conclusions", "suggestions", "risks", "criticalErrors")


def unwrap_response(text: str) -> str:
    """Trim the response and strip an enclosing markdown code fence if present."""
    stripped = (text or "").strip()
    match = FENCE_RE.match(stripped)
    if match and match.group(2):
        return match.group(2).strip()
    return stripped


def _require_string_array(obj: Mapping[str, Any], field: str, where: str) -> list[str]:
    value = obj.get(field)
    if not isinstance(value, list):
        raise ValueError(f"{where}{field} must be an array.")
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise ValueError(f"{where}{field}[{i}] must be a string.")
    return value


def validate_insights_obj(obj: Any) -> MarketingAnalysis:
    if not isinstance(obj, Mapping):
        raise ValueError("Response must be a JSON object.")
    fields = {f: _require_string_array(obj, f, "") for f in INSIGHTS_FIELDS}
    return MarketingAnalysis(**fields)


def validate_verdict_obj(obj: Any) -> DocumentVerdict:
    if not isinstance(obj, Mapping):
        raise ValueError("Response must be a JSON object.")

    flag = obj.get("isMarketingData")
    if not isinstance(flag, bool):
        raise ValueError("isMarketingData must be a boolean.")

    if flag:
        analysis = obj.get("analysis")
        if analysis is None:
            raise ValueError("analysis is required when isMarketingData is true.")
        if not isinstance(analysis, Mapping):
            raise ValueError("analysis must be an object.")
        if "reasoning" in obj:
            raise ValueError("reasoning must be absent when isMarketingData is true.")
        sections = {f: _require_string_array(analysis, f, "analysis.") for f in SECTION_FIELDS}
        return DocumentVerdict(isMarketingData=True, analysis=AnalysisSections(**sections))

    reasoning = obj.get("reasoning")
    if not isinstance(reasoning, str) or not reasoning.strip():
        raise ValueError("reasoning must be a non-empty string when isMarketingData is false.")
    if "analysis" in obj:
        raise ValueError("analysis must be absent when isMarketingData is false.")
    return DocumentVerdict(isMarketingData=False, reasoning=reasoning.strip())


def parse_response(text: str, shape: ResponseShape, schema_constrained: bool = False) -> AnalysisResult:
    """Decode and validate a raw model response.

    Schema-constrained responses are assumed to be clean JSON and are only
    trimmed; otherwise an enclosing code fence is stripped first.

    Raises ResponseParseError carrying a truncated preview of the payload.
    """
    payload = (text or "").strip() if schema_constrained else unwrap_response(text)

    try:
        obj = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.error("Response is not valid JSON (%s). Received: %s", e, payload)
        raise ResponseParseError(f"Response is not valid JSON: {e}", payload) from e

    try:
        if shape is ResponseShape.INSIGHTS:
            return validate_insights_obj(obj)
        return validate_verdict_obj(obj)
    except ValueError as e:
        logger.error("Invalid JSON structure received from API: %s. Received: %s", e, payload)
        raise ResponseParseError(str(e), payload) from e
