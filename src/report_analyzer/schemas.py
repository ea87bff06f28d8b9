"""JSON Schemas used to constrain the model's structured output."""
from __future__ import annotations

from typing import Any

from .models import ResponseShape

_STRING_ARRAY: dict[str, Any] = {"type": "array", "items": {"type": "string"}}

INSIGHTS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "insights": _STRING_ARRAY,
        "recommendations": _STRING_ARRAY,
    },
    "required": ["insights", "recommendations"],
    "additionalProperties": False,
}

VERDICT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "isMarketingData": {"type": "boolean"},
        "analysis": {
            "type": "object",
            "properties": {
                "conclusions": _STRING_ARRAY,
                "suggestions": _STRING_ARRAY,
                "risks": _STRING_ARRAY,
                "criticalErrors": _STRING_ARRAY,
            },
            "required": ["conclusions", "suggestions", "risks", "criticalErrors"],
            "additionalProperties": False,
        },
        "reasoning": {"type": "string"},
    },
    "required": ["isMarketingData"],
    "additionalProperties": False,
}

SCHEMAS: dict[ResponseShape, dict[str, Any]] = {
    ResponseShape.INSIGHTS: INSIGHTS_SCHEMA,
    ResponseShape.VERDICT: VERDICT_SCHEMA,
}


def response_format_for(shape: ResponseShape, use_schema: bool) -> dict[str, Any]:
    """
    Return the Chat Completions `response_format` for a shape.

    Without a schema the model is only asked for a JSON object. The verdict
    schema has optional keys, so it is sent with strict=False.
    """
    if not use_schema:
        return {"type": "json_object"}
    return {
        "type": "json_schema",
        "json_schema": {
            "name": f"marketing_{shape.value}",
            "schema": SCHEMAS[shape],
            "strict": False,
        },
    }
