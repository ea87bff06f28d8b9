from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from report_analyzer.config import AnalyzerSettings


@dataclass
class FakeUpload:
    """Stand-in for streamlit's UploadedFile."""

    name: str
    type: str
    data: bytes = b"col_a,col_b\n1,2\n"

    def getvalue(self) -> bytes:
        return self.data


@dataclass
class FakeClient:
    """Records generate() calls and returns a canned response."""

    response: str = ""
    error: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def generate(self, content_parts, shape, language=None, use_schema=True) -> str:
        self.calls.append(
            {"content": content_parts, "shape": shape, "language": language, "use_schema": use_schema}
        )
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings() -> AnalyzerSettings:
    return AnalyzerSettings(api_key="sk-test", model="test-model")


@pytest.fixture
def csv_upload() -> FakeUpload:
    return FakeUpload(name="campaign_q3.csv", type="text/csv")
