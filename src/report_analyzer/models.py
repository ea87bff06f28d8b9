from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ResponseShape(str, Enum):
    """
    The two mutually exclusive JSON layouts the model is asked to return.

    - INSIGHTS: {"insights": [...], "recommendations": [...]}
    - VERDICT:  {"isMarketingData": bool, "analysis": {...} | "reasoning": str}
    """
    INSIGHTS = "insights"
    VERDICT = "verdict"


class PromptPolicy(str, Enum):
    """
    How the prompt relates to the uploaded document.

    - FILENAME_ONLY: the model infers plausible content from the filename alone
      and the file bytes are never sent
    - DOCUMENT_CONTENT: the file bytes are attached and the model must not
      fabricate content it cannot read
    """
    FILENAME_ONLY = "filename_only"
    DOCUMENT_CONTENT = "document_content"

    @property
    def shape(self) -> ResponseShape:
        if self is PromptPolicy.FILENAME_ONLY:
            return ResponseShape.INSIGHTS
        return ResponseShape.VERDICT

    @property
    def sends_content(self) -> bool:
        return self is PromptPolicy.DOCUMENT_CONTENT


class Language(str, Enum):
    EN = "en"
    PL = "pl"


class SelectedFile(BaseModel):
    """
    Read-once snapshot of an uploaded file.

    name: original filename as reported by the browser
    mime_type: declared MIME type (may be empty)
    data: raw bytes
    """
    model_config = ConfigDict(frozen=True)

    name: str
    mime_type: str = ""
    data: bytes = b""

    @property
    def size(self) -> int:
        return len(self.data)


class MarketingAnalysis(BaseModel):
    """Shape A."""
    insights: list[str]
    recommendations: list[str]


class AnalysisSections(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conclusions: list[str]
    suggestions: list[str]
    risks: list[str]
    critical_errors: list[str] = Field(alias="criticalErrors")


class DocumentVerdict(BaseModel):
    """
    Shape B.

    analysis is set iff is_marketing_data is true; reasoning is set iff it is
    false. The parser enforces this before a DocumentVerdict is built.
    """
    model_config = ConfigDict(populate_by_name=True)

    is_marketing_data: bool = Field(alias="isMarketingData")
    analysis: Optional[AnalysisSections] = None
    reasoning: Optional[str] = None


AnalysisResult = Union[MarketingAnalysis, DocumentVerdict]
