"""Panel definitions shared by the Streamlit page and the CLI."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .models import AnalysisResult, DocumentVerdict, Language, MarketingAnalysis

LABELS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "insights": "Insights",
        "recommendations": "Recommendations",
        "conclusions": "Conclusions",
        "suggestions": "Suggestions",
        "risks": "Risks",
        "critical_errors": "Critical Errors",
        "not_marketing": "This document does not appear to contain marketing data.",
        "reasoning": "Reasoning",
    },
    Language.PL: {
        "insights": "Wnioski",
        "recommendations": "Rekomendacje",
        "conclusions": "Wnioski",
        "suggestions": "Sugestie",
        "risks": "Ryzyka",
        "critical_errors": "Błędy krytyczne",
        "not_marketing": "Ten dokument nie wydaje się zawierać danych marketingowych.",
        "reasoning": "Uzasadnienie",
    },
}

# Characters Streamlit markdown would interpret, including $ for LaTeX.
_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_\[\]<>#|~$])")


def escape_markdown(text: str) -> str:
    """Escape model or user text so markdown renders it literally."""
    return _MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)


PLACEHOLDERS: dict[Language, str] = {
    Language.EN: "No {what} generated.",
    Language.PL: "Brak wygenerowanych pozycji ({what}).",
}


@dataclass(frozen=True)
class Panel:
    key: str
    title: str
    items: list[str]
    placeholder: str

    @property
    def is_empty(self) -> bool:
        return not self.items


def _panel(key: str, items: list[str], language: Language) -> Panel:
    title = LABELS[language][key]
    return Panel(
        key=key,
        title=title,
        items=list(items),
        placeholder=PLACEHOLDERS[language].format(what=title.lower()),
    )


def result_panels(result: AnalysisResult, language: Language = Language.EN) -> list[Panel]:
    """
    Panels to render for a parsed result.

    Two panels for insights/recommendations, four for a marketing verdict,
    none for a non-marketing verdict (that case is an info banner).
    """
    if isinstance(result, MarketingAnalysis):
        return [
            _panel("insights", result.insights, language),
            _panel("recommendations", result.recommendations, language),
        ]
    if isinstance(result, DocumentVerdict) and result.is_marketing_data and result.analysis:
        a = result.analysis
        return [
            _panel("conclusions", a.conclusions, language),
            _panel("suggestions", a.suggestions, language),
            _panel("risks", a.risks, language),
            _panel("critical_errors", a.critical_errors, language),
        ]
    return []


def not_marketing_message(result: DocumentVerdict, language: Language = Language.EN) -> str:
    labels = LABELS[language]
    return f"{labels['not_marketing']}\n\n**{labels['reasoning']}:** {escape_markdown(result.reasoning or '')}".strip()


def render_markdown(result: AnalysisResult, file_name: str = "", language: Language = Language.EN) -> str:
    lines: list[str] = []
    if file_name:
        lines.append(f"# {escape_markdown(file_name)}\n")

    if isinstance(result, DocumentVerdict) and not result.is_marketing_data:
        lines.append(f"\n{not_marketing_message(result, language)}\n")
        return "".join(lines).strip() + "\n"

    for panel in result_panels(result, language):
        lines.append(f"\n## {panel.title}\n\n")
        if panel.is_empty:
            lines.append(f"_{panel.placeholder}_\n")
            continue
        for item in panel.items:
            lines.append(f"- {item}\n")

    return "".join(lines).strip() + "\n"
