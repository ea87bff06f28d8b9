"""Prompt templates.

Two policies:
- filename_only: the model is told the report name and asked for a plausible
  analysis of a typical marketing report. Nothing from the file is sent.
- document_content: the file is attached and the model must decide whether it
  contains marketing data, without inventing content it cannot read.
"""
from __future__ import annotations

from typing import Any

from .file_selection import to_data_url
from .models import Language, PromptPolicy, SelectedFile

SYSTEM_PROMPTS: dict[Language, str] = {
    Language.EN: (
        "You are a cautious marketing analysis assistant. "
        "Return ONLY valid JSON, without any surrounding text or markdown."
    ),
    Language.PL: (
        "Jesteś ostrożnym asystentem analizy marketingowej. "
        "Zwróć WYŁĄCZNIE poprawny obiekt JSON, bez dodatkowego tekstu i bez markdown."
    ),
}

_FILENAME_ONLY_EN = """
You are a marketing analysis expert.
Analyze a typical marketing report. Assume the report shows mixed results: some campaigns are successful, but overall engagement is declining.
The report is named: "{file_name}".

Provide your analysis in JSON format. The JSON object must have two keys: "insights" and "recommendations".
Each key must have a value that is an array of strings, where each string is a bullet point.
For example:
{{
  "insights": [
    "Insight 1 regarding typical marketing data.",
    "Insight 2 regarding typical marketing data."
  ],
  "recommendations": [
    "Recommendation 1 based on typical insights.",
    "Recommendation 2 based on typical insights."
  ]
}}
Ensure the output is only the JSON object, without any surrounding text or markdown."""

_FILENAME_ONLY_PL = """
Jesteś ekspertem od analizy marketingowej.
Przeanalizuj typowy raport marketingowy. Załóż, że raport pokazuje mieszane wyniki: część kampanii odnosi sukces, ale ogólne zaangażowanie spada.
Nazwa raportu: "{file_name}".

Przedstaw analizę w formacie JSON. Obiekt JSON musi mieć dwa klucze: "insights" oraz "recommendations".
Wartością każdego klucza musi być tablica napisów, gdzie każdy napis to jeden punkt listy.
Przykład:
{{
  "insights": [
    "Wniosek 1 dotyczący typowych danych marketingowych.",
    "Wniosek 2 dotyczący typowych danych marketingowych."
  ],
  "recommendations": [
    "Rekomendacja 1 wynikająca z wniosków.",
    "Rekomendacja 2 wynikająca z wniosków."
  ]
}}
Zwróć wyłącznie obiekt JSON, bez dodatkowego tekstu i bez markdown."""

_DOCUMENT_CONTENT_EN = """
You are a marketing analysis expert.
The attached document is named: "{file_name}". Read its actual content.

First decide which scenario applies:
1. The document contains marketing data (campaign results, channel performance, budgets, customer or sales funnel metrics).
2. The document does not contain marketing data, or its content is unreadable or unclear.

Respond with a single JSON object:
- Scenario 1:
{{
  "isMarketingData": true,
  "analysis": {{
    "conclusions": ["..."],
    "suggestions": ["..."],
    "risks": ["..."],
    "criticalErrors": ["..."]
  }}
}}
- Scenario 2:
{{
  "isMarketingData": false,
  "reasoning": "A short explanation of why the document was not analyzed."
}}

Rules:
- Base every bullet point on the document content. Do NOT invent figures, campaigns or facts.
- If the content is unclear, choose scenario 2 and explain why instead of guessing.
- "criticalErrors" lists data errors or inconsistencies found in the document; use an empty array if there are none.
- Include "analysis" only in scenario 1 and "reasoning" only in scenario 2.
Ensure the output is only the JSON object, without any surrounding text or markdown."""

_DOCUMENT_CONTENT_PL = """
Jesteś ekspertem od analizy marketingowej.
Załączony dokument nosi nazwę: "{file_name}". Przeczytaj jego rzeczywistą treść.

Najpierw ustal, który scenariusz ma zastosowanie:
1. Dokument zawiera dane marketingowe (wyniki kampanii, skuteczność kanałów, budżety, metryki klientów lub lejka sprzedażowego).
2. Dokument nie zawiera danych marketingowych albo jego treść jest nieczytelna lub niejasna.

Odpowiedz jednym obiektem JSON:
- Scenariusz 1:
{{
  "isMarketingData": true,
  "analysis": {{
    "conclusions": ["..."],
    "suggestions": ["..."],
    "risks": ["..."],
    "criticalErrors": ["..."]
  }}
}}
- Scenariusz 2:
{{
  "isMarketingData": false,
  "reasoning": "Krótkie wyjaśnienie, dlaczego dokument nie został przeanalizowany."
}}

Zasady:
- Każdy punkt opieraj na treści dokumentu. NIE wymyślaj liczb, kampanii ani faktów.
- Jeśli treść jest niejasna, wybierz scenariusz 2 i wyjaśnij dlaczego, zamiast zgadywać.
- "criticalErrors" to błędy lub niespójności danych znalezione w dokumencie; jeśli ich brak, zwróć pustą tablicę.
- "analysis" dołącz tylko w scenariuszu 1, a "reasoning" tylko w scenariuszu 2.
Zwróć wyłącznie obiekt JSON, bez dodatkowego tekstu i bez markdown."""

_TEMPLATES: dict[tuple[PromptPolicy, Language], str] = {
    (PromptPolicy.FILENAME_ONLY, Language.EN): _FILENAME_ONLY_EN,
    (PromptPolicy.FILENAME_ONLY, Language.PL): _FILENAME_ONLY_PL,
    (PromptPolicy.DOCUMENT_CONTENT, Language.EN): _DOCUMENT_CONTENT_EN,
    (PromptPolicy.DOCUMENT_CONTENT, Language.PL): _DOCUMENT_CONTENT_PL,
}


def build_prompt(file_name: str, policy: PromptPolicy, language: Language = Language.EN) -> str:
    return _TEMPLATES[(policy, language)].format(file_name=file_name)


def build_message_content(
    selected: SelectedFile,
    policy: PromptPolicy,
    language: Language = Language.EN,
) -> list[dict[str, Any]]:
    """Build the user message parts: the instruction, plus the file for document_content."""
    parts: list[dict[str, Any]] = [
        {"type": "text", "text": build_prompt(selected.name, policy, language)}
    ]
    if policy.sends_content:
        parts.append(
            {
                "type": "file",
                "file": {
                    "filename": selected.name,
                    "file_data": to_data_url(selected),
                },
            }
        )
    return parts
