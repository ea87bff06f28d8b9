from __future__ import annotations

from report_analyzer.models import AnalysisSections, DocumentVerdict, Language, MarketingAnalysis
from report_analyzer.rendering import render_markdown, result_panels


def test_insights_render_two_panels_with_placeholder() -> None:
    panels = result_panels(MarketingAnalysis(insights=["Spend up 8%"], recommendations=[]))
    assert [p.key for p in panels] == ["insights", "recommendations"]
    assert panels[0].items == ["Spend up 8%"]
    assert panels[1].is_empty
    assert panels[1].placeholder == "No recommendations generated."


def test_verdict_renders_four_panels() -> None:
    verdict = DocumentVerdict(
        isMarketingData=True,
        analysis=AnalysisSections(conclusions=["c"], suggestions=["s"], risks=[], criticalErrors=["e"]),
    )
    panels = result_panels(verdict, Language.PL)
    assert [p.title for p in panels] == ["Wnioski", "Sugestie", "Ryzyka", "Błędy krytyczne"]


def test_non_marketing_verdict_has_no_panels() -> None:
    verdict = DocumentVerdict(isMarketingData=False, reasoning="It is a tax form.")
    assert result_panels(verdict) == []
    md = render_markdown(verdict, file_name="form.pdf")
    assert md.startswith("# form.pdf")
    assert "It is a tax form." in md


def test_markdown_never_renders_empty_list() -> None:
    md = render_markdown(MarketingAnalysis(insights=[], recommendations=["Test new audiences"]))
    assert "_No insights generated._" in md
    assert "- Test new audiences" in md
    assert md.endswith("\n")


def test_reasoning_and_filename_are_escaped() -> None:
    verdict = DocumentVerdict(isMarketingData=False, reasoning="**Total** is $5 and _not_ a [link](x)")
    md = render_markdown(verdict, file_name="q3_#final*.csv")
    assert "# q3\\_\\#final\\*.csv" in md
    assert "\\*\\*Total\\*\\* is \\$5 and \\_not\\_ a \\[link\\](x)" in md
    assert "**Reasoning:**" in md
