"""Style utilities for consistent UI presentation."""
import html

COLORS = {
    "primary": "#1E88E5",
    "secondary": "#6C757D",
    "success": "#28A745",
    "warning": "#FFC107",
    "critical": "#DC3545",
    "info": "#17A2B8",
    "light": "#F8F9FA",
    "dark": "#343A40",
}

PANEL_COLORS = {
    "insights": COLORS["primary"],
    "recommendations": COLORS["success"],
    "conclusions": COLORS["primary"],
    "suggestions": COLORS["success"],
    "risks": COLORS["warning"],
    "critical_errors": COLORS["critical"],
}

PANEL_ICONS = {
    "insights": "💡",
    "recommendations": "✅",
    "conclusions": "💡",
    "suggestions": "✅",
    "risks": "⚠️",
    "critical_errors": "🔴",
}


def panel_html(key: str, title: str, items: list, placeholder: str) -> str:
    """Return HTML for one bulleted result panel. Item text is escaped."""
    color = PANEL_COLORS.get(key, COLORS["secondary"])
    icon = PANEL_ICONS.get(key, "•")
    if items:
        body = "<ul style='margin: 8px 0 0 0; padding-left: 20px;'>" + "".join(
            f"<li style='margin-bottom: 6px;'>{html.escape(item)}</li>" for item in items
        ) + "</ul>"
    else:
        body = f"<p style='margin: 8px 0 0 0; color: {COLORS['secondary']}; font-style: italic;'>{html.escape(placeholder)}</p>"
    return f"""
<div style="border-left: 4px solid {color}; padding: 12px 16px; margin: 8px 0 16px 0; background: {COLORS['light']}; border-radius: 6px;">
    <h3 style="margin: 0; color: {COLORS['dark']}; font-size: 1.15em;">{icon} {html.escape(title)}</h3>
    {body}
</div>
"""

