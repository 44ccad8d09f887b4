"""
Render the page model to HTML (web) or plain text (CLI).

Every string that came from the user or the API is escaped.
"""

from html import escape
from typing import List

from holiday_finder.services.page import (
    HolidayCard,
    LoadingIndicator,
    Message,
    Page,
    ResultsContainer,
    SelectControl,
)


def _attr(value: str) -> str:
    return escape(value, quote=True)


def render_message_html(message: Message) -> str:
    style = ' style="color:red;"' if message.is_error else ""
    return f'<p class="placeholder-text"{style}>{escape(message.text)}</p>'


def render_card_html(card: HolidayCard) -> str:
    return (
        '<div class="holiday-card">'
        f"<h4>{escape(card.name)}</h4>"
        f'<span class="holiday-date">{escape(card.date_label)}</span>'
        f"<p>Type: <strong>{escape(card.type)}</strong></p>"
        f"<p>Global: {escape(card.global_label)}</p>"
        "</div>"
    )


def render_results_html(container: ResultsContainer) -> str:
    """Inner HTML of the results container."""
    parts = []
    for node in container.children:
        if isinstance(node, HolidayCard):
            parts.append(render_card_html(node))
        else:
            parts.append(render_message_html(node))
    return "\n".join(parts)


def render_select_html(select: SelectControl) -> str:
    options = []
    for option in select.options:
        selected = " selected" if option.value and option.value == select.value else ""
        disabled = " disabled" if option.disabled else ""
        options.append(
            f'<option value="{_attr(option.value)}"{selected}{disabled}>{escape(option.label)}</option>'
        )
    return f'<select id="{_attr(select.id)}" name="country">{"".join(options)}</select>'


def render_spinner_html(spinner: LoadingIndicator) -> str:
    display = "block" if spinner.visible else "none"
    return f'<div id="{_attr(spinner.id)}" class="loading-spinner" style="display:{display};"></div>'


def render_page_html(page: Page, title: str = "Holiday Finder") -> str:
    """Full HTML document for the search page."""
    year = page.input()
    button = page.button()
    results = page.results()
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{escape(title)}</title>
</head>
<body>
<section class="api-search-section">
<form method="get" action="/">
{render_select_html(page.select())}
<input id="{_attr(year.id)}" name="year" type="number" value="{_attr(year.value)}">
<button id="{_attr(button.id)}" type="submit">{escape(button.label)}</button>
</form>
{render_spinner_html(page.spinner())}
<div id="{_attr(results.id)}">
{render_results_html(results)}
</div>
</section>
</body>
</html>
"""


def render_results_text(container: ResultsContainer) -> List[str]:
    """Results as plain text lines for terminal output."""
    lines: List[str] = []
    for node in container.children:
        if isinstance(node, HolidayCard):
            lines.append(node.name)
            lines.append(f"  {node.date_label}")
            lines.append(f"  Type: {node.type}")
            lines.append(f"  Global: {node.global_label}")
        else:
            lines.append(node.text)
    return lines
