"""Message preview page: renders a list of resolved messages."""

from collections.abc import Sequence
from html import escape

from msgcache.application.dtos.message import MessageLookupResult
from msgcache.pages._layout import render_layout


def render_preview_page(app_name: str, results: Sequence[MessageLookupResult]) -> str:
    """Return HTML listing each key with its text (or a missing marker)."""
    rows = []
    for result in results:
        if result.text is None:
            text = '<span class="muted">&lt;missing&gt;</span>'
        else:
            text = escape(result.text)
        rows.append(
            f'        <p><code>{escape(result.key)}</code> '
            f'<span class="muted">[{result.decision.value}]</span> {text}</p>'
        )
    if not rows:
        rows.append('        <p class="muted">No keys requested. Use ?keys=a&amp;keys=b</p>')
    body = (
        f"    <h1>{escape(app_name)}</h1>\n"
        '    <div class="card">\n'
        "        <h2>Messages</h2>\n"
        + "\n".join(rows)
        + "\n    </div>\n"
    )
    return render_layout("Message preview", body)
