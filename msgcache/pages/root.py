"""Root landing page with API links."""

from html import escape

from msgcache.pages._layout import render_layout


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    body = f"""
    <h1>{name}</h1>
    <div class="card">
        <h2>What it does</h2>
        <p>Reports message keys that cannot exist (known non-customizable prefixes,
        not defined by the catalog) as missing before the message cache is queried.</p>
    </div>
    <div class="card">
        <h2>Try it</h2>
        <p><code>GET /api/v1/messages/&lt;key&gt;</code> resolve a message</p>
        <p><code>POST /api/v1/messages/decisions</code> check many keys</p>
        <p><code>GET /preview?keys=&lt;key&gt;</code> render messages as a page</p>
        <p><a href="/docs">API documentation</a></p>
    </div>
"""
    return render_layout(name, body)
