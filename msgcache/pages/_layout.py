"""Shared HTML shell for pages."""

_STYLE = """
        * { box-sizing: border-box; }
        body {
            font-family: system-ui, sans-serif;
            margin: 0;
            background: #000;
            color: #e0e0e0;
            padding: 2rem 1rem;
        }
        .wrap { max-width: 640px; margin: 0 auto; }
        .card {
            background: #0c0c0c;
            border: 1px solid #1a1a1a;
            padding: 1.5rem 1.75rem;
            margin-bottom: 1.25rem;
        }
        .card h2 {
            font-size: 0.75rem;
            text-transform: uppercase;
            letter-spacing: 0.08em;
            color: #666;
            margin: 0 0 1rem 0;
        }
        code, .code { font-family: monospace; font-size: 0.8125rem; color: #b0b0b0; }
        .muted { color: #555; }
        a { color: #e0e0e0; }
"""


def render_layout(title: str, body: str) -> str:
    """Wrap body (already escaped HTML) in the page shell."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{_STYLE}</style>
</head>
<body>
<div class="wrap">
{body}
</div>
</body>
</html>
"""
