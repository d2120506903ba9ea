"""HTML pages: landing page and message preview (a rendered unit of work)."""

from msgcache.pages.preview import render_preview_page
from msgcache.pages.root import render_root_page

__all__ = ["render_preview_page", "render_root_page"]
