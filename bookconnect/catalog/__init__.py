"""
Catalog package for the book browser.

This package holds the catalogue controller and everything around it:
pure filtering, detail and option functions (``store``), the preview
renderer and view sinks (``render``), per-session state (``sessions``),
the day/night theme helper (``theme``) and the REST routes that a thin
front-end calls (``router``).
"""

from .router import router as catalog_router  # noqa: F401
