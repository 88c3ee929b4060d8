"""
Top-level package for the inclusive events browser.

Most code should import from submodules such as:
    event_browser.core
    event_browser.views
    event_browser.ui
"""

__all__: list[str] = []
