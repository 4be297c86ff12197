"""
Top-level package for the tabular dataset browser.

This package exposes the core architecture (dataset engine, chart views,
import/export collaborators).
Most code should import from submodules such as:
    tab_browser.core
    tab_browser.views
    tab_browser.data_io
"""

__all__: list[str] = []
