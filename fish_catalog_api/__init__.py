"""
Top‑level package for the Fish Catalog API.

This file makes ``fish_catalog_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``fish_catalog_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
