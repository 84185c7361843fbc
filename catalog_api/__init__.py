"""
Top-level package for the Catalog API.

The package provides no public exports; all functionality lives in
submodules under ``app`` (for example ``catalog_api.app.main``).
"""

__all__ = []
