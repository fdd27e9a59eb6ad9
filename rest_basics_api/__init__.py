"""
Top‑level package for the REST Basics API.

This file makes ``rest_basics_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``rest_basics_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
