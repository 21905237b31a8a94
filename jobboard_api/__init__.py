"""
Top‑level package for the Job Board API.

This file makes ``jobboard_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``jobboard_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
