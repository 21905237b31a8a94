"""
Application package initializer.

The job board is split into a small number of layers: ``schemas``
(pydantic models for request and response bodies), ``services`` (the
in‑memory store and its fixture data) and ``api`` (FastAPI routers that
translate HTTP requests into store calls).  ``core`` holds
configuration, logging and error handling shared by all layers.
"""

from .main import app, create_app  # noqa: F401
