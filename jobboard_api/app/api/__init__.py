"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` that includes every
domain router from ``endpoints``.  The application mounts it under the
``/api`` prefix.
"""
