"""
Service layer.

``store`` holds the in‑memory collections and every business rule
about them; ``seed`` provides the fixture data loaded at startup.
"""
