"""
Pydantic schema definitions for API payloads.

Companies and jobs each define a ``Create`` schema (all non‑computed
fields, required fields enforced), an ``Update`` schema (every field
optional) and a ``Read`` schema that adds the server‑computed fields.
All schemas speak camelCase on the wire.
"""
