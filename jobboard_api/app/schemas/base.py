"""
Shared pydantic configuration.

Field names are snake_case in Python and camelCase on the wire
(``company_id`` ↔ ``companyId``).  Both spellings are accepted on
input; responses are serialized by alias.  Unknown keys are ignored,
which is also how client attempts to set computed fields such as
``followersCount`` are discarded.
"""

from typing import Any, Optional
from urllib.parse import urlparse

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
        "extra": "ignore",
    }


def reject_null(value: Any, field_name: str) -> Any:
    """Raise if a partial update explicitly sets a non‑nullable field to null."""
    if value is None:
        raise ValueError(f"{to_camel(field_name)} cannot be null")
    return value


def normalize_website(value: Optional[str]) -> Optional[str]:
    """Validate an optional http(s) URL; an empty string means no website."""
    if value is None or value == "":
        return None
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("website must be an http:// or https:// URL")
    return value
