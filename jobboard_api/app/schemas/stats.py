"""
Pydantic models for aggregate statistics and filter options.
"""

from typing import List

from .base import CamelModel


class StatsRead(CamelModel):
    graduates: int
    companies: int
    jobs: int


class OptionsRead(CamelModel):
    """Enumerated values accepted by the create/update schemas."""

    cities: List[str]
    sectors: List[str]
    job_types: List[str]
    experience_levels: List[str]
    company_types: List[str]
