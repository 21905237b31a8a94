"""
Pydantic models for job postings.

``JobCreate`` requires every client‑settable field except
``salaryRange``.  ``isActive``, ``applicationsCount`` and ``createdAt``
only appear on ``JobRead``; the store owns them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import CamelModel, reject_null
from .enums import City, ExperienceLevel, JobType, Sector


class JobBase(CamelModel):
    company_id: str = Field(..., min_length=1, examples=["company-1"])
    title: str = Field(..., min_length=1, examples=["Petroleum Engineer"])
    description: str = Field(..., min_length=1)
    requirements: str = Field(..., min_length=1)
    job_type: JobType = Field(..., examples=["full-time"])
    experience_level: ExperienceLevel = Field(..., examples=["mid"])
    city: City = Field(..., examples=["tripoli"])
    sector: Sector = Field(..., examples=["oil-and-gas"])
    salary_range: Optional[str] = Field(None, examples=["3000-5000 LYD"])


class JobCreate(JobBase):
    """Schema for creating a job posting."""
    pass


class JobUpdate(CamelModel):
    """Schema for updating a job posting.

    All fields are optional.  Changing ``companyId`` is re‑validated by
    the store against the existing companies.
    """

    company_id: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    requirements: Optional[str] = Field(None, min_length=1)
    job_type: Optional[JobType] = None
    experience_level: Optional[ExperienceLevel] = None
    city: Optional[City] = None
    sector: Optional[Sector] = None
    salary_range: Optional[str] = None

    @field_validator(
        "company_id",
        "title",
        "description",
        "requirements",
        "job_type",
        "experience_level",
        "city",
        "sector",
    )
    @classmethod
    def not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info.field_name)


class JobRead(JobBase):
    """Schema for reading a job posting from the API."""

    id: str
    is_active: bool = True
    applications_count: int = Field(0, ge=0)
    created_at: datetime
