"""
Pydantic models for company data.

``CompanyCreate`` lists every client‑settable field; ``CompanyUpdate``
makes all of them optional for PATCH requests; ``CompanyRead`` adds the
server‑computed ``id``, ``followersCount`` and ``createdAt``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import CamelModel, normalize_website, reject_null
from .enums import City, CompanyType, Sector


class CompanyBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["National Oil Corporation"])
    description: str = Field(..., min_length=1)
    sector: Sector = Field(..., examples=["oil-and-gas"])
    city: City = Field(..., examples=["tripoli"])
    website: Optional[str] = Field(None, examples=["https://noc.ly"])
    company_type: CompanyType = Field(..., examples=["government"])
    employee_count: str = Field(..., min_length=1, examples=["5000+"])

    @field_validator("website")
    @classmethod
    def validate_website(cls, v: Optional[str]) -> Optional[str]:
        return normalize_website(v)


class CompanyCreate(CompanyBase):
    """Schema for creating a company."""
    pass


class CompanyUpdate(CamelModel):
    """Schema for updating a company.

    All fields are optional; only fields present in the request body
    are applied.  ``website`` may be set to null to clear it.
    """

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    sector: Optional[Sector] = None
    city: Optional[City] = None
    website: Optional[str] = None
    company_type: Optional[CompanyType] = None
    employee_count: Optional[str] = Field(None, min_length=1)

    @field_validator("name", "description", "sector", "city", "company_type", "employee_count")
    @classmethod
    def not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info.field_name)

    @field_validator("website")
    @classmethod
    def validate_website(cls, v: Optional[str]) -> Optional[str]:
        return normalize_website(v)


class CompanyRead(CompanyBase):
    """Schema for reading a company from the API."""

    id: str
    followers_count: int = Field(0, ge=0)
    created_at: datetime
