"""
Enumerated values for client filter dropdowns and forms.

Clients should build their city, sector, job type, experience level
and company type pickers from this endpoint so that submitted values
always pass validation.
"""

from fastapi import APIRouter

from jobboard_api.app.schemas.enums import (
    City,
    CompanyType,
    ExperienceLevel,
    JobType,
    Sector,
    enum_values,
)
from jobboard_api.app.schemas.stats import OptionsRead

router = APIRouter()


@router.get("", response_model=OptionsRead)
async def get_options() -> OptionsRead:
    return OptionsRead(
        cities=enum_values(City),
        sectors=enum_values(Sector),
        job_types=enum_values(JobType),
        experience_levels=enum_values(ExperienceLevel),
        company_types=enum_values(CompanyType),
    )
