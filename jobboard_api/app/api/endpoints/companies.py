"""
Company endpoints.

These routes expose CRUD operations for companies, the "featured"
ranking used on the landing page and the list of a company's open
positions.  Deleting a company also closes all of its job postings.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from jobboard_api.app.api.deps import get_store
from jobboard_api.app.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from jobboard_api.app.schemas.enums import City, CompanyType, Sector
from jobboard_api.app.schemas.job import JobRead
from jobboard_api.app.services.store import JobBoardStore

router = APIRouter()

COMPANY_NOT_FOUND = "Company not found"


@router.get("", response_model=List[CompanyRead])
async def list_companies(
    q: Optional[str] = Query(None, description="Case‑insensitive search in name and description"),
    city: Optional[City] = Query(None),
    sector: Optional[Sector] = Query(None),
    company_type: Optional[CompanyType] = Query(None, alias="companyType"),
    store: JobBoardStore = Depends(get_store),
) -> List[CompanyRead]:
    """List all companies.

    Every filter is optional; omitted filters match everything.
    """
    return store.list_companies(query=q, city=city, sector=sector, company_type=company_type)


@router.get("/featured", response_model=List[CompanyRead])
async def featured_companies(
    limit: int = Query(4, ge=1, le=100),
    store: JobBoardStore = Depends(get_store),
) -> List[CompanyRead]:
    """Return the companies with the most followers."""
    return store.featured_companies(limit)


@router.get("/{company_id}", response_model=CompanyRead)
async def get_company(company_id: str, store: JobBoardStore = Depends(get_store)) -> CompanyRead:
    company = store.get_company(company_id)
    if company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COMPANY_NOT_FOUND)
    return company


@router.get("/{company_id}/jobs", response_model=List[JobRead])
async def list_company_jobs(company_id: str, store: JobBoardStore = Depends(get_store)) -> List[JobRead]:
    """List the active jobs of a company.

    An unknown company simply has no jobs, so this returns an empty
    list rather than 404.
    """
    return store.jobs_by_company(company_id)


@router.post("", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
async def create_company(company: CompanyCreate, store: JobBoardStore = Depends(get_store)) -> CompanyRead:
    """Create a company.

    ``followersCount`` starts at zero and ``createdAt`` is set by the
    server; values for them in the body are ignored.
    """
    return store.create_company(company)


@router.patch("/{company_id}", response_model=CompanyRead)
async def update_company(
    company_id: str,
    updates: CompanyUpdate,
    store: JobBoardStore = Depends(get_store),
) -> CompanyRead:
    """Partially update a company.

    Only fields present in the body change.  Computed fields are never
    overwritten.
    """
    company = store.update_company(company_id, updates)
    if company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COMPANY_NOT_FOUND)
    return company


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(company_id: str, store: JobBoardStore = Depends(get_store)) -> None:
    """Delete a company after deactivating all of its jobs.

    The jobs themselves stay retrievable by id with ``isActive`` set
    to false.
    """
    if not store.delete_company(company_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COMPANY_NOT_FOUND)
    return None
