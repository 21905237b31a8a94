"""
Job posting endpoints.

Lists only ever contain active postings; a single posting can still be
fetched by id after it has been closed.  Deleting a posting closes it
(``isActive`` becomes false) instead of removing it.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from jobboard_api.app.api.deps import get_store
from jobboard_api.app.schemas.enums import City, ExperienceLevel, JobType, Sector
from jobboard_api.app.schemas.job import JobCreate, JobRead, JobUpdate
from jobboard_api.app.services.store import JobBoardStore

router = APIRouter()

JOB_NOT_FOUND = "Job not found"


@router.get("", response_model=List[JobRead])
async def list_jobs(
    q: Optional[str] = Query(None, description="Case‑insensitive search in title and description"),
    city: Optional[City] = Query(None),
    sector: Optional[Sector] = Query(None),
    job_type: Optional[JobType] = Query(None, alias="jobType"),
    experience_level: Optional[ExperienceLevel] = Query(None, alias="experienceLevel"),
    store: JobBoardStore = Depends(get_store),
) -> List[JobRead]:
    """List active jobs, optionally filtered."""
    return store.list_jobs(
        query=q,
        city=city,
        sector=sector,
        job_type=job_type,
        experience_level=experience_level,
    )


@router.get("/recent", response_model=List[JobRead])
async def recent_jobs(
    limit: int = Query(6, ge=1, le=100),
    store: JobBoardStore = Depends(get_store),
) -> List[JobRead]:
    """Return the newest active jobs first."""
    return store.recent_jobs(limit)


@router.get("/{job_id}", response_model=JobRead)
async def get_job(job_id: str, store: JobBoardStore = Depends(get_store)) -> JobRead:
    job = store.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return job


@router.post("", response_model=JobRead, status_code=status.HTTP_201_CREATED)
async def create_job(job: JobCreate, store: JobBoardStore = Depends(get_store)) -> JobRead:
    """Create an active job posting.

    ``companyId`` must name an existing company; otherwise the request
    fails with 400 and nothing is stored.
    """
    return store.create_job(job)


@router.patch("/{job_id}", response_model=JobRead)
async def update_job(
    job_id: str,
    updates: JobUpdate,
    store: JobBoardStore = Depends(get_store),
) -> JobRead:
    """Partially update a job posting.

    Moving a job to a company that does not exist fails with 400 and
    leaves the posting unchanged.
    """
    job = store.update_job(job_id, updates)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(job_id: str, store: JobBoardStore = Depends(get_store)) -> None:
    """Close a job posting.  Closing it again also succeeds."""
    if not store.delete_job(job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return None
