"""
In‑memory store for companies and job postings.

``JobBoardStore`` is the authoritative keeper of every record and of
the rules that govern them:

* computed fields (``id``, ``followersCount``, ``applicationsCount``,
  ``createdAt``) are assigned here and never taken from clients;
* a job must reference an existing company when it is created and
  whenever its ``companyId`` is changed;
* deleting a job is a soft delete (``isActive`` becomes ``False``);
  deleting a company first deactivates all of its jobs and then
  removes the company itself;
* every list query over jobs hides inactive postings, while
  ``get_job`` still returns them.

"Not found" is an ordinary outcome and is reported as ``None`` or
``False``; only a dangling company reference raises.

The store is constructed explicitly by the application factory and
handed to request handlers through a dependency, so tests can create
as many isolated instances as they need.  All methods are synchronous
and their effects are visible to the next call immediately.
"""

from __future__ import annotations

import logging
import random
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from ..schemas.enums import City, CompanyType, ExperienceLevel, JobType, Sector
from ..schemas.job import JobCreate, JobRead, JobUpdate
from ..schemas.stats import StatsRead
from .seed import load_seed_data

logger = logging.getLogger(__name__)

# Placeholder shown on the landing page.  Not derived from any stored
# entity; there is no graduate data in the system yet.
GRADUATES_PLACEHOLDER = 15000


class InvalidCompanyReference(ValueError):
    """Raised when a job points at a company that does not exist."""

    def __init__(self, company_id: str) -> None:
        super().__init__(f"Company '{company_id}' does not exist")
        self.company_id = company_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _matches_text(query: Optional[str], *fields: Optional[str]) -> bool:
    if not query:
        return True
    needle = query.casefold()
    return any(field and needle in field.casefold() for field in fields)


class JobBoardStore:
    """Keyed collections of companies and jobs with their query helpers."""

    def __init__(self, seed: bool = True, random_seed: Optional[int] = None) -> None:
        self._companies: Dict[str, CompanyRead] = {}
        self._jobs: Dict[str, JobRead] = {}
        if seed:
            load_seed_data(self, random.Random(random_seed))
            logger.info(
                "Seeded store with %d companies and %d jobs",
                len(self._companies),
                len(self._jobs),
            )

    # Fixtures

    def insert_company(self, company: CompanyRead) -> CompanyRead:
        """Store a fully formed company record as is (used for fixtures)."""
        self._companies[company.id] = company
        return company

    def insert_job(self, job: JobRead) -> JobRead:
        """Store a fully formed job record as is (used for fixtures)."""
        self._jobs[job.id] = job
        return job

    # Companies

    def get_company(self, company_id: str) -> Optional[CompanyRead]:
        return self._companies.get(company_id)

    def list_companies(
        self,
        query: Optional[str] = None,
        city: Optional[City] = None,
        sector: Optional[Sector] = None,
        company_type: Optional[CompanyType] = None,
    ) -> List[CompanyRead]:
        """Return companies in insertion order, optionally filtered.

        ``query`` is a case‑insensitive substring matched against the
        name and the description.
        """
        return [
            company
            for company in self._companies.values()
            if _matches_text(query, company.name, company.description)
            and (city is None or company.city == city)
            and (sector is None or company.sector == sector)
            and (company_type is None or company.company_type == company_type)
        ]

    def create_company(self, data: CompanyCreate) -> CompanyRead:
        company = CompanyRead(
            **data.model_dump(),
            id=_new_id(),
            followers_count=0,
            created_at=_utcnow(),
        )
        self._companies[company.id] = company
        logger.info("Created company %s (%s)", company.id, company.name)
        return company

    def update_company(self, company_id: str, data: CompanyUpdate) -> Optional[CompanyRead]:
        """Apply the fields present in ``data`` to an existing company.

        Returns ``None`` if the company does not exist.  ``id``,
        ``followers_count`` and ``created_at`` always keep their stored
        values.
        """
        existing = self._companies.get(company_id)
        if existing is None:
            return None
        changes = data.model_dump(exclude_unset=True)
        changes.update(
            id=existing.id,
            followers_count=existing.followers_count,
            created_at=existing.created_at,
        )
        updated = existing.model_copy(update=changes)
        self._companies[company_id] = updated
        logger.info("Updated company %s", company_id)
        return updated

    def delete_company(self, company_id: str) -> bool:
        """Deactivate the company's jobs, then remove the company.

        Returns ``False`` if the company does not exist.
        """
        if company_id not in self._companies:
            return False
        deactivated = self.deactivate_company_jobs(company_id)
        del self._companies[company_id]
        logger.info("Deleted company %s; deactivated %d job(s)", company_id, deactivated)
        return True

    def deactivate_company_jobs(self, company_id: str) -> int:
        """Soft delete every active job of ``company_id``; return how many."""
        jobs = self.jobs_by_company(company_id)
        for job in jobs:
            self._deactivate_job(job)
        return len(jobs)

    def featured_companies(self, limit: int) -> List[CompanyRead]:
        """Return at most ``limit`` companies with the most followers."""
        ranked = sorted(self._companies.values(), key=lambda c: c.followers_count, reverse=True)
        return ranked[:limit]

    # Jobs

    def get_job(self, job_id: str) -> Optional[JobRead]:
        """Return a job by id whether or not it is still active."""
        return self._jobs.get(job_id)

    def list_jobs(
        self,
        query: Optional[str] = None,
        city: Optional[City] = None,
        sector: Optional[Sector] = None,
        job_type: Optional[JobType] = None,
        experience_level: Optional[ExperienceLevel] = None,
    ) -> List[JobRead]:
        """Return active jobs in insertion order, optionally filtered.

        ``query`` is matched case‑insensitively against the title and
        the description.
        """
        return [
            job
            for job in self._active_jobs()
            if _matches_text(query, job.title, job.description)
            and (city is None or job.city == city)
            and (sector is None or job.sector == sector)
            and (job_type is None or job.job_type == job_type)
            and (experience_level is None or job.experience_level == experience_level)
        ]

    def create_job(self, data: JobCreate) -> JobRead:
        """Create an active job for an existing company.

        Raises
        ------
        InvalidCompanyReference
            If ``data.company_id`` does not name a stored company.
        """
        if data.company_id not in self._companies:
            logger.warning("Rejected job for unknown company %s", data.company_id)
            raise InvalidCompanyReference(data.company_id)
        job = JobRead(
            **data.model_dump(),
            id=_new_id(),
            is_active=True,
            applications_count=0,
            created_at=_utcnow(),
        )
        self._jobs[job.id] = job
        logger.info("Created job %s (%s) for company %s", job.id, job.title, job.company_id)
        return job

    def update_job(self, job_id: str, data: JobUpdate) -> Optional[JobRead]:
        """Apply the fields present in ``data`` to an existing job.

        Returns ``None`` if the job does not exist.  A changed
        ``company_id`` must resolve to a stored company, otherwise
        ``InvalidCompanyReference`` is raised and the job is left as it
        was.  Keeping the current ``company_id`` is always allowed, even
        when that company has since been deleted.
        """
        existing = self._jobs.get(job_id)
        if existing is None:
            return None
        changes = data.model_dump(exclude_unset=True)
        new_company_id = changes.get("company_id")
        if (
            new_company_id is not None
            and new_company_id != existing.company_id
            and new_company_id not in self._companies
        ):
            logger.warning("Rejected move of job %s to unknown company %s", job_id, new_company_id)
            raise InvalidCompanyReference(new_company_id)
        changes.update(
            id=existing.id,
            is_active=existing.is_active,
            applications_count=existing.applications_count,
            created_at=existing.created_at,
        )
        updated = existing.model_copy(update=changes)
        self._jobs[job_id] = updated
        logger.info("Updated job %s", job_id)
        return updated

    def delete_job(self, job_id: str) -> bool:
        """Soft delete a job.  Deleting an inactive job again succeeds."""
        job = self._jobs.get(job_id)
        if job is None:
            return False
        self._deactivate_job(job)
        logger.info("Deactivated job %s", job_id)
        return True

    def recent_jobs(self, limit: int) -> List[JobRead]:
        """Return at most ``limit`` active jobs, newest first."""
        ranked = sorted(self._active_jobs(), key=lambda j: j.created_at, reverse=True)
        return ranked[:limit]

    def jobs_by_company(self, company_id: str) -> List[JobRead]:
        return [job for job in self._active_jobs() if job.company_id == company_id]

    # Stats

    def stats(self) -> StatsRead:
        return StatsRead(
            graduates=GRADUATES_PLACEHOLDER,
            companies=len(self._companies),
            jobs=len(self._active_jobs()),
        )

    def _active_jobs(self) -> List[JobRead]:
        return [job for job in self._jobs.values() if job.is_active]

    def _deactivate_job(self, job: JobRead) -> JobRead:
        inactive = job.model_copy(update={"is_active": False})
        self._jobs[job.id] = inactive
        return inactive
