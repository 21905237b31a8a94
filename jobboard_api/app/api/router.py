"""
Top‑level API router.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import companies, jobs, options, stats

router = APIRouter()

router.include_router(stats.router, prefix="/stats", tags=["stats"])
router.include_router(options.router, prefix="/options", tags=["options"])
router.include_router(companies.router, prefix="/companies", tags=["companies"])
router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
