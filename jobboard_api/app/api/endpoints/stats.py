"""
Aggregate statistics shown on the landing page.
"""

from fastapi import APIRouter, Depends

from jobboard_api.app.api.deps import get_store
from jobboard_api.app.schemas.stats import StatsRead
from jobboard_api.app.services.store import JobBoardStore

router = APIRouter()


@router.get("", response_model=StatsRead)
async def get_stats(store: JobBoardStore = Depends(get_store)) -> StatsRead:
    """Return the number of companies and active jobs.

    ``graduates`` is a fixed placeholder; no graduate records exist.
    """
    return store.stats()
