"""
Pytest configuration and shared fixtures.
"""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from jobboard_api.app.main import create_app
from jobboard_api.app.services.store import JobBoardStore


@pytest.fixture
def store() -> JobBoardStore:
    """A store loaded with the reproducible fixture data."""
    return JobBoardStore(seed=True, random_seed=1234)


@pytest.fixture
def empty_store() -> JobBoardStore:
    """A store without any companies or jobs."""
    return JobBoardStore(seed=False)


@pytest.fixture
def client(store) -> TestClient:
    """A test client for an app serving its own seeded store."""
    return TestClient(create_app(store=store))


@pytest.fixture
def company_payload() -> Dict[str, Any]:
    """Valid company creation body (camelCase, as sent by the web client)."""
    return {
        "name": "Sahara Construction",
        "description": "Builds roads and housing across the south.",
        "sector": "construction",
        "city": "sabha",
        "website": "https://sahara-construction.ly",
        "companyType": "private",
        "employeeCount": "200-500",
    }


@pytest.fixture
def job_payload() -> Dict[str, Any]:
    """Valid job creation body for the seeded ``company-3``."""
    return {
        "companyId": "company-3",
        "title": "Backend Developer",
        "description": "Build and operate Python services.",
        "requirements": "- 3 years of Python\n- FastAPI or Django",
        "jobType": "remote",
        "experienceLevel": "mid",
        "city": "benghazi",
        "sector": "technology",
        "salaryRange": "3000-4000 LYD",
    }
