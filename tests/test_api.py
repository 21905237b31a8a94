"""
Tests for the HTTP API - routing, status codes and error envelopes.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from jobboard_api.app.main import create_app


class TestStatsAndOptions:
    """Test the landing page endpoints."""

    def test_seed_stats(self, client):
        """Test the stats of the fixture data."""
        response = client.get("/api/stats")
        assert response.status_code == 200
        assert response.json() == {"graduates": 15000, "companies": 6, "jobs": 9}

    def test_options(self, client):
        """Test that the enumerations are published."""
        response = client.get("/api/options")
        assert response.status_code == 200
        body = response.json()
        assert len(body["cities"]) == 17
        assert len(body["sectors"]) == 11
        assert body["jobTypes"] == ["full-time", "part-time", "internship", "remote"]
        assert body["companyTypes"] == ["government", "private", "mixed"]


class TestCompanyEndpoints:
    """Test /api/companies routes."""

    def test_list_companies(self, client):
        """Test that all companies are listed in camelCase."""
        response = client.get("/api/companies")
        assert response.status_code == 200
        companies = response.json()
        assert len(companies) == 6
        assert {"id", "followersCount", "createdAt", "companyType", "employeeCount"} <= set(companies[0])

    def test_list_companies_filters(self, client):
        """Test query parameter filters."""
        response = client.get("/api/companies", params={"city": "tripoli", "companyType": "government"})
        assert [c["id"] for c in response.json()] == ["company-1", "company-2", "company-4", "company-6"]

    def test_list_companies_invalid_filter(self, client):
        """Test that an unknown enum value in a filter is a 400."""
        response = client.get("/api/companies", params={"city": "paris"})
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "city"

    def test_featured_companies(self, client):
        """Test the default featured ranking."""
        response = client.get("/api/companies/featured")
        assert response.status_code == 200
        featured = response.json()
        assert len(featured) == 4
        counts = [c["followersCount"] for c in featured]
        assert counts == sorted(counts, reverse=True)

    def test_featured_companies_limit(self, client):
        """Test the limit parameter and its bounds."""
        assert len(client.get("/api/companies/featured", params={"limit": 2}).json()) == 2
        assert client.get("/api/companies/featured", params={"limit": 0}).status_code == 400

    def test_get_company(self, client):
        """Test a single company lookup."""
        response = client.get("/api/companies/company-3")
        assert response.status_code == 200
        assert response.json()["city"] == "benghazi"

    def test_get_company_not_found(self, client):
        """Test the 404 envelope."""
        response = client.get("/api/companies/company-404")
        assert response.status_code == 404
        assert response.json() == {"error": "Company not found"}

    def test_company_jobs(self, client):
        """Test the active jobs of a company."""
        response = client.get("/api/companies/company-1/jobs")
        assert response.status_code == 200
        assert sorted(j["id"] for j in response.json()) == ["job-1", "job-8"]

    def test_company_jobs_unknown_company(self, client):
        """Test that an unknown company has an empty job list."""
        response = client.get("/api/companies/company-404/jobs")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_company(self, client, company_payload):
        """Test creation with server-computed fields."""
        company_payload["followersCount"] = 500
        response = client.post("/api/companies", json=company_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["followersCount"] == 0
        assert body["name"] == "Sahara Construction"
        assert client.get(f"/api/companies/{body['id']}").status_code == 200
        assert client.get("/api/stats").json()["companies"] == 7

    def test_create_company_validation_error(self, client, company_payload):
        """Test that invalid bodies are rejected with field messages."""
        company_payload["city"] = "atlantis"
        del company_payload["name"]
        response = client.post("/api/companies", json=company_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error"].startswith("Validation error:")
        assert {d["field"] for d in body["details"]} == {"city", "name"}
        assert client.get("/api/stats").json()["companies"] == 6

    def test_create_company_malformed_json(self, client):
        """Test that a body that is not JSON is a client error."""
        response = client.post(
            "/api/companies",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_patch_company(self, client):
        """Test a partial update."""
        response = client.patch("/api/companies/company-2", json={"employeeCount": "1500+"})
        assert response.status_code == 200
        assert response.json()["employeeCount"] == "1500+"
        assert response.json()["name"] == "Central Bank of Libya"

    def test_patch_company_cannot_override_followers(self, client):
        """Test that followersCount is protected from clients."""
        before = client.get("/api/companies/company-1").json()
        response = client.patch("/api/companies/company-1", json={"followersCount": 99999})

        assert response.status_code == 200
        assert response.json()["followersCount"] == before["followersCount"]
        assert response.json()["createdAt"] == before["createdAt"]

    def test_patch_company_invalid(self, client):
        """Test that partial bodies are still validated."""
        response = client.patch("/api/companies/company-1", json={"sector": "fishing"})
        assert response.status_code == 400

    def test_patch_company_not_found(self, client):
        """Test updating an unknown company."""
        response = client.patch("/api/companies/company-404", json={"name": "x"})
        assert response.status_code == 404

    def test_delete_company_cascades(self, client):
        """Test deleting a company closes its jobs."""
        response = client.delete("/api/companies/company-1")
        assert response.status_code == 204
        assert response.content == b""

        assert client.get("/api/companies/company-1").status_code == 404
        job = client.get("/api/jobs/job-1")
        assert job.status_code == 200
        assert job.json()["isActive"] is False
        assert client.get("/api/jobs/job-8").json()["isActive"] is False
        assert client.get("/api/stats").json() == {"graduates": 15000, "companies": 5, "jobs": 7}

    def test_delete_company_not_found(self, client):
        """Test deleting an unknown company."""
        response = client.delete("/api/companies/company-404")
        assert response.status_code == 404
        assert response.json() == {"error": "Company not found"}


class TestJobEndpoints:
    """Test /api/jobs routes."""

    def test_list_jobs(self, client):
        """Test that all seeded jobs are listed."""
        response = client.get("/api/jobs")
        assert response.status_code == 200
        assert len(response.json()) == 9

    def test_list_jobs_filters(self, client):
        """Test query parameter filters."""
        response = client.get("/api/jobs", params={"q": "Engineer", "jobType": "internship"})
        assert [j["id"] for j in response.json()] == ["job-8"]

    def test_recent_jobs(self, client):
        """Test the default recent list."""
        response = client.get("/api/jobs/recent")
        assert response.status_code == 200
        jobs = response.json()
        assert len(jobs) == 6
        assert all(j["isActive"] for j in jobs)

    def test_get_job(self, client):
        """Test a single job lookup."""
        response = client.get("/api/jobs/job-5")
        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Network Engineer"
        assert body["companyId"] == "company-5"

    def test_get_job_not_found(self, client):
        """Test the 404 envelope for jobs."""
        response = client.get("/api/jobs/job-404")
        assert response.status_code == 404
        assert response.json() == {"error": "Job not found"}

    def test_create_job(self, client, job_payload):
        """Test creating a job."""
        job_payload.update(isActive=False, applicationsCount=42)
        response = client.post("/api/jobs", json=job_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["isActive"] is True
        assert body["applicationsCount"] == 0
        assert client.get("/api/jobs/recent", params={"limit": 1}).json()[0]["id"] == body["id"]

    def test_create_job_unknown_company(self, client, job_payload):
        """Test that a job for a missing company is rejected."""
        job_payload["companyId"] = "nonexistent"
        response = client.post("/api/jobs", json=job_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Company 'nonexistent' does not exist"
        assert body["details"][0]["field"] == "companyId"
        assert len(client.get("/api/jobs").json()) == 9

    def test_create_job_missing_fields(self, client):
        """Test that an incomplete body is a 400."""
        response = client.post("/api/jobs", json={"companyId": "company-1"})
        assert response.status_code == 400
        fields = {d["field"] for d in response.json()["details"]}
        assert {"title", "description", "requirements", "jobType", "experienceLevel"} <= fields

    def test_patch_job(self, client):
        """Test a partial job update."""
        response = client.patch("/api/jobs/job-2", json={"salaryRange": "2500-3500 LYD"})
        assert response.status_code == 200
        assert response.json()["salaryRange"] == "2500-3500 LYD"
        assert response.json()["title"] == "Financial Accountant"

    def test_patch_job_unknown_company(self, client):
        """Test that moving a job to a missing company is rejected."""
        response = client.patch("/api/jobs/job-2", json={"companyId": "nonexistent"})
        assert response.status_code == 400
        assert client.get("/api/jobs/job-2").json()["companyId"] == "company-2"

    def test_patch_job_not_found(self, client):
        """Test updating an unknown job."""
        assert client.patch("/api/jobs/job-404", json={"title": "x"}).status_code == 404

    def test_delete_job_soft_and_idempotent(self, client):
        """Test that deleting a job twice succeeds both times."""
        assert client.delete("/api/jobs/job-3").status_code == 204
        assert client.delete("/api/jobs/job-3").status_code == 204

        assert client.get("/api/jobs/job-3").json()["isActive"] is False
        assert "job-3" not in [j["id"] for j in client.get("/api/jobs").json()]
        assert client.get("/api/stats").json()["jobs"] == 8

    def test_delete_job_not_found(self, client):
        """Test deleting an unknown job."""
        response = client.delete("/api/jobs/job-404")
        assert response.status_code == 404
        assert response.json() == {"error": "Job not found"}


class TestErrorHandling:
    """Test the shared error envelope and isolation between apps."""

    def test_unknown_route(self, client):
        """Test that unknown paths use the error envelope."""
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert "error" in response.json()

    def test_unexpected_error_is_opaque(self, store, monkeypatch, caplog):
        """Test that internal failures become a generic 500."""

        def boom():
            raise RuntimeError("database password is hunter2")

        monkeypatch.setattr(store, "stats", boom)
        client = TestClient(create_app(store=store))

        with caplog.at_level(logging.ERROR):
            response = client.get("/api/stats")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "hunter2" not in response.text
        assert "hunter2" in caplog.text

    def test_apps_do_not_share_state(self, empty_store):
        """Test that each app serves only its own store."""
        seeded = TestClient(create_app())
        empty = TestClient(create_app(store=empty_store))

        seeded.delete("/api/jobs/job-1")
        assert empty.get("/api/stats").json() == {"graduates": 15000, "companies": 0, "jobs": 0}
        assert TestClient(create_app()).get("/api/stats").json()["jobs"] == 9
