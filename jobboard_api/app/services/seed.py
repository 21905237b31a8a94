"""
Fixture data loaded into a fresh store.

Six companies (``company-1`` … ``company-6``) and nine active jobs
(``job-1`` … ``job-9``).  ``company-1`` owns ``job-1`` and ``job-8``.
Follower and application counters and the creation timestamps are
randomised; pass a seeded ``random.Random`` for reproducible fixtures.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Dict, List

from ..schemas.company import CompanyRead
from ..schemas.enums import City, CompanyType, ExperienceLevel, JobType, Sector
from ..schemas.job import JobRead

if TYPE_CHECKING:
    from .store import JobBoardStore


COMPANIES: List[Dict[str, Any]] = [
    {
        "name": "National Oil Corporation",
        "description": (
            "The state‑owned company that manages the oil and gas sector. Founded in 1970, "
            "it is one of the largest companies in the region's petroleum industry."
        ),
        "sector": Sector.OIL_AND_GAS,
        "city": City.TRIPOLI,
        "website": "https://noc.ly",
        "company_type": CompanyType.GOVERNMENT,
        "employee_count": "5000+",
    },
    {
        "name": "Central Bank of Libya",
        "description": (
            "The central bank responsible for monetary policy and banking supervision. It "
            "regulates the financial system and issues the national currency."
        ),
        "sector": Sector.ACCOUNTING_AND_FINANCE,
        "city": City.TRIPOLI,
        "website": "https://cbl.gov.ly",
        "company_type": CompanyType.GOVERNMENT,
        "employee_count": "1000+",
    },
    {
        "name": "Libya Telecom & Technology",
        "description": (
            "A leading telecommunications and IT company delivering technology solutions to "
            "businesses and individuals and building out the digital infrastructure."
        ),
        "sector": Sector.TECHNOLOGY,
        "city": City.BENGHAZI,
        "website": "https://ltt.ly",
        "company_type": CompanyType.PRIVATE,
        "employee_count": "500-1000",
    },
    {
        "name": "Tripoli Central Hospital",
        "description": (
            "The largest hospital in the country, offering comprehensive and specialised "
            "healthcare across many departments."
        ),
        "sector": Sector.HEALTHCARE,
        "city": City.TRIPOLI,
        "website": None,
        "company_type": CompanyType.GOVERNMENT,
        "employee_count": "2000+",
    },
    {
        "name": "Al Madar Aljadid",
        "description": (
            "A mobile operator providing voice and internet services to millions of "
            "subscribers with wide network coverage."
        ),
        "sector": Sector.TECHNOLOGY,
        "city": City.MISRATA,
        "website": "https://almadar.ly",
        "company_type": CompanyType.PRIVATE,
        "employee_count": "1000-2000",
    },
    {
        "name": "University of Tripoli",
        "description": (
            "A leading public university offering programmes across many disciplines and "
            "welcoming thousands of students every year."
        ),
        "sector": Sector.EDUCATION,
        "city": City.TRIPOLI,
        "website": "https://uot.edu.ly",
        "company_type": CompanyType.GOVERNMENT,
        "employee_count": "3000+",
    },
]

# ``company`` is the 1‑based index into COMPANIES.
JOBS: List[Dict[str, Any]] = [
    {
        "company": 1,
        "title": "Petroleum Engineer",
        "description": (
            "Plan and supervise drilling and production operations, analyse geological data "
            "and ensure compliance with safety and environmental standards."
        ),
        "requirements": (
            "- BSc in petroleum engineering or equivalent\n"
            "- At least 3 years in exploration and production\n"
            "- Fluent written and spoken English\n"
            "- Experience with simulation and engineering design software"
        ),
        "job_type": JobType.FULL_TIME,
        "experience_level": ExperienceLevel.MID,
        "city": City.TRIPOLI,
        "sector": Sector.OIL_AND_GAS,
        "salary_range": "3000-5000 LYD",
    },
    {
        "company": 2,
        "title": "Financial Accountant",
        "description": (
            "Prepare financial reports, manage accounts and internal audits, and ensure "
            "compliance with international accounting standards."
        ),
        "requirements": (
            "- BSc in accounting or finance\n"
            "- 2-3 years of financial accounting experience\n"
            "- ERP systems and advanced Excel\n"
            "- Knowledge of IFRS"
        ),
        "job_type": JobType.FULL_TIME,
        "experience_level": ExperienceLevel.MID,
        "city": City.TRIPOLI,
        "sector": Sector.ACCOUNTING_AND_FINANCE,
        "salary_range": "2000-3000 LYD",
    },
    {
        "company": 3,
        "title": "Full Stack Developer",
        "description": (
            "Design and build front‑end and back‑end features of web applications with React "
            "and Node.js as part of a cross‑functional team."
        ),
        "requirements": (
            "- Hands‑on React, Node.js, MongoDB or PostgreSQL\n"
            "- Git, REST APIs and modern tooling\n"
            "- Good grasp of UI and UX principles\n"
            "- TypeScript is a plus"
        ),
        "job_type": JobType.FULL_TIME,
        "experience_level": ExperienceLevel.MID,
        "city": City.BENGHAZI,
        "sector": Sector.TECHNOLOGY,
        "salary_range": "2500-4000 LYD",
    },
    {
        "company": 4,
        "title": "Emergency Nurse",
        "description": (
            "Join the emergency department and provide urgent care to patients in critical "
            "condition."
        ),
        "requirements": (
            "- Nursing certificate accredited by the Ministry of Health\n"
            "- At least two years in an emergency department\n"
            "- Able to work under pressure and on shifts"
        ),
        "job_type": JobType.FULL_TIME,
        "experience_level": ExperienceLevel.ENTRY,
        "city": City.TRIPOLI,
        "sector": Sector.HEALTHCARE,
        "salary_range": "1500-2500 LYD",
    },
    {
        "company": 5,
        "title": "Network Engineer",
        "description": (
            "Design and maintain the network infrastructure, troubleshoot technical issues "
            "and keep the network secure."
        ),
        "requirements": (
            "- BSc in computer or network engineering\n"
            "- CCNA or CCNP certification\n"
            "- 3-5 years of network administration\n"
            "- Solid knowledge of network protocols and security"
        ),
        "job_type": JobType.FULL_TIME,
        "experience_level": ExperienceLevel.EXPERT,
        "city": City.MISRATA,
        "sector": Sector.TECHNOLOGY,
        "salary_range": "3000-4500 LYD",
    },
    {
        "company": 6,
        "title": "Lecturer in Computer Science",
        "description": (
            "Teach programming and algorithms courses and supervise student research "
            "projects in the computer science department."
        ),
        "requirements": (
            "- PhD in computer science or a related field\n"
            "- University teaching and research experience\n"
            "- Peer‑reviewed publications\n"
            "- Fluent Arabic and English"
        ),
        "job_type": JobType.FULL_TIME,
        "experience_level": ExperienceLevel.PROFESSIONAL,
        "city": City.TRIPOLI,
        "sector": Sector.EDUCATION,
        "salary_range": "4000-6000 LYD",
    },
    {
        "company": 3,
        "title": "UI/UX Designer",
        "description": (
            "Design modern mobile and web interfaces and improve the user experience of our "
            "products."
        ),
        "requirements": (
            "- Figma, Adobe XD or Sketch\n"
            "- UX and UI design principles\n"
            "- A strong portfolio"
        ),
        "job_type": JobType.PART_TIME,
        "experience_level": ExperienceLevel.ENTRY,
        "city": City.BENGHAZI,
        "sector": Sector.TECHNOLOGY,
        "salary_range": "1500-2500 LYD",
    },
    {
        "company": 1,
        "title": "Engineering Intern",
        "description": (
            "A six‑month training programme for engineering students in oil and gas, working "
            "on real projects alongside experienced engineers."
        ),
        "requirements": (
            "- Final‑year engineering student (petroleum, chemical or mechanical)\n"
            "- GPA of at least 3.0\n"
            "- Strong willingness to learn"
        ),
        "job_type": JobType.INTERNSHIP,
        "experience_level": ExperienceLevel.ENTRY,
        "city": City.TRIPOLI,
        "sector": Sector.OIL_AND_GAS,
        "salary_range": "500-1000 LYD",
    },
    {
        "company": 5,
        "title": "Digital Marketing Specialist",
        "description": (
            "Plan and run online campaigns for our mobile and internet packages and report "
            "on their performance."
        ),
        "requirements": (
            "- 2 years of digital marketing experience\n"
            "- Social media advertising and analytics tools\n"
            "- Excellent Arabic copywriting"
        ),
        "job_type": JobType.REMOTE,
        "experience_level": ExperienceLevel.MID,
        "city": City.MISRATA,
        "sector": Sector.MARKETING_AND_SALES,
        "salary_range": None,
    },
]


def load_seed_data(store: "JobBoardStore", rng: random.Random) -> None:
    """Insert the fixture companies and jobs into ``store``."""
    now = datetime.now(timezone.utc)
    company_ids: List[str] = []
    for index, fields in enumerate(COMPANIES, start=1):
        company = CompanyRead(
            **fields,
            id=f"company-{index}",
            followers_count=rng.randint(500, 1499),
            created_at=now - timedelta(days=rng.uniform(0, 90)),
        )
        store.insert_company(company)
        company_ids.append(company.id)

    for index, fields in enumerate(JOBS, start=1):
        fields = dict(fields)
        company_id = company_ids[fields.pop("company") - 1]
        job = JobRead(
            **fields,
            company_id=company_id,
            id=f"job-{index}",
            is_active=True,
            applications_count=rng.randint(10, 159),
            created_at=now - timedelta(days=rng.uniform(0, 30)),
        )
        store.insert_job(job)
