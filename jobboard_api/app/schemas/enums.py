"""
Enumerated domain values.

These fixed lists are shared by request validation and by the filter
dropdowns of the web client (see ``GET /api/options``).  Values are
URL‑safe slugs; display labels are the client's concern.
"""

from enum import Enum
from typing import List, Type


class City(str, Enum):
    TRIPOLI = "tripoli"
    BENGHAZI = "benghazi"
    MISRATA = "misrata"
    ZAWIYA = "zawiya"
    BAYDA = "bayda"
    SABHA = "sabha"
    GHARYAN = "gharyan"
    ZLITEN = "zliten"
    KHOMS = "khoms"
    SABRATHA = "sabratha"
    ZINTAN = "zintan"
    TARHUNA = "tarhuna"
    SURMAN = "surman"
    DERNA = "derna"
    TOBRUK = "tobruk"
    MARJ = "marj"
    AJDABIYA = "ajdabiya"


class Sector(str, Enum):
    OIL_AND_GAS = "oil-and-gas"
    TECHNOLOGY = "technology"
    EDUCATION = "education"
    HEALTHCARE = "healthcare"
    ENGINEERING = "engineering"
    ACCOUNTING_AND_FINANCE = "accounting-and-finance"
    MARKETING_AND_SALES = "marketing-and-sales"
    CONSTRUCTION = "construction"
    TOURISM_AND_HOSPITALITY = "tourism-and-hospitality"
    LAW = "law"
    MEDIA = "media"


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    INTERNSHIP = "internship"
    REMOTE = "remote"


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    EXPERT = "expert"
    PROFESSIONAL = "professional"


class CompanyType(str, Enum):
    GOVERNMENT = "government"
    PRIVATE = "private"
    MIXED = "mixed"


def enum_values(enum_cls: Type[Enum]) -> List[str]:
    """Return the wire values of ``enum_cls`` in declaration order."""
    return [member.value for member in enum_cls]
