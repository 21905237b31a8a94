"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (stats, companies, jobs, options).  The routers are aggregated
in ``api/router.py``.
"""
