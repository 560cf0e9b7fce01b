"""
Endpoint modules.

Each module defines an ``APIRouter`` for one domain.  The routers are
aggregated in ``router.py`` one level up.
"""
