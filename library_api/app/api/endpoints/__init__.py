"""
Endpoint subpackage.

Each module defines an APIRouter for one domain (books, loans).  The
routers are aggregated in ``router.py`` at the package level.
"""
