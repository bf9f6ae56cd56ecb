"""
Endpoint modules.

Each module defines an APIRouter for one area (info, users); they are
aggregated in ``api/router.py``.
"""
