"""
Top‑level router of the API.

The lab record routes are served from the root path (``/LabRecords``,
``/LabNames`` and so on) so no prefix is applied.  When new endpoint
modules are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, lab_records

router = APIRouter()

router.include_router(lab_records.router, tags=["lab records"])
router.include_router(health.router, tags=["health"])
