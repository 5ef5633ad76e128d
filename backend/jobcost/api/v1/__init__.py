"""
API v1 Router - JobCost
"""
from fastapi import APIRouter
from jobcost.api.v1.endpoints import (
    materials,
    estimates,
    reports,
)

router = APIRouter()

# Material catalog
router.include_router(
    materials.router,
    prefix="/materials",
    tags=["materials"]
)

# Per-job estimates
router.include_router(
    estimates.router,
    prefix="/estimates",
    tags=["estimates"]
)

# P&L and bill of materials over logged submissions
router.include_router(
    reports.router,
    prefix="/reports",
    tags=["reports"]
)
