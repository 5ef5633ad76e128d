"""
Estimate API Endpoints

One endpoint per job category. Estimates are pure computations over the
catalog snapshot: nothing is stored.
"""
from fastapi import APIRouter, Depends

from jobcost.api.deps import get_catalog
from jobcost.schemas.apparel_job import ApparelCostBreakdown, ApparelJobRequest
from jobcost.schemas.fabrication_job import FabricationCostBreakdown, FabricationJobRequest
from jobcost.schemas.print_job import PrintEstimate, PrintJobRequest
from jobcost.services.apparel_estimator import estimate_apparel_cost
from jobcost.services.fabrication_estimator import estimate_fabrication_cost
from jobcost.services.material_catalog import MaterialCatalog
from jobcost.services.print_estimator import estimate_print_job


router = APIRouter()


@router.post("/print", response_model=PrintEstimate)
def create_print_estimate(
    request: PrintJobRequest,
    catalog: MaterialCatalog = Depends(get_catalog),
):
    """
    Estimate a print job.

    Unknown materials, non-positive sizes and artwork that does not fit the
    material return a zeroed breakdown with a warning rather than an error.
    """
    return estimate_print_job(catalog, request)


@router.post("/apparel", response_model=ApparelCostBreakdown)
def create_apparel_estimate(request: ApparelJobRequest):
    """Estimate a screen printed apparel job"""
    return estimate_apparel_cost(request)


@router.post("/fabrication", response_model=FabricationCostBreakdown)
def create_fabrication_estimate(request: FabricationJobRequest):
    """Estimate a fabrication job"""
    return estimate_fabrication_cost(request)
