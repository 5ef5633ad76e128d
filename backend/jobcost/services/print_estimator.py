"""
Print Cost Estimator

Turns a print job (quantity, artwork size, material, finishing options and
logged labor) into a cost breakdown. Bad input never raises: the estimate
comes back zeroed with a warning explaining why.

The rates below are the shop's pricing parameters and are used as-is.
"""
from typing import Optional

from jobcost.logging_config import get_logger
from jobcost.schemas.common import to_hours
from jobcost.schemas.estimate import EstimateWarning, WarningCode
from jobcost.schemas.material import Material, MaterialKind
from jobcost.schemas.print_job import (
    Layout,
    PrintCostBreakdown,
    PrintEstimate,
    PrintJobRequest,
)
from jobcost.services.material_catalog import MaterialCatalog
from jobcost.services.nesting import ArtworkDoesNotFitError, ROLL_BUFFER_FEET, compute_layout

logger = get_logger(__name__)


CATALOG_CATEGORY = "print"

# Material
SHEET_MINIMUM_FRACTION = 0.5        # never bill less than half a sheet

# Throughput (sq ft or linear in per minute)
PRINT_SQFT_PER_MIN = 0.83
RIP_SQFT_PER_MIN = 20.52
PRINT_COMPUTE_SQFT_PER_MIN = 6.2
CUT_INCHES_PER_MIN = 120
COMPLEX_CUT_FACTOR = 1.5

# Rates
INK_PER_SQFT = 0.165
CUTTING_PER_HOUR = 25.00
DESIGN_PER_HOUR = 60.00
DESIGN_SQFT_PER_BLOCK = 25
DESIGN_HOURS_PER_BLOCK = 0.0625
LAMINATION_PER_LINEAR_FOOT = 1.02
LAMINATION_PER_SQFT = 0.2267
EQUIPMENT_PER_HOUR = 4.95
OPERATOR_PER_HOUR = 28.00


def _rejected(warning: EstimateWarning) -> PrintEstimate:
    logger.warning(warning.message, extra={"warning_code": warning.code.value, "reference": warning.reference})
    return PrintEstimate(breakdown=PrintCostBreakdown(), warnings=[warning])


def check_print_request(material: Optional[Material], request: PrintJobRequest) -> Optional[EstimateWarning]:
    """
    Return the warning that rules a request out before nesting, or None.

    Shared by the cost estimate and the bill of materials.
    """
    if material is None:
        return EstimateWarning(
            code=WarningCode.LOOKUP_FAILURE,
            message=f"Material '{request.material_name}' not found in catalog",
            reference=request.material_name or None,
        )
    if request.quantity <= 0 or request.art_width <= 0 or request.art_height <= 0:
        return EstimateWarning(
            code=WarningCode.VALIDATION_FAILURE,
            message="Quantity, artwork width and artwork height must all be greater than zero",
            reference=material.name,
        )
    return None


def manual_labor_hours(request: PrintJobRequest) -> float:
    """Decal, finishing and install time logged on the form, in hours"""
    return (
        max(to_hours(request.labor_decals_time, request.labor_decals_time_unit), 0.0)
        + max(to_hours(request.labor_finishing_time, request.labor_finishing_time_unit), 0.0)
        + max(to_hours(request.labor_installing_time, request.labor_installing_time_unit), 0.0)
    )


def _material_cost(material: Material, layout: Layout) -> float:
    if material.kind == MaterialKind.ROLL:
        return (layout.linear_feet + ROLL_BUFFER_FEET) * material.cost_per_linear_foot
    return max(
        layout.sheets_needed * material.unit_cost,
        material.unit_cost * SHEET_MINIMUM_FRACTION,
    )


def estimate_print_cost(material: Optional[Material], request: PrintJobRequest) -> PrintEstimate:
    """
    Estimate a print job on a resolved material.

    Args:
        material: Material from the catalog, or None when lookup failed
        request: The print job

    Returns:
        PrintEstimate; zeroed with a warning when the material is missing,
        inputs are non-positive, or the artwork does not fit the material
    """
    warning = check_print_request(material, request)
    if warning is not None:
        return _rejected(warning)

    try:
        layout = compute_layout(material, request.art_width, request.art_height, request.quantity)
    except ArtworkDoesNotFitError as e:
        return _rejected(EstimateWarning(code=WarningCode.FIT_FAILURE, message=str(e), reference=material.name))

    quantity = request.quantity

    area = (layout.art_width_total * layout.art_height_total) / 144 * quantity
    if request.double_sided:
        area *= 2
    perimeter = (request.art_width * 2 + request.art_height * 2) * quantity

    print_time = area / PRINT_SQFT_PER_MIN / 60
    cut_time = perimeter / CUT_INCHES_PER_MIN / 60
    if request.complex_shape:
        cut_time *= COMPLEX_CUT_FACTOR
    rip_time = area / RIP_SQFT_PER_MIN / 60
    print_compute_time = area / PRINT_COMPUTE_SQFT_PER_MIN / 60
    machine_hours = print_time + cut_time + rip_time + print_compute_time

    design_hours = max(to_hours(request.design_time, request.design_time_unit), 0.0)

    lamination_cost = 0.0
    if request.lamination:
        if material.kind == MaterialKind.ROLL:
            lamination_cost = layout.linear_feet * LAMINATION_PER_LINEAR_FOOT
        else:
            lamination_cost = area * LAMINATION_PER_SQFT

    breakdown = PrintCostBreakdown(
        material_cost=_material_cost(material, layout),
        lamination_cost=lamination_cost,
        ink_cost=area * INK_PER_SQFT,
        cutting_cost=cut_time * CUTTING_PER_HOUR,
        equipment_cost=machine_hours * EQUIPMENT_PER_HOUR,
        design_cost=(
            (area / DESIGN_SQFT_PER_BLOCK) * DESIGN_HOURS_PER_BLOCK * DESIGN_PER_HOUR
            + design_hours * DESIGN_PER_HOUR
        ),
        operator_cost=(machine_hours + manual_labor_hours(request)) * OPERATOR_PER_HOUR,
    )

    return PrintEstimate(breakdown=breakdown, layout=layout, total_cost=breakdown.total)


def estimate_print_job(catalog: MaterialCatalog, request: PrintJobRequest) -> PrintEstimate:
    """Look up the request's material in the catalog snapshot and estimate it."""
    material = catalog.lookup(request.material_name, category=CATALOG_CATEGORY)
    return estimate_print_cost(material, request)
