"""
Apparel Cost Estimator

Garment cost, screen setup, print run and add-on charges for screen printed
apparel.
"""
from jobcost.schemas.apparel_job import ApparelCostBreakdown, ApparelJobRequest
from jobcost.schemas.common import to_hours


SCREEN_SETUP_PER_COLOR = 13

# Flat per-impression charge. This is a stand-in for the shop's tiered
# price sheet and is kept until that table is provided.
PRINT_PER_COLOR_PER_UNIT = 2

# Add-on rates (per garment unless noted)
OVERSIZE_PER_UNIT = 1.00
COLOR_CHANGE_EACH = 5.00          # per color change, on its own quantity
POLY_NYLON_PER_UNIT = 0.25        # poly / nylon / spandex / mesh
METALLIC_SHIMMER_PER_UNIT = 0.50
GLOW_PER_UNIT = 1.25
FLEECE_PER_UNIT = 0.25
DESIGN_LABOR_PER_HOUR = 60.00


def total_colors(request: ApparelJobRequest) -> float:
    """Colors across the front, back and every additional print location"""
    extra = sum(max(location.colors, 0.0) for location in request.additional_locations)
    return max(request.front_colors, 0.0) + max(request.back_colors, 0.0) + extra


def additional_options_cost(request: ApparelJobRequest) -> float:
    quantity = max(request.quantity, 0.0)
    options = request.additional_options
    cost = 0.0

    if options.oversized:
        cost += quantity * OVERSIZE_PER_UNIT
    if options.color_change.enabled:
        cost += max(options.color_change.quantity, 0.0) * COLOR_CHANGE_EACH
    if options.poly_nylon:
        cost += quantity * POLY_NYLON_PER_UNIT
    if options.metallic_shimmer:
        cost += quantity * METALLIC_SHIMMER_PER_UNIT
    if options.glow:
        cost += quantity * GLOW_PER_UNIT
    if options.fleece:
        cost += quantity * FLEECE_PER_UNIT
    if options.design_labor.enabled:
        hours = to_hours(max(options.design_labor.quantity, 0.0), options.design_labor.unit)
        cost += hours * DESIGN_LABOR_PER_HOUR

    return cost


def estimate_apparel_cost(request: ApparelJobRequest) -> ApparelCostBreakdown:
    """
    Estimate an apparel job.

    Negative quantities and costs are treated as zero so the breakdown never
    goes negative.
    """
    quantity = max(request.quantity, 0.0)
    colors = total_colors(request)

    return ApparelCostBreakdown(
        garment_total=quantity * max(request.garment_unit_cost, 0.0),
        total_print_costs=quantity * colors * PRINT_PER_COLOR_PER_UNIT,
        screen_setup_costs=colors * SCREEN_SETUP_PER_COLOR,
        additional_options_costs=additional_options_cost(request),
    )
