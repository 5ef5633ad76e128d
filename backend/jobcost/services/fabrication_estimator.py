"""
Fabrication Cost Estimator
"""
from typing import Iterable

from jobcost.schemas.common import to_hours
from jobcost.schemas.fabrication_job import (
    FabricationCostBreakdown,
    FabricationJobRequest,
    FabricationLine,
)
from jobcost.services.print_estimator import OPERATOR_PER_HOUR


def _extended(lines: Iterable[FabricationLine]) -> float:
    return sum(max(line.quantity, 0.0) * max(line.unit_cost, 0.0) for line in lines)


def estimate_fabrication_cost(request: FabricationJobRequest) -> FabricationCostBreakdown:
    """Materials and components at extended cost, labor at the operator rate."""
    labor_hours = max(to_hours(request.labor_time, request.labor_time_unit), 0.0)
    return FabricationCostBreakdown(
        materials_cost=_extended(request.materials),
        labor_cost=labor_hours * OPERATOR_PER_HOUR,
        components_cost=_extended(request.components),
    )
