"""
Shared estimate result schemas

Every job category produces a cost breakdown: a flat set of non-negative
cost fields that add up independently. Soft failures travel alongside the
breakdown as warnings.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class WarningCode(str, Enum):
    """Soft failure kinds reported with a zeroed estimate"""
    VALIDATION_FAILURE = "VALIDATION_FAILURE"  # missing / non-positive inputs
    FIT_FAILURE = "FIT_FAILURE"                # artwork exceeds material in every orientation
    LOOKUP_FAILURE = "LOOKUP_FAILURE"          # material name not in catalog


class EstimateWarning(BaseModel):
    """A soft failure attached to an estimate or report"""
    code: WarningCode
    message: str
    reference: Optional[str] = Field(None, description="Project or material the warning refers to")


class CostBreakdown(BaseModel):
    """
    Base for per-category cost breakdowns.

    Subclasses declare only float cost fields; aggregation and totals work
    field-by-field over `model_fields`.
    """

    @classmethod
    def cost_fields(cls) -> tuple:
        return tuple(cls.model_fields)

    @property
    def total(self) -> float:
        return sum(getattr(self, name) for name in self.cost_fields())
