"""
Pydantic schemas for fabrication estimates
"""
from typing import List, Optional

from pydantic import Field, field_validator

from jobcost.schemas.common import FormPayload, HOURS, coerce_number
from jobcost.schemas.estimate import CostBreakdown


class FabricationLine(FormPayload):
    """A material or purchased component consumed by a fabrication job"""
    description: str = Field(..., min_length=1)
    quantity: float = 0.0
    unit_cost: float = 0.0
    unit_of_measure: str = "Each"
    vendor: Optional[str] = None
    status: Optional[str] = None

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("quantity", "unit_cost", mode="before")
    @classmethod
    def numeric_or_zero(cls, v):
        return coerce_number(v)


class FabricationJobRequest(FormPayload):
    """A fabrication job as submitted on the estimate form"""
    materials: List[FabricationLine] = Field(default_factory=list)
    components: List[FabricationLine] = Field(default_factory=list)
    labor_time: float = 0.0
    labor_time_unit: str = HOURS

    @field_validator("materials", "components", mode="before")
    @classmethod
    def line_list(cls, v):
        return v or []

    @field_validator("labor_time", mode="before")
    @classmethod
    def numeric_or_zero(cls, v):
        return coerce_number(v)

    @field_validator("labor_time_unit", mode="before")
    @classmethod
    def unit_or_hours(cls, v):
        return str(v).strip() if v else HOURS


class FabricationCostBreakdown(CostBreakdown):
    """Cost components of a fabrication job"""
    materials_cost: float = Field(0.0, ge=0)
    labor_cost: float = Field(0.0, ge=0)
    components_cost: float = Field(0.0, ge=0)
