"""
Pydantic schemas for print (signage / large format) estimates
"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from jobcost.schemas.common import FormPayload, HOURS, coerce_flag, coerce_number
from jobcost.schemas.estimate import CostBreakdown, EstimateWarning
from jobcost.schemas.material import MaterialKind


class PrintJobRequest(FormPayload):
    """
    A print job as submitted on the estimate form.

    Numeric fields default to 0 when absent or non-numeric; the estimator
    decides whether the request is usable.
    """
    quantity: float = 0.0
    art_width: float = Field(0.0, description="Artwork width in inches, before bleed")
    art_height: float = Field(0.0, description="Artwork height in inches, before bleed")
    material_name: str = ""
    double_sided: bool = False
    complex_shape: bool = False
    lamination: bool = False

    design_time: float = 0.0
    design_time_unit: str = HOURS
    labor_decals_time: float = 0.0
    labor_decals_time_unit: str = HOURS
    labor_finishing_time: float = 0.0
    labor_finishing_time_unit: str = HOURS
    labor_installing_time: float = 0.0
    labor_installing_time_unit: str = HOURS

    @field_validator(
        "quantity", "art_width", "art_height", "design_time",
        "labor_decals_time", "labor_finishing_time", "labor_installing_time",
        mode="before",
    )
    @classmethod
    def numeric_or_zero(cls, v):
        return coerce_number(v)

    @field_validator("double_sided", "complex_shape", "lamination", mode="before")
    @classmethod
    def checkbox(cls, v):
        return coerce_flag(v)

    @field_validator("material_name", mode="before")
    @classmethod
    def material_name_text(cls, v):
        return "" if v is None else str(v)

    @field_validator(
        "design_time_unit", "labor_decals_time_unit",
        "labor_finishing_time_unit", "labor_installing_time_unit",
        mode="before",
    )
    @classmethod
    def unit_or_hours(cls, v):
        return str(v).strip() if v else HOURS


class Layout(BaseModel):
    """
    How copies of an artwork nest on a material.

    ROLL layouts fill `columns`, `rows` and `linear_feet`; SHEET layouts fill
    `pieces_per_sheet` and `sheets_needed`.
    """
    kind: MaterialKind
    art_width_total: float
    art_height_total: float
    rotated: bool = False

    columns: int = 0
    rows: int = 0
    linear_feet: float = 0.0

    pieces_per_sheet: int = 0
    sheets_needed: int = 0


class PrintCostBreakdown(CostBreakdown):
    """Cost components of a print job"""
    material_cost: float = Field(0.0, ge=0)
    lamination_cost: float = Field(0.0, ge=0)
    ink_cost: float = Field(0.0, ge=0)
    cutting_cost: float = Field(0.0, ge=0)
    equipment_cost: float = Field(0.0, ge=0)
    design_cost: float = Field(0.0, ge=0)
    operator_cost: float = Field(0.0, ge=0)


class PrintEstimate(BaseModel):
    """Print estimate: breakdown, the nesting it was based on, and any warnings"""
    breakdown: PrintCostBreakdown = Field(default_factory=PrintCostBreakdown)
    layout: Optional[Layout] = None
    warnings: List[EstimateWarning] = Field(default_factory=list)
    total_cost: float = 0.0
