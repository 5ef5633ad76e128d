"""
Pydantic schemas for apparel (screen printed garment) estimates
"""
from typing import List, Optional

from pydantic import Field, field_validator

from jobcost.schemas.common import FormPayload, HOURS, coerce_flag, coerce_number
from jobcost.schemas.estimate import CostBreakdown


class PrintLocation(FormPayload):
    """An extra print location (sleeve, pocket, ...)"""
    name: Optional[str] = None
    colors: float = 0.0

    @field_validator("colors", mode="before")
    @classmethod
    def numeric_or_zero(cls, v):
        return coerce_number(v)


class QuantityOption(FormPayload):
    """An add-on billed on its own quantity rather than the garment count"""
    enabled: bool = False
    quantity: float = 0.0
    unit: str = HOURS

    @field_validator("enabled", mode="before")
    @classmethod
    def checkbox(cls, v):
        return coerce_flag(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def numeric_or_zero(cls, v):
        return coerce_number(v)

    @field_validator("unit", mode="before")
    @classmethod
    def unit_or_hours(cls, v):
        return str(v).strip() if v else HOURS


class AdditionalOptions(FormPayload):
    """Garment add-ons; flags are billed per garment"""
    oversized: bool = False
    color_change: QuantityOption = Field(default_factory=QuantityOption)
    poly_nylon: bool = Field(False, description="Poly / nylon / spandex / mesh garments")
    metallic_shimmer: bool = False
    glow: bool = False
    fleece: bool = False
    design_labor: QuantityOption = Field(default_factory=QuantityOption)

    @field_validator("oversized", "poly_nylon", "metallic_shimmer", "glow", "fleece", mode="before")
    @classmethod
    def checkbox(cls, v):
        return coerce_flag(v)


class ApparelJobRequest(FormPayload):
    """An apparel job as submitted on the estimate form"""
    quantity: float = 0.0
    garment_unit_cost: float = 0.0
    garment_description: Optional[str] = Field(None, description="Garment style, used on the BOM")
    vendor: Optional[str] = None
    front_colors: float = 0.0
    back_colors: float = 0.0
    additional_locations: List[PrintLocation] = Field(default_factory=list)
    additional_options: AdditionalOptions = Field(default_factory=AdditionalOptions)

    @field_validator("quantity", "garment_unit_cost", "front_colors", "back_colors", mode="before")
    @classmethod
    def numeric_or_zero(cls, v):
        return coerce_number(v)

    @field_validator("additional_locations", mode="before")
    @classmethod
    def locations_list(cls, v):
        return v or []

    @field_validator("additional_options", mode="before")
    @classmethod
    def options_dict(cls, v):
        return v or {}


class ApparelCostBreakdown(CostBreakdown):
    """Cost components of an apparel job"""
    garment_total: float = Field(0.0, ge=0)
    total_print_costs: float = Field(0.0, ge=0)
    screen_setup_costs: float = Field(0.0, ge=0)
    additional_options_costs: float = Field(0.0, ge=0)
