"""
Material catalog schemas

A Material is the costing view of a catalog row; a CatalogEntry adds the
bookkeeping used when a material shows up on a bill of materials.
"""
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MaterialKind(str, Enum):
    """How a material is stocked and costed"""
    SHEET = "SHEET"  # flat stock sold by sheet count
    ROLL = "ROLL"    # continuous stock sold by length


class Material(BaseModel):
    """
    Physical and costing attributes of a material.

    SHEET: width x height_or_length in inches, unit_cost per sheet.
    ROLL: width is cross-web inches, height_or_length is the roll's sellable
    length in feet, unit_cost per roll.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    kind: MaterialKind
    width: float = Field(..., ge=0)
    height_or_length: float = Field(..., ge=0)
    unit_cost: float = Field(0.0, ge=0)

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def cost_per_linear_foot(self) -> float:
        """Roll cost spread over its length; zero for sheet stock."""
        if self.kind != MaterialKind.ROLL or self.height_or_length <= 0:
            return 0.0
        return self.unit_cost / self.height_or_length


class CatalogEntry(Material):
    """Catalog row: a material tagged with the job categories that use it"""
    categories: Tuple[str, ...] = ()
    vendor: Optional[str] = None
    unit_of_measure: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("categories", mode="before")
    @classmethod
    def split_categories(cls, v):
        """Accept "print;fabrication" as exported from the sheet."""
        if isinstance(v, str):
            v = v.replace(",", ";").split(";")
        return tuple(c.strip().lower() for c in (v or ()) if c and c.strip())

    def has_category(self, category: Optional[str]) -> bool:
        return category is None or category.lower() in self.categories

    @property
    def bom_unit(self) -> str:
        if self.unit_of_measure:
            return self.unit_of_measure
        return "Linear Feet" if self.kind == MaterialKind.ROLL else "Sheets"


class CatalogEntryResponse(BaseModel):
    """Catalog row as listed by the API"""
    name: str
    kind: MaterialKind
    width: float
    height_or_length: float
    unit_cost: float
    cost_per_linear_foot: float
    categories: Tuple[str, ...]
    vendor: Optional[str] = None
    unit_of_measure: str

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "CatalogEntryResponse":
        return cls(
            name=entry.name,
            kind=entry.kind,
            width=entry.width,
            height_or_length=entry.height_or_length,
            unit_cost=entry.unit_cost,
            cost_per_linear_foot=entry.cost_per_linear_foot,
            categories=entry.categories,
            vendor=entry.vendor,
            unit_of_measure=entry.bom_unit,
        )
