"""
Pydantic schemas for logged submissions and the reports derived from them
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from jobcost.schemas.apparel_job import ApparelCostBreakdown
from jobcost.schemas.common import FormPayload, coerce_number
from jobcost.schemas.estimate import EstimateWarning
from jobcost.schemas.fabrication_job import FabricationCostBreakdown
from jobcost.schemas.print_job import PrintCostBreakdown


class LogCategory(str, Enum):
    """Job categories with their own estimate form and log sheet"""
    PRINT = "print"
    APPAREL = "apparel"
    FABRICATION = "fabrication"


# Timestamp formats written by the form sheet
SHEET_TIMESTAMP_FORMATS = ("%m/%d/%Y %H:%M:%S", "%m/%d/%Y %H:%M", "%m/%d/%Y")


class LogEntry(FormPayload):
    """
    One logged form submission.

    `payload` is the submission exactly as logged; it is parsed into the
    category's request schema when a report is built, so a bad payload
    only costs that one entry.
    """
    category: str
    project: Optional[str] = None
    submitted_at: Optional[datetime] = None
    sale_price: float = Field(0.0, description="Quoted price, counted as revenue on the P&L")
    status: Optional[str] = Field(None, description="Purchasing status carried onto BOM lines")
    payload: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        return str(v or "").strip().lower()

    @field_validator("submitted_at", mode="before")
    @classmethod
    def sheet_timestamp(cls, v):
        """Accept ISO or sheet-style timestamps; anything unreadable becomes None."""
        if isinstance(v, bool):
            return None
        if v is None or isinstance(v, (datetime, int, float)):
            return v
        text = str(v).strip()
        if not text:
            return None
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass
        for fmt in SHEET_TIMESTAMP_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        return None

    @field_validator("sale_price", mode="before")
    @classmethod
    def numeric_or_zero(cls, v):
        return coerce_number(v)


# ============================================================================
# Bill of Materials
# ============================================================================

DEFAULT_LINE_STATUS = "Pending"


class LineItem(BaseModel):
    """A bill-of-materials row"""
    description: str
    quantity: float = Field(0.0, ge=0)
    unit_of_measure: Optional[str] = None
    vendor: Optional[str] = None
    status: str = DEFAULT_LINE_STATUS


class BillOfMaterials(BaseModel):
    """Merged line items per job category"""
    categories: Dict[str, List[LineItem]] = Field(default_factory=dict)
    items_skipped: Dict[str, int] = Field(default_factory=dict)
    warnings: List[EstimateWarning] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)


# ============================================================================
# Profit & Loss
# ============================================================================

class ReportLine(BaseModel):
    """A fixed-position P&L line"""
    position: int
    category: LogCategory
    label: str
    amount: float = 0.0


class ProfitLossReport(BaseModel):
    """Cost totals per category mapped into the P&L layout"""
    lines: List[ReportLine] = Field(default_factory=list)
    print_totals: PrintCostBreakdown = Field(default_factory=PrintCostBreakdown)
    apparel_totals: ApparelCostBreakdown = Field(default_factory=ApparelCostBreakdown)
    fabrication_totals: FabricationCostBreakdown = Field(default_factory=FabricationCostBreakdown)
    revenue: float = 0.0
    total_cost: float = 0.0
    net_profit: float = 0.0
    items_counted: Dict[str, int] = Field(default_factory=dict)
    items_skipped: Dict[str, int] = Field(default_factory=dict)
    warnings: List[EstimateWarning] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)
