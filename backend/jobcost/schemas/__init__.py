"""
Request and response schemas for estimates and reports
"""
from jobcost.schemas.material import CatalogEntry, Material, MaterialKind
from jobcost.schemas.estimate import CostBreakdown, EstimateWarning, WarningCode
from jobcost.schemas.print_job import Layout, PrintCostBreakdown, PrintEstimate, PrintJobRequest
from jobcost.schemas.apparel_job import ApparelCostBreakdown, ApparelJobRequest
from jobcost.schemas.fabrication_job import FabricationCostBreakdown, FabricationJobRequest
from jobcost.schemas.report import (
    BillOfMaterials,
    LineItem,
    LogCategory,
    LogEntry,
    ProfitLossReport,
    ReportLine,
)

__all__ = [
    "CatalogEntry",
    "Material",
    "MaterialKind",
    "CostBreakdown",
    "EstimateWarning",
    "WarningCode",
    "Layout",
    "PrintCostBreakdown",
    "PrintEstimate",
    "PrintJobRequest",
    "ApparelCostBreakdown",
    "ApparelJobRequest",
    "FabricationCostBreakdown",
    "FabricationJobRequest",
    "BillOfMaterials",
    "LineItem",
    "LogCategory",
    "LogEntry",
    "ProfitLossReport",
    "ReportLine",
]
