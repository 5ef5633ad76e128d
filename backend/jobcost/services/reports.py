"""
Report Builders

Derive the profit & loss report and the bill of materials from a snapshot
of logged submissions and a snapshot of the material catalog.
"""
from typing import Dict, List, Optional, Tuple

from jobcost.logging_config import audit_log, get_logger
from jobcost.schemas.apparel_job import ApparelCostBreakdown, ApparelJobRequest
from jobcost.schemas.estimate import EstimateWarning, WarningCode
from jobcost.schemas.fabrication_job import FabricationCostBreakdown, FabricationJobRequest
from jobcost.schemas.print_job import PrintCostBreakdown, PrintJobRequest
from jobcost.schemas.report import (
    BillOfMaterials,
    DEFAULT_LINE_STATUS,
    LineItem,
    LogCategory,
    ProfitLossReport,
    ReportLine,
)
from jobcost.services.aggregation import aggregate, merge_line_items
from jobcost.services.apparel_estimator import estimate_apparel_cost
from jobcost.services.fabrication_estimator import estimate_fabrication_cost
from jobcost.services.log_entries import LogSnapshot, ParsedEntry
from jobcost.services.material_catalog import MaterialCatalog
from jobcost.services.nesting import ArtworkDoesNotFitError, compute_layout, purchase_quantity
from jobcost.services.print_estimator import (
    CATALOG_CATEGORY,
    check_print_request,
    estimate_print_job,
)

logger = get_logger(__name__)


# (position, category, label, breakdown fields summed into the line)
PROFIT_LOSS_LAYOUT: Tuple[Tuple[int, LogCategory, str, Tuple[str, ...]], ...] = (
    (1, LogCategory.PRINT, "Material", ("material_cost", "lamination_cost")),
    (2, LogCategory.PRINT, "Ink", ("ink_cost",)),
    (3, LogCategory.PRINT, "Equipment", ("equipment_cost", "cutting_cost")),
    (4, LogCategory.PRINT, "Operator", ("operator_cost",)),
    (5, LogCategory.PRINT, "Design", ("design_cost",)),
    (6, LogCategory.FABRICATION, "Materials", ("materials_cost",)),
    (7, LogCategory.FABRICATION, "Labor", ("labor_cost",)),
    (8, LogCategory.FABRICATION, "Components", ("components_cost",)),
    (9, LogCategory.APPAREL, "Garments", ("garment_total",)),
    (10, LogCategory.APPAREL, "Print & Screen Setup", ("total_print_costs", "screen_setup_costs")),
    (11, LogCategory.APPAREL, "Labor", ("additional_options_costs",)),
)

GARMENT_UNIT = "Each"


def _with_reference(warning: EstimateWarning, entry_project: Optional[str]) -> EstimateWarning:
    if not entry_project:
        return warning
    reference = f"{entry_project}: {warning.reference}" if warning.reference else entry_project
    return warning.model_copy(update={"reference": reference})


# ============================================================================
# Profit & Loss
# ============================================================================

def build_profit_and_loss(
    snapshot: LogSnapshot,
    catalog: MaterialCatalog,
    *,
    ip_address: Optional[str] = None,
) -> ProfitLossReport:
    """
    Estimate every logged item and fold the results into the P&L layout.

    Items whose estimate comes back zeroed (unknown material, bad inputs,
    artwork that does not fit) still count toward revenue; their warnings
    are carried on the report.
    """
    warnings: List[EstimateWarning] = []
    revenue = 0.0

    print_breakdowns: List[PrintCostBreakdown] = []
    for parsed in snapshot.items(LogCategory.PRINT):
        estimate = estimate_print_job(catalog, parsed.request)
        print_breakdowns.append(estimate.breakdown)
        warnings.extend(_with_reference(w, parsed.entry.project) for w in estimate.warnings)
        revenue += parsed.entry.sale_price

    apparel_breakdowns: List[ApparelCostBreakdown] = []
    for parsed in snapshot.items(LogCategory.APPAREL):
        apparel_breakdowns.append(estimate_apparel_cost(parsed.request))
        revenue += parsed.entry.sale_price

    fabrication_breakdowns: List[FabricationCostBreakdown] = []
    for parsed in snapshot.items(LogCategory.FABRICATION):
        fabrication_breakdowns.append(estimate_fabrication_cost(parsed.request))
        revenue += parsed.entry.sale_price

    totals = {
        LogCategory.PRINT: aggregate(print_breakdowns, PrintCostBreakdown),
        LogCategory.APPAREL: aggregate(apparel_breakdowns, ApparelCostBreakdown),
        LogCategory.FABRICATION: aggregate(fabrication_breakdowns, FabricationCostBreakdown),
    }

    lines = [
        ReportLine(
            position=position,
            category=category,
            label=label,
            amount=sum(getattr(totals[category], name) for name in fields),
        )
        for position, category, label, fields in PROFIT_LOSS_LAYOUT
    ]
    total_cost = sum(line.amount for line in lines)

    report = ProfitLossReport(
        lines=lines,
        print_totals=totals[LogCategory.PRINT],
        apparel_totals=totals[LogCategory.APPAREL],
        fabrication_totals=totals[LogCategory.FABRICATION],
        revenue=revenue,
        total_cost=total_cost,
        net_profit=revenue - total_cost,
        items_counted=snapshot.counted(),
        items_skipped=dict(snapshot.skipped),
        warnings=warnings,
    )

    audit_log(
        "REPORT_GENERATED",
        resource_type="profit_loss",
        details={
            "items_counted": report.items_counted,
            "items_skipped": report.items_skipped,
            "revenue": round(report.revenue, 2),
            "total_cost": round(report.total_cost, 2),
        },
        ip_address=ip_address,
    )
    return report


# ============================================================================
# Bill of Materials
# ============================================================================

def _print_lines(
    parsed: ParsedEntry, catalog: MaterialCatalog
) -> Tuple[List[LineItem], Optional[EstimateWarning]]:
    request: PrintJobRequest = parsed.request
    material = catalog.lookup(request.material_name, category=CATALOG_CATEGORY)
    warning = check_print_request(material, request)
    if warning is not None:
        return [], warning
    try:
        layout = compute_layout(material, request.art_width, request.art_height, request.quantity)
    except ArtworkDoesNotFitError as e:
        return [], EstimateWarning(code=WarningCode.FIT_FAILURE, message=str(e), reference=material.name)

    return [
        LineItem(
            description=material.name,
            quantity=purchase_quantity(layout),
            unit_of_measure=material.bom_unit,
            vendor=material.vendor,
            status=parsed.entry.status or DEFAULT_LINE_STATUS,
        )
    ], None


def _apparel_lines(parsed: ParsedEntry) -> List[LineItem]:
    request: ApparelJobRequest = parsed.request
    if request.quantity <= 0:
        return []
    return [
        LineItem(
            description=request.garment_description or "Garments",
            quantity=request.quantity,
            unit_of_measure=GARMENT_UNIT,
            vendor=request.vendor,
            status=parsed.entry.status or DEFAULT_LINE_STATUS,
        )
    ]


def _fabrication_lines(parsed: ParsedEntry) -> List[LineItem]:
    request: FabricationJobRequest = parsed.request
    return [
        LineItem(
            description=line.description,
            quantity=line.quantity,
            unit_of_measure=line.unit_of_measure,
            vendor=line.vendor,
            status=line.status or parsed.entry.status or DEFAULT_LINE_STATUS,
        )
        for line in (*request.materials, *request.components)
        if line.quantity > 0
    ]


def build_bill_of_materials(
    snapshot: LogSnapshot,
    catalog: MaterialCatalog,
    *,
    ip_address: Optional[str] = None,
) -> BillOfMaterials:
    """
    Collect the material each logged item consumes and merge by description.

    Print quantities come from the same nesting routine as the cost estimate,
    rounded up to whole sheets or whole linear feet including the run buffer.
    """
    warnings: List[EstimateWarning] = []
    categories: Dict[str, List[LineItem]] = {}

    print_items: List[LineItem] = []
    for parsed in snapshot.items(LogCategory.PRINT):
        lines, warning = _print_lines(parsed, catalog)
        print_items.extend(lines)
        if warning is not None:
            logger.warning(
                warning.message,
                extra={"warning_code": warning.code.value, "project": parsed.entry.project},
            )
            warnings.append(_with_reference(warning, parsed.entry.project))
    categories[LogCategory.PRINT.value] = merge_line_items(print_items)

    apparel_items: List[LineItem] = []
    for parsed in snapshot.items(LogCategory.APPAREL):
        apparel_items.extend(_apparel_lines(parsed))
    categories[LogCategory.APPAREL.value] = merge_line_items(apparel_items)

    fabrication_items: List[LineItem] = []
    for parsed in snapshot.items(LogCategory.FABRICATION):
        fabrication_items.extend(_fabrication_lines(parsed))
    categories[LogCategory.FABRICATION.value] = merge_line_items(fabrication_items)

    bom = BillOfMaterials(
        categories=categories,
        items_skipped=dict(snapshot.skipped),
        warnings=warnings,
    )

    audit_log(
        "REPORT_GENERATED",
        resource_type="bill_of_materials",
        details={
            "line_items": {name: len(items) for name, items in categories.items()},
            "items_skipped": bom.items_skipped,
        },
        ip_address=ip_address,
    )
    return bom
