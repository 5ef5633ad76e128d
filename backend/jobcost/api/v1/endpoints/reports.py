"""
Report API Endpoints

Build the profit & loss report and the bill of materials from a batch of
logged submissions posted by the caller.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field

from jobcost.api.deps import get_catalog
from jobcost.logging_config import get_client_ip, get_logger
from jobcost.schemas.report import BillOfMaterials, ProfitLossReport
from jobcost.services.log_entries import LogSnapshot
from jobcost.services.material_catalog import MaterialCatalog
from jobcost.services.report_export import (
    bill_of_materials_to_csv,
    check_export_format,
    profit_and_loss_to_csv,
)
from jobcost.services.reports import build_bill_of_materials, build_profit_and_loss


router = APIRouter()
logger = get_logger(__name__)


class ReportRequest(BaseModel):
    """
    Log entries to report on.

    Entries are left unvalidated here so that one malformed submission is
    skipped and counted instead of rejecting the whole batch.
    """
    entries: List[Any] = Field(default_factory=list)


@router.post("/profit-loss", response_model=ProfitLossReport)
def create_profit_loss_report(
    body: ReportRequest,
    request: Request,
    format: str = Query("json", description="json or csv"),
    catalog: MaterialCatalog = Depends(get_catalog),
):
    """
    Profit & loss over the posted log entries.

    - **format**: `json` (default) or `csv`
    """
    export_format = check_export_format(format)
    snapshot = LogSnapshot(body.entries)
    report = build_profit_and_loss(snapshot, catalog, ip_address=get_client_ip(request))

    logger.info(
        "Built profit & loss report",
        extra={"items_counted": report.items_counted, "items_skipped": report.items_skipped},
    )

    if export_format == "csv":
        return Response(
            content=profit_and_loss_to_csv(report),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="profit_loss.csv"'},
        )
    return report


@router.post("/bill-of-materials", response_model=BillOfMaterials)
def create_bill_of_materials(
    body: ReportRequest,
    request: Request,
    format: str = Query("json", description="json or csv"),
    catalog: MaterialCatalog = Depends(get_catalog),
):
    """
    Bill of materials over the posted log entries, merged by description
    within each category.

    - **format**: `json` (default) or `csv`
    """
    export_format = check_export_format(format)
    snapshot = LogSnapshot(body.entries)
    bom = build_bill_of_materials(snapshot, catalog, ip_address=get_client_ip(request))

    if export_format == "csv":
        return Response(
            content=bill_of_materials_to_csv(bom),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="bill_of_materials.csv"'},
        )
    return bom
