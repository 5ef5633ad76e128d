"""
Report Export

Renders reports as CSV text, ready to paste into a project sheet or save
next to it.
"""
import csv
import io

from jobcost.exceptions import UnsupportedExportFormatError
from jobcost.schemas.report import BillOfMaterials, ProfitLossReport


EXPORT_FORMATS = ("json", "csv")

PROFIT_LOSS_COLUMNS = ["position", "category", "line", "amount"]
BOM_COLUMNS = ["category", "description", "quantity", "unit_of_measure", "vendor", "status"]


def check_export_format(export_format: str) -> str:
    normalized = (export_format or "json").strip().lower()
    if normalized not in EXPORT_FORMATS:
        raise UnsupportedExportFormatError(export_format)
    return normalized


def _money(amount: float) -> str:
    return f"{amount:.2f}"


def profit_and_loss_to_csv(report: ProfitLossReport) -> str:
    """
    One row per fixed P&L line, followed by summary rows for revenue, total
    cost, net profit and the number of log entries skipped.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(PROFIT_LOSS_COLUMNS)

    for line in sorted(report.lines, key=lambda l: l.position):
        writer.writerow([line.position, line.category.value, line.label, _money(line.amount)])

    writer.writerow(["", "", "Revenue", _money(report.revenue)])
    writer.writerow(["", "", "Total Cost", _money(report.total_cost)])
    writer.writerow(["", "", "Net Profit", _money(report.net_profit)])
    writer.writerow(["", "", "Skipped Entries", sum(report.items_skipped.values())])
    return output.getvalue()


def bill_of_materials_to_csv(bom: BillOfMaterials) -> str:
    """One row per merged line item, grouped by category."""
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=BOM_COLUMNS, lineterminator="\n")
    writer.writeheader()

    for category, items in bom.categories.items():
        for item in items:
            writer.writerow({
                "category": category,
                "description": item.description,
                "quantity": f"{item.quantity:g}",
                "unit_of_measure": item.unit_of_measure or "",
                "vendor": item.vendor or "",
                "status": item.status,
            })
    return output.getvalue()
