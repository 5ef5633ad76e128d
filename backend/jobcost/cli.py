"""
Generate P&L and bill-of-materials reports from a log export

Reads a catalog CSV and a JSON export of the form log, and writes the
reports as CSV (or JSON) without running the API.

Run with: jobcost-report --log logs.json --out reports/
"""
import argparse
import os
import sys
from typing import List, Optional

from jobcost.core.config import settings
from jobcost.exceptions import JobCostException
from jobcost.logging_config import get_logger, setup_logging
from jobcost.services.log_entries import LogSnapshot
from jobcost.services.material_catalog import MaterialCatalog
from jobcost.services.report_export import (
    EXPORT_FORMATS,
    bill_of_materials_to_csv,
    profit_and_loss_to_csv,
)
from jobcost.services.reports import build_bill_of_materials, build_profit_and_loss

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build P&L and BOM reports from a form log export")
    parser.add_argument("--log", required=True, help="JSON export of logged submissions")
    parser.add_argument("--catalog", default=settings.CATALOG_PATH, help="Material catalog CSV")
    parser.add_argument("--out", default=".", help="Directory to write reports into")
    parser.add_argument("--format", choices=EXPORT_FORMATS, default="csv", help="Output format")
    return parser


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    print(f"   Wrote {path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        catalog = MaterialCatalog.from_csv_file(args.catalog)
        with open(args.log, "r", encoding="utf-8") as f:
            snapshot = LogSnapshot.from_json_text(f.read())
    except (JobCostException, OSError, ValueError) as e:
        logger.error(f"Cannot build reports: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    profit_loss = build_profit_and_loss(snapshot, catalog)
    bom = build_bill_of_materials(snapshot, catalog)

    os.makedirs(args.out, exist_ok=True)
    if args.format == "csv":
        _write(os.path.join(args.out, "profit_loss.csv"), profit_and_loss_to_csv(profit_loss))
        _write(os.path.join(args.out, "bill_of_materials.csv"), bill_of_materials_to_csv(bom))
    else:
        _write(os.path.join(args.out, "profit_loss.json"), profit_loss.model_dump_json(indent=2))
        _write(os.path.join(args.out, "bill_of_materials.json"), bom.model_dump_json(indent=2))

    print(f"\nRevenue:    ${profit_loss.revenue:,.2f}")
    print(f"Total Cost: ${profit_loss.total_cost:,.2f}")
    print(f"Net Profit: ${profit_loss.net_profit:,.2f}")
    if snapshot.total_skipped:
        print(f"Skipped {snapshot.total_skipped} malformed log entries: {snapshot.skipped}")
    for warning in profit_loss.warnings:
        print(f"WARNING [{warning.code.value}] {warning.reference or ''}: {warning.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
