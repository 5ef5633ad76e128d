"""
Unit tests for the report command line tool
"""
import json

import pytest

from jobcost.cli import main


@pytest.fixture(autouse=True)
def keep_logging_config(monkeypatch):
    """Leave pytest's log capture in place"""
    monkeypatch.setattr("jobcost.cli.setup_logging", lambda: None)


CATALOG = (
    "name,kind,width,height_or_length,unit_cost,categories,vendor,unit_of_measure\n"
    "Test Sheet,SHEET,48,96,40.00,print,Laird Plastics,\n"
)


def _log(tmp_path, entries):
    path = tmp_path / "log.json"
    path.write_text(json.dumps(entries), encoding="utf-8")
    return str(path)


class TestReportCli:
    """Test jobcost-report"""

    def test_writes_csv_reports(self, tmp_path, make_entry, capsys):
        """Test both CSV reports are written with a summary printed"""
        catalog = tmp_path / "catalog.csv"
        catalog.write_text(CATALOG, encoding="utf-8")
        log = _log(tmp_path, [
            make_entry(
                "print",
                {"quantity": 40, "artWidth": 12, "artHeight": 12, "materialName": "Test Sheet"},
                sale_price=500,
            ),
        ])
        out = tmp_path / "reports"

        code = main(["--log", log, "--catalog", str(catalog), "--out", str(out)])

        assert code == 0
        assert (out / "profit_loss.csv").exists()
        bom = (out / "bill_of_materials.csv").read_text(encoding="utf-8")
        assert "print,Test Sheet,2,Sheets,Laird Plastics,Pending" in bom
        assert "Revenue:    $500.00" in capsys.readouterr().out

    def test_json_format(self, tmp_path, make_entry):
        """Test JSON output"""
        catalog = tmp_path / "catalog.csv"
        catalog.write_text(CATALOG, encoding="utf-8")
        log = _log(tmp_path, [make_entry("apparel", {"quantity": 2, "garmentUnitCost": 5})])

        code = main(["--log", log, "--catalog", str(catalog), "--out", str(tmp_path), "--format", "json"])

        assert code == 0
        report = json.loads((tmp_path / "profit_loss.json").read_text(encoding="utf-8"))
        assert report["apparel_totals"]["garment_total"] == 10

    def test_missing_catalog(self, tmp_path):
        """Test a missing catalog exits non-zero"""
        log = _log(tmp_path, [])

        code = main(["--log", log, "--catalog", str(tmp_path / "nope.csv"), "--out", str(tmp_path)])

        assert code == 1

    def test_malformed_keyed_export(self, tmp_path, capsys):
        """Test a category mapped to a scalar exits non-zero without a traceback"""
        catalog = tmp_path / "catalog.csv"
        catalog.write_text(CATALOG, encoding="utf-8")
        log = tmp_path / "log.json"
        log.write_text(json.dumps({"print": 5}), encoding="utf-8")

        code = main(["--log", str(log), "--catalog", str(catalog), "--out", str(tmp_path)])

        assert code == 1
        assert "print" in capsys.readouterr().err
