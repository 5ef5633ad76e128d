"""
Unit tests for the log entry snapshot

Malformed entries are skipped and counted per category; they never stop a
report from being built.
"""
import json
from datetime import datetime

import pytest

from jobcost.schemas.apparel_job import ApparelJobRequest
from jobcost.schemas.print_job import PrintJobRequest
from jobcost.schemas.report import LogCategory
from jobcost.services.log_entries import LogSnapshot


class TestLogSnapshot:
    """Test parsing and grouping logged submissions"""

    def test_groups_by_category(self, make_entry):
        """Test valid entries are parsed into their request schema"""
        snapshot = LogSnapshot([
            make_entry("print", {"quantity": 1, "artWidth": 10, "artHeight": 10, "materialName": "Test Sheet"}),
            make_entry("Apparel", {"quantity": 12, "garmentUnitCost": 4}),
            make_entry("print", {"quantity": 2}),
        ])

        assert len(snapshot.items(LogCategory.PRINT)) == 2
        assert len(snapshot.items(LogCategory.APPAREL)) == 1
        assert snapshot.items(LogCategory.FABRICATION) == ()
        assert isinstance(snapshot.items(LogCategory.PRINT)[0].request, PrintJobRequest)
        assert isinstance(snapshot.items(LogCategory.APPAREL)[0].request, ApparelJobRequest)
        assert snapshot.counted() == {"print": 2, "apparel": 1, "fabrication": 0}
        assert snapshot.total_skipped == 0

    def test_unknown_category_skipped(self, make_entry):
        """Test entries for a category with no estimator are counted by name"""
        snapshot = LogSnapshot([make_entry("embroidery", {"quantity": 1})])

        assert snapshot.skipped == {"embroidery": 1}
        assert sum(snapshot.counted().values()) == 0

    def test_unreadable_entry_skipped(self, make_entry):
        """Test entries that are not objects count as unknown"""
        snapshot = LogSnapshot(["garbage", 42, make_entry("print", {"quantity": 1})])

        assert snapshot.skipped == {"unknown": 2}
        assert snapshot.counted()["print"] == 1

    def test_bad_payload_skipped_under_category(self, make_entry):
        """Test a payload failing its schema counts against its category"""
        snapshot = LogSnapshot([
            make_entry("fabrication", {"materials": [{"quantity": 2}]}),
            make_entry("fabrication", {"materials": [{"description": "Plywood", "quantity": 2}]}),
        ])

        assert snapshot.skipped == {"fabrication": 1}
        assert snapshot.counted()["fabrication"] == 1
        assert snapshot.total_skipped == 1

    def test_sale_price_coerced(self, make_entry):
        """Test currency-formatted sale prices are read as numbers"""
        snapshot = LogSnapshot([make_entry("apparel", {}, sale_price="$1,200.50")])

        assert snapshot.items(LogCategory.APPAREL)[0].entry.sale_price == pytest.approx(1200.50)

    def test_sheet_timestamp_read(self, make_entry):
        """Test the form sheet's month/day/year timestamps are parsed"""
        entry = make_entry("apparel", {"quantity": 24, "garmentUnitCost": 5}, sale_price=300)
        entry["submittedAt"] = "10/19/2026 12:34:56"

        snapshot = LogSnapshot([entry])

        assert snapshot.counted()["apparel"] == 1
        assert snapshot.total_skipped == 0
        assert snapshot.items(LogCategory.APPAREL)[0].entry.submitted_at == datetime(2026, 10, 19, 12, 34, 56)

    @pytest.mark.parametrize("value,expected", [
        ("2026-10-19T08:15:00", datetime(2026, 10, 19, 8, 15)),
        ("10/19/2026", datetime(2026, 10, 19)),
        ("", None),
        ("sometime last week", None),
    ])
    def test_timestamp_never_drops_entry(self, make_entry, value, expected):
        """Test unreadable timestamps are dropped, not the entry"""
        entry = make_entry("fabrication", {"laborTime": 1})
        entry["submittedAt"] = value

        snapshot = LogSnapshot([entry])

        assert snapshot.counted()["fabrication"] == 1
        assert snapshot.items(LogCategory.FABRICATION)[0].entry.submitted_at == expected


class TestFromJsonText:
    """Test loading a JSON export of the log"""

    def test_list_export(self, make_entry):
        """Test a JSON list of entries"""
        text = json.dumps([make_entry("apparel", {"quantity": 5})])

        assert LogSnapshot.from_json_text(text).counted()["apparel"] == 1

    def test_keyed_by_category(self):
        """Test an object mapping each log sheet to its payloads"""
        text = json.dumps({
            "print": [{"quantity": 1, "artWidth": 5, "artHeight": 5, "materialName": "Test Sheet"}],
            "apparel": [
                {"project": "Team Shirts", "salePrice": 300, "payload": {"quantity": 24}},
            ],
        })

        snapshot = LogSnapshot.from_json_text(text)

        assert snapshot.counted() == {"print": 1, "apparel": 1, "fabrication": 0}
        apparel = snapshot.items(LogCategory.APPAREL)[0]
        assert apparel.entry.project == "Team Shirts"
        assert apparel.request.quantity == 24

    def test_rejects_non_list_category(self):
        """Test a category mapped to something other than a list of entries"""
        with pytest.raises(ValueError):
            LogSnapshot.from_json_text(json.dumps({"print": 5}))

    def test_null_category_is_empty(self):
        """Test a category with no entries exported as null"""
        snapshot = LogSnapshot.from_json_text(json.dumps({"print": None}))

        assert snapshot.counted()["print"] == 0

    def test_rejects_scalar_export(self):
        """Test a JSON document that is neither list nor object"""
        with pytest.raises(ValueError):
            LogSnapshot.from_json_text("42")
