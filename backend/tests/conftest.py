"""
Shared fixtures: a small in-memory material catalog and a factory for log
entries.
"""
import pytest

from jobcost.services.material_catalog import MaterialCatalog


CATALOG_CSV = """name,kind,width,height_or_length,unit_cost,categories,vendor,unit_of_measure
Test Roll 60,ROLL,60,150,150.00,print,Grimco,
Test Sheet,SHEET,48,96,40.00,print;fabrication,Laird Plastics,
1/8 White PVC,SHEET,48,96,38.50,print,Laird Plastics,Sheets
Fab Only MDF,SHEET,49,97,44.00,fabrication,Home Depot,
"""


@pytest.fixture
def catalog():
    """Catalog with a $1/ft 60in roll, a $40 4x8 sheet and a fabrication-only sheet"""
    return MaterialCatalog.from_csv_text(CATALOG_CSV, source="test")


@pytest.fixture
def make_entry():
    """Build a raw log entry dict the way the form log exports them"""
    def _make(category, payload, *, project="Test Project", sale_price=0, status=None):
        entry = {
            "category": category,
            "project": project,
            "salePrice": sale_price,
            "payload": payload,
        }
        if status is not None:
            entry["status"] = status
        return entry
    return _make
