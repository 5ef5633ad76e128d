"""
Material Catalog Service

Resolves material names from the estimate forms to their costing attributes.
The catalog is an immutable snapshot of the shop's material sheet, taken once
per computation and passed to whatever needs it.
"""
import csv
import io
import os
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from jobcost.exceptions import CatalogUnavailableError
from jobcost.logging_config import get_logger
from jobcost.schemas.material import CatalogEntry

logger = get_logger(__name__)


CATALOG_COLUMNS = (
    "name", "kind", "width", "height_or_length", "unit_cost",
    "categories", "vendor", "unit_of_measure",
)


class MaterialCatalog:
    """
    Read-only snapshot of catalog entries.

    Lookups are case-sensitive exact matches on the trimmed name. A name that
    is not found (or not tagged for the requested category) resolves to None;
    it is up to the caller to report it.
    """

    def __init__(self, entries: Iterable[CatalogEntry], rejected_rows: int = 0):
        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)
        self.rejected_rows = rejected_rows

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def lookup(self, name: Optional[str], category: Optional[str] = None) -> Optional[CatalogEntry]:
        """
        Find a material by name, optionally limited to entries tagged for a
        job category.

        Args:
            name: Material name as entered on the form
            category: Category tag filter (e.g. 'print'); None means any

        Returns:
            The first matching CatalogEntry, or None
        """
        wanted = (name or "").strip()
        if not wanted:
            return None
        for entry in self._entries:
            if entry.name == wanted and entry.has_category(category):
                return entry
        return None

    def entries(self, category: Optional[str] = None) -> List[CatalogEntry]:
        """List entries, optionally only those tagged for a category"""
        return [e for e in self._entries if e.has_category(category)]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_csv_text(cls, text: str, source: str = "<csv>") -> "MaterialCatalog":
        """
        Build a catalog from a CSV export of the material sheet.

        Expected columns: name, kind, width, height_or_length, unit_cost,
        categories, vendor, unit_of_measure. Rows that fail validation are
        skipped and counted.
        """
        reader = csv.DictReader(io.StringIO(text))
        entries: List[CatalogEntry] = []
        rejected = 0

        for row_num, row in enumerate(reader, start=2):
            record: Dict[str, Optional[str]] = {
                key: (row.get(key) or "").strip() or None
                for key in CATALOG_COLUMNS
            }
            if not record["name"]:
                # blank spacer rows are common in the sheet
                continue
            try:
                entries.append(CatalogEntry(**{k: v for k, v in record.items() if v is not None}))
            except ValidationError as e:
                rejected += 1
                logger.warning(
                    "Skipping invalid catalog row",
                    extra={
                        "source": source,
                        "row": row_num,
                        "material": record["name"],
                        "errors": [err["msg"] for err in e.errors()],
                    },
                )

        logger.info(
            "Loaded material catalog",
            extra={"source": source, "entries": len(entries), "rejected_rows": rejected},
        )
        return cls(entries, rejected_rows=rejected)

    @classmethod
    def from_csv_file(cls, path: str) -> "MaterialCatalog":
        try:
            with open(path, "r", encoding="utf-8-sig", newline="") as f:
                text = f.read()
        except OSError as e:
            raise CatalogUnavailableError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise CatalogUnavailableError(path, f"not UTF-8 text ({e.reason})") from e
        return cls.from_csv_text(text, source=path)


# ---------- in-process cache keyed by file mtime ----------
_CATALOG_CACHE: Dict[str, Tuple[Optional[float], MaterialCatalog]] = {}


def load_catalog(path: str) -> MaterialCatalog:
    """
    Load the catalog snapshot at `path`, re-reading only when the file changed.
    """
    try:
        mtime = os.path.getmtime(path)
    except OSError:
        mtime = None

    cached = _CATALOG_CACHE.get(path)
    if cached is not None and mtime is not None and cached[0] == mtime:
        return cached[1]

    catalog = MaterialCatalog.from_csv_file(path)
    _CATALOG_CACHE[path] = (mtime, catalog)
    return catalog


def clear_catalog_cache() -> None:
    """Force the next load_catalog() to re-read from disk."""
    _CATALOG_CACHE.clear()
