"""
Log Entry Snapshot

Logged form submissions, parsed once into validated request schemas and
grouped by job category. A malformed entry is skipped and counted; it never
stops a report.
"""
import json
from typing import Any, Dict, Iterable, List, NamedTuple, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from jobcost.logging_config import get_logger
from jobcost.schemas.apparel_job import ApparelJobRequest
from jobcost.schemas.fabrication_job import FabricationJobRequest
from jobcost.schemas.print_job import PrintJobRequest
from jobcost.schemas.report import LogCategory, LogEntry

logger = get_logger(__name__)


REQUEST_SCHEMAS: Dict[LogCategory, Type[BaseModel]] = {
    LogCategory.PRINT: PrintJobRequest,
    LogCategory.APPAREL: ApparelJobRequest,
    LogCategory.FABRICATION: FabricationJobRequest,
}

UNKNOWN_CATEGORY = "unknown"


class ParsedEntry(NamedTuple):
    """A log entry alongside its validated request"""
    entry: LogEntry
    request: Any


class LogSnapshot:
    """
    Immutable, parsed view of a batch of log entries.

    Attributes:
        skipped: count of unusable entries per category name
    """

    def __init__(self, entries: Iterable[Union[LogEntry, Dict[str, Any]]]):
        parsed: Dict[LogCategory, List[ParsedEntry]] = {c: [] for c in LogCategory}
        skipped: Dict[str, int] = {}

        for index, raw in enumerate(entries):
            result = self._parse(index, raw)
            if isinstance(result, ParsedEntry):
                parsed[LogCategory(result.entry.category)].append(result)
            else:
                skipped[result] = skipped.get(result, 0) + 1

        self._parsed: Dict[LogCategory, Tuple[ParsedEntry, ...]] = {
            category: tuple(items) for category, items in parsed.items()
        }
        self.skipped = skipped

        if skipped:
            logger.warning(
                "Skipped malformed log entries",
                extra={"skipped": skipped, "total_skipped": self.total_skipped},
            )

    @staticmethod
    def _parse(index: int, raw: Union[LogEntry, Dict[str, Any]]) -> Union[ParsedEntry, str]:
        """Return a ParsedEntry, or the category name to count a skip against."""
        try:
            entry = raw if isinstance(raw, LogEntry) else LogEntry.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                "Skipping unreadable log entry",
                extra={"index": index, "errors": [err["msg"] for err in e.errors()]},
            )
            return UNKNOWN_CATEGORY

        try:
            category = LogCategory(entry.category)
        except ValueError:
            logger.warning(
                "Skipping log entry with unknown category",
                extra={"index": index, "category": entry.category, "project": entry.project},
            )
            return entry.category or UNKNOWN_CATEGORY

        try:
            request = REQUEST_SCHEMAS[category].model_validate(entry.payload)
        except ValidationError as e:
            logger.warning(
                "Skipping malformed log entry",
                extra={
                    "index": index,
                    "category": category.value,
                    "project": entry.project,
                    "errors": [err["msg"] for err in e.errors()],
                },
            )
            return category.value

        return ParsedEntry(entry=entry, request=request)

    def items(self, category: LogCategory) -> Tuple[ParsedEntry, ...]:
        return self._parsed[category]

    def counted(self) -> Dict[str, int]:
        return {category.value: len(items) for category, items in self._parsed.items()}

    @property
    def total_skipped(self) -> int:
        return sum(self.skipped.values())

    @classmethod
    def from_json_text(cls, text: str) -> "LogSnapshot":
        """
        Build a snapshot from a JSON export: either a list of entries or an
        object mapping category name to a list of payloads.
        """
        data = json.loads(text)
        if isinstance(data, dict):
            for category, payloads in data.items():
                if payloads is not None and not isinstance(payloads, list):
                    raise ValueError(
                        f"Log export for category '{category}' must be a list of entries"
                    )
            entries = [
                {"category": category, "payload": payload}
                if not (isinstance(payload, dict) and "payload" in payload)
                else {"category": category, **payload}
                for category, payloads in data.items()
                for payload in (payloads or [])
            ]
            return cls(entries)
        if not isinstance(data, list):
            raise ValueError("Log export must be a JSON list or an object keyed by category")
        return cls(data)
