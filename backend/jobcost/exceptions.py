"""
JobCost exception hierarchy

Hard failures that the HTTP host turns into JSON error responses. Soft
estimating failures (bad inputs, artwork that does not fit, unknown
materials) are not exceptions; they come back as warnings on the estimate.
"""
from typing import Any, Dict, Optional


class JobCostException(Exception):
    """Base class for errors rendered by the API exception handler."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str = "JOBCOST_ERROR",
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class CatalogUnavailableError(JobCostException):
    """The material catalog snapshot could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Material catalog unavailable: {reason}",
            error_code="CATALOG_UNAVAILABLE",
            status_code=503,
            details={"path": path},
        )


class UnsupportedExportFormatError(JobCostException):
    """A report was requested in a format we cannot render."""

    def __init__(self, export_format: str):
        super().__init__(
            f"Unsupported export format: {export_format}",
            error_code="UNSUPPORTED_FORMAT",
            status_code=400,
            details={"format": export_format, "allowed": ["json", "csv"]},
        )
