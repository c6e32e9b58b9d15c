"""
Structured operation logging for the mod database tooling.
Every pipeline stage reports through the shared ``logger`` instance below.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.config import debug_enabled


def _truncate(value: str, limit: int = 50) -> str:
    return value[:limit] + "..." if len(value) > limit else value


class StructuredLogger:
    """Structured logger for validation, intake, store and build operations."""

    def __init__(self, name: str = "modtags"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug_enabled() else logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None, level: int = logging.INFO):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.log(level, message)

    # Validation
    def log_validation_report(self, mod_count: int, error_count: int, warning_count: int):
        """Log the outcome of a full database validation run."""
        details = {
            "mods": mod_count,
            "errors": error_count,
            "warnings": warning_count
        }
        status = "passed" if error_count == 0 else "failed"
        level = logging.INFO if error_count == 0 else logging.ERROR
        self.log_operation("validation.database", status, details, level)

    def log_validation_errors(self, operation: str, errors: List[Any]):
        """Log validation errors, limiting each message length."""
        log_details = {
            "errors": [str(error)[:100] for error in errors],
            "error_count": len(errors)
        }
        self.log_operation(f"{operation}.rejected", "invalid", log_details, logging.WARNING)

    # Remote verification
    def log_verification(self, project_id: str, status: str, details: Dict[str, Any] = None):
        """Log a remote identifier verification outcome."""
        log_details = {"project_id": project_id}
        if details:
            log_details.update(details)

        # Unknown outcomes are fail-open, surfaced for observability only
        level = logging.WARNING if status == "unknown" else logging.INFO
        self.log_operation("verify.modrinth", status, log_details, level)

    # Intake
    def log_submission_accepted(self, mod_name: str, issue_number: Optional[str] = None, reported_by: Optional[str] = None):
        """Log an accepted new-record submission."""
        details = {"mod_name": _truncate(mod_name)}
        if issue_number:
            details["issue_number"] = issue_number
        if reported_by:
            details["reported_by"] = reported_by

        self.log_operation("submission.accepted", "success", details)

    def log_dispute_applied(self, mod_name: str, dispute_type: str, issue_number: Optional[str] = None, explanation: Optional[str] = None):
        """Log a dispute that removed a record."""
        details = {
            "mod_name": _truncate(mod_name),
            "dispute_type": dispute_type
        }
        if issue_number:
            details["issue_number"] = issue_number
        if explanation:
            details["explanation"] = _truncate(explanation)

        self.log_operation("dispute.applied", "success", details)

    # Store and build
    def log_store_write(self, path: str, mod_count: int, updated: str):
        """Log a rewrite of the canonical store."""
        self.log_operation("store.write", "success", {
            "path": path,
            "mods": mod_count,
            "updated": updated
        })

    def log_api_build(self, dist_dir: str, counts: Dict[str, int]):
        """Log a derived API build."""
        details = {"dist_dir": dist_dir}
        details.update(counts)
        self.log_operation("api.build", "success", details)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()
