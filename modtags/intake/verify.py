"""
Modrinth project verification.
A courtesy check: only an explicit 404 rejects a submission, every other failure fails open.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..core.config import MODRINTH_API_BASE, USER_AGENT, get_verify_timeout
from ..util.logging import logger


class VerificationStatus(Enum):
    CONFIRMED = "confirmed"  # remote resolved the project
    REJECTED = "rejected"    # remote reported not found
    UNKNOWN = "unknown"      # absent id, transport failure, timeout or unexpected reply


@dataclass(frozen=True)
class VerificationResult:
    status: VerificationStatus
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        """Only a rejection blocks; unknown is allowed through."""
        return self.status != VerificationStatus.REJECTED


def _normalize_project(project: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": project.get("title"),
        "slug": project.get("slug"),
        "id": project.get("id"),
        "client_side": project.get("client_side"),
        "server_side": project.get("server_side")
    }


class ModrinthVerifier:
    """Looks up a project by ID or slug on the Modrinth API."""

    def __init__(self, api_base: str = MODRINTH_API_BASE, timeout: float = None, user_agent: str = USER_AGENT):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout if timeout is not None else get_verify_timeout()
        self.user_agent = user_agent

    def project_url(self, project_id: str) -> str:
        return f"{self.api_base}/project/{quote(project_id, safe='')}"

    def verify(self, project_id: Optional[str]) -> VerificationResult:
        """Confirm that ``project_id`` resolves on Modrinth."""
        if not project_id:
            return VerificationResult(VerificationStatus.UNKNOWN)

        try:
            response = requests.get(
                self.project_url(project_id),
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout
            )
        except requests.Timeout:
            logger.log_verification(project_id, "unknown", {"reason": "timeout"})
            return VerificationResult(VerificationStatus.UNKNOWN)
        except requests.RequestException as e:
            logger.log_verification(project_id, "unknown", {"reason": type(e).__name__})
            return VerificationResult(VerificationStatus.UNKNOWN)

        if response.status_code == 404:
            logger.log_verification(project_id, "rejected", {"http_status": 404})
            return VerificationResult(
                VerificationStatus.REJECTED,
                error=f'Modrinth project "{project_id}" not found'
            )

        if response.status_code != 200:
            logger.log_verification(project_id, "unknown", {"http_status": response.status_code})
            return VerificationResult(VerificationStatus.UNKNOWN)

        try:
            project = response.json()
        except ValueError:
            logger.log_verification(project_id, "unknown", {"reason": "invalid_json"})
            return VerificationResult(VerificationStatus.UNKNOWN)

        if not isinstance(project, dict):
            logger.log_verification(project_id, "unknown", {"reason": "unexpected_payload"})
            return VerificationResult(VerificationStatus.UNKNOWN)

        logger.log_verification(project_id, "confirmed")
        return VerificationResult(VerificationStatus.CONFIRMED, data=_normalize_project(project))

