"""
Removal disputes.
Finds the disputed record by platform ID and splices it out of the store.
"""

from typing import Any, Dict, Optional

from ..core.integrity import find_record_index
from ..core.normalize import clean_text, parse_curseforge_id, slugify
from ..core.store import ModStore
from ..util.logging import logger
from .results import ProcessResult


class DisputeProcessor:
    """Validates disputes and removes the disputed record."""

    def __init__(self, store: ModStore = None):
        self.store = store or ModStore()

    def process(self, fields: Dict[str, Any], issue_number: Optional[str] = None) -> ProcessResult:
        """Validate a dispute and remove the matching record when valid.

        Raises StoreError if the store cannot be read or written.
        """
        errors = []

        mod_name = clean_text(fields.get("mod-name"))
        modrinth_id = clean_text(fields.get("modrinth-id"))
        curseforge_id, curseforge_error = parse_curseforge_id(fields.get("curseforge-id"))
        dispute_type = clean_text(fields.get("dispute-type")) or ""
        explanation = clean_text(fields.get("explanation"))

        if not mod_name:
            errors.append("Mod name is required")
        if not modrinth_id and not curseforge_id:
            errors.append("At least one platform ID is required")
        if curseforge_error:
            errors.append(curseforge_error)
        if not explanation:
            errors.append("Explanation is required")

        index = None
        if modrinth_id or curseforge_id:
            index = find_record_index(self.store.mods(), modrinth_id, curseforge_id)
            if index is None:
                errors.append(
                    f"Mod not found in database (Modrinth: {modrinth_id or 'N/A'}, "
                    f"CurseForge: {curseforge_id or 'N/A'})"
                )

        if errors:
            logger.log_validation_errors("dispute", errors)
            return ProcessResult.failure(errors, issue_number)

        removed = self.store.remove_at(index)
        logger.log_dispute_applied(removed["name"], dispute_type, issue_number, explanation)

        return ProcessResult(
            valid=True,
            mod_name=removed["name"],
            mod_slug=slugify(removed["name"]),
            dispute_type=dispute_type,
            issue_number=issue_number
        )

