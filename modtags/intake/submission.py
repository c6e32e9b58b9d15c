"""
New-record submissions.
Turns an issue-form field map into a validated record and appends it to the store.
Every rule runs; a rejected submission reports all of its problems at once.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from ..core.config import LOADERS, UNKNOWN_AUTHOR, is_verification_enabled
from ..core.integrity import find_conflicts
from ..core.normalize import (
    clean_text, is_valid_modrinth_id, parse_curseforge_id, parse_loaders, parse_tag, slugify
)
from ..core.schema import Record
from ..core.store import ModStore, utc_date
from ..util.logging import logger
from .results import ProcessResult
from .verify import ModrinthVerifier


def _pydantic_messages(error: ValidationError) -> List[str]:
    return [
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    ]


class SubmissionProcessor:
    """Validates and records new mod submissions."""

    def __init__(self, store: ModStore = None, verifier: ModrinthVerifier = None,
                 clock: Callable[[], datetime] = None, verify_enabled: Optional[bool] = None):
        self.store = store or ModStore()
        self.verifier = verifier or ModrinthVerifier()
        # None defers to MODRINTH_VERIFY_ENABLED at processing time
        self.verify_enabled = verify_enabled
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def process(self, fields: Dict[str, Any], author: Optional[str] = None,
                issue_number: Optional[str] = None) -> ProcessResult:
        """Validate a submission and append it to the store when valid.

        Raises StoreError if the store cannot be read or written.
        """
        errors = []

        mod_name = clean_text(fields.get("mod-name"))
        modrinth_id = clean_text(fields.get("modrinth-id"))
        curseforge_id, curseforge_error = parse_curseforge_id(fields.get("curseforge-id"))
        client_tag = parse_tag(fields.get("correct-client-tag"))
        server_tag = parse_tag(fields.get("correct-server-tag"))
        loaders = parse_loaders(fields.get("loaders"))
        notes = clean_text(fields.get("notes"))

        if not mod_name:
            errors.append("Mod name is required")
        if not modrinth_id and not curseforge_id:
            errors.append("At least one platform ID is required")
        if modrinth_id and not is_valid_modrinth_id(modrinth_id):
            errors.append(f'Invalid Modrinth ID: "{modrinth_id}"')
        if curseforge_error:
            errors.append(curseforge_error)
        if not client_tag:
            errors.append("Correct client tag is required")
        if not server_tag:
            errors.append("Correct server tag is required")

        # Checkbox lists are not filtered by parse_loaders; reject unknown names here
        unknown_loaders = [loader for loader in loaders if loader not in LOADERS]
        if unknown_loaders:
            errors.append(f"Unknown loaders: {', '.join(unknown_loaders)}")

        verify = self.verify_enabled if self.verify_enabled is not None else is_verification_enabled()
        if modrinth_id and is_valid_modrinth_id(modrinth_id) and verify:
            verification = self.verifier.verify(modrinth_id)
            if not verification.valid:
                errors.append(verification.error)

        existing = self.store.mods()
        errors.extend(find_conflicts(existing, modrinth_id, curseforge_id))

        if errors:
            logger.log_validation_errors("submission", errors)
            return ProcessResult.failure(errors, issue_number)

        try:
            record = Record(
                name=mod_name,
                modrinth_id=modrinth_id,
                curseforge_id=curseforge_id,
                correct_tags={"client": client_tag, "server": server_tag},
                loaders=loaders or None,
                notes=notes,
                reported_by=author or UNKNOWN_AUTHOR,
                reported_date=utc_date(self._clock())
            )
        except ValidationError as e:
            messages = _pydantic_messages(e)
            logger.log_validation_errors("submission", messages)
            return ProcessResult.failure(messages, issue_number)

        self.store.append(record.to_document())
        logger.log_submission_accepted(record.name, issue_number, record.reported_by)

        return ProcessResult(
            valid=True,
            mod_name=record.name,
            mod_slug=slugify(record.name),
            issue_number=issue_number
        )

