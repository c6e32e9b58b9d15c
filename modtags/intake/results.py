"""
Outcome of a submission or dispute, as exposed to the workflow runner.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class ProcessResult:
    valid: bool
    errors: List[str] = field(default_factory=list)
    mod_name: Optional[str] = None
    mod_slug: Optional[str] = None
    dispute_type: Optional[str] = None
    issue_number: Optional[str] = None

    @classmethod
    def failure(cls, errors: List[str], issue_number: Optional[str] = None) -> "ProcessResult":
        return cls(valid=False, errors=list(errors), issue_number=issue_number)

    @property
    def error(self) -> str:
        """All accumulated errors as a single message."""
        return "; ".join(self.errors)

    def to_outputs(self) -> List[Tuple[str, str]]:
        """Ordered workflow outputs for this result."""
        if not self.valid:
            return [("valid", "false"), ("error", self.error)]

        outputs = [
            ("valid", "true"),
            ("mod_name", self.mod_name or ""),
            ("mod_slug", self.mod_slug or "")
        ]
        if self.dispute_type is not None:
            outputs.append(("dispute_type", self.dispute_type))
        outputs.append(("issue_number", self.issue_number or ""))
        return outputs
