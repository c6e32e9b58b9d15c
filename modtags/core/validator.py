"""
Whole-store schema validation.
Wraps jsonschema so every violation in a candidate store is reported, not just the first.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError


class SchemaLoadError(Exception):
    """Raised when the schema document is missing, unparsable or not a valid schema."""
    pass


@dataclass(frozen=True)
class SchemaViolation:
    location: str  # JSON pointer into the document, e.g. /mods/3/correct_tags
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


@dataclass
class ValidationReport:
    errors: List[SchemaViolation] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class StoreSchema:
    """Compiled JSON Schema for the canonical store."""

    path: Path
    validator: Draft202012Validator

    @classmethod
    def load(cls, path: Union[Path, str]) -> "StoreSchema":
        """Load and compile a JSON schema from disk."""
        schema_path = Path(path)
        if not schema_path.exists():
            raise SchemaLoadError(f"Schema file not found: {schema_path}")

        try:
            with schema_path.open("r", encoding="utf-8") as fh:
                schema_obj = json.load(fh)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Error parsing schema file: {e}") from e

        return cls.from_dict(schema_obj, schema_path)

    @classmethod
    def from_dict(cls, schema_obj: Dict[str, Any], path: Union[Path, str] = "<memory>") -> "StoreSchema":
        try:
            Draft202012Validator.check_schema(schema_obj)
        except SchemaError as e:
            raise SchemaLoadError(f"Invalid schema: {e.message}") from e

        validator = Draft202012Validator(
            schema_obj,
            format_checker=Draft202012Validator.FORMAT_CHECKER
        )
        return cls(path=Path(path), validator=validator)


def _json_pointer(path) -> str:
    return "/" + "/".join(str(part) for part in path)


def _document_order(error) -> List[tuple]:
    # Array indices compare numerically, property names lexically
    return [(0, part) if isinstance(part, int) else (1, str(part)) for part in error.absolute_path]


def validate_document(document: Any, schema: StoreSchema) -> ValidationReport:
    """Validate a store document, collecting every violation in document order.

    The document is not modified.
    """
    violations = sorted(schema.validator.iter_errors(document), key=_document_order)
    return ValidationReport(errors=[
        SchemaViolation(location=_json_pointer(error.absolute_path), message=error.message)
        for error in violations
    ])
