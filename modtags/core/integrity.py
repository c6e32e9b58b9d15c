"""
Cross-record integrity rules that JSON Schema cannot express.
Identifier uniqueness is a hard rule; missing platform linkage is only a warning.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .validator import SchemaViolation, StoreSchema, validate_document


@dataclass(frozen=True)
class DuplicateFinding:
    """Two records sharing one external identifier."""
    platform: str  # 'modrinth', 'curseforge'
    identifier: Any
    first_index: int
    duplicate_index: int

    @property
    def message(self) -> str:
        label = "Modrinth" if self.platform == "modrinth" else "CurseForge"
        return (f'Duplicate {label} ID "{self.identifier}" at indices '
                f'{self.first_index} and {self.duplicate_index}')

    def __str__(self) -> str:
        return self.message


def check_duplicates(mods: List[Dict[str, Any]]) -> List[DuplicateFinding]:
    """Report every record whose identifier was already claimed by an earlier record.

    Modrinth IDs compare case-insensitively, CurseForge IDs by exact integer value.
    Each colliding pair is reported once, against the first index that used the ID.
    """
    findings = []
    modrinth_ids: Dict[str, int] = {}
    curseforge_ids: Dict[int, int] = {}

    for index, mod in enumerate(mods):
        modrinth_id = mod.get("modrinth_id")
        if modrinth_id:
            existing = modrinth_ids.get(modrinth_id.lower())
            if existing is not None:
                findings.append(DuplicateFinding("modrinth", modrinth_id, existing, index))
            else:
                modrinth_ids[modrinth_id.lower()] = index

        curseforge_id = mod.get("curseforge_id")
        if curseforge_id:
            existing = curseforge_ids.get(curseforge_id)
            if existing is not None:
                findings.append(DuplicateFinding("curseforge", curseforge_id, existing, index))
            else:
                curseforge_ids[curseforge_id] = index

    return findings


def check_completeness(mods: List[Dict[str, Any]]) -> List[str]:
    """Warn about legacy records linked to neither platform."""
    return [
        f"[{mod.get('name')}] has neither modrinth_id nor curseforge_id"
        for mod in mods
        if not mod.get("modrinth_id") and not mod.get("curseforge_id")
    ]


def matches_identifiers(mod: Dict[str, Any], modrinth_id: Optional[str], curseforge_id: Optional[int]) -> bool:
    """Identity rule shared by duplicate checks and dispute lookup."""
    existing_modrinth = mod.get("modrinth_id")
    if modrinth_id and existing_modrinth and existing_modrinth.lower() == modrinth_id.lower():
        return True
    if curseforge_id and mod.get("curseforge_id") == curseforge_id:
        return True
    return False


def find_conflicts(mods: List[Dict[str, Any]], modrinth_id: Optional[str], curseforge_id: Optional[int]) -> List[str]:
    """Duplicate errors for a candidate record against the existing store."""
    errors = []
    for mod in mods:
        existing_modrinth = mod.get("modrinth_id")
        if modrinth_id and existing_modrinth and existing_modrinth.lower() == modrinth_id.lower():
            errors.append(f'Mod with Modrinth ID "{modrinth_id}" already exists: {mod.get("name")}')
        if curseforge_id and mod.get("curseforge_id") == curseforge_id:
            errors.append(f'Mod with CurseForge ID "{curseforge_id}" already exists: {mod.get("name")}')
    return errors


def find_record_index(mods: List[Dict[str, Any]], modrinth_id: Optional[str], curseforge_id: Optional[int]) -> Optional[int]:
    """Index of the first record matching either identifier, or None."""
    for index, mod in enumerate(mods):
        if matches_identifiers(mod, modrinth_id, curseforge_id):
            return index
    return None


@dataclass
class IntegrityReport:
    """Combined outcome of the standalone database check."""
    mod_count: int = 0
    schema_errors: List[SchemaViolation] = field(default_factory=list)
    duplicates: List[DuplicateFinding] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.schema_errors and not self.duplicates

    @property
    def errors(self) -> List[str]:
        return [str(error) for error in self.schema_errors] + [d.message for d in self.duplicates]


def check_database(document: Any, schema: StoreSchema) -> IntegrityReport:
    """Run schema validation, then the duplicate and completeness passes.

    The cross-record passes only run on a schema-valid document.
    """
    mods = document.get("mods") if isinstance(document, dict) else None
    report = IntegrityReport(mod_count=len(mods) if isinstance(mods, list) else 0)

    report.schema_errors = validate_document(document, schema).errors
    if report.schema_errors:
        return report

    report.duplicates = check_duplicates(document["mods"])
    report.warnings = check_completeness(document["mods"])
    return report
