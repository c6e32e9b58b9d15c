"""
Field normalization for loose issue-form input.
Pure functions: free text and form widgets in, canonical record values out.
"""

import json
import re
from typing import Any, Dict, List, Optional, Tuple

from .config import LOADERS, TAGS

_LOADER_DELIMITERS = re.compile(r"[,\n]")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")
_INVALID_MODRINTH_CHARS = re.compile(r"[\s/\\]")
# Collides with the per-platform index document in the API tree
_RESERVED_MODRINTH_IDS = ("index",)
_DIGITS = re.compile(r"^[0-9]+$")

SLUG_MAX_LENGTH = 50


class PayloadError(Exception):
    """Raised when the intake payload is absent or not a JSON object."""
    pass


def parse_issue_data(raw: Optional[str]) -> Dict[str, Any]:
    """Decode the serialized form payload into a flat field map."""
    if not raw:
        raise PayloadError("No issue data provided")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PayloadError("Invalid issue data format") from e

    if not isinstance(data, dict):
        raise PayloadError("Invalid issue data format")
    return data


def clean_text(value: Any) -> Optional[str]:
    """Trim a free-text field; blank or missing becomes None."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def parse_tag(raw: Any) -> Optional[str]:
    """Map free text like 'Required (must be installed)' to a tag.

    Matching is a case-insensitive substring test in priority order
    required, optional, unsupported. None means no tag was recognised.
    """
    if not raw or not isinstance(raw, str):
        return None

    lower = raw.lower()
    for tag in TAGS:
        if tag in lower:
            return tag
    return None


def parse_loaders(raw: Any) -> List[str]:
    """Normalize loader input to lower-case names.

    A list of items (strings or ``{"label": ...}`` checkbox objects) is only
    lower-cased. A comma or newline delimited string is additionally filtered
    to the known loaders.
    """
    if not raw:
        return []

    if isinstance(raw, list):
        loaders = []
        for item in raw:
            if isinstance(item, str):
                loaders.append(item.lower())
            elif isinstance(item, dict) and item.get("label"):
                loaders.append(str(item["label"]).lower())
        return [loader for loader in loaders if loader]

    if isinstance(raw, str):
        parts = (part.strip().lower() for part in _LOADER_DELIMITERS.split(raw))
        return [part for part in parts if part in LOADERS]

    return []


def parse_curseforge_id(raw: Any) -> Tuple[Optional[int], Optional[str]]:
    """Parse a CurseForge project ID.

    Returns ``(value, None)`` on success, ``(None, None)`` when absent and
    ``(None, error)`` when the text is not a positive integer.
    """
    if isinstance(raw, bool):
        return None, f'Invalid CurseForge ID: "{raw}"'
    if isinstance(raw, int):
        text = str(raw)
    else:
        text = clean_text(raw)
        if text is None:
            return None, None

    if not _DIGITS.match(text):
        return None, f'Invalid CurseForge ID: "{text}"'

    value = int(text)
    if value < 1:
        return None, f'Invalid CurseForge ID: "{text}"'
    return value, None


def is_valid_modrinth_id(value: str) -> bool:
    """Modrinth IDs and slugs never contain whitespace or path separators."""
    if value.lower() in _RESERVED_MODRINTH_IDS:
        return False
    return not _INVALID_MODRINTH_CHARS.search(value)


def slugify(name: str) -> str:
    """Human-facing slug for branch and file names. Never used for identity."""
    slug = _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")
    return slug[:SLUG_MAX_LENGTH]
