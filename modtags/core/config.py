"""
Runtime configuration for the mod database tooling.
All values come from environment variables with local-checkout defaults.
"""

import os
from pathlib import Path

# Canonical store and schema locations
DATA_FILE = os.getenv("MODTAGS_DATA_FILE", "./data/mods.json")
SCHEMA_FILE = os.getenv("MODTAGS_SCHEMA_FILE", "./data/schema.json")

# Derived API output root (documents land under <DIST_DIR>/api/v1)
DIST_DIR = os.getenv("MODTAGS_DIST_DIR", "./dist")
API_VERSION = "v1"

# Remote verification (Modrinth project lookup)
MODRINTH_API_BASE = os.getenv("MODRINTH_API_BASE", "https://api.modrinth.com/v2")
MODRINTH_VERIFY_TIMEOUT_SEC = float(os.getenv("MODRINTH_VERIFY_TIMEOUT_SEC", "5"))
USER_AGENT = os.getenv(
    "MODTAGS_USER_AGENT",
    "BadModTags/1.0 (https://github.com/pyrohost/bad-mod-tags)"
)

# Closed vocabularies shared by the normalizer, models and schema
TAGS = ("required", "optional", "unsupported")
LOADERS = ("fabric", "forge", "neoforge", "quilt")

# Audit sentinel when the submitting identity is unavailable
UNKNOWN_AUTHOR = "unknown"

# Debug logging
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# Version string
VERSION = "1.0.0"


def get_data_file() -> Path:
    """Path of the canonical store document."""
    return Path(DATA_FILE)


def get_schema_file() -> Path:
    """Path of the JSON Schema describing the store."""
    return Path(SCHEMA_FILE)


def get_api_dir() -> Path:
    """Root directory of the derived API tree."""
    return Path(DIST_DIR) / "api" / API_VERSION


def is_verification_enabled():
    """Check if remote Modrinth verification is enabled."""
    return os.getenv("MODRINTH_VERIFY_ENABLED", "true").lower() == "true"


def get_verify_timeout():
    """Get the remote verification timeout in seconds."""
    return MODRINTH_VERIFY_TIMEOUT_SEC


def get_output_file():
    """Get the workflow output file, if the runner provides one."""
    return os.getenv("GITHUB_OUTPUT") or None


def validate_config():
    """Validate configuration and return any issues."""
    issues = []

    if MODRINTH_VERIFY_TIMEOUT_SEC <= 0:
        issues.append("MODRINTH_VERIFY_TIMEOUT_SEC must be > 0")

    if not MODRINTH_API_BASE.startswith(("http://", "https://")):
        issues.append(f"Invalid MODRINTH_API_BASE: {MODRINTH_API_BASE}")

    if not DATA_FILE:
        issues.append("MODTAGS_DATA_FILE must not be empty")

    return issues


def debug_enabled():
    """Check if debug logging is enabled."""
    return DEBUG
