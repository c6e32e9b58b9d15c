#!/usr/bin/env python3
"""
Database validation gate.

Checks mods.json against the JSON schema, then for duplicate platform IDs.
Records without any platform ID are reported as warnings only.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from modtags.core.config import get_data_file, get_schema_file
from modtags.core.integrity import check_database
from modtags.core.store import StoreError, read_json
from modtags.core.validator import SchemaLoadError, StoreSchema
from modtags.util.logging import logger


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Validate the mod database against its schema and integrity rules"
    )
    parser.add_argument(
        "--data", "-d",
        default=str(get_data_file()),
        help="Path to mods.json (default: MODTAGS_DATA_FILE or ./data/mods.json)"
    )
    parser.add_argument(
        "--schema", "-s",
        default=str(get_schema_file()),
        help="Path to schema.json (default: MODTAGS_SCHEMA_FILE or ./data/schema.json)"
    )
    args = parser.parse_args(argv)

    print("Validating database...")

    try:
        schema = StoreSchema.load(args.schema)
        data = read_json(Path(args.data))
    except (SchemaLoadError, StoreError) as e:
        print(f"ERROR: {e}")
        return 1

    report = check_database(data, schema)
    print(f"Loaded {report.mod_count} mods")
    logger.log_validation_report(report.mod_count, len(report.errors), len(report.warnings))

    if report.schema_errors:
        print("Schema validation failed:")
        for error in report.schema_errors:
            print(f"  {error}")
        return 1
    print("Schema validation passed")

    if report.duplicates:
        print("Duplicate entries found:")
        for duplicate in report.duplicates:
            print(f"  {duplicate.message}")
        return 1
    print("No duplicates found")

    if report.warnings:
        print("Warnings:")
        for warning in report.warnings:
            print(f"  {warning}")
    else:
        print("Semantic checks passed")

    print(f"Done: {report.mod_count} mods validated, {len(report.warnings)} warnings")
    return 0


if __name__ == "__main__":
    sys.exit(main())
