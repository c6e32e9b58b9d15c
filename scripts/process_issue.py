#!/usr/bin/env python3
"""
Process a new-mod issue submission.

Reads the parsed issue form from ISSUE_DATA, validates it and appends the
record to mods.json. Results are written to $GITHUB_OUTPUT:
- valid=true, mod_name, mod_slug, issue_number on success
- valid=false, error=<all errors joined by "; "> on failure

Environment variables:
- ISSUE_DATA (JSON object of form fields, required)
- ISSUE_NUMBER, ISSUE_AUTHOR (optional)
- MODRINTH_VERIFY_ENABLED=false to skip the Modrinth lookup
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from modtags.core.config import get_data_file, validate_config
from modtags.core.normalize import PayloadError, parse_issue_data
from modtags.core.outputs import write_outputs
from modtags.core.store import ModStore, StoreError
from modtags.intake.results import ProcessResult
from modtags.intake.submission import SubmissionProcessor
from modtags.util.logging import logger


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate and record a mod submission")
    parser.add_argument("--data", "-d", default=str(get_data_file()), help="Path to mods.json")
    parser.add_argument("--issue-data", default=os.getenv("ISSUE_DATA"), help="Issue form JSON (default: ISSUE_DATA)")
    parser.add_argument("--issue-number", default=os.getenv("ISSUE_NUMBER"), help="Issue number (default: ISSUE_NUMBER)")
    parser.add_argument("--author", default=os.getenv("ISSUE_AUTHOR"), help="Issue author (default: ISSUE_AUTHOR)")
    parser.add_argument("--output", default=None, help="Output file (default: GITHUB_OUTPUT)")
    parser.add_argument("--no-verify", action="store_true", help="Skip the Modrinth project lookup")
    args = parser.parse_args(argv)

    for issue in validate_config():
        logger.warning(f"Configuration issue: {issue}")

    try:
        fields = parse_issue_data(args.issue_data)
        processor = SubmissionProcessor(
            store=ModStore(args.data),
            verify_enabled=False if args.no_verify else None
        )
        result = processor.process(fields, author=args.author, issue_number=args.issue_number)
    except (PayloadError, StoreError) as e:
        result = ProcessResult.failure([str(e)], args.issue_number)

    write_outputs(result.to_outputs(), args.output)

    if not result.valid:
        print(f"Validation failed: {result.error}")
        return 1

    print(f"Processed: {result.mod_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
