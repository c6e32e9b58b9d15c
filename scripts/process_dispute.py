#!/usr/bin/env python3
"""
Process a dispute issue.

Reads the parsed issue form from ISSUE_DATA, finds the disputed mod by
platform ID and removes it from mods.json. Results are written to
$GITHUB_OUTPUT:
- valid=true, mod_name, mod_slug, dispute_type, issue_number on success
- valid=false, error=<all errors joined by "; "> on failure
"""

import argparse
import os
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from modtags.core.config import get_data_file
from modtags.core.normalize import PayloadError, parse_issue_data
from modtags.core.outputs import write_outputs
from modtags.core.store import ModStore, StoreError
from modtags.intake.dispute import DisputeProcessor
from modtags.intake.results import ProcessResult


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate a dispute and remove the disputed mod")
    parser.add_argument("--data", "-d", default=str(get_data_file()), help="Path to mods.json")
    parser.add_argument("--issue-data", default=os.getenv("ISSUE_DATA"), help="Issue form JSON (default: ISSUE_DATA)")
    parser.add_argument("--issue-number", default=os.getenv("ISSUE_NUMBER"), help="Issue number (default: ISSUE_NUMBER)")
    parser.add_argument("--output", default=None, help="Output file (default: GITHUB_OUTPUT)")
    args = parser.parse_args(argv)

    try:
        fields = parse_issue_data(args.issue_data)
        processor = DisputeProcessor(store=ModStore(args.data))
        result = processor.process(fields, issue_number=args.issue_number)
    except (PayloadError, StoreError) as e:
        result = ProcessResult.failure([str(e)], args.issue_number)

    write_outputs(result.to_outputs(), args.output)

    if not result.valid:
        print(f"Validation failed: {result.error}")
        return 1

    print(f"Removed: {result.mod_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
