#!/usr/bin/env python3
"""
Static API build.

Regenerates dist/api/v1 from mods.json:
- mods.json, stats.json
- modrinth/<id>.json, modrinth/index.json
- curseforge/<id>.json, curseforge/index.json
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from modtags.api.build import build_api, platform_counts, write_api_tree
from modtags.core.config import get_api_dir, get_data_file
from modtags.core.store import StoreError, read_json


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build the static mod database API")
    parser.add_argument(
        "--data", "-d",
        default=str(get_data_file()),
        help="Path to mods.json (default: MODTAGS_DATA_FILE or ./data/mods.json)"
    )
    parser.add_argument(
        "--out", "-o",
        default=str(get_api_dir()),
        help="API output directory (default: MODTAGS_DIST_DIR/api/v1)"
    )
    args = parser.parse_args(argv)

    print("Building API...")

    try:
        data = read_json(Path(args.data))
    except StoreError as e:
        print(f"ERROR: {e}")
        return 1

    if not isinstance(data, dict) or not isinstance(data.get("mods"), list):
        print("ERROR: Data file has no mods list")
        return 1

    print(f"Loaded {len(data['mods'])} mods")

    try:
        tree = build_api(data)
        write_api_tree(tree, args.out)
    except (KeyError, ValueError, OSError) as e:
        print(f"ERROR: Build failed: {e}")
        return 1

    counts = platform_counts(tree)
    print(f"Done: {len(data['mods'])} mods, {counts['modrinth']} Modrinth, {counts['curseforge']} CurseForge")
    return 0


if __name__ == "__main__":
    sys.exit(main())
