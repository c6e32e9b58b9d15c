"""
Static API derivation.
Projects the canonical store into read-only documents: a full dump, aggregate stats,
and per-platform record documents plus indices. Derivation is pure; writing the tree
to disk is a separate step.
"""

import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.schema import get_recommendation
from ..core.store import serialize, utc_timestamp
from ..util.logging import logger
from .schemas import IndexEntry, ModEntry, PlatformBreakdown, StatsDocument, TagCoverage

# Platform directory name -> record field holding that platform's ID
PLATFORMS = {
    "modrinth": "modrinth_id",
    "curseforge": "curseforge_id",
}


def generate_stats(data: Dict[str, Any], generated: Optional[datetime] = None) -> Dict[str, Any]:
    """Aggregate statistics over the whole store."""
    mods = data["mods"]

    loader_counts: Dict[str, int] = {}
    for mod in mods:
        for loader in mod.get("loaders") or []:
            loader_counts[loader] = loader_counts.get(loader, 0) + 1

    recommendations = [get_recommendation(mod) for mod in mods]

    stats = StatsDocument(
        version=data.get("version"),
        updated=data.get("updated"),
        generated=utc_timestamp(generated),
        total_mods=len(mods),
        by_platform=PlatformBreakdown(
            modrinth_only=sum(1 for m in mods if m.get("modrinth_id") and not m.get("curseforge_id")),
            curseforge_only=sum(1 for m in mods if not m.get("modrinth_id") and m.get("curseforge_id")),
            both_platforms=sum(1 for m in mods if m.get("modrinth_id") and m.get("curseforge_id"))
        ),
        by_loader=loader_counts,
        by_correct_tags=TagCoverage(
            # Records unsupported on both sides fall into no bucket
            client_only=sum(1 for r in recommendations if r.client and not r.server),
            server_only=sum(1 for r in recommendations if r.server and not r.client),
            both_sides=sum(1 for r in recommendations if r.client and r.server)
        )
    )
    return stats.model_dump()


def create_mod_entry(mod: Dict[str, Any]) -> Dict[str, Any]:
    """Per-record document with the derived recommendation."""
    return ModEntry(
        name=mod["name"],
        modrinth_id=mod.get("modrinth_id") or None,
        curseforge_id=mod.get("curseforge_id") or None,
        correct_tags=mod["correct_tags"],
        recommendation=get_recommendation(mod),
        loaders=mod.get("loaders") or [],
        notes=mod.get("notes") or None
    ).model_dump()


def build_platform_index(mods: List[Dict[str, Any]], platform: str) -> List[Dict[str, Any]]:
    """Index of every record linked to ``platform``, in store order."""
    id_field = PLATFORMS[platform]
    return [
        IndexEntry(id=mod[id_field], name=mod["name"], recommendation=get_recommendation(mod)).model_dump()
        for mod in mods
        if mod.get(id_field)
    ]


def build_api(data: Dict[str, Any], generated: Optional[datetime] = None) -> Dict[str, Any]:
    """Derive the full API tree as a mapping of relative path -> document.

    Each platform always gets an index, empty when no record links to it.
    Raises ValueError if two documents would share a path.
    """
    tree: Dict[str, Any] = {}
    tree["mods.json"] = data
    tree["stats.json"] = generate_stats(data, generated)

    for platform, id_field in PLATFORMS.items():
        index_path = f"{platform}/index.json"
        for mod in data["mods"]:
            if mod.get(id_field):
                path = f"{platform}/{mod[id_field]}.json"
                if path == index_path or path in tree:
                    raise ValueError(f"API path collision for {mod['name']}: {path}")
                tree[path] = create_mod_entry(mod)
        tree[index_path] = build_platform_index(data["mods"], platform)

    return tree


def platform_counts(tree: Dict[str, Any]) -> Dict[str, int]:
    """Number of per-record documents per platform."""
    return {
        platform: len(tree.get(f"{platform}/index.json", []))
        for platform in PLATFORMS
    }


def write_api_tree(tree: Dict[str, Any], api_dir: Union[Path, str]) -> List[Path]:
    """Replace ``api_dir`` with the documents in ``tree``."""
    api_dir = Path(api_dir)
    if api_dir.exists():
        shutil.rmtree(api_dir)

    written = []
    for relative, document in tree.items():
        target = api_dir / relative
        if api_dir.resolve() not in target.resolve().parents:
            raise ValueError(f"Refusing to write outside API directory: {relative}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(serialize(document), encoding="utf-8")
        written.append(target)

    logger.log_api_build(str(api_dir), platform_counts(tree))
    return written
