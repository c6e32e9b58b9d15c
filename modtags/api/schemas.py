"""
Document models for the derived static API.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from ..core.schema import CorrectTags, Recommendation


class ModEntry(BaseModel):
    """Per-record document, served at /<platform>/<id>.json."""
    name: str
    modrinth_id: Optional[str] = None
    curseforge_id: Optional[int] = None
    correct_tags: CorrectTags
    recommendation: Recommendation
    loaders: List[str] = []
    notes: Optional[str] = None


class IndexEntry(BaseModel):
    id: Union[str, int]
    name: str
    recommendation: Recommendation


class PlatformBreakdown(BaseModel):
    modrinth_only: int
    curseforge_only: int
    both_platforms: int


class TagCoverage(BaseModel):
    client_only: int
    server_only: int
    both_sides: int


class StatsDocument(BaseModel):
    version: Optional[str] = None
    updated: Optional[str] = None
    generated: str
    total_mods: int
    by_platform: PlatformBreakdown
    by_loader: Dict[str, int]
    by_correct_tags: TagCoverage
