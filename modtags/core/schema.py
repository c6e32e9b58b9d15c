"""
Record models for the mod compatibility database.
The JSON Schema in data/schema.json describes the same shapes for whole-store validation.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .config import LOADERS

Tag = Literal["required", "optional", "unsupported"]


class CorrectTags(BaseModel):
    client: Tag
    server: Tag


class Recommendation(BaseModel):
    """Whether a mod belongs on each side. Derived from tags, never stored."""
    client: bool
    server: bool


def get_recommendation(mod: Dict[str, Any]) -> Recommendation:
    """Compute the recommendation for a stored record from its correct tags."""
    tags = mod["correct_tags"]
    return Recommendation(
        client=tags["client"] != "unsupported",
        server=tags["server"] != "unsupported"
    )


class Record(BaseModel):
    """A new database entry as created by a submission.

    Optional fields left as None are omitted from the stored document, so the
    store never carries null placeholders.
    """
    model_config = ConfigDict(extra="forbid")

    name: str
    modrinth_id: Optional[str] = None
    curseforge_id: Optional[int] = None
    correct_tags: CorrectTags
    loaders: Optional[List[str]] = None
    notes: Optional[str] = None
    reported_by: str
    reported_date: str

    @field_validator('name')
    @classmethod
    def name_must_not_be_empty(cls, v):
        if not v.strip():
            raise ValueError('name cannot be empty')
        return v

    @field_validator('curseforge_id')
    @classmethod
    def curseforge_id_must_be_positive(cls, v):
        if v is not None and v < 1:
            raise ValueError('curseforge_id must be a positive integer')
        return v

    @field_validator('loaders')
    @classmethod
    def loaders_must_be_known(cls, v):
        if v is not None:
            unknown = [loader for loader in v if loader not in LOADERS]
            if unknown:
                raise ValueError(f'loaders must be one of: {list(LOADERS)}')
        return v

    @property
    def recommendation(self) -> Recommendation:
        return get_recommendation(self.to_document())

    def to_document(self) -> Dict[str, Any]:
        """Convert to the stored JSON form."""
        return self.model_dump(exclude_none=True)
