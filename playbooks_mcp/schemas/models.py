"""Document and analysis schemas

Documents are fetched from ClickUp and never modified; analyses are derived
from a document on every call and never stored.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Complexity = Literal["low", "medium", "high", "unknown"]

def _as_optional_str(value):
    """ClickUp returns ids and timestamps as either numbers or strings"""
    if value is None or value == "":
        return None
    return str(value)

class Creator(BaseModel):
    """ClickUp user who created a doc"""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(None, description="ClickUp user ID")
    username: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        return _as_optional_str(v)

class FolderRef(BaseModel):
    """Folder a doc was fetched from"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="ClickUp folder ID")
    name: str = Field("Unknown", description="Folder name")

class Document(BaseModel):
    """A playbook document as fetched from ClickUp"""
    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "2ky4v6a-1234",
            "name": "HubSpot Audit Playbook",
            "content": "Requirements:\n- access to HubSpot\nEstimate: 3 days",
            "date_created": "1700000000000",
            "date_updated": "1700000500000",
            "creator": {"id": "42", "username": "ops", "email": "ops@example.com"},
            "folder": {"id": "98107928", "name": "Playbooks"}
        }
    })

    id: str = Field(..., description="ClickUp doc ID")
    name: str = Field("", description="Doc title")
    content: str = Field("", description="Markdown content of all pages, empty if unavailable")
    date_created: Optional[str] = Field(None, description="Creation time, ms since epoch")
    date_updated: Optional[str] = Field(None, description="Last update time, ms since epoch")
    creator: Optional[Creator] = Field(None, description="Doc creator")
    folder: Optional[FolderRef] = Field(None, description="Owning folder")

    @field_validator('id', mode='before')
    @classmethod
    def coerce_doc_id(cls, v):
        return str(v)

    @field_validator('name', 'content', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v if v is not None else ""

    @field_validator('date_created', 'date_updated', mode='before')
    @classmethod
    def coerce_timestamp(cls, v):
        return _as_optional_str(v)

    @field_validator('creator', mode='before')
    @classmethod
    def coerce_creator(cls, v):
        # Some endpoints return the bare user id instead of an object
        if v is None or isinstance(v, (dict, Creator)):
            return v
        return {"id": v}

class PlaybookAnalysis(BaseModel):
    """Fields extracted from a playbook's free text"""
    model_config = ConfigDict(frozen=True)

    estimation: Optional[str] = Field(None, description="Effort estimate as written, sprint points converted to hours")
    description: Optional[str] = Field(None, description="Labeled description, first paragraph or title")
    requirements: List[str] = Field(default_factory=list, description="Requirement items in discovery order")
    tags: List[str] = Field(default_factory=list, description="Explicit and inferred tags")
    complexity: Complexity = Field("unknown", description="Keyword-scored complexity bucket")
    hours: Optional[str] = Field(None, description="Effort in hours")
    prerequisites: List[str] = Field(default_factory=list, description="Prerequisite items in discovery order")
    timing: Optional[str] = Field(None, description="Free-text timeline")
