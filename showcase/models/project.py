"""Project data model."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class Project(BaseModel):
    """A showcased project.

    `likes` always equals `len(liked_by)`; both are maintained together by
    the like toggle and are never patched directly.
    """

    id: str = Field(..., description="Store-assigned identifier")
    title: str
    description: str
    tags: List[str] = Field(default_factory=list)
    github_repo: str = Field(..., alias="githubRepo")
    live_demo: Optional[str] = Field(None, alias="liveDemo")
    author_uid: str = Field(..., alias="authorUID", description="External identity of the creator")
    likes: int = Field(0, ge=0)
    liked_by: List[str] = Field(default_factory=list, alias="likedBy")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


# Fields a project owner may overwrite on update.
PATCHABLE_FIELDS = ("title", "description", "tags", "github_repo", "live_demo")

# Patchable fields backed by NOT NULL columns.
REQUIRED_FIELDS = ("title", "description", "tags", "github_repo")
