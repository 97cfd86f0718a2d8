"""Request/response models for the HTTP API.

Request bodies are parsed into these before any handler logic runs. Fields
not declared here are ignored, which is what keeps ownership and like
counters out of reach of an update patch.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from showcase.models.project import Project
from showcase.models.user import User


class RegisterRequest(BaseModel):
    """Request model for user registration/sync."""
    firebase_uid: Optional[str] = Field(None, alias="firebaseUID")
    name: Optional[str] = None
    email: Optional[str] = None

    class Config:
        populate_by_name = True


class ProjectCreateRequest(BaseModel):
    """Request model for project creation."""
    title: str
    description: str
    tags: Optional[List[str]] = None
    github_repo: str = Field(..., alias="githubRepo")
    live_demo: Optional[str] = Field(None, alias="liveDemo")
    firebase_uid: Optional[str] = Field(None, alias="firebaseUID")

    class Config:
        populate_by_name = True


class ProjectUpdateRequest(BaseModel):
    """Request model for project update. Only explicitly sent fields are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    github_repo: Optional[str] = Field(None, alias="githubRepo")
    live_demo: Optional[str] = Field(None, alias="liveDemo")
    firebase_uid: Optional[str] = Field(None, alias="firebaseUID")

    class Config:
        populate_by_name = True


class OwnerRequest(BaseModel):
    """Body carrying only the caller's identity (delete, like)."""
    firebase_uid: Optional[str] = Field(None, alias="firebaseUID")

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    message: str
    timestamp: datetime


class MessageResponse(BaseModel):
    message: str


class UserResponse(BaseModel):
    message: str
    user: User


class ProjectResponse(BaseModel):
    message: str
    project: Project
