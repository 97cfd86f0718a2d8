"""User data model."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """A registered user, keyed by the identity provider's subject id."""

    id: str = Field(..., description="Store-assigned identifier")
    firebase_uid: str = Field(..., alias="firebaseUID", description="Identity provider subject id")
    name: Optional[str] = Field(None, description="User display name")
    email: str = Field(..., description="User email address")
    created_at: datetime = Field(..., alias="createdAt", description="User creation timestamp")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
