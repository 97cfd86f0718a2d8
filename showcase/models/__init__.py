"""Data models for the showcase API."""

from showcase.models.user import User
from showcase.models.project import Project

__all__ = [
    "User",
    "Project",
]
