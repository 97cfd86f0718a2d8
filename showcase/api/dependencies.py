"""FastAPI dependencies wiring sessions into repositories and services."""

from fastapi import Depends
from sqlalchemy.orm import Session

from showcase.database.database import get_db
from showcase.database.project_repository import ProjectRepository
from showcase.database.user_repository import UserRepository
from showcase.services.project_service import ProjectService
from showcase.services.user_service import UserService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    return ProjectService(ProjectRepository(db))
