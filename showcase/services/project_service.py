"""Project operations: listing, creation, owner-only edits and like toggling."""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from showcase.database.project_repository import ProjectRepository
from showcase.errors import Forbidden, InvalidInput, NotFound
from showcase.models.project import Project, PATCHABLE_FIELDS, REQUIRED_FIELDS

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Project not found"


class ProjectService:
    def __init__(self, projects: ProjectRepository):
        self.projects = projects

    def list_projects(self, tag: Optional[str] = None, search: Optional[str] = None) -> List[Project]:
        return self.projects.get_all(tag=tag, search=search)

    def get_project(self, project_id: str) -> Project:
        project = self.projects.get(project_id)
        if not project:
            raise NotFound(PROJECT_NOT_FOUND)
        return project

    def create_project(
        self,
        firebase_uid: Optional[str],
        title: str,
        description: str,
        github_repo: str,
        tags: Optional[List[str]] = None,
        live_demo: Optional[str] = None,
    ) -> Project:
        if not firebase_uid:
            raise InvalidInput("firebaseUID required")

        now = datetime.utcnow()
        project = Project(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            tags=tags or [],
            github_repo=github_repo,
            live_demo=live_demo,
            author_uid=firebase_uid,
            likes=0,
            liked_by=[],
            created_at=now,
            updated_at=now,
        )
        created = self.projects.create(project)
        logger.info(f"Project {created.id} created by {firebase_uid}")
        return created

    def _get_owned(self, project_id: str, firebase_uid: Optional[str], action: str) -> Project:
        project = self.get_project(project_id)
        if project.author_uid != firebase_uid:
            logger.warning(f"Refused {action} of project {project_id} by {firebase_uid}")
            raise Forbidden(f"Not authorized to {action} this project")
        return project

    def update_project(self, project_id: str, firebase_uid: Optional[str], changes: Dict[str, Any]) -> Project:
        """Apply an owner's patch.

        Only PATCHABLE_FIELDS are written; anything else in `changes` is dropped.
        """
        self._get_owned(project_id, firebase_uid, "update")

        patch = {field: value for field, value in changes.items() if field in PATCHABLE_FIELDS}
        for field in REQUIRED_FIELDS:
            if field in patch and patch[field] is None:
                raise InvalidInput(f"{Project.model_fields[field].alias or field} cannot be null")
        patch["updated_at"] = datetime.utcnow()

        updated = self.projects.update(project_id, patch)
        if not updated:
            # Deleted between the ownership check and the write.
            raise NotFound(PROJECT_NOT_FOUND)
        logger.info(f"Project {project_id} updated: {sorted(k for k in patch if k != 'updated_at')}")
        return updated

    def delete_project(self, project_id: str, firebase_uid: Optional[str]) -> None:
        self._get_owned(project_id, firebase_uid, "delete")
        if not self.projects.delete(project_id):
            raise NotFound(PROJECT_NOT_FOUND)
        logger.info(f"Project {project_id} deleted by {firebase_uid}")

    def toggle_like(self, project_id: str, firebase_uid: Optional[str]) -> Project:
        """Like the project for `firebase_uid`, or unlike it if already liked."""
        self.get_project(project_id)
        if not firebase_uid:
            raise InvalidInput("firebaseUID required")
        project = self.projects.toggle_like(project_id, firebase_uid)
        if not project:
            raise NotFound(PROJECT_NOT_FOUND)
        logger.info(f"Like toggled on project {project_id} by {firebase_uid}: likes={project.likes}")
        return project
