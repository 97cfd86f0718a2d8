"""Repository for Project database operations."""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import case, desc, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from showcase.errors import StoreUnavailable
from showcase.models.project import Project
from showcase.database.models import ProjectDB, ProjectLikeDB

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so search text matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProjectRepository:
    """Repository for Project database operations."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, project: Project) -> Project:
        """Create a new project."""
        try:
            project_db = ProjectDB.from_pydantic(project)
            self.db.add(project_db)
            self.db.commit()
            self.db.refresh(project_db)
            logger.debug(f"Created project {project.id}: {project.title[:50]}")
            return project_db.to_pydantic()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create project {project.id}: {type(e).__name__}: {str(e)}")
            raise StoreUnavailable(str(e)) from e

    def get(self, project_id: str) -> Optional[Project]:
        """Get project by ID."""
        project_db = self.db.query(ProjectDB).filter(ProjectDB.id == project_id).first()
        return project_db.to_pydantic() if project_db else None

    def get_all(self, tag: Optional[str] = None, search: Optional[str] = None) -> List[Project]:
        """List projects sorted by creation date (newest first).

        Args:
            tag: keep only projects whose tags contain this exact value
            search: case-insensitive substring of title or description
        """
        query = self.db.query(ProjectDB)
        if search:
            pattern = f"%{_escape_like(search)}%"
            query = query.filter(
                or_(
                    ProjectDB.title.ilike(pattern, escape="\\"),
                    ProjectDB.description.ilike(pattern, escape="\\"),
                )
            )
        projects_db = query.order_by(desc(ProjectDB.created_at)).all()

        # JSON array membership has no portable SQL form; filter after the query.
        if tag:
            projects_db = [p for p in projects_db if tag in (p.tags or [])]
        return [project_db.to_pydantic() for project_db in projects_db]

    def update(self, project_id: str, changes: Dict[str, Any]) -> Optional[Project]:
        """Overwrite the given columns of a project.

        Returns:
            The updated project, or None if no project has this ID
        """
        project_db = self.db.query(ProjectDB).filter(ProjectDB.id == project_id).first()
        if not project_db:
            return None

        for field, value in changes.items():
            setattr(project_db, field, value)

        try:
            self.db.commit()
            self.db.refresh(project_db)
            logger.debug(f"Updated project {project_id}: {sorted(changes)}")
            return project_db.to_pydantic()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update project {project_id}: {type(e).__name__}: {str(e)}")
            raise StoreUnavailable(str(e)) from e

    def delete(self, project_id: str) -> bool:
        """Permanently delete a project and its likes."""
        project_db = self.db.query(ProjectDB).filter(ProjectDB.id == project_id).first()
        if not project_db:
            return False

        try:
            self.db.delete(project_db)
            self.db.commit()
            logger.debug(f"Deleted project {project_id}")
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete project {project_id}: {type(e).__name__}: {str(e)}")
            raise StoreUnavailable(str(e)) from e

    def toggle_like(self, project_id: str, firebase_uid: str, retry: bool = True) -> Optional[Project]:
        """Flip whether `firebase_uid` likes the project, in a single transaction.

        The like row and the `likes` counter change together, and the counter
        is adjusted in SQL rather than from a value read earlier, so concurrent
        toggles cannot drift `likes` away from the number of like rows.

        Returns:
            The updated project, or None if no project has this ID
        """
        exists = self.db.query(ProjectDB.id).filter(ProjectDB.id == project_id).first()
        if not exists:
            return None

        try:
            removed = (
                self.db.query(ProjectLikeDB)
                .filter(ProjectLikeDB.project_id == project_id, ProjectLikeDB.firebase_uid == firebase_uid)
                .delete(synchronize_session=False)
            )
            if removed:
                new_count = case((ProjectDB.likes > 0, ProjectDB.likes - 1), else_=0)
            else:
                self.db.add(ProjectLikeDB(project_id=project_id, firebase_uid=firebase_uid))
                self.db.flush()
                new_count = ProjectDB.likes + 1
            self.db.query(ProjectDB).filter(ProjectDB.id == project_id).update(
                {ProjectDB.likes: new_count}, synchronize_session=False
            )
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if not retry:
                logger.error(f"Failed to toggle like on {project_id}: {type(e).__name__}: {str(e)}")
                raise StoreUnavailable(str(e)) from e
            # A concurrent toggle inserted the same row first; apply ours on top of it.
            logger.debug(f"Like race on project {project_id}, re-applying toggle")
            return self.toggle_like(project_id, firebase_uid, retry=False)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to toggle like on {project_id}: {type(e).__name__}: {str(e)}")
            raise StoreUnavailable(str(e)) from e

        logger.debug(f"Toggled like on project {project_id} for {firebase_uid} (removed={bool(removed)})")
        return self.get(project_id)
