"""SQLAlchemy database models for the showcase API."""

from datetime import datetime
import uuid
from sqlalchemy import Column, String, Integer, DateTime, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from showcase.database.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


class UserDB(Base):
    """Database model for User."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=new_id)

    # Identity provider subject id
    firebase_uid = Column(String, nullable=False, unique=True, index=True)

    # User profile
    name = Column(String, nullable=True)
    email = Column(String, nullable=False, unique=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from showcase.models.user import User
        return User(
            id=self.id,
            firebase_uid=self.firebase_uid,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
        )

    @classmethod
    def from_pydantic(cls, user):
        """Create database model from Pydantic model."""
        return cls(
            id=user.id,
            firebase_uid=user.firebase_uid,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )


class ProjectLikeDB(Base):
    """One (project, external identity) like. Rows form the project's likedBy set."""

    __tablename__ = "project_likes"
    __table_args__ = (
        UniqueConstraint("project_id", "firebase_uid", name="uq_project_like"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    firebase_uid = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class ProjectDB(Base):
    """Database model for Project."""

    __tablename__ = "projects"

    id = Column(String, primary_key=True, default=new_id)

    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    github_repo = Column(String, nullable=False)
    live_demo = Column(String, nullable=True)

    # Owner (identity provider subject id, not a users.id)
    author_uid = Column(String, nullable=False, index=True)

    # Kept equal to the number of like rows
    likes = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    like_rows = relationship(
        ProjectLikeDB,
        order_by=ProjectLikeDB.id,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from showcase.models.project import Project
        return Project(
            id=self.id,
            title=self.title,
            description=self.description,
            tags=list(self.tags or []),
            github_repo=self.github_repo,
            live_demo=self.live_demo,
            author_uid=self.author_uid,
            likes=self.likes,
            liked_by=[row.firebase_uid for row in self.like_rows],
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_pydantic(cls, project):
        """Create database model from Pydantic model.

        Like rows are not copied; a new project always starts with none.
        """
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            tags=list(project.tags),
            github_repo=project.github_repo,
            live_demo=project.live_demo,
            author_uid=project.author_uid,
            likes=0,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
