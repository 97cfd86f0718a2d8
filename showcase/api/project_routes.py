"""Project endpoints."""

from typing import List, Optional
from fastapi import APIRouter, Body, Depends, status

from showcase.api.dependencies import get_project_service
from showcase.api.schemas import (
    MessageResponse,
    OwnerRequest,
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)
from showcase.auth.dependencies import require_bearer_token
from showcase.models.project import Project
from showcase.services.project_service import ProjectService

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=List[Project])
def list_projects(
    tag: Optional[str] = None,
    search: Optional[str] = None,
    service: ProjectService = Depends(get_project_service),
):
    """List projects, newest first, optionally filtered by tag and/or search text."""
    return service.list_projects(tag=tag, search=search)


@router.get("/{project_id}", response_model=Project)
def get_project(project_id: str, service: ProjectService = Depends(get_project_service)):
    return service.get_project(project_id)


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer_token)],
)
def create_project(payload: ProjectCreateRequest, service: ProjectService = Depends(get_project_service)):
    project = service.create_project(
        firebase_uid=payload.firebase_uid,
        title=payload.title,
        description=payload.description,
        github_repo=payload.github_repo,
        tags=payload.tags,
        live_demo=payload.live_demo,
    )
    return ProjectResponse(message="Project created", project=project)


@router.put("/{project_id}", response_model=ProjectResponse, dependencies=[Depends(require_bearer_token)])
def update_project(
    project_id: str,
    payload: Optional[ProjectUpdateRequest] = Body(None),
    service: ProjectService = Depends(get_project_service),
):
    """Update a project. Only its author may do this."""
    payload = payload or ProjectUpdateRequest()
    changes = payload.model_dump(exclude_unset=True, exclude={"firebase_uid"})
    project = service.update_project(project_id, payload.firebase_uid, changes)
    return ProjectResponse(message="Project updated", project=project)


@router.delete("/{project_id}", response_model=MessageResponse, dependencies=[Depends(require_bearer_token)])
def delete_project(
    project_id: str,
    payload: Optional[OwnerRequest] = Body(None),
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project. Only its author may do this."""
    firebase_uid = payload.firebase_uid if payload else None
    service.delete_project(project_id, firebase_uid)
    return MessageResponse(message="Project deleted")


@router.post("/{project_id}/like", response_model=ProjectResponse)
def toggle_like(
    project_id: str,
    payload: Optional[OwnerRequest] = Body(None),
    service: ProjectService = Depends(get_project_service),
):
    """Like the project, or unlike it if this firebaseUID already liked it."""
    firebase_uid = payload.firebase_uid if payload else None
    project = service.toggle_like(project_id, firebase_uid)
    return ProjectResponse(message="Like updated", project=project)
