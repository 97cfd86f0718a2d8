"""Registration and profile endpoints."""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from showcase.api.dependencies import get_user_service
from showcase.api.schemas import RegisterRequest, UserResponse
from showcase.models.user import User
from showcase.services.user_service import UserService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """Register a user, or return the existing one for this firebaseUID."""
    user, created = service.register(payload.firebase_uid, payload.name, payload.email)
    if not created:
        response.status_code = status.HTTP_200_OK
        return UserResponse(message="User already exists", user=user)
    return UserResponse(message="User created", user=user)


@router.get("/profile", response_model=User)
def get_profile(
    uid: Optional[str] = Query(None),
    service: UserService = Depends(get_user_service),
):
    """Get a user profile by firebaseUID."""
    return service.get_profile(uid)
