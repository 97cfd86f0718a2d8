"""FastAPI dependencies for authentication."""

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from showcase.auth.verifier import IdentityVerifier
from showcase.errors import Unauthenticated

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def get_identity_verifier(request: Request) -> IdentityVerifier:
    return request.app.state.identity_verifier


def require_bearer_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> str:
    """Reject the request unless it carries `Authorization: Bearer <token>`.

    Returns:
        The raw token

    Raises:
        Unauthenticated: If no bearer token is present or the verifier rejects it
    """
    if not credentials or not credentials.credentials:
        raise Unauthenticated("No token provided")

    token = credentials.credentials
    verifier.verify(token)
    return token
