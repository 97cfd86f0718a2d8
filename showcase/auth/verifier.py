"""Bearer credential verification.

The auth gate only checks that a bearer token is present, then hands the
token to an `IdentityVerifier`. The default verifier accepts any token; the
caller's identity for ownership checks still comes from the request body's
`firebaseUID`. Swap in another verifier to actually validate tokens.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

import jwt

from showcase.config import Settings
from showcase.errors import Unauthenticated

logger = logging.getLogger(__name__)


class IdentityVerifier(ABC):
    """Capability that accepts or rejects a bearer token."""

    @abstractmethod
    def verify(self, token: str) -> None:
        """Raise Unauthenticated if the token is not acceptable."""


class PassThroughVerifier(IdentityVerifier):
    """Accepts every token without inspecting it."""

    def verify(self, token: str) -> None:
        return None


class JwtIdentityVerifier(IdentityVerifier):
    """Accepts tokens that decode as valid, unexpired JWTs for the configured key."""

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def decode(self, token: str) -> Optional[Dict]:
        """Decode and validate a JWT.

        Returns:
            Decoded token payload, or None if invalid or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            return None
        except jwt.InvalidTokenError:
            return None

    def verify(self, token: str) -> None:
        if self.decode(token) is None:
            logger.warning("Rejected bearer token: invalid or expired")
            raise Unauthenticated("Invalid or expired token")


def build_identity_verifier(settings: Settings) -> IdentityVerifier:
    """Pick the verifier named by `settings.identity_verifier`."""
    if settings.identity_verifier == "jwt":
        return JwtIdentityVerifier(settings.jwt_secret_key, settings.jwt_algorithm)
    if settings.identity_verifier != "passthrough":
        raise ValueError(f"Unknown identity verifier: {settings.identity_verifier!r}")
    return PassThroughVerifier()
