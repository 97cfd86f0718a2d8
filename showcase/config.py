"""Runtime configuration for the showcase API.

Values come from the environment, optionally seeded from a ``.env`` file.
"""

import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./showcase.db"


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() == "true"


def parse_origins(raw: str) -> List[str]:
    """Split a comma-separated origin list; empty or ``*`` means any origin."""
    raw = (raw or "").strip()
    if not raw or raw == "*":
        return ["*"]
    return [part.strip() for part in raw.split(",") if part.strip()]


class Settings(BaseModel):
    """Application settings."""

    database_url: str = Field(DEFAULT_DATABASE_URL, description="SQLAlchemy database URL")
    debug: bool = Field(False, description="Echo SQL statements")
    client_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    identity_verifier: str = Field("passthrough", description="Bearer token verifier: passthrough or jwt")
    jwt_secret_key: str = Field("change-me-in-production")
    jwt_algorithm: str = Field("HS256")
    host: str = Field("0.0.0.0")
    port: int = Field(5000)
    log_level: str = Field("INFO")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            debug=_env_bool("DEBUG"),
            client_origins=parse_origins(os.getenv("CLIENT_URL", "")),
            identity_verifier=os.getenv("IDENTITY_VERIFIER", "passthrough").lower(),
            jwt_secret_key=os.getenv("JWT_SECRET_KEY", "change-me-in-production"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
