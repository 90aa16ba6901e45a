"""Auth dependencies for FastAPI route injection."""

from dataclasses import dataclass

import jwt
from fastapi import Depends, Request

from codetutor.auth.jwt import verify_token
from codetutor.config.settings import Settings
from codetutor.context import get_settings
from codetutor.errors import Unauthenticated


@dataclass
class CurrentUser:
    id: int


def _extract_bearer_token(request: Request) -> str | None:
    auth = request.headers.get("Authorization")
    if auth and auth.startswith("Bearer "):
        return auth[7:].strip() or None
    return None


def authorize(token: str | None, settings: Settings) -> int:
    """Resolve a bearer token to a user id or raise ``Unauthenticated``."""
    if not token:
        raise Unauthenticated("Missing authentication credentials")
    try:
        payload = verify_token(token, settings)
        return int(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
        raise Unauthenticated("Invalid or expired token")


async def get_current_user(request: Request, settings: Settings = Depends(get_settings)) -> CurrentUser:
    """FastAPI dependency: authenticate via Bearer JWT."""
    user_id = authorize(_extract_bearer_token(request), settings)
    request.state.user_id = user_id
    return CurrentUser(id=user_id)
