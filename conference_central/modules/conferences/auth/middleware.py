"""
Authentication Middleware

FastAPI dependencies exposing the caller identity. The identity provider in
front of the service authenticates the user and forwards the account id and
email as request headers.
"""
from dataclasses import dataclass
from typing import Optional
from fastapi import Header


@dataclass(frozen=True)
class Caller:
    """Authenticated caller as forwarded by the identity provider."""
    user_id: str
    email: Optional[str] = None


async def get_caller(
    x_user_id: Optional[str] = Header(None, alias="X-User-ID"),
    x_user_email: Optional[str] = Header(None, alias="X-User-Email")
) -> Optional[Caller]:
    """
    FastAPI dependency returning the caller, or None when not signed in.

    Operations that need a caller reject None themselves.
    """
    if not x_user_id:
        return None
    return Caller(user_id=x_user_id, email=x_user_email or None)
