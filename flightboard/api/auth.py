"""Firebase Auth JWT verification."""

from __future__ import annotations

import os
from dataclasses import dataclass

from fastapi import Header, HTTPException


@dataclass
class UserClaims:
    uid: str
    email: str | None = None
    name: str | None = None


def _auth_disabled() -> bool:
    return os.environ.get("FLIGHTBOARD_AUTH_DISABLED") == "1"


def _decode(token: str) -> UserClaims:
    try:
        from firebase_admin import auth as firebase_auth

        decoded = firebase_auth.verify_id_token(token)
    except Exception as exc:
        raise HTTPException(status_code=401, detail=f"Invalid token: {exc}") from exc

    return UserClaims(
        uid=decoded["uid"],
        email=decoded.get("email"),
        name=decoded.get("name"),
    )


async def verify_firebase_token(
    authorization: str | None = Header(None, description="Bearer <Firebase ID token>"),
) -> UserClaims:
    """Extract and verify a Firebase Auth ID token from the Authorization header.

    In development, set ``FLIGHTBOARD_AUTH_DISABLED=1`` to bypass verification
    and use a fixed test user.
    """
    if _auth_disabled():
        return UserClaims(uid="dev-user", email="dev@localhost", name="Dev User")

    if not authorization:
        raise HTTPException(status_code=401, detail="Missing authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Invalid authorization header")

    return _decode(token)


async def optional_firebase_token(
    authorization: str | None = Header(None, description="Bearer <Firebase ID token>"),
) -> UserClaims | None:
    """Like verify_firebase_token, but an absent header means anonymous.

    Used where the controllers themselves report "must be logged in".
    A present but invalid token is still rejected.
    """
    if _auth_disabled():
        return UserClaims(uid="dev-user", email="dev@localhost", name="Dev User")
    if not authorization:
        return None
    return await verify_firebase_token(authorization)
