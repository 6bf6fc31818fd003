"""
FastAPI dependency functions for mock authentication.

There is no real authentication: login hands out an opaque session token and
these dependencies resolve it back to the in-memory UserSession. Any unknown
or malformed token is a 401.
"""

import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from credit_assist.services.session_store import SessionStore, UserSession, get_session_store

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str:
    """
    Read the token from an ``Authorization: Bearer <token>`` header value.

    Raises:
        HTTPException: 401 if the header is missing or malformed
    """
    if not authorization:
        logger.warning("Missing Authorization header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "unauthorized", "details": "Missing Authorization header"}
        )

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.warning("Invalid Authorization header format")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "unauthorized", "details": "Invalid Authorization header format"}
        )

    return parts[1]


async def get_current_session(
    authorization: Annotated[str | None, Header()] = None,
    store: SessionStore = Depends(get_session_store),
) -> UserSession:
    """
    Resolve the Bearer session token to the logged-in user's session.

    Usage:
        @router.get("/chat")
        async def history(session: UserSession = Depends(get_current_session)):
            ...
    """
    token = extract_bearer_token(authorization)

    session = store.get_user_session(token)
    if session is None:
        logger.warning("Unknown or expired session token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_session", "details": "Session not found. Please log in again."}
        )

    return session
