"""
Mock authentication endpoints.

Users come from the fixed demo directory; there are no passwords. Each login
opens a fresh UserSession (new chat, empty bill list) and returns its token.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status

from credit_assist.auth.dependencies import extract_bearer_token, get_current_session
from credit_assist.db import MOCK_USERS
from credit_assist.schemas.auth import (
    LoginRequest,
    LogoutResponse,
    SessionResponse,
    SwitchUserRequest,
    User,
)
from credit_assist.services.session_store import SessionStore, UserSession, get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def find_user(*, email: Optional[str] = None, user_id: Optional[str] = None) -> Optional[User]:
    for row in MOCK_USERS:
        if email is not None and row["email"].lower() == email.strip().lower():
            return User(**row)
        if user_id is not None and row["id"] == user_id:
            return User(**row)
    return None


@router.post(
    "/login",
    response_model=SessionResponse,
    status_code=status.HTTP_200_OK,
    summary="Log in as a demo user",
)
async def login(
    request: LoginRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    user = find_user(email=request.email)
    if user is None:
        logger.warning("Login attempt for unknown user")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_credentials", "details": "No demo user with that email"},
        )

    session = store.create_user_session(user)
    return SessionResponse(session_token=session.session_id, user=user)


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Log out and discard the session",
)
async def logout(
    authorization: Annotated[str | None, Header()] = None,
    store: SessionStore = Depends(get_session_store),
) -> LogoutResponse:
    token = extract_bearer_token(authorization)
    # Logging out twice is harmless
    store.end_user_session(token)
    return LogoutResponse()


@router.post(
    "/switch",
    response_model=SessionResponse,
    summary="Switch to another demo user",
    description="Ends the current session and opens one for the selected user.",
)
async def switch_user(
    request: SwitchUserRequest,
    session: UserSession = Depends(get_current_session),
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    user = find_user(user_id=request.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": f"User {request.user_id} not found"},
        )

    store.end_user_session(session.session_id)
    new_session = store.create_user_session(user)
    return SessionResponse(session_token=new_session.session_id, user=user)


@router.get(
    "/me",
    response_model=SessionResponse,
    summary="Get the logged-in user",
)
async def me(session: UserSession = Depends(get_current_session)) -> SessionResponse:
    return SessionResponse(session_token=session.session_id, user=session.user)
