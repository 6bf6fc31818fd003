"""
In-memory session registry.

There is no persistence. A UserSession is created at login and dropped at
logout; it owns the user's chat, their dashboard bill capture workflow and
any officer review decisions. A RegistrationSession lives from the start of a
registration until it succeeds or is abandoned.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

from credit_assist.schemas.auth import User
from credit_assist.services.bill_capture import BillCaptureWorkflow
from credit_assist.services.chat_service import ChatConversation

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UserSession:
    user: User
    session_id: str = field(default_factory=_new_id)
    chat: ChatConversation = field(default_factory=ChatConversation)
    bill_capture: BillCaptureWorkflow = field(default_factory=BillCaptureWorkflow)
    # beneficiary id -> loan stage set by this officer
    loan_stages: Dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=_now)


@dataclass
class RegistrationSession:
    registration_id: str = field(default_factory=_new_id)
    bill_capture: BillCaptureWorkflow = field(
        default_factory=lambda: BillCaptureWorkflow(require_category=True)
    )
    is_submitting: bool = False
    created_at: datetime = field(default_factory=_now)


class SessionStore:
    """Registry of live user and registration sessions, keyed by id."""

    def __init__(self):
        self._user_sessions: Dict[str, UserSession] = {}
        self._registrations: Dict[str, RegistrationSession] = {}

    # --- User sessions ---

    def create_user_session(self, user: User) -> UserSession:
        session = UserSession(user=user)
        self._user_sessions[session.session_id] = session
        logger.info(f"Session opened: user_id={user.id}, role={user.role}")
        return session

    def get_user_session(self, session_id: str) -> Optional[UserSession]:
        return self._user_sessions.get(session_id)

    def end_user_session(self, session_id: str) -> bool:
        """Drop a session and everything it owns. Returns False if unknown."""
        session = self._user_sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info(f"Session closed: user_id={session.user.id}")
        return True

    # --- Registration sessions ---

    def create_registration(self) -> RegistrationSession:
        registration = RegistrationSession()
        self._registrations[registration.registration_id] = registration
        logger.info("Registration session opened")
        return registration

    def get_registration(self, registration_id: str) -> Optional[RegistrationSession]:
        return self._registrations.get(registration_id)

    def end_registration(self, registration_id: str) -> bool:
        registration = self._registrations.pop(registration_id, None)
        if registration is None:
            return False
        logger.info(
            f"Registration session closed: confirmed_bills={len(registration.bill_capture.confirmed_bills)}"
        )
        return True


_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """
    Get or create the process-wide session store.

    Used as a FastAPI dependency; tests override it with a fresh store.
    """
    global _session_store

    if _session_store is None:
        _session_store = SessionStore()

    return _session_store
