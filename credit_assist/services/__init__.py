"""
Service layer for the Credit Assist backend.

Contains the session-scoped workflows around the model invocation flows:
- Bill capture state machine (select -> parse -> review -> confirm/cancel)
- Registration submit (validation, optional credit scoring, redirect)
- Chat conversation with the literacy assistant
- In-memory session store and mock dashboard views

Services act as the glue between routes (HTTP layer) and the flows.
"""

from .bill_capture import (
    BillCaptureError,
    BillCaptureState,
    BillCaptureWorkflow,
    FileTooLargeError,
    InvalidTransitionError,
    MissingSelectionError,
    UnsupportedFileTypeError,
    WorkflowBusyError,
)
from .chat_service import ChatConversation, ConversationBusyError
from .dashboard_service import (
    build_dashboard,
    get_risk_analysis,
    review_beneficiary,
    summarize_spending,
)
from .registration_service import RegistrationBusyError, build_credit_score_input, submit_registration
from .session_store import RegistrationSession, SessionStore, UserSession, get_session_store

__all__ = [
    "BillCaptureWorkflow",
    "BillCaptureState",
    "BillCaptureError",
    "FileTooLargeError",
    "UnsupportedFileTypeError",
    "MissingSelectionError",
    "InvalidTransitionError",
    "WorkflowBusyError",
    "ChatConversation",
    "ConversationBusyError",
    "build_dashboard",
    "get_risk_analysis",
    "review_beneficiary",
    "summarize_spending",
    "RegistrationBusyError",
    "build_credit_score_input",
    "submit_registration",
    "SessionStore",
    "UserSession",
    "RegistrationSession",
    "get_session_store",
]
