"""
Registration endpoints.

Flow:
1. POST /register - Open a registration session (bills can now be attached
   under /register/{registration_id}/bills)
2. POST /register/{registration_id}/submit - Validate the form, score
   beneficiaries, return the outcome and close the session
3. DELETE /register/{registration_id} - Abandon the registration

The form is validated before any model call. A failed scoring call keeps the
session so the same form can be resubmitted.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import TypeAdapter, ValidationError

from credit_assist.config import settings
from credit_assist.flows.credit_scoring import CreditScoreFlow
from credit_assist.flows.dependencies import get_credit_score_flow
from credit_assist.flows.errors import InputValidationError, collect_violations
from credit_assist.schemas.registration import (
    RegistrationForm,
    RegistrationOutcome,
    RegistrationStartResponse,
)
from credit_assist.services.registration_service import submit_registration
from credit_assist.services.session_store import RegistrationSession, SessionStore, get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/register", tags=["registration"])

_registration_form = TypeAdapter(RegistrationForm)


def _get_registration_or_404(store: SessionStore, registration_id: str) -> RegistrationSession:
    registration = store.get_registration(registration_id)
    if registration is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": "Registration not found or already completed"},
        )
    return registration


def validate_registration_form(payload: Any):
    """Validate a raw registration form, reporting violations like the flows do."""
    try:
        return _registration_form.validate_python(payload)
    except ValidationError as e:
        violations = collect_violations(e)
        logger.info(f"Registration form rejected: {', '.join(v.field for v in violations)}")
        raise InputValidationError(violations, flow_name="Registration") from e


@router.post(
    "",
    response_model=RegistrationStartResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start a registration",
)
async def start_registration(
    store: SessionStore = Depends(get_session_store),
) -> RegistrationStartResponse:
    registration = store.create_registration()
    return RegistrationStartResponse(registration_id=registration.registration_id)


@router.post(
    "/{registration_id}/submit",
    response_model=RegistrationOutcome,
    status_code=status.HTTP_200_OK,
    summary="Submit the registration form",
    description="""
    Body: an officer form ({"role": "officer", name, email, password}) or a
    beneficiary form (adds age, occupation, monthly_income, credit_history,
    loan_amount, address, city, state, pincode).

    Beneficiaries receive an AI credit score (when enabled). The response
    always carries redirect_to; the client navigates there after showing
    the score.
    """,
)
async def submit(
    registration_id: str,
    payload: Annotated[Any, Body()],
    store: SessionStore = Depends(get_session_store),
    scoring_flow: CreditScoreFlow = Depends(get_credit_score_flow),
) -> RegistrationOutcome:
    registration = _get_registration_or_404(store, registration_id)
    form = validate_registration_form(payload)

    outcome = await submit_registration(
        registration,
        form,
        scoring_flow,
        score_at_registration=settings.SCORE_AT_REGISTRATION,
    )

    store.end_registration(registration_id)
    return outcome


@router.delete(
    "/{registration_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Abandon a registration",
)
async def abandon_registration(
    registration_id: str,
    store: SessionStore = Depends(get_session_store),
) -> None:
    if not store.end_registration(registration_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": "Registration not found or already completed"},
        )
