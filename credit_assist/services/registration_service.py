"""
Registration Workflow.

Officers are registered without any model call. Beneficiaries are scored with
CreditScoreFlow (when scoring at registration is enabled) so the client can
show the score before redirecting to login.

The form has already been validated by the time it reaches this module, so
every check that can fail locally (age, pincode, required fields) happens
before any network call.
"""

import logging
from typing import Any, Dict, Optional

from credit_assist.flows.credit_scoring import CreditScoreFlow, CreditScoreResult
from credit_assist.schemas.registration import (
    BeneficiaryRegistrationForm,
    OfficerRegistrationForm,
    RegistrationOutcome,
)
from credit_assist.services.session_store import RegistrationSession
from credit_assist.utils.constants import POST_REGISTRATION_REDIRECT

logger = logging.getLogger(__name__)


class RegistrationBusyError(Exception):
    """A submission for this registration is already in progress."""


def build_credit_score_input(form: BeneficiaryRegistrationForm) -> Dict[str, Any]:
    """Map the beneficiary form onto the CreditScoreFlow input shape."""
    return {
        "personalInfo": {
            "age": form.age,
            "location": f"{form.city}, {form.state}",
            "occupation": form.occupation,
        },
        "financialInfo": {
            "income": form.monthly_income,
            "creditHistory": form.credit_history,
            "loanAmount": form.loan_amount,
        },
    }


async def submit_registration(
    session: RegistrationSession,
    form: BeneficiaryRegistrationForm | OfficerRegistrationForm,
    scoring_flow: CreditScoreFlow,
    score_at_registration: bool,
) -> RegistrationOutcome:
    """
    Submit a validated registration form.

    Args:
        session: The registration session (owns the bills confirmed so far)
        form: Validated officer or beneficiary form
        scoring_flow: Flow used to score beneficiaries
        score_at_registration: When False, beneficiaries are only validated and redirected

    Returns:
        RegistrationOutcome with the credit score (if computed) and confirmed bills

    Raises:
        RegistrationBusyError: Another submit for this session is in flight
        FlowError: Scoring failed; the session is kept so the user can resubmit
    """
    if session.is_submitting:
        raise RegistrationBusyError("Registration is already being submitted. Please wait.")

    confirmed_bills = list(session.bill_capture.confirmed_bills)

    if isinstance(form, OfficerRegistrationForm):
        logger.info("Officer registration accepted")
        return RegistrationOutcome(
            role="officer",
            name=form.name,
            email=form.email,
            credit_score=None,
            confirmed_bills=confirmed_bills,
            redirect_to=POST_REGISTRATION_REDIRECT,
        )

    credit_score: Optional[CreditScoreResult] = None
    if score_at_registration:
        session.is_submitting = True
        try:
            credit_score = await scoring_flow.invoke(build_credit_score_input(form))
        finally:
            session.is_submitting = False
        logger.info(
            f"Beneficiary scored at registration: risk_level={credit_score.risk_level}, "
            f"bills={len(confirmed_bills)}"
        )
    else:
        logger.info(f"Beneficiary registration accepted without scoring: bills={len(confirmed_bills)}")

    return RegistrationOutcome(
        role="beneficiary",
        name=form.name,
        email=form.email,
        credit_score=credit_score,
        confirmed_bills=confirmed_bills,
        redirect_to=POST_REGISTRATION_REDIRECT,
    )
