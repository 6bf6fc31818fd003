"""
Dashboard endpoints.

GET /dashboard returns the view for the session's role (beneficiary, officer
or admin). The beneficiary routes below it are officer-only.
"""

import logging
from typing import Union

from fastapi import APIRouter, Depends, Query

from credit_assist.auth.dependencies import get_current_session
from credit_assist.schemas.dashboard import (
    AdminDashboard,
    BeneficiaryDashboard,
    OfficerDashboard,
    ReviewRequest,
    ReviewResponse,
    RiskAnalysisResponse,
    RiskFilter,
)
from credit_assist.services.dashboard_service import (
    build_dashboard,
    get_risk_analysis,
    review_beneficiary,
)
from credit_assist.services.session_store import UserSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "",
    response_model=Union[BeneficiaryDashboard, OfficerDashboard, AdminDashboard],
    summary="Get the dashboard for the logged-in user's role",
)
async def get_dashboard(
    risk_filter: RiskFilter = Query("All", description="Officer view only: filter by risk level"),
    session: UserSession = Depends(get_current_session),
) -> Union[BeneficiaryDashboard, OfficerDashboard, AdminDashboard]:
    return build_dashboard(session, risk_filter)


@router.get(
    "/beneficiaries/{beneficiary_id}/risk",
    response_model=RiskAnalysisResponse,
    summary="Risk analysis for one beneficiary (officers only)",
)
async def risk_analysis(
    beneficiary_id: str,
    session: UserSession = Depends(get_current_session),
) -> RiskAnalysisResponse:
    return get_risk_analysis(session, beneficiary_id)


@router.post(
    "/beneficiaries/{beneficiary_id}/review",
    response_model=ReviewResponse,
    summary="Approve or flag a beneficiary's loan (officers only)",
)
async def review(
    beneficiary_id: str,
    request: ReviewRequest,
    session: UserSession = Depends(get_current_session),
) -> ReviewResponse:
    summary = review_beneficiary(session, beneficiary_id, request.decision)
    return ReviewResponse(beneficiary=summary)
