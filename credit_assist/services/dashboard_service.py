"""
Dashboard views built from the mock data.

The role decides which view is built (exhaustive dispatch in
``build_dashboard``). Officer review decisions are kept on the officer's
session and layered over the mock list; the mock data itself never changes.
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from fastapi import HTTPException, status

from credit_assist.db import (
    MOCK_ADMIN_FORECAST,
    MOCK_BENEFICIARIES_LIST,
    MOCK_BENEFICIARY_DATA,
)
from credit_assist.schemas.dashboard import (
    AdminDashboard,
    BeneficiaryDashboard,
    BeneficiarySummary,
    CategorySpend,
    FinancialAdvice,
    OfficerDashboard,
    RepaymentInstallment,
    RiskAnalysisResponse,
    ScoreForecastPoint,
)
from credit_assist.services.session_store import UserSession

logger = logging.getLogger(__name__)

REVIEW_DECISIONS: Dict[str, str] = {
    "approve": "Approved",
    "flag": "Flagged",
}


def _summaries(loan_stages: Dict[str, str]) -> List[BeneficiarySummary]:
    return [
        BeneficiarySummary(
            id=row["id"],
            name=row["name"],
            region=row["region"],
            score=row["score"],
            risk=row["risk"],
            loan_stage=loan_stages.get(row["id"], row["loan_stage"]),
        )
        for row in MOCK_BENEFICIARIES_LIST
    ]


def _find_beneficiary(beneficiary_id: str) -> Optional[dict]:
    return next((row for row in MOCK_BENEFICIARIES_LIST if row["id"] == beneficiary_id), None)


def _require_officer(session: UserSession) -> None:
    if session.user.role != "officer":
        logger.warning(f"Officer action refused for role={session.user.role}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "forbidden", "details": "Only loan officers can review beneficiaries"},
        )


def _not_found(beneficiary_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error": "not_found", "details": f"Beneficiary {beneficiary_id} not found"},
    )


def summarize_spending(session: UserSession) -> List[CategorySpend]:
    """Total the session's confirmed bills per category, in first-seen order."""
    totals: "OrderedDict[str, List[float]]" = OrderedDict()
    for bill in session.bill_capture.confirmed_bills:
        totals.setdefault(bill.category, []).append(bill.total_amount)

    return [
        CategorySpend(category=category, total_amount=round(sum(amounts), 2), bill_count=len(amounts))
        for category, amounts in totals.items()
    ]


def build_beneficiary_dashboard(session: UserSession) -> BeneficiaryDashboard:
    data = MOCK_BENEFICIARY_DATA
    return BeneficiaryDashboard(
        user=session.user,
        credit_score=data["credit_score"],
        risk_level=data["risk_level"],
        insights=list(data["insights"]),
        repayment_schedule=[RepaymentInstallment(**item) for item in data["repayment_schedule"]],
        financial_advice=[FinancialAdvice(**item) for item in data["financial_advice"]],
        spend_by_category=summarize_spending(session),
    )


def build_officer_dashboard(session: UserSession, risk_filter: str = "All") -> OfficerDashboard:
    summaries = _summaries(session.loan_stages)
    high_risk_count = sum(1 for row in summaries if row.risk == "High")

    if risk_filter != "All":
        summaries = [row for row in summaries if row.risk == risk_filter]

    return OfficerDashboard(
        user=session.user,
        risk_filter=risk_filter,
        beneficiaries=summaries,
        high_risk_count=high_risk_count,
    )


def build_admin_dashboard(session: UserSession) -> AdminDashboard:
    rows = MOCK_BENEFICIARIES_LIST
    total = len(rows)

    average_score = round(sum(row["score"] for row in rows) / total, 1) if total else 0.0
    defaulted = sum(1 for row in rows if row["loan_stage"] == "Defaulted")
    default_rate = round(defaulted * 100 / total, 1) if total else 0.0

    risk_distribution = {
        level: (round(sum(1 for row in rows if row["risk"] == level) * 100 / total, 1) if total else 0.0)
        for level in ("Low", "Medium", "High")
    }

    return AdminDashboard(
        user=session.user,
        total_beneficiaries=total,
        average_score=average_score,
        default_rate=default_rate,
        risk_distribution=risk_distribution,
        score_forecast=[ScoreForecastPoint(**point) for point in MOCK_ADMIN_FORECAST],
    )


def build_dashboard(
    session: UserSession,
    risk_filter: str = "All",
) -> BeneficiaryDashboard | OfficerDashboard | AdminDashboard:
    """
    Build the dashboard for the session's role.

    ``risk_filter`` only applies to the officer view.
    """
    role = session.user.role
    if role == "beneficiary":
        return build_beneficiary_dashboard(session)
    if role == "officer":
        return build_officer_dashboard(session, risk_filter)
    if role == "admin":
        return build_admin_dashboard(session)
    raise ValueError(f"Unknown role: {role}")


def get_risk_analysis(session: UserSession, beneficiary_id: str) -> RiskAnalysisResponse:
    """Risk factors for one beneficiary (officers only)."""
    _require_officer(session)
    row = _find_beneficiary(beneficiary_id)
    if row is None:
        raise _not_found(beneficiary_id)

    summary = next(item for item in _summaries(session.loan_stages) if item.id == beneficiary_id)
    return RiskAnalysisResponse(beneficiary=summary, risk_factors=list(row["risk_factors"]))


def review_beneficiary(session: UserSession, beneficiary_id: str, decision: str) -> BeneficiarySummary:
    """
    Approve or flag a beneficiary's loan (officers only).

    The new stage is stored on the officer's session.
    """
    _require_officer(session)
    if _find_beneficiary(beneficiary_id) is None:
        raise _not_found(beneficiary_id)

    session.loan_stages[beneficiary_id] = REVIEW_DECISIONS[decision]
    logger.info(f"Beneficiary reviewed: id={beneficiary_id}, stage={session.loan_stages[beneficiary_id]}")

    return next(item for item in _summaries(session.loan_stages) if item.id == beneficiary_id)
