"""
Pydantic schemas for the role-based dashboards.

``DashboardResponse`` is a tagged union over ``role``; each variant carries
only what that role's dashboard shows.
"""

from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, Field

from credit_assist.flows.credit_scoring import RiskLevel
from credit_assist.schemas.auth import User

LoanStage = Literal["Verification", "Approved", "Active", "Defaulted", "Flagged"]
RiskFilter = Literal["All", "Low", "Medium", "High"]


class RepaymentInstallment(BaseModel):
    id: str
    due_date: str = Field(..., description="Due date (YYYY-MM-DD)")
    amount: float = Field(..., ge=0, description="Installment amount in INR")
    status: Literal["Paid", "Upcoming", "Overdue"]


class FinancialAdvice(BaseModel):
    id: str
    title: str
    advice: str


class CategorySpend(BaseModel):
    category: str = Field(..., description="Bill category")
    total_amount: float = Field(..., ge=0, description="Sum of confirmed bill totals in INR")
    bill_count: int = Field(..., ge=1)


class BeneficiaryDashboard(BaseModel):
    role: Literal["beneficiary"] = "beneficiary"
    user: User
    credit_score: float
    risk_level: RiskLevel
    insights: List[str]
    repayment_schedule: List[RepaymentInstallment]
    financial_advice: List[FinancialAdvice]
    spend_by_category: List[CategorySpend] = Field(
        default_factory=list,
        description="Spending derived from bills confirmed in this session",
    )


class BeneficiarySummary(BaseModel):
    """One row of the officer's beneficiary table."""
    id: str = Field(..., examples=["ben_01"])
    name: str
    region: str
    score: int
    risk: RiskLevel
    loan_stage: LoanStage


class OfficerDashboard(BaseModel):
    role: Literal["officer"] = "officer"
    user: User
    risk_filter: RiskFilter = "All"
    beneficiaries: List[BeneficiarySummary]
    high_risk_count: int = Field(..., ge=0, description="High risk beneficiaries in the whole portfolio")


class ScoreForecastPoint(BaseModel):
    month: str
    score: int


class AdminDashboard(BaseModel):
    role: Literal["admin"] = "admin"
    user: User
    total_beneficiaries: int
    average_score: float
    default_rate: float = Field(..., description="Share of beneficiaries in the Defaulted stage, in percent")
    risk_distribution: Dict[str, float] = Field(
        ...,
        description="Percent of beneficiaries per risk level",
        examples=[{"Low": 50.0, "Medium": 25.0, "High": 25.0}],
    )
    score_forecast: List[ScoreForecastPoint]


DashboardResponse = Annotated[
    Union[BeneficiaryDashboard, OfficerDashboard, AdminDashboard],
    Field(discriminator="role"),
]


class RiskAnalysisResponse(BaseModel):
    beneficiary: BeneficiarySummary
    risk_factors: List[str]


class ReviewRequest(BaseModel):
    decision: Literal["approve", "flag"] = Field(..., description="Officer decision", examples=["approve"])


class ReviewResponse(BaseModel):
    beneficiary: BeneficiarySummary
