"""
CreditScoreFlow schemas.

One declarative model per side of the flow. Field descriptions are rendered
into the prompt as guidance and are also what the model sees in the response
schema.
"""

from typing import Literal

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from credit_assist.flows.base import FlowSchema

RiskLevel = Literal["Low", "Medium", "High"]

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850


class PersonalInfo(FlowSchema):
    """Personal information of the beneficiary."""
    age: StrictInt = Field(..., ge=0, description="Age of the beneficiary in years")
    location: StrictStr = Field(..., description="Location of the beneficiary (city, state)")
    occupation: StrictStr = Field(..., description="Occupation of the beneficiary")


class FinancialInfo(FlowSchema):
    """Financial information of the beneficiary."""
    income: StrictFloat = Field(..., ge=0, description="Monthly income of the beneficiary in INR")
    credit_history: StrictStr = Field(..., description="Credit history of the beneficiary")
    loan_amount: StrictFloat = Field(..., ge=0, description="Requested loan amount in INR")


class CreditScoreRequest(FlowSchema):
    """Input for CreditScoreFlow, built once per registration submission."""
    personal_info: PersonalInfo = Field(..., description="Personal information of the beneficiary")
    financial_info: FinancialInfo = Field(..., description="Financial information of the beneficiary")


class CreditScoreResult(FlowSchema):
    """Output of CreditScoreFlow."""
    credit_score: StrictFloat = Field(
        ...,
        ge=MIN_CREDIT_SCORE,
        le=MAX_CREDIT_SCORE,
        description="The composite credit score calculated by the AI.",
    )
    risk_level: RiskLevel = Field(
        ...,
        description="The risk level associated with the credit score.",
    )
    insights: StrictStr = Field(
        ...,
        description="Insights and recommendations based on the credit score.",
    )
