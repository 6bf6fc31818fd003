"""
CreditScoreFlow Package

Composite credit scoring for beneficiaries using Google Gemini with a
single-shot structured-output call.

Main Components:
- schemas: CreditScoreRequest / CreditScoreResult (validation + field guidance)
- prompts: System prompt and user prompt builder
- flow: CreditScoreFlow (validate -> render -> call -> validate)

Usage:
    from credit_assist.flows.credit_scoring import CreditScoreFlow

    flow = CreditScoreFlow(client)
    result = await flow.invoke({
        "personalInfo": {"age": 34, "location": "Patna, Bihar", "occupation": "Tailor"},
        "financialInfo": {"income": 12000, "creditHistory": "No defaults", "loanAmount": 50000},
    })
"""

from credit_assist.flows.credit_scoring.flow import CreditScoreFlow
from credit_assist.flows.credit_scoring.prompts import (
    CREDIT_SCORE_SYSTEM_PROMPT,
    build_credit_score_user_prompt,
)
from credit_assist.flows.credit_scoring.schemas import (
    CreditScoreRequest,
    CreditScoreResult,
    FinancialInfo,
    PersonalInfo,
    RiskLevel,
)

__all__ = [
    "CreditScoreFlow",
    "CreditScoreRequest",
    "CreditScoreResult",
    "PersonalInfo",
    "FinancialInfo",
    "RiskLevel",
    "CREDIT_SCORE_SYSTEM_PROMPT",
    "build_credit_score_user_prompt",
]
