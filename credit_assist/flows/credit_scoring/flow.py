"""
CreditScoreFlow Runner

Scores a beneficiary from personal and financial information. Output is
constrained to creditScore in [300, 850] and riskLevel in {Low, Medium, High}.
"""

from typing import List

from credit_assist.flows.base import ModelFlow
from credit_assist.flows.credit_scoring.prompts import (
    CREDIT_SCORE_SYSTEM_PROMPT,
    build_credit_score_user_prompt,
)
from credit_assist.flows.credit_scoring.schemas import CreditScoreRequest, CreditScoreResult
from credit_assist.flows.model_client import PromptPart, TextPart


class CreditScoreFlow(ModelFlow[CreditScoreRequest, CreditScoreResult]):
    name = "CreditScoreFlow"
    input_model = CreditScoreRequest
    output_model = CreditScoreResult
    system_prompt = CREDIT_SCORE_SYSTEM_PROMPT
    temperature = 0.2

    def render_prompt(self, request: CreditScoreRequest) -> List[PromptPart]:
        return [TextPart(text=build_credit_score_user_prompt(request))]
