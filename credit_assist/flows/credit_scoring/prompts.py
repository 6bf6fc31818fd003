"""
CreditScoreFlow Prompt Templates

Architecture:
- Pattern: Single-shot structured extraction
- Model: Gemini (text only)
- Temperature: 0.2 (near-deterministic scoring)
- Output: Structured JSON (response_schema = CreditScoreResult)

Prompt Engineering Pattern:
- System prompt defines the role only
- User prompt carries the beneficiary data and output requirements
- XML tags separate context, instructions and output fields
"""

from credit_assist.flows.base import render_field_guide
from credit_assist.flows.credit_scoring.schemas import (
    MAX_CREDIT_SCORE,
    MIN_CREDIT_SCORE,
    CreditScoreRequest,
    CreditScoreResult,
)

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

CREDIT_SCORE_SYSTEM_PROMPT = """You are an AI-powered credit scoring system designed for NBCFDC (National Backward Classes Finance & Development Corporation).

<role>
You assess the creditworthiness of beneficiaries from backward-class communities applying for concessional loans. You understand:
- Informal and seasonal incomes common in rural and semi-urban India
- Thin or missing formal credit histories
- Regional cost-of-living differences across Indian states
</role>

<limitations>
- You only score the applicant described in the prompt
- You cannot access credit bureaus or external data
- You never invent facts about the applicant
</limitations>"""


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_credit_score_user_prompt(request: CreditScoreRequest) -> str:
    """
    Build the user prompt for CreditScoreFlow.

    Args:
        request: Validated CreditScoreRequest

    Returns:
        str: Prompt text with the applicant data substituted in
    """
    personal = request.personal_info
    financial = request.financial_info

    return f"""Calculate a composite credit score based on the personal and financial information provided.

<personal_information>
Age: {personal.age}
Location: {personal.location}
Occupation: {personal.occupation}
</personal_information>

<financial_information>
Income: {financial.income}
Credit History: {financial.credit_history}
Loan Amount: {financial.loan_amount}
</financial_information>

<instructions>
1. Determine the credit score, the risk level (Low, Medium, High) and provide insights.
2. The creditScore MUST be a number between {MIN_CREDIT_SCORE} and {MAX_CREDIT_SCORE}.
3. The riskLevel MUST be exactly one of: Low, Medium, High.
4. Keep insights clear and concise.
5. An income of 0 is valid input; score it, do not refuse.
</instructions>

<output_fields>
{render_field_guide(CreditScoreResult)}
</output_fields>

Return ONLY valid JSON with these fields. No markdown, no prose."""
