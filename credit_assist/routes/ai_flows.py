"""
Model invocation flow endpoints.

Each endpoint exposes one flow as ``invoke(input) -> result | error``. The
request body is passed to the flow unvalidated so that every rejection comes
from the flow's own input schema:

- 200: validated flow output (camelCase fields)
- 422: InputValidationError (no model call was made)
- 502: OutputValidationError (the model answered with something unusable)
- 503: UpstreamUnavailableError (timeout, network, quota, missing API key)
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from credit_assist.flows.bill_parser import BillParserFlow, BillParseResult
from credit_assist.flows.credit_scoring import CreditScoreFlow, CreditScoreResult
from credit_assist.flows.dependencies import (
    get_bill_parser_flow,
    get_credit_score_flow,
    get_literacy_flow,
)
from credit_assist.flows.literacy import LiteracyAnswer, LiteracyFlow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post(
    "/credit-score",
    response_model=CreditScoreResult,
    status_code=status.HTTP_200_OK,
    summary="Calculate a composite credit score",
    description="""
    Score a beneficiary from personal and financial information.

    Body: {"personalInfo": {age, location, occupation},
           "financialInfo": {income, creditHistory, loanAmount}}

    Returns creditScore (300-850), riskLevel (Low|Medium|High) and insights.
    """,
)
async def credit_score(
    payload: Annotated[Any, Body()],
    flow: CreditScoreFlow = Depends(get_credit_score_flow),
) -> CreditScoreResult:
    return await flow.invoke(payload)


@router.post(
    "/bill-parse",
    response_model=BillParseResult,
    status_code=status.HTTP_200_OK,
    summary="Extract structured data from a bill photo",
    description="""
    Body: {"photoDataUri": "data:<mimetype>;base64,<encoded_data>"}

    Returns vendorName, transactionDate (YYYY-MM-DD), totalAmount, category
    and lineItems. Nothing is stored; use /bills for the review workflow.
    """,
)
async def bill_parse(
    payload: Annotated[Any, Body()],
    flow: BillParserFlow = Depends(get_bill_parser_flow),
) -> BillParseResult:
    return await flow.invoke(payload)


@router.post(
    "/literacy",
    response_model=LiteracyAnswer,
    status_code=status.HTTP_200_OK,
    summary="Ask the financial literacy assistant",
    description='Body: {"question": "..."}. Returns {"answer": "..."}.',
)
async def literacy(
    payload: Annotated[Any, Body()],
    flow: LiteracyFlow = Depends(get_literacy_flow),
) -> LiteracyAnswer:
    return await flow.invoke(payload)
