"""
FastAPI dependency providers for the model invocation flows.

One Gemini client is shared by all flows and created on first use. Tests
replace ``get_model_client`` (or a single flow provider) through
``app.dependency_overrides``.
"""

import logging
from typing import Optional

from fastapi import Depends

from credit_assist.flows.bill_parser import BillParserFlow
from credit_assist.flows.credit_scoring import CreditScoreFlow
from credit_assist.flows.literacy import LiteracyFlow
from credit_assist.flows.model_client import GeminiModelClient, ModelClient

logger = logging.getLogger(__name__)

_model_client: Optional[GeminiModelClient] = None


def get_model_client() -> ModelClient:
    """Get or create the shared Gemini model client."""
    global _model_client

    if _model_client is None:
        _model_client = GeminiModelClient()
        logger.info("Model client created")

    return _model_client


def get_credit_score_flow(client: ModelClient = Depends(get_model_client)) -> CreditScoreFlow:
    return CreditScoreFlow(client)


def get_bill_parser_flow(client: ModelClient = Depends(get_model_client)) -> BillParserFlow:
    return BillParserFlow(client)


def get_literacy_flow(client: ModelClient = Depends(get_model_client)) -> LiteracyFlow:
    return LiteracyFlow(client)
