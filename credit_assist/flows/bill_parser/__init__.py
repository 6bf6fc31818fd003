"""
BillParserFlow Package

Extracts vendor, date, total, category and line items from a bill photo
using Gemini vision with structured output.

Main Components:
- schemas: BillParseRequest / BillParseResult / LineItem, BillCategory enum
- prompts: System prompt and user prompt builder
- flow: BillParserFlow (the photo is attached as an inline media part)

Usage:
    from credit_assist.flows.bill_parser import BillParserFlow

    result = await BillParserFlow(client).invoke(
        {"photoDataUri": "data:image/jpeg;base64,/9j/4AAQ..."}
    )
"""

from credit_assist.flows.bill_parser.flow import BillParserFlow
from credit_assist.flows.bill_parser.prompts import (
    BILL_PARSER_SYSTEM_PROMPT,
    build_bill_parser_user_prompt,
)
from credit_assist.flows.bill_parser.schemas import (
    BILL_CATEGORIES,
    BillCategory,
    BillParseRequest,
    BillParseResult,
    LineItem,
)

__all__ = [
    "BillParserFlow",
    "BillParseRequest",
    "BillParseResult",
    "LineItem",
    "BillCategory",
    "BILL_CATEGORIES",
    "BILL_PARSER_SYSTEM_PROMPT",
    "build_bill_parser_user_prompt",
]
