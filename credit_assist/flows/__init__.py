"""
Model invocation flows for the Credit Assist backend.

Each flow is a validated-input -> external-model-call -> validated-output
operation exposing one entry point, ``invoke(input) -> result``:

- credit_scoring: CreditScoreFlow (composite credit score at registration)
- bill_parser: BillParserFlow (bill photo OCR into structured data)
- literacy: LiteracyFlow (financial literacy Q&A)

Shared pieces:
- base: ModelFlow, FlowSchema, render_field_guide
- errors: InputValidationError / OutputValidationError / UpstreamUnavailableError
- model_client: ModelClient protocol and the Gemini implementation
- data_uri: bill image data URI encoding and decoding
"""

from credit_assist.flows.base import FlowSchema, ModelFlow, render_field_guide
from credit_assist.flows.errors import (
    FieldViolation,
    FlowError,
    InputValidationError,
    OutputValidationError,
    UpstreamUnavailableError,
)
from credit_assist.flows.model_client import GeminiModelClient, MediaPart, ModelClient, TextPart
from credit_assist.flows.bill_parser import BillParserFlow
from credit_assist.flows.credit_scoring import CreditScoreFlow
from credit_assist.flows.literacy import LiteracyFlow

__all__ = [
    "ModelFlow",
    "FlowSchema",
    "render_field_guide",
    "FieldViolation",
    "FlowError",
    "InputValidationError",
    "OutputValidationError",
    "UpstreamUnavailableError",
    "ModelClient",
    "GeminiModelClient",
    "TextPart",
    "MediaPart",
    "BillParserFlow",
    "CreditScoreFlow",
    "LiteracyFlow",
]
