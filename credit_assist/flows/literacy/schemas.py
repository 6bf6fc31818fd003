"""
LiteracyFlow schemas.

A single question in, a single answer out. Whitespace-only text counts as
empty on both sides.
"""

from pydantic import Field, StrictStr, field_validator

from credit_assist.flows.base import FlowSchema


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


class LiteracyQuestion(FlowSchema):
    """Input for LiteracyFlow."""
    question: StrictStr = Field(
        ...,
        description="The user question about financial literacy.",
    )

    @field_validator("question")
    @classmethod
    def validate_question(cls, value: str) -> str:
        return _require_text(value)


class LiteracyAnswer(FlowSchema):
    """Output of LiteracyFlow."""
    answer: StrictStr = Field(
        ...,
        description="The answer to the user question.",
    )

    @field_validator("answer")
    @classmethod
    def validate_answer(cls, value: str) -> str:
        return _require_text(value)
