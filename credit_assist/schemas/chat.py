"""
Pydantic schemas for the chat endpoints.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatTurn(BaseModel):
    """One message in the conversation. Never mutated once appended."""
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    # Emptiness is checked by the literacy flow so it reports the same violation
    question: str = Field(..., description="Question for the assistant", examples=["What is a credit score?"])


class ChatResponse(BaseModel):
    answer: str = Field(..., description="Assistant's answer to the question")
    turns: List[ChatTurn] = Field(..., description="Full conversation, oldest first")


class ChatHistoryResponse(BaseModel):
    turns: List[ChatTurn] = Field(..., description="Full conversation, oldest first")
    is_loading: bool = Field(..., description="Whether a question is waiting for an answer")
