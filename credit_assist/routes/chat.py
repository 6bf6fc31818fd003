"""
Chat endpoints for the financial literacy assistant ("Ask Nidhi").

The conversation lives on the user's session. Only the new question is sent
to the model; the full history is returned for display.
"""

import logging

from fastapi import APIRouter, Depends, status

from credit_assist.auth.dependencies import get_current_session
from credit_assist.flows.dependencies import get_literacy_flow
from credit_assist.flows.literacy import LiteracyFlow
from credit_assist.schemas.chat import ChatHistoryResponse, ChatRequest, ChatResponse
from credit_assist.services.session_store import UserSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "",
    response_model=ChatResponse,
    status_code=status.HTTP_200_OK,
    summary="Ask a question",
    description="""
    Appends the question and the assistant's answer to the conversation.

    - 422 for an empty question (nothing is appended)
    - 409 while a previous question is still being answered
    - 502/503 when the model fails; an apology turn is appended
    """,
)
async def ask(
    request: ChatRequest,
    session: UserSession = Depends(get_current_session),
    literacy_flow: LiteracyFlow = Depends(get_literacy_flow),
) -> ChatResponse:
    answer = await session.chat.ask(request.question, literacy_flow)
    return ChatResponse(answer=answer.answer, turns=list(session.chat.turns))


@router.get(
    "",
    response_model=ChatHistoryResponse,
    summary="Get the conversation",
)
async def history(session: UserSession = Depends(get_current_session)) -> ChatHistoryResponse:
    return ChatHistoryResponse(turns=list(session.chat.turns), is_loading=session.chat.is_loading)
