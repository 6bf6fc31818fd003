"""
Chat conversation with the financial literacy assistant.

The conversation is an append-only list of turns held by the owning user
session. Only the current question is sent to LiteracyFlow; history stays
here for display.
"""

import logging
from typing import List, Tuple

from credit_assist.flows.errors import FlowError
from credit_assist.flows.literacy import LiteracyAnswer, LiteracyFlow
from credit_assist.schemas.chat import ChatTurn
from credit_assist.utils.constants import CHAT_ERROR_REPLY, CHAT_GREETING

logger = logging.getLogger(__name__)


class ConversationBusyError(Exception):
    """A question is already waiting for an answer."""


class ChatConversation:
    def __init__(self, greeting: str = CHAT_GREETING):
        self._turns: List[ChatTurn] = [ChatTurn(role="assistant", content=greeting)]
        self.is_loading = False

    @property
    def turns(self) -> Tuple[ChatTurn, ...]:
        return tuple(self._turns)

    async def ask(self, question: str, literacy_flow: LiteracyFlow) -> LiteracyAnswer:
        """
        Append the question, ask the model, append the answer.

        An invalid (empty) question is rejected before anything is appended.
        If the flow fails, an apology turn is appended and the error re-raised
        so the caller can offer a retry.
        """
        if self.is_loading:
            raise ConversationBusyError("Please wait for the current answer.")

        request = literacy_flow.validate_input({"question": question})

        self.is_loading = True
        self._turns.append(ChatTurn(role="user", content=request.question))
        try:
            answer = await literacy_flow.invoke(request)
        except FlowError:
            self._turns.append(ChatTurn(role="assistant", content=CHAT_ERROR_REPLY))
            raise
        finally:
            self.is_loading = False

        self._turns.append(ChatTurn(role="assistant", content=answer.answer))
        logger.info(f"Chat answered: turns={len(self._turns)}")
        return answer
