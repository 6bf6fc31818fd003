"""
Tests for the chat conversation with the literacy assistant.
"""

import asyncio

import pytest

from credit_assist.flows.errors import InputValidationError, UpstreamUnavailableError
from credit_assist.flows.literacy import LiteracyFlow
from credit_assist.services.chat_service import ChatConversation, ConversationBusyError
from credit_assist.utils.constants import CHAT_ERROR_REPLY, CHAT_GREETING


@pytest.fixture
def literacy_flow(fake_model_client):
    return LiteracyFlow(fake_model_client)


def test_conversation_starts_with_greeting():
    conversation = ChatConversation()

    assert [(t.role, t.content) for t in conversation.turns] == [("assistant", CHAT_GREETING)]
    assert conversation.is_loading is False


@pytest.mark.asyncio
async def test_ask_appends_question_and_answer(literacy_flow, fake_model_client):
    fake_model_client.queue_json({"answer": "Interest is the cost of borrowing money."})
    conversation = ChatConversation()

    answer = await conversation.ask("What is interest?", literacy_flow)

    assert answer.answer == "Interest is the cost of borrowing money."
    assert [t.role for t in conversation.turns] == ["assistant", "user", "assistant"]
    assert conversation.turns[1].content == "What is interest?"
    assert conversation.turns[2].content == answer.answer
    assert conversation.is_loading is False


@pytest.mark.asyncio
async def test_only_the_current_question_is_sent(literacy_flow, fake_model_client):
    fake_model_client.queue_json({"answer": "First."}, {"answer": "Second."})
    conversation = ChatConversation()

    await conversation.ask("What is a loan?", literacy_flow)
    await conversation.ask("What is EMI?", literacy_flow)

    second_prompt = fake_model_client.calls[1]["parts"][0].text
    assert "What is EMI?" in second_prompt
    assert "What is a loan?" not in second_prompt
    assert "First." not in second_prompt


@pytest.mark.asyncio
async def test_empty_question_appends_nothing(literacy_flow, fake_model_client):
    conversation = ChatConversation()

    with pytest.raises(InputValidationError):
        await conversation.ask("   ", literacy_flow)

    assert len(conversation.turns) == 1
    assert fake_model_client.calls == []


@pytest.mark.asyncio
async def test_failure_appends_apology(literacy_flow, fake_model_client):
    fake_model_client.queue(UpstreamUnavailableError("quota exceeded"))
    conversation = ChatConversation()

    with pytest.raises(UpstreamUnavailableError):
        await conversation.ask("How do I save?", literacy_flow)

    assert conversation.turns[-1].role == "assistant"
    assert conversation.turns[-1].content == CHAT_ERROR_REPLY
    assert conversation.turns[-2].content == "How do I save?"
    assert conversation.is_loading is False


@pytest.mark.asyncio
async def test_second_question_while_loading_is_refused():
    class SlowClient:
        def __init__(self):
            self.release = asyncio.Event()

        async def generate(self, parts, *, system_instruction, response_schema, temperature):
            await self.release.wait()
            return '{"answer": "Done."}'

    slow = SlowClient()
    flow = LiteracyFlow(slow)
    conversation = ChatConversation()

    first = asyncio.create_task(conversation.ask("First?", flow))
    await asyncio.sleep(0)

    assert conversation.is_loading
    with pytest.raises(ConversationBusyError):
        await conversation.ask("Second?", flow)

    slow.release.set()
    await first

    assert [t.content for t in conversation.turns][1:] == ["First?", "Done."]
