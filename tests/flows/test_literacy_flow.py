"""
Tests for LiteracyFlow. Only the shape of the answer is checked.
"""

import pytest

from credit_assist.flows.errors import InputValidationError, OutputValidationError
from credit_assist.flows.literacy import LiteracyAnswer, LiteracyFlow


@pytest.fixture
def flow(fake_model_client):
    return LiteracyFlow(fake_model_client)


@pytest.mark.asyncio
async def test_answer_shape(flow, fake_model_client):
    fake_model_client.queue_json({"answer": "A credit score shows how reliably you repay loans."})

    result = await flow.invoke({"question": "What is a credit score?"})

    assert isinstance(result, LiteracyAnswer)
    assert result.answer
    assert "What is a credit score?" in fake_model_client.calls[0]["parts"][0].text
    assert "Nidhi" in fake_model_client.calls[0]["system_instruction"]


@pytest.mark.asyncio
@pytest.mark.parametrize("question", ["", "   "])
async def test_empty_question_is_rejected(flow, fake_model_client, question):
    with pytest.raises(InputValidationError) as exc_info:
        await flow.invoke({"question": question})

    assert exc_info.value.violations[0].message == "must not be empty"
    assert fake_model_client.calls == []


@pytest.mark.asyncio
async def test_empty_answer_is_rejected(flow, fake_model_client):
    fake_model_client.queue_json({"answer": ""})

    with pytest.raises(OutputValidationError):
        await flow.invoke({"question": "How do I save money?"})


@pytest.mark.asyncio
async def test_missing_answer_is_rejected(flow, fake_model_client):
    fake_model_client.queue_json({"reply": "Save 10% of your income."})

    with pytest.raises(OutputValidationError) as exc_info:
        await flow.invoke({"question": "How do I save money?"})

    assert exc_info.value.violations[0].field == "answer"
