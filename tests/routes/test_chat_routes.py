"""
Tests for the /chat endpoints.
"""

from credit_assist.flows.errors import OutputValidationError
from credit_assist.utils.constants import CHAT_ERROR_REPLY, CHAT_GREETING


def test_history_starts_with_greeting(client, beneficiary_headers):
    response = client.get("/chat", headers=beneficiary_headers)

    assert response.status_code == 200
    assert response.json() == {
        "turns": [{"role": "assistant", "content": CHAT_GREETING}],
        "is_loading": False,
    }


def test_ask(client, fake_model_client, beneficiary_headers):
    fake_model_client.queue_json({"answer": "EMI is your fixed monthly loan payment."})

    response = client.post("/chat", headers=beneficiary_headers, json={"question": "What is EMI?"})

    assert response.status_code == 200
    data = response.json()
    assert data["answer"] == "EMI is your fixed monthly loan payment."
    assert [turn["role"] for turn in data["turns"]] == ["assistant", "user", "assistant"]


def test_empty_question_returns_422_and_appends_nothing(client, fake_model_client, beneficiary_headers):
    response = client.post("/chat", headers=beneficiary_headers, json={"question": ""})

    assert response.status_code == 422
    assert len(client.get("/chat", headers=beneficiary_headers).json()["turns"]) == 1
    assert fake_model_client.calls == []


def test_model_failure_appends_apology(client, fake_model_client, beneficiary_headers):
    fake_model_client.queue(OutputValidationError("The model returned an empty response."))

    response = client.post("/chat", headers=beneficiary_headers, json={"question": "What is EMI?"})

    assert response.status_code == 502
    turns = client.get("/chat", headers=beneficiary_headers).json()["turns"]
    assert turns[-1] == {"role": "assistant", "content": CHAT_ERROR_REPLY}


def test_chat_requires_session(client):
    assert client.get("/chat").status_code == 401
    assert client.get("/chat", headers={"Authorization": "Bearer unknown"}).status_code == 401
