"""
Tests for CreditScoreFlow.

Covers the four flow steps with a fake model client:
- input validation happens before any model call
- the prompt carries the beneficiary data and the output field guide
- output must satisfy the score range and risk level enum
- upstream failures are reported, never converted into a score
"""

import json

import pytest

from credit_assist.flows.credit_scoring import CreditScoreFlow, CreditScoreResult
from credit_assist.flows.errors import (
    InputValidationError,
    OutputValidationError,
    UpstreamUnavailableError,
)
from credit_assist.flows.model_client import TextPart


@pytest.fixture
def flow(fake_model_client):
    return CreditScoreFlow(fake_model_client)


class TestCreditScoreInput:
    @pytest.mark.asyncio
    async def test_missing_nested_field_is_rejected_without_model_call(
        self, flow, fake_model_client, credit_score_input
    ):
        del credit_score_input["financialInfo"]["loanAmount"]

        with pytest.raises(InputValidationError) as exc_info:
            await flow.invoke(credit_score_input)

        fields = {v.field: v.constraint for v in exc_info.value.violations}
        assert fields == {"financialInfo.loanAmount": "required"}
        assert exc_info.value.flow_name == "CreditScoreFlow"
        assert fake_model_client.calls == []

    @pytest.mark.asyncio
    async def test_string_age_is_a_type_violation(self, flow, fake_model_client, credit_score_input):
        credit_score_input["personalInfo"]["age"] = "34"

        with pytest.raises(InputValidationError) as exc_info:
            await flow.invoke(credit_score_input)

        assert exc_info.value.violations[0].field == "personalInfo.age"
        assert exc_info.value.violations[0].constraint == "type"
        assert fake_model_client.calls == []

    @pytest.mark.asyncio
    async def test_zero_income_is_valid(
        self, flow, fake_model_client, credit_score_input, credit_score_payload
    ):
        credit_score_input["financialInfo"]["income"] = 0
        fake_model_client.queue_json(credit_score_payload)

        result = await flow.invoke(credit_score_input)

        assert isinstance(result, CreditScoreResult)
        assert len(fake_model_client.calls) == 1


class TestCreditScorePrompt:
    @pytest.mark.asyncio
    async def test_prompt_contains_inputs_and_field_guide(
        self, flow, fake_model_client, credit_score_input, credit_score_payload
    ):
        fake_model_client.queue_json(credit_score_payload)

        await flow.invoke(credit_score_input)

        call = fake_model_client.calls[0]
        (part,) = call["parts"]
        assert isinstance(part, TextPart)
        assert "Patna, Bihar" in part.text
        assert "Tailor" in part.text
        assert "Repaid a self-help group loan on time" in part.text
        assert "creditScore" in part.text
        assert ">= 300" in part.text and "<= 850" in part.text
        assert call["response_schema"] is CreditScoreResult
        assert call["temperature"] == 0.2
        assert "NBCFDC" in call["system_instruction"]


class TestCreditScoreOutput:
    @pytest.mark.asyncio
    async def test_valid_output(self, flow, fake_model_client, credit_score_input, credit_score_payload):
        fake_model_client.queue_json(credit_score_payload)

        result = await flow.invoke(credit_score_input)

        assert result.credit_score == 712
        assert result.risk_level == "Medium"
        assert 300 <= result.credit_score <= 850
        assert result.model_dump(by_alias=True)["riskLevel"] == "Medium"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("score", [299, 851, 1000])
    async def test_out_of_range_score_is_rejected(
        self, flow, fake_model_client, credit_score_input, credit_score_payload, score
    ):
        fake_model_client.queue_json({**credit_score_payload, "creditScore": score})

        with pytest.raises(OutputValidationError) as exc_info:
            await flow.invoke(credit_score_input)

        assert exc_info.value.violations[0].field == "creditScore"
        assert exc_info.value.violations[0].constraint == "range"

    @pytest.mark.asyncio
    async def test_unknown_risk_level_is_rejected(
        self, flow, fake_model_client, credit_score_input, credit_score_payload
    ):
        fake_model_client.queue_json({**credit_score_payload, "riskLevel": "Very High"})

        with pytest.raises(OutputValidationError) as exc_info:
            await flow.invoke(credit_score_input)

        assert exc_info.value.violations[0].constraint == "enum"

    @pytest.mark.asyncio
    async def test_non_json_output_is_rejected(self, flow, fake_model_client, credit_score_input):
        fake_model_client.queue("Your score is about 700.")

        with pytest.raises(OutputValidationError) as exc_info:
            await flow.invoke(credit_score_input)

        assert exc_info.value.violations[0].constraint == "json"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [None, "", "   "])
    async def test_empty_output_is_rejected(self, flow, fake_model_client, credit_score_input, raw):
        fake_model_client.queue(raw)

        with pytest.raises(OutputValidationError, match="empty response"):
            await flow.invoke(credit_score_input)

    @pytest.mark.asyncio
    async def test_code_fenced_json_is_accepted(
        self, flow, fake_model_client, credit_score_input, credit_score_payload
    ):
        fake_model_client.queue(f"```json\n{json.dumps(credit_score_payload)}\n```")

        result = await flow.invoke(credit_score_input)

        assert result.risk_level == "Medium"


class TestCreditScoreUpstream:
    @pytest.mark.asyncio
    async def test_upstream_failure_is_reraised_with_flow_name(
        self, flow, fake_model_client, credit_score_input
    ):
        fake_model_client.queue(UpstreamUnavailableError("timed out"))

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await flow.invoke(credit_score_input)

        assert exc_info.value.flow_name == "CreditScoreFlow"

    @pytest.mark.asyncio
    async def test_retry_after_failure_succeeds(
        self, flow, fake_model_client, credit_score_input, credit_score_payload
    ):
        fake_model_client.queue(UpstreamUnavailableError("timed out"))
        fake_model_client.queue_json(credit_score_payload)

        with pytest.raises(UpstreamUnavailableError):
            await flow.invoke(credit_score_input)
        result = await flow.invoke(credit_score_input)

        assert result.credit_score == 712
        assert len(fake_model_client.calls) == 2
