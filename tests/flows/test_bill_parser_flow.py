"""
Tests for BillParserFlow.

The photo data URI is validated locally (no model call on a malformed URI)
and sent to the model as an inline media part. Output must carry a real
YYYY-MM-DD date, a known category and non-negative amounts.
"""

import pytest

from credit_assist.flows.bill_parser import BillParserFlow, BillParseResult
from credit_assist.flows.data_uri import to_data_uri
from credit_assist.flows.errors import InputValidationError, OutputValidationError
from credit_assist.flows.model_client import MediaPart, TextPart


@pytest.fixture
def flow(fake_model_client):
    return BillParserFlow(fake_model_client)


@pytest.fixture
def photo_input(jpeg_bytes):
    return {"photoDataUri": to_data_uri(jpeg_bytes, "image/jpeg")}


class TestBillParserInput:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "photo_data_uri",
        [
            "not-a-data-uri",
            "data:image/png,iVBORw0KGgo=",
            "data:text/plain;base64,aGVsbG8=",
            "data:image/png;base64,%%%",
        ],
    )
    async def test_malformed_data_uri_is_rejected_without_model_call(
        self, flow, fake_model_client, photo_data_uri
    ):
        with pytest.raises(InputValidationError) as exc_info:
            await flow.invoke({"photoDataUri": photo_data_uri})

        assert exc_info.value.violations[0].field == "photoDataUri"
        assert exc_info.value.violations[0].constraint == "format"
        assert fake_model_client.calls == []

    @pytest.mark.asyncio
    async def test_missing_photo_is_required(self, flow, fake_model_client):
        with pytest.raises(InputValidationError) as exc_info:
            await flow.invoke({})

        assert exc_info.value.violations[0].constraint == "required"
        assert fake_model_client.calls == []


class TestBillParserPrompt:
    @pytest.mark.asyncio
    async def test_image_sent_as_media_part(
        self, flow, fake_model_client, photo_input, jpeg_bytes, bill_result_payload
    ):
        fake_model_client.queue_json(bill_result_payload)

        await flow.invoke(photo_input)

        call = fake_model_client.calls[0]
        text_part, media_part = call["parts"]
        assert isinstance(text_part, TextPart)
        assert isinstance(media_part, MediaPart)
        assert media_part.mime_type == "image/jpeg"
        assert media_part.data == jpeg_bytes
        assert "Essential, Discretionary, Utilities, Healthcare, Education, Other" in text_part.text
        # The data URI itself never appears in prompt text
        assert "base64" not in text_part.text
        assert call["temperature"] == 0.0


class TestBillParserOutput:
    @pytest.mark.asyncio
    async def test_valid_output(self, flow, fake_model_client, photo_input, bill_result_payload):
        fake_model_client.queue_json(bill_result_payload)

        result = await flow.invoke(photo_input)

        assert isinstance(result, BillParseResult)
        assert result.vendor_name == "Sharma Kirana Store"
        assert result.transaction_date == "2024-07-15"
        assert result.category == "Essential"
        assert [item.amount for item in result.line_items] == [300.0, 150.0]

    @pytest.mark.asyncio
    async def test_empty_line_items_are_allowed(self, flow, fake_model_client, photo_input, bill_result_payload):
        fake_model_client.queue_json({**bill_result_payload, "lineItems": []})

        result = await flow.invoke(photo_input)

        assert result.line_items == ()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("transaction_date", ["15/07/2024", "20240715", "2024-02-30", "July 15"])
    async def test_bad_dates_are_rejected(
        self, flow, fake_model_client, photo_input, bill_result_payload, transaction_date
    ):
        fake_model_client.queue_json({**bill_result_payload, "transactionDate": transaction_date})

        with pytest.raises(OutputValidationError) as exc_info:
            await flow.invoke(photo_input)

        assert exc_info.value.violations[0].field == "transactionDate"

    @pytest.mark.asyncio
    async def test_unknown_category_is_rejected(self, flow, fake_model_client, photo_input, bill_result_payload):
        fake_model_client.queue_json({**bill_result_payload, "category": "Groceries"})

        with pytest.raises(OutputValidationError) as exc_info:
            await flow.invoke(photo_input)

        assert exc_info.value.violations[0].constraint == "enum"

    @pytest.mark.asyncio
    async def test_negative_line_item_amount_is_rejected(
        self, flow, fake_model_client, photo_input, bill_result_payload
    ):
        payload = {**bill_result_payload, "lineItems": [{"description": "Refund", "amount": -10}]}
        fake_model_client.queue_json(payload)

        with pytest.raises(OutputValidationError) as exc_info:
            await flow.invoke(photo_input)

        assert exc_info.value.violations[0].field == "lineItems.0.amount"
        assert exc_info.value.violations[0].constraint == "range"

    @pytest.mark.asyncio
    async def test_line_item_without_amount_is_rejected(
        self, flow, fake_model_client, photo_input, bill_result_payload
    ):
        payload = {**bill_result_payload, "lineItems": [{"description": "Rice 5kg"}]}
        fake_model_client.queue_json(payload)

        with pytest.raises(OutputValidationError) as exc_info:
            await flow.invoke(photo_input)

        violation = exc_info.value.violations[0]
        assert violation.field == "lineItems.0.amount"
        assert violation.constraint == "required"
