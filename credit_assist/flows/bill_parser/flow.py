"""
BillParserFlow Runner

Single-shot multimodal extraction: one vision call to the model with the
bill photo attached as inline data.
"""

from typing import List

from credit_assist.flows.base import ModelFlow
from credit_assist.flows.bill_parser.prompts import (
    BILL_PARSER_SYSTEM_PROMPT,
    build_bill_parser_user_prompt,
)
from credit_assist.flows.bill_parser.schemas import BillParseRequest, BillParseResult
from credit_assist.flows.data_uri import parse_data_uri
from credit_assist.flows.model_client import MediaPart, PromptPart, TextPart


class BillParserFlow(ModelFlow[BillParseRequest, BillParseResult]):
    name = "BillParserFlow"
    input_model = BillParseRequest
    output_model = BillParseResult
    system_prompt = BILL_PARSER_SYSTEM_PROMPT
    temperature = 0.0

    def render_prompt(self, request: BillParseRequest) -> List[PromptPart]:
        # Already validated, so this cannot fail here
        image = parse_data_uri(request.photo_data_uri)
        return [
            TextPart(text=build_bill_parser_user_prompt()),
            MediaPart(mime_type=image.mime_type, data=image.data),
        ]
