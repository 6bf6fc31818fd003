"""
LiteracyFlow Runner
"""

from typing import List

from credit_assist.flows.base import ModelFlow
from credit_assist.flows.literacy.prompts import LITERACY_SYSTEM_PROMPT, build_literacy_user_prompt
from credit_assist.flows.literacy.schemas import LiteracyAnswer, LiteracyQuestion
from credit_assist.flows.model_client import PromptPart, TextPart


class LiteracyFlow(ModelFlow[LiteracyQuestion, LiteracyAnswer]):
    name = "LiteracyFlow"
    input_model = LiteracyQuestion
    output_model = LiteracyAnswer
    system_prompt = LITERACY_SYSTEM_PROMPT
    # Conversational answers, some variety is fine
    temperature = 0.7

    def render_prompt(self, request: LiteracyQuestion) -> List[PromptPart]:
        return [TextPart(text=build_literacy_user_prompt(request))]
