"""
LiteracyFlow Package

Financial literacy Q&A ("Ask Nidhi"): {question} in, {answer} out.
"""

from credit_assist.flows.literacy.flow import LiteracyFlow
from credit_assist.flows.literacy.prompts import LITERACY_SYSTEM_PROMPT, build_literacy_user_prompt
from credit_assist.flows.literacy.schemas import LiteracyAnswer, LiteracyQuestion

__all__ = [
    "LiteracyFlow",
    "LiteracyQuestion",
    "LiteracyAnswer",
    "LITERACY_SYSTEM_PROMPT",
    "build_literacy_user_prompt",
]
