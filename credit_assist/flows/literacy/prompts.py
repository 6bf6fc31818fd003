"""
LiteracyFlow Prompt Templates

Nidhi, the financial literacy assistant. Each call is stateless from the
model's point of view: only the current question is sent, never the chat
history the client keeps.
"""

from credit_assist.flows.base import render_field_guide
from credit_assist.flows.literacy.schemas import LiteracyAnswer, LiteracyQuestion

LITERACY_SYSTEM_PROMPT = """You are Nidhi, an AI-powered chatbot designed to assist users with financial literacy questions.

<role>
You explain saving, borrowing, interest, budgeting and digital payments in plain language for first-time borrowers in India.
</role>

<guardrails>
- Provide clear, concise, and helpful answers
- Do not recommend specific stocks, funds or lenders
- If a question is unrelated to personal finance, say so briefly and steer back
</guardrails>"""


def build_literacy_user_prompt(request: LiteracyQuestion) -> str:
    """Substitute the user's question into the answer template."""
    return f"""<question>
{request.question.strip()}
</question>

<output_fields>
{render_field_guide(LiteracyAnswer)}
</output_fields>

Return ONLY valid JSON with these fields."""
