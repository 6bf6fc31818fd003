"""
BillParserFlow Prompt Templates

Architecture:
- Pattern: Single-shot multimodal extraction
- Model: Gemini (with vision capabilities)
- Temperature: 0.0 (deterministic extraction)
- Output: Structured JSON (response_schema = BillParseResult)

The bill photo is NOT substituted into the text. It travels as an inline
media part next to the prompt built here.
"""

from credit_assist.flows.base import render_field_guide
from credit_assist.flows.bill_parser.schemas import BILL_CATEGORIES, BillParseResult

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

BILL_PARSER_SYSTEM_PROMPT = """You are an expert OCR system for parsing Indian receipts and bills.

<role>
You read photos of bills and receipts and extract structured financial data with high accuracy. You have deep knowledge of:
- Indian retail receipts, utility bills, pharmacy and school fee bills
- Rupee amounts and Indian number formatting (e.g. 1,25,000.00)
- Common vendor naming patterns
</role>

<limitations>
- You can ONLY process bill/receipt images
- You must use only what is visible in the image
- You cannot persist data - the caller handles storage
</limitations>"""


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_bill_parser_user_prompt() -> str:
    """
    Build the user prompt for BillParserFlow.

    Returns:
        str: Instructions to send together with the bill image part
    """
    categories = ", ".join(BILL_CATEGORIES)

    return f"""Analyze the attached image of a bill and extract the following information.

<instructions>
1. vendorName: the vendor or store name.
2. transactionDate: the date of the transaction, formatted as YYYY-MM-DD.
3. totalAmount: the total amount as a plain number (no currency symbol, no thousands separators).
4. lineItems: every line item with its description and amount, in the order printed. Use an empty list if no items are legible.
5. category: one primary category for the overall purchase, exactly one of: {categories}.
</instructions>

<output_fields>
{render_field_guide(BillParseResult)}
</output_fields>

Return ONLY valid JSON with these fields. No markdown, no prose."""
