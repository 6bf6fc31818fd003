"""
BillParserFlow schemas.

The input is a single data URI carrying the bill photo. The output mirrors
what a loan officer needs from a bill: vendor, date, total, a spending
category and the individual line items.
"""

import re
from datetime import date
from typing import Literal, Tuple, get_args

from pydantic import Field, StrictFloat, StrictStr, field_validator

from credit_assist.flows.base import FlowSchema
from credit_assist.flows.data_uri import parse_data_uri

BillCategory = Literal["Essential", "Discretionary", "Utilities", "Healthcare", "Education", "Other"]

BILL_CATEGORIES = get_args(BillCategory)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class BillParseRequest(FlowSchema):
    """Input for BillParserFlow."""
    photo_data_uri: StrictStr = Field(
        ...,
        description=(
            "A photo of a bill or receipt, as a data URI that must include a MIME type "
            "and use Base64 encoding. Expected format: 'data:<mimetype>;base64,<encoded_data>'."
        ),
    )

    @field_validator("photo_data_uri")
    @classmethod
    def validate_data_uri(cls, value: str) -> str:
        parse_data_uri(value)
        return value


class LineItem(FlowSchema):
    """Single line item from a bill."""
    description: StrictStr = Field(..., description="The description of the line item.")
    amount: StrictFloat = Field(..., ge=0, description="The amount for the line item.")


class BillParseResult(FlowSchema):
    """Output of BillParserFlow. Held as 'pending' until the user confirms it."""
    vendor_name: StrictStr = Field(..., description="The name of the vendor or store.")
    transaction_date: StrictStr = Field(
        ...,
        description="The date of the transaction in YYYY-MM-DD format.",
    )
    total_amount: StrictFloat = Field(..., ge=0, description="The total amount of the bill.")
    category: BillCategory = Field(..., description="The primary category of the expenditure.")
    line_items: Tuple[LineItem, ...] = Field(..., description="An array of items purchased.")

    @field_validator("transaction_date")
    @classmethod
    def validate_transaction_date(cls, value: str) -> str:
        """
        Enforce YYYY-MM-DD and a real calendar date.

        date.fromisoformat also accepts compact forms such as "20240315",
        so the shape is checked first.
        """
        if not _ISO_DATE.match(value):
            raise ValueError("must be a date in YYYY-MM-DD format")
        try:
            date.fromisoformat(value)
        except ValueError:
            raise ValueError("must be a valid calendar date")
        return value
