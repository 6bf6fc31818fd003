"""
Pydantic schemas for the bill capture endpoints.

Parsed and confirmed bills keep the camelCase wire names of the bill parser
flow; the workflow envelopes around them are snake_case like the rest of the
API.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from credit_assist.flows.bill_parser import BillCategory, BillParseResult


class ConfirmedBill(BillParseResult):
    """
    A parsed bill accepted by the user.

    ``category`` is what the user settled on; ``detected_category`` keeps the
    model's original suggestion.
    """
    detected_category: BillCategory = Field(
        ...,
        description="Category the model detected before any user correction",
    )


BillCaptureStateName = Literal["idle", "image_selected", "parsing", "pending_review"]


class BillCaptureStatusResponse(BaseModel):
    """Snapshot of a bill capture workflow."""
    state: BillCaptureStateName = Field(..., description="Current workflow state")
    selected_filename: Optional[str] = Field(None, description="Name of the selected image, if any")
    selected_category: Optional[BillCategory] = Field(None, description="Category pre-selected by the user")
    require_category: bool = Field(..., description="Whether a category must be chosen before parsing")
    pending: Optional[BillParseResult] = Field(None, description="Parsed bill awaiting confirmation")
    last_error: Optional[str] = Field(None, description="User-facing message from the last failed parse")
    confirmed_bills: List[ConfirmedBill] = Field(
        default_factory=list,
        description="Bills confirmed so far, in confirmation order",
    )


class BillImageSelectedResponse(BaseModel):
    state: BillCaptureStateName
    preview_data_uri: str = Field(..., description="Data URI of the selected image for preview")


class CategoryRequest(BaseModel):
    category: BillCategory = Field(..., description="Spending category for the selected bill", examples=["Utilities"])


class ConfirmBillRequest(BaseModel):
    category: Optional[BillCategory] = Field(
        None,
        description="Category override; defaults to the pre-selected or detected category",
    )


class ConfirmBillResponse(BaseModel):
    bill: ConfirmedBill
    confirmed_count: int = Field(..., ge=1, description="Number of bills confirmed in this session")
