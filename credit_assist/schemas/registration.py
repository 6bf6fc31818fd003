"""
Pydantic schemas for registration endpoints.

The registration form is a tagged union over ``role``: officers only give
name, email and password; beneficiaries give the full personal, financial and
address set. All checks here are local and run before any model call.
"""

import re
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from credit_assist.flows.credit_scoring import CreditScoreResult
from credit_assist.schemas.bills import ConfirmedBill

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
_PINCODE = re.compile(r"[0-9]{6}")


class _AccountFields(BaseModel):
    name: str = Field(..., min_length=2, description="Full name")
    email: str = Field(..., pattern=_EMAIL_PATTERN, description="Email address", examples=["m@example.com"])
    password: str = Field(..., min_length=8, description="Account password")


class OfficerRegistrationForm(_AccountFields):
    """Loan officer sign-up. No credit scoring."""
    role: Literal["officer"]


class BeneficiaryRegistrationForm(_AccountFields):
    """Beneficiary sign-up with everything needed for credit scoring."""
    role: Literal["beneficiary"]
    age: int = Field(..., description="Age in years (18 or older)")
    occupation: str = Field(..., min_length=2, description="Occupation", examples=["Tailor"])
    monthly_income: float = Field(..., ge=0, description="Monthly income in INR")
    credit_history: str = Field(
        ...,
        min_length=3,
        description="Free-text credit history",
        examples=["Repaid a self-help group loan of 20,000 INR on time"],
    )
    loan_amount: float = Field(..., ge=0, description="Requested loan amount in INR")
    address: str = Field(..., min_length=5, description="Street address")
    city: str = Field(..., min_length=2, description="City or village")
    state: str = Field(..., min_length=2, description="State")
    pincode: str = Field(..., description="6-digit Indian postal code", examples=["800001"])

    @field_validator("age")
    @classmethod
    def validate_age(cls, value: int) -> int:
        if value < 18:
            raise ValueError("must be at least 18")
        return value

    @field_validator("pincode")
    @classmethod
    def validate_pincode(cls, value: str) -> str:
        if not _PINCODE.fullmatch(value):
            raise ValueError("must be a 6-digit pincode")
        return value


RegistrationForm = Annotated[
    Union[BeneficiaryRegistrationForm, OfficerRegistrationForm],
    Field(discriminator="role"),
]


class RegistrationStartResponse(BaseModel):
    registration_id: str = Field(..., description="Id of the registration session (used for bill uploads)")


class RegistrationOutcome(BaseModel):
    """
    Result of a successful registration.

    The client shows ``credit_score`` in a blocking dialog (when present)
    and navigates to ``redirect_to`` once the user acknowledges it.
    """
    role: Literal["beneficiary", "officer"]
    name: str
    email: str
    credit_score: Optional[CreditScoreResult] = Field(
        None,
        description="AI credit score (beneficiaries, when scoring at registration is enabled)",
    )
    confirmed_bills: List[ConfirmedBill] = Field(
        default_factory=list,
        description="Bills confirmed during this registration, in confirmation order",
    )
    redirect_to: str = Field("/login", description="Where the client should navigate next")
