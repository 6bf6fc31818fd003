"""
Pytest configuration for Credit Assist backend tests.

Sets up the test environment, a scripted fake model client and global
fixtures.
"""
import io
import json
import os
from typing import Any, Dict, List, Optional

import pytest
from PIL import Image

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")
os.environ.setdefault("SCORE_AT_REGISTRATION", "true")


class FakeModelClient:
    """
    ModelClient that records every call and replays queued outcomes.

    Each queued outcome is returned as the raw response text, or raised if it
    is an exception. A call with nothing queued fails the test.
    """

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self._outcomes: List[Any] = []

    def queue(self, *outcomes: Any) -> "FakeModelClient":
        self._outcomes.extend(outcomes)
        return self

    def queue_json(self, *payloads: Dict[str, Any]) -> "FakeModelClient":
        return self.queue(*(json.dumps(payload) for payload in payloads))

    async def generate(
        self,
        parts,
        *,
        system_instruction: str,
        response_schema,
        temperature: float,
    ) -> Optional[str]:
        self.calls.append(
            {
                "parts": parts,
                "system_instruction": system_instruction,
                "response_schema": response_schema,
                "temperature": temperature,
            }
        )
        if not self._outcomes:
            raise AssertionError("Unexpected model call")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def fake_model_client():
    return FakeModelClient()


def _image_bytes(image_format: str) -> bytes:
    img = Image.new("RGB", (64, 64), color="white")
    img_bytes = io.BytesIO()
    img.save(img_bytes, format=image_format)
    return img_bytes.getvalue()


@pytest.fixture
def png_bytes():
    """A small valid PNG image."""
    return _image_bytes("PNG")


@pytest.fixture
def jpeg_bytes():
    """A small valid JPEG image."""
    return _image_bytes("JPEG")


@pytest.fixture
def webp_bytes():
    """A small valid WEBP image."""
    return _image_bytes("WEBP")


@pytest.fixture
def oversized_png_bytes(png_bytes):
    """A PNG padded to 5MB, over the 4MB upload limit."""
    return png_bytes + b"\0" * (5 * 1024 * 1024 - len(png_bytes))


@pytest.fixture
def bill_result_payload():
    """A valid BillParserFlow response (camelCase, as the model returns it)."""
    return {
        "vendorName": "Sharma Kirana Store",
        "transactionDate": "2024-07-15",
        "totalAmount": 450.0,
        "category": "Essential",
        "lineItems": [
            {"description": "Rice 5kg", "amount": 300.0},
            {"description": "Dal 1kg", "amount": 150.0},
        ],
    }


@pytest.fixture
def credit_score_payload():
    """A valid CreditScoreFlow response."""
    return {
        "creditScore": 712,
        "riskLevel": "Medium",
        "insights": "Stable income from tailoring. Build a repayment record with small loans first.",
    }


@pytest.fixture
def credit_score_input():
    """A valid CreditScoreFlow input."""
    return {
        "personalInfo": {"age": 34, "location": "Patna, Bihar", "occupation": "Tailor"},
        "financialInfo": {
            "income": 12000,
            "creditHistory": "Repaid a self-help group loan on time",
            "loanAmount": 50000,
        },
    }
