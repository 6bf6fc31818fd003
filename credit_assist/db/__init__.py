"""
Data access layer for the Credit Assist backend.

There is no persistence: this package only exposes the fixed mock directory
used by login and the dashboards.
"""

from .mock_data import (
    MOCK_ADMIN_FORECAST,
    MOCK_BENEFICIARIES_LIST,
    MOCK_BENEFICIARY_DATA,
    MOCK_USERS,
)

__all__ = [
    "MOCK_USERS",
    "MOCK_BENEFICIARY_DATA",
    "MOCK_BENEFICIARIES_LIST",
    "MOCK_ADMIN_FORECAST",
]
