"""
Pydantic schemas for API request and response validation.

Flow payloads (credit score, bill parse, literacy) live with their flows and
use camelCase wire names. The schemas here wrap them for the HTTP surface and
use snake_case.
"""
