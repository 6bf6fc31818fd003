"""
Error taxonomy for model invocation flows.

Every flow fails with exactly one of three error kinds:

- InputValidationError: the candidate input violates the flow's input schema.
  Raised before any model call.
- OutputValidationError: the model answered, but the answer is empty,
  not JSON, or violates the output schema. Never coerced or defaulted.
- UpstreamUnavailableError: the model call itself could not complete
  (network, timeout, quota, missing configuration).

Output and upstream failures look the same to users (a retryable error) but
are logged separately.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

# pydantic error types grouped into the constraint kinds reported to clients
_CONSTRAINT_KINDS = {
    "missing": "required",
    "literal_error": "enum",
    "enum": "enum",
    "greater_than": "range",
    "greater_than_equal": "range",
    "less_than": "range",
    "less_than_equal": "range",
    "string_too_short": "min_length",
    "too_short": "min_length",
    "string_pattern_mismatch": "pattern",
    "json_invalid": "json",
    "json_type": "json",
    "extra_forbidden": "unexpected",
}


@dataclass(frozen=True)
class FieldViolation:
    """One violated constraint on one field."""
    field: str
    constraint: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _constraint_kind(error_type: str) -> str:
    if error_type in _CONSTRAINT_KINDS:
        return _CONSTRAINT_KINDS[error_type]
    if error_type.endswith("_type") or error_type.endswith("_parsing"):
        return "type"
    if error_type == "value_error":
        return "format"
    return error_type


def collect_violations(exc: ValidationError) -> List[FieldViolation]:
    """
    Flatten a pydantic ValidationError into one FieldViolation per error.

    Field paths are dotted using the wire (camelCase) names, with list indexes
    inline, e.g. "lineItems.0.amount". Errors on the root object use "$".
    """
    violations = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error.get("loc", ())) or "$"
        message = error.get("msg", "invalid value")
        # pydantic prefixes custom validator messages with "Value error, "
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        violations.append(
            FieldViolation(
                field=location,
                constraint=_constraint_kind(error.get("type", "")),
                message=message,
            )
        )
    return violations


class FlowError(Exception):
    """Base class for all model invocation flow failures."""

    error_code = "flow_error"

    def __init__(self, message: str, flow_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.flow_name = flow_name

    def to_detail(self) -> Dict[str, Any]:
        """Response body used by the HTTP exception handlers."""
        return {"error": self.error_code, "details": self.message}


class InputValidationError(FlowError):
    """Candidate input failed the flow's input schema. No model call was made."""

    error_code = "input_validation_error"

    def __init__(self, violations: List[FieldViolation], flow_name: Optional[str] = None):
        fields = ", ".join(v.field for v in violations) or "input"
        super().__init__(f"Invalid input for fields: {fields}", flow_name)
        self.violations = violations

    def to_detail(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "details": [v.to_dict() for v in self.violations],
        }


class OutputValidationError(FlowError):
    """The model produced no usable structured output."""

    error_code = "output_validation_error"

    def __init__(
        self,
        reason: str,
        violations: Optional[List[FieldViolation]] = None,
        flow_name: Optional[str] = None,
    ):
        super().__init__(reason, flow_name)
        self.violations = violations or []


class UpstreamUnavailableError(FlowError):
    """The external model could not be reached or did not answer in time."""

    error_code = "upstream_unavailable"
