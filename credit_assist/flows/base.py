"""
Generic model invocation flow.

A flow is one validated-input -> external-model-call -> validated-output
operation. Concrete flows only declare their schemas, system prompt and
prompt renderer; ``ModelFlow.invoke`` runs the four steps:

1. Validate the candidate input against ``input_model``
   (InputValidationError, no model call on failure)
2. Render the prompt parts
3. Call the model with ``output_model`` as the response schema
   (UpstreamUnavailableError if the call cannot complete)
4. Validate the response against ``output_model``
   (OutputValidationError on empty, non-JSON or non-conforming output)

Flows hold no state between calls, so retrying simply calls ``invoke`` again.
"""

import logging
import re
from typing import Any, Generic, List, Literal, Optional, Type, TypeVar, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from credit_assist.flows.errors import (
    InputValidationError,
    OutputValidationError,
    UpstreamUnavailableError,
    collect_violations,
)
from credit_assist.flows.model_client import ModelClient, PromptPart

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*([\s\S]*?)\s*```$", re.IGNORECASE)


class FlowSchema(BaseModel):
    """
    Base for flow input/output models.

    Attributes are snake_case; the wire format (and the schema shown to the
    model) uses camelCase aliases. Instances are immutable.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


# =============================================================================
# FIELD GUIDE RENDERING
# =============================================================================
# Field descriptions double as validation documentation and as guidance for
# the model. render_field_guide turns them into prompt text.
# =============================================================================

_PRIMITIVE_NAMES = {str: "string", int: "integer", float: "number", bool: "boolean"}


def _describe_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is Literal:
        return "one of " + ", ".join(f'"{choice}"' for choice in get_args(annotation))
    if origin in (list, List):
        (item_type,) = get_args(annotation) or (Any,)
        return f"list of {_describe_type(item_type)}"
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return "object"
    return _PRIMITIVE_NAMES.get(annotation, getattr(annotation, "__name__", str(annotation)))


def _describe_bounds(metadata: List[Any]) -> str:
    bounds = []
    for item in metadata:
        if getattr(item, "ge", None) is not None:
            bounds.append(f">= {item.ge}")
        if getattr(item, "le", None) is not None:
            bounds.append(f"<= {item.le}")
    return f" ({', '.join(bounds)})" if bounds else ""


def _nested_model(annotation: Any) -> Optional[Type[BaseModel]]:
    if get_origin(annotation) in (list, List):
        args = get_args(annotation)
        annotation = args[0] if args else None
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    return None


def render_field_guide(model: Type[BaseModel], indent: int = 0) -> str:
    """
    Render a model's fields as an indented bullet list.

    Example line: ``- creditScore (number (>= 300, <= 850)): The composite ...``
    """
    lines = []
    pad = "  " * indent
    for name, field in model.model_fields.items():
        wire_name = field.alias or name
        type_text = _describe_type(field.annotation) + _describe_bounds(field.metadata)
        description = field.description or ""
        lines.append(f"{pad}- {wire_name} ({type_text}): {description}".rstrip(": "))
        nested = _nested_model(field.annotation)
        if nested is not None:
            lines.append(render_field_guide(nested, indent + 1))
    return "\n".join(lines)


def _strip_code_fence(text: str) -> str:
    stripped = text.strip()
    match = _CODE_FENCE.match(stripped)
    return match.group(1) if match else stripped


# =============================================================================
# FLOW
# =============================================================================

class ModelFlow(Generic[InputT, OutputT]):
    """Schema-constrained request/response call to the hosted model."""

    name: str = "ModelFlow"
    input_model: Type[InputT]
    output_model: Type[OutputT]
    system_prompt: str = ""
    temperature: float = 0.2

    def __init__(self, client: ModelClient):
        self.client = client

    def validate_input(self, candidate: Any) -> InputT:
        """Step 1: validate an unvalidated candidate (dict or model instance)."""
        if isinstance(candidate, self.input_model):
            return candidate
        try:
            return self.input_model.model_validate(candidate)
        except ValidationError as e:
            violations = collect_violations(e)
            logger.info(
                f"{self.name} input rejected: "
                f"{', '.join(f'{v.field}={v.constraint}' for v in violations)}"
            )
            raise InputValidationError(violations, flow_name=self.name) from e

    def render_prompt(self, request: InputT) -> List[PromptPart]:
        """Step 2: build the prompt parts for a validated request."""
        raise NotImplementedError

    def validate_output(self, raw_text: Optional[str]) -> OutputT:
        """Step 4: parse and validate the model's raw response text."""
        if raw_text is None or not raw_text.strip():
            logger.error(f"{self.name} output rejected: empty response")
            raise OutputValidationError(
                "The model returned an empty response.", flow_name=self.name
            )

        try:
            return self.output_model.model_validate_json(_strip_code_fence(raw_text))
        except ValidationError as e:
            violations = collect_violations(e)
            logger.error(
                f"{self.name} output rejected: "
                f"{', '.join(f'{v.field}={v.constraint}' for v in violations)}"
            )
            logger.debug(f"Rejected response preview: {raw_text[:200]}")
            raise OutputValidationError(
                "The model response did not match the expected format.",
                violations=violations,
                flow_name=self.name,
            ) from e

    async def invoke(self, candidate: Any) -> OutputT:
        """Run all four steps. Returns a validated result or raises a FlowError."""
        request = self.validate_input(candidate)
        parts = self.render_prompt(request)

        logger.info(f"{self.name} invoked")
        try:
            raw_text = await self.client.generate(
                parts,
                system_instruction=self.system_prompt,
                response_schema=self.output_model,
                temperature=self.temperature,
            )
        except UpstreamUnavailableError as e:
            e.flow_name = self.name
            logger.error(f"{self.name} upstream unavailable: {e.message}")
            raise

        result = self.validate_output(raw_text)
        logger.info(f"{self.name} completed")
        return result
