"""
Bill Capture Workflow.

Human-in-the-loop cycle around BillParserFlow:

    idle -> image_selected -> parsing -> pending_review -> idle

- idle -> image_selected: an image is selected (size and type checked here,
  before anything is encoded)
- image_selected -> parsing: explicit user action, needs an image and, when
  the workflow requires it, a category
- parsing -> pending_review: the flow returned a valid BillParseResult
- parsing -> image_selected: the flow failed; image and category are kept so
  the user can retry without re-uploading
- pending_review -> idle: confirm (bill appended) or cancel (bill discarded)

At most one bill is in flight. Confirmed bills are immutable and kept in
confirmation order for the lifetime of the owning session.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from credit_assist.config import settings
from credit_assist.flows.bill_parser import BillCategory, BillParserFlow, BillParseResult
from credit_assist.flows.data_uri import sniff_image_mime, to_data_uri
from credit_assist.flows.errors import FlowError
from credit_assist.schemas.bills import ConfirmedBill
from credit_assist.utils.constants import SUPPORTED_IMAGE_MIME_TYPES

logger = logging.getLogger(__name__)


class BillCaptureState(str, Enum):
    IDLE = "idle"
    IMAGE_SELECTED = "image_selected"
    PARSING = "parsing"
    PENDING_REVIEW = "pending_review"


# --- Errors ---

class BillCaptureError(Exception):
    """Base class for bill capture rejections surfaced to the user."""

    error_code = "bill_capture_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FileTooLargeError(BillCaptureError):
    error_code = "file_too_large"


class UnsupportedFileTypeError(BillCaptureError):
    error_code = "invalid_file_type"


class MissingSelectionError(BillCaptureError):
    error_code = "missing_selection"


class InvalidTransitionError(BillCaptureError):
    error_code = "invalid_transition"


class WorkflowBusyError(BillCaptureError):
    error_code = "parse_in_progress"


@dataclass(frozen=True)
class SelectedImage:
    filename: str
    mime_type: str
    data: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"SelectedImage(filename={self.filename!r}, mime_type={self.mime_type!r}, size={self.size_bytes})"


class BillCaptureWorkflow:
    """Session-scoped state machine for capturing and confirming bills."""

    def __init__(self, require_category: bool = False, max_image_bytes: Optional[int] = None):
        self.require_category = require_category
        self.max_image_bytes = max_image_bytes or settings.MAX_BILL_IMAGE_BYTES

        self.state = BillCaptureState.IDLE
        self.selected_image: Optional[SelectedImage] = None
        self.selected_category: Optional[str] = None
        self.pending: Optional[BillParseResult] = None
        self.last_error: Optional[str] = None
        self._confirmed: List[ConfirmedBill] = []

    @property
    def confirmed_bills(self) -> Tuple[ConfirmedBill, ...]:
        return tuple(self._confirmed)

    @property
    def is_parsing(self) -> bool:
        return self.state is BillCaptureState.PARSING

    def _require_state(self, action: str, *allowed: BillCaptureState) -> None:
        if self.state is BillCaptureState.PARSING and BillCaptureState.PARSING not in allowed:
            raise WorkflowBusyError("A bill is being parsed. Please wait for it to finish.")
        if self.state not in allowed:
            raise InvalidTransitionError(
                f"Cannot {action} while the bill capture is in state '{self.state.value}'"
            )

    def select_image(
        self,
        filename: str,
        content_type: Optional[str],
        data: bytes,
        category: Optional[BillCategory] = None,
    ) -> str:
        """
        Select a bill image (idle -> image_selected, or replace the current pick).

        Size is checked before the image is encoded, and the declared type must
        match the file's leading bytes. A rejected file leaves the workflow
        exactly as it was.

        Returns:
            Preview data URI for the selected image
        """
        self._require_state("select an image", BillCaptureState.IDLE, BillCaptureState.IMAGE_SELECTED)

        if len(data) > self.max_image_bytes:
            logger.warning(f"Bill image rejected: size={len(data)} bytes")
            raise FileTooLargeError(
                f"File too large. Please upload an image smaller than "
                f"{self.max_image_bytes // (1024 * 1024)}MB."
            )

        mime_type = (content_type or "").split(";")[0].strip().lower()
        if mime_type not in SUPPORTED_IMAGE_MIME_TYPES:
            logger.warning(f"Bill image rejected: content_type={content_type}")
            raise UnsupportedFileTypeError("File must be a PNG, JPG, or WEBP image.")

        detected = sniff_image_mime(data)
        if detected != mime_type:
            logger.warning(f"Bill image rejected: declared {mime_type}, content is {detected or 'unknown'}")
            raise UnsupportedFileTypeError(
                "The file content does not match its image type. Please upload a PNG, JPG, or WEBP image."
            )

        self.selected_image = SelectedImage(filename=filename, mime_type=mime_type, data=data)
        if category is not None:
            self.selected_category = category
        self.pending = None
        self.last_error = None
        self.state = BillCaptureState.IMAGE_SELECTED

        logger.info(f"Bill image selected: type={mime_type}, size={len(data)} bytes")
        return to_data_uri(data, mime_type)

    def choose_category(self, category: BillCategory) -> None:
        """Pre-select the spending category for the selected image."""
        self._require_state("choose a category", BillCaptureState.IMAGE_SELECTED)
        self.selected_category = category

    async def parse(self, bill_parser: BillParserFlow) -> BillParseResult:
        """
        Run the bill parser on the selected image (image_selected -> parsing).

        Raises:
            MissingSelectionError: no image, or no category when one is required
            WorkflowBusyError: a parse is already in flight
            FlowError: the flow failed; the workflow is back in image_selected
        """
        self._require_state("parse", BillCaptureState.IMAGE_SELECTED, BillCaptureState.IDLE)
        if self.selected_image is None:
            raise MissingSelectionError("Please select a bill image to upload.")
        if self.require_category and self.selected_category is None:
            raise MissingSelectionError("Please choose a category for this bill before parsing.")

        # Set before the first await so a concurrent request sees the busy state
        self.state = BillCaptureState.PARSING
        self.last_error = None
        image = self.selected_image

        try:
            result = await bill_parser.invoke(
                {"photoDataUri": to_data_uri(image.data, image.mime_type)}
            )
        except FlowError as e:
            self.state = BillCaptureState.IMAGE_SELECTED
            self.last_error = "The AI could not read the document. Please try a clearer image."
            logger.warning(f"Bill parse failed ({type(e).__name__}), image kept for retry")
            raise

        self.pending = result
        self.state = BillCaptureState.PENDING_REVIEW
        logger.info(f"Bill parsed: category={result.category}, items={len(result.line_items)}")
        return result

    def confirm(self, category_override: Optional[BillCategory] = None) -> ConfirmedBill:
        """
        Accept the pending bill (pending_review -> idle).

        The confirmed category is the override if given, else the category the
        user pre-selected, else the one the model detected.
        """
        self._require_state("confirm a bill", BillCaptureState.PENDING_REVIEW)

        category = category_override or self.selected_category or self.pending.category
        bill = ConfirmedBill(
            **self.pending.model_dump(exclude={"category"}),
            category=category,
            detected_category=self.pending.category,
        )
        self._confirmed.append(bill)
        self._reset()

        logger.info(f"Bill confirmed: total confirmed={len(self._confirmed)}")
        return bill

    def cancel(self) -> None:
        """Discard the selected image and any pending result (back to empty idle)."""
        self._require_state(
            "cancel",
            BillCaptureState.IDLE,
            BillCaptureState.IMAGE_SELECTED,
            BillCaptureState.PENDING_REVIEW,
        )
        if self.pending is not None:
            logger.info("Pending bill discarded")
        self._reset()

    def _reset(self) -> None:
        self.state = BillCaptureState.IDLE
        self.selected_image = None
        self.selected_category = None
        self.pending = None
        self.last_error = None
