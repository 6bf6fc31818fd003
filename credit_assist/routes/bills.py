"""
Bill capture endpoints.

The same workflow is exposed twice:

- /bills: the logged-in user's dashboard upload (category optional)
- /register/{registration_id}/bills: bills attached during registration
  (a category must be chosen before parsing)

Flow:
1. POST .../image - Select an image (multipart), get a preview data URI
2. PUT .../category - Pre-select the spending category
3. POST .../parse - Run BillParserFlow, result held as pending
4. POST .../confirm - Accept the pending bill (optional category override)
   or POST .../cancel - Discard it
"""

import logging
from typing import Annotated, Callable, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from credit_assist.auth.dependencies import get_current_session
from credit_assist.flows.bill_parser import BillCategory, BillParserFlow, BillParseResult
from credit_assist.flows.dependencies import get_bill_parser_flow
from credit_assist.schemas.bills import (
    BillCaptureStatusResponse,
    BillImageSelectedResponse,
    CategoryRequest,
    ConfirmBillRequest,
    ConfirmBillResponse,
)
from credit_assist.services.bill_capture import BillCaptureWorkflow
from credit_assist.services.session_store import SessionStore, UserSession, get_session_store

logger = logging.getLogger(__name__)


def get_user_bill_capture(session: UserSession = Depends(get_current_session)) -> BillCaptureWorkflow:
    return session.bill_capture


def get_registration_bill_capture(
    registration_id: str,
    store: SessionStore = Depends(get_session_store),
) -> BillCaptureWorkflow:
    registration = store.get_registration(registration_id)
    if registration is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": "Registration not found or already completed"},
        )
    return registration.bill_capture


def _status(workflow: BillCaptureWorkflow) -> BillCaptureStatusResponse:
    return BillCaptureStatusResponse(
        state=workflow.state.value,
        selected_filename=workflow.selected_image.filename if workflow.selected_image else None,
        selected_category=workflow.selected_category,
        require_category=workflow.require_category,
        pending=workflow.pending,
        last_error=workflow.last_error,
        confirmed_bills=list(workflow.confirmed_bills),
    )


def build_bill_capture_router(
    prefix: str,
    get_workflow: Callable[..., BillCaptureWorkflow],
    tags: list,
) -> APIRouter:
    """Build the bill capture endpoints around a workflow dependency."""
    router = APIRouter(prefix=prefix, tags=tags)

    @router.get(
        "",
        response_model=BillCaptureStatusResponse,
        summary="Get bill capture state and confirmed bills",
    )
    async def get_bill_capture(
        workflow: BillCaptureWorkflow = Depends(get_workflow),
    ) -> BillCaptureStatusResponse:
        return _status(workflow)

    @router.post(
        "/image",
        response_model=BillImageSelectedResponse,
        status_code=status.HTTP_200_OK,
        summary="Select a bill image",
        description="""
        Upload a bill photo (PNG, JPG or WEBP, at most 4MB).

        - 413 if the file is too large (checked before the image is encoded)
        - 415 if the file is not a supported image type
        - Replaces any previously selected image
        """,
    )
    async def select_image(
        image: Annotated[UploadFile, File(description="Bill or receipt image file")],
        category: Annotated[Optional[BillCategory], Form(description="Optional spending category")] = None,
        workflow: BillCaptureWorkflow = Depends(get_workflow),
    ) -> BillImageSelectedResponse:
        data = await image.read()
        preview = workflow.select_image(
            filename=image.filename or "bill",
            content_type=image.content_type,
            data=data,
            category=category,
        )
        return BillImageSelectedResponse(state=workflow.state.value, preview_data_uri=preview)

    @router.put(
        "/category",
        response_model=BillCaptureStatusResponse,
        summary="Choose the spending category for the selected image",
    )
    async def choose_category(
        request: CategoryRequest,
        workflow: BillCaptureWorkflow = Depends(get_workflow),
    ) -> BillCaptureStatusResponse:
        workflow.choose_category(request.category)
        return _status(workflow)

    @router.post(
        "/parse",
        response_model=BillParseResult,
        summary="Parse the selected bill with AI",
        description="""
        Runs the bill parser on the selected image. The result is held as
        pending until it is confirmed or cancelled.

        On failure (502/503) the image and category are kept for a retry.
        """,
    )
    async def parse_bill(
        workflow: BillCaptureWorkflow = Depends(get_workflow),
        bill_parser: BillParserFlow = Depends(get_bill_parser_flow),
    ) -> BillParseResult:
        return await workflow.parse(bill_parser)

    @router.post(
        "/confirm",
        response_model=ConfirmBillResponse,
        summary="Confirm the pending bill",
    )
    async def confirm_bill(
        request: Optional[ConfirmBillRequest] = None,
        workflow: BillCaptureWorkflow = Depends(get_workflow),
    ) -> ConfirmBillResponse:
        bill = workflow.confirm(category_override=request.category if request else None)
        return ConfirmBillResponse(bill=bill, confirmed_count=len(workflow.confirmed_bills))

    @router.post(
        "/cancel",
        response_model=BillCaptureStatusResponse,
        summary="Discard the selected image and any pending bill",
    )
    async def cancel_bill(
        workflow: BillCaptureWorkflow = Depends(get_workflow),
    ) -> BillCaptureStatusResponse:
        workflow.cancel()
        return _status(workflow)

    return router


router = build_bill_capture_router("/bills", get_user_bill_capture, tags=["bills"])
registration_router = build_bill_capture_router(
    "/register/{registration_id}/bills",
    get_registration_bill_capture,
    tags=["registration"],
)
