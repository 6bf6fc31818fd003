"""
FastAPI application entry point for the Credit Assist backend.

This module creates the FastAPI app instance, registers all routers and maps
flow and workflow errors to HTTP responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from credit_assist.config import settings
from credit_assist.flows.errors import (
    FlowError,
    InputValidationError,
    OutputValidationError,
    UpstreamUnavailableError,
)
from credit_assist.routes.ai_flows import router as ai_flows_router
from credit_assist.routes.auth import router as auth_router
from credit_assist.routes.bills import registration_router as registration_bills_router
from credit_assist.routes.bills import router as bills_router
from credit_assist.routes.chat import router as chat_router
from credit_assist.routes.dashboard import router as dashboard_router
from credit_assist.routes.health import router as health_router
from credit_assist.routes.registration import router as registration_router
from credit_assist.services.bill_capture import (
    BillCaptureError,
    FileTooLargeError,
    MissingSelectionError,
    UnsupportedFileTypeError,
)
from credit_assist.services.chat_service import ConversationBusyError
from credit_assist.services.registration_service import RegistrationBusyError

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (none if unset)
    - ENVIRONMENT=testing/development: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed. Set CORS_ALLOWED_ORIGINS for web clients."
            )
        return list(origins)

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# HTTP status per bill capture rejection; anything else is a state conflict
_BILL_CAPTURE_STATUS = {
    FileTooLargeError: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    UnsupportedFileTypeError: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    MissingSelectionError: status.HTTP_400_BAD_REQUEST,
}


# Create FastAPI app
app = FastAPI(
    title="Credit Assist API",
    description="AI credit scoring, bill parsing and financial literacy for NBCFDC beneficiaries",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log validation errors for debugging.

    The request body is not logged or echoed back since it may carry bill
    images or personal financial figures.
    """
    logger.error(f"Validation error on {request.method} {request.url.path}: {len(exc.errors())} errors")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_encoder(
                [{key: value for key, value in error.items() if key not in ("input", "ctx")} for error in exc.errors()]
            ),
        }
    )


@app.exception_handler(InputValidationError)
async def input_validation_handler(request: Request, exc: InputValidationError):
    logger.info(f"{exc.flow_name or 'Flow'} input rejected on {request.url.path}")
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=exc.to_detail())


@app.exception_handler(OutputValidationError)
async def output_validation_handler(request: Request, exc: OutputValidationError):
    logger.error(f"{exc.flow_name or 'Flow'} returned unusable output on {request.url.path}")
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=exc.to_detail())


@app.exception_handler(UpstreamUnavailableError)
async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailableError):
    logger.error(f"{exc.flow_name or 'Flow'} upstream unavailable on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=exc.to_detail())


@app.exception_handler(FlowError)
async def flow_error_handler(request: Request, exc: FlowError):
    logger.error(f"Unexpected flow error on {request.url.path}: {type(exc).__name__}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=exc.to_detail())


@app.exception_handler(BillCaptureError)
async def bill_capture_handler(request: Request, exc: BillCaptureError):
    status_code = _BILL_CAPTURE_STATUS.get(type(exc), status.HTTP_409_CONFLICT)
    logger.warning(f"Bill capture rejected on {request.url.path}: {exc.error_code}")
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.error_code, "details": exc.message},
    )


@app.exception_handler(ConversationBusyError)
async def conversation_busy_handler(request: Request, exc: ConversationBusyError):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": "chat_busy", "details": str(exc)},
    )


@app.exception_handler(RegistrationBusyError)
async def registration_busy_handler(request: Request, exc: RegistrationBusyError):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": "submit_in_progress", "details": str(exc)},
    )


# Configure CORS with environment-based origins
cors_origins = _get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(ai_flows_router)
app.include_router(bills_router)
app.include_router(registration_router)
app.include_router(registration_bills_router)
app.include_router(chat_router)
app.include_router(dashboard_router)

logger.info("FastAPI app initialized successfully")
