"""Contact form endpoint for the portfolio site.

This module contains the FastAPI route that accepts contact form submissions.
Requests are rate limited per client before they reach validation.
"""

import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse

from portfolio.core.config import settings
from portfolio.core.rate_limit import limiter
from portfolio.models.contact import ContactFormResponse, ErrorResponse
from portfolio.services.contact_service import ContactService, ContactValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

SUBMISSION_ERROR_MESSAGE = "Error submitting form. Please try again later."


def get_contact_service(request: Request) -> ContactService:
    """Return the contact service owned by the running application."""
    return request.app.state.contact_service


async def read_form_payload(request: Request) -> Dict[str, Any]:
    """Parse a JSON or form-encoded request body into a dict.

    A body that cannot be parsed, or that is not a JSON object, yields an
    empty payload.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.info("Contact form body is not valid JSON")
            return {}
        return payload if isinstance(payload, dict) else {}

    if content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    ):
        try:
            form = await request.form()
        except HTTPException as e:
            logger.info(f"Contact form body could not be parsed: {e.detail}")
            return {}
        return {key: value for key, value in form.items()}

    return {}


@router.post(
    "/submit-form",
    response_model=ContactFormResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Submit contact form",
    description="Submit a contact form message. Limited per client address.",
)
@limiter.limit(settings.CONTACT_RATE_LIMIT)
async def submit_form(
    request: Request,
    contact_service: ContactService = Depends(get_contact_service),
) -> JSONResponse:
    """
    Submit a contact form message.

    Args:
        request: FastAPI request object carrying the JSON or form body
        contact_service: Service validating and accepting the submission

    Returns:
        200 with the echoed name, email and subject, 400 with the validation
        reason, or 500 if accepting the submission failed
    """
    try:
        payload = await read_form_payload(request)
        result = await contact_service.submit(payload)
        return JSONResponse(status_code=status.HTTP_200_OK, content=result.model_dump())

    except ContactValidationError as e:
        logger.info(f"Contact form rejected: {e.reason}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": e.reason},
        )

    except Exception as e:
        logger.error(f"Form submission error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SUBMISSION_ERROR_MESSAGE},
        )
