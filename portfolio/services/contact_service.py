"""Contact Service Module

Validates contact form payloads and runs the accept step for the ones that
pass. Validation is a pure function of the payload; the accept step is a
pluggable coroutine so storage or notifications can be added later without
touching validation.
"""

import asyncio
import logging
import re
from typing import Any, Awaitable, Callable, Mapping, Optional

from portfolio.core.config import Settings, settings
from portfolio.models.contact import (
    ContactFormResponse,
    ContactSubmission,
    ContactSubmissionData,
)


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "subject", "message")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

FIELDS_REQUIRED_MESSAGE = "All fields are required"
INVALID_EMAIL_MESSAGE = "Invalid email format"
SUCCESS_MESSAGE = "Form submitted successfully"

AcceptHook = Callable[[ContactSubmission], Awaitable[None]]


class ContactValidationError(Exception):
    """Raised when a payload cannot be accepted as a contact submission."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def _field_value(payload: Mapping[str, Any], field: str) -> str:
    value = payload.get(field)
    # non-text values count as missing
    return value if isinstance(value, str) else ""


def validate_submission(payload: Optional[Mapping[str, Any]]) -> ContactSubmission:
    """Validate a raw contact form payload.

    Args:
        payload: Parsed request body with name, email, subject and message

    Returns:
        The validated submission

    Raises:
        ContactValidationError: If a field is missing or the email is malformed
    """
    payload = payload or {}
    values = {field: _field_value(payload, field) for field in REQUIRED_FIELDS}

    if not all(values.values()):
        raise ContactValidationError(FIELDS_REQUIRED_MESSAGE)

    if not EMAIL_PATTERN.match(values["email"]):
        raise ContactValidationError(INVALID_EMAIL_MESSAGE)

    return ContactSubmission(**values)


class ContactService:
    """Service for accepting contact form submissions.

    Args:
        on_accept: Coroutine run for every valid submission. Defaults to a
            simulated processing delay.
        accept_delay: Seconds the default accept step waits.
    """

    def __init__(self, on_accept: Optional[AcceptHook] = None, accept_delay: float = 1.0):
        self.accept_delay = accept_delay
        self.on_accept = on_accept or self.simulate_processing

    async def simulate_processing(self, submission: ContactSubmission) -> None:
        """Stand-in for persisting the submission and notifying the site owner."""
        await asyncio.sleep(self.accept_delay)

    async def submit(self, payload: Optional[Mapping[str, Any]]) -> ContactFormResponse:
        """Validate a payload and run the accept step.

        Raises:
            ContactValidationError: If the payload is invalid. The accept
                step is not run in that case.
        """
        submission = validate_submission(payload)

        await self.on_accept(submission)

        logger.info(
            f"Contact form submission accepted from {submission.email} - Subject: {submission.subject}"
        )
        return ContactFormResponse(
            message=SUCCESS_MESSAGE,
            data=ContactSubmissionData(
                name=submission.name,
                email=submission.email,
                subject=submission.subject,
            ),
        )


def build_contact_service(app_settings: Settings = settings) -> ContactService:
    return ContactService(accept_delay=app_settings.CONTACT_ACCEPT_DELAY)
