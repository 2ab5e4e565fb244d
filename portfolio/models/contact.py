"""Contact form models for the portfolio site.

This module contains the Pydantic models for contact form functionality.
"""

from typing_extensions import Annotated
from pydantic import BaseModel, Field, ConfigDict


class ContactSubmission(BaseModel):
    """A validated contact form submission.

    Attributes:
        name: Name of the person getting in touch
        email: Email address for the reply
        subject: Subject line of the inquiry
        message: The message itself
    """
    name: Annotated[str, Field(..., min_length=1, description="Name of the person getting in touch")]
    email: Annotated[str, Field(..., min_length=1, description="Email address for the reply")]
    subject: Annotated[str, Field(..., min_length=1, description="Subject line of the inquiry")]
    message: Annotated[str, Field(..., min_length=1, description="The message itself")]

    model_config = ConfigDict(frozen=True)


class ContactSubmissionData(BaseModel):
    """Echo of an accepted submission. The message body is never echoed."""
    name: str = Field(..., description="Name of the sender")
    email: str = Field(..., description="Email address of the sender")
    subject: str = Field(..., description="Subject line of the inquiry")


class ContactFormResponse(BaseModel):
    """Response model for accepted contact form submissions.

    Attributes:
        message: Confirmation message for the user
        data: Echo of the submitted name, email and subject
    """
    message: str = Field(..., description="Confirmation message for the user")
    data: ContactSubmissionData


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human readable reason the request failed")
