"""Services for talking to systems outside the timesheet checker."""

from timesheet_checker.services.retry_handler import (
    RetryExhaustedException,
    RetryHandler,
)
from timesheet_checker.services.submission_service import (
    MissingRequiredInputError,
    SubmissionError,
    SubmissionPayload,
    SubmissionService,
    build_payload,
)

__all__ = [
    "MissingRequiredInputError",
    "RetryExhaustedException",
    "RetryHandler",
    "SubmissionError",
    "SubmissionPayload",
    "SubmissionService",
    "build_payload",
]
