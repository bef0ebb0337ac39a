"""Submission of a completed timesheet to a hosted form endpoint.

The payload carries the employee name, the period covered, the overall
totals from the recalculation and the CSV export of the rows. Required
inputs are checked before any network call is made.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import requests

from timesheet_checker.aggregators.timesheet_aggregator import recalculate
from timesheet_checker.calculators.overtime_reallocator import BASIC_THRESHOLD_MINUTES
from timesheet_checker.models.timesheet import TimeEntryRow
from timesheet_checker.services.retry_handler import (
    RetryExhaustedException,
    RetryHandler,
)
from timesheet_checker.writers.csv_writer import rows_to_csv
from timesheet_checker.writers.report_formatter import format_hm

logger = logging.getLogger(__name__)


class MissingRequiredInputError(Exception):
    """Raised when the name, period or rows needed for submission are missing."""

    pass


class SubmissionError(Exception):
    """Raised when the endpoint rejects or cannot receive the submission."""

    pass


@dataclass(frozen=True)
class SubmissionPayload:
    """Form fields sent to the submission endpoint.

    Attributes:
        employee_name: Name of the person the timesheet belongs to
        period_start: First day of the period (opaque text)
        period_end: Last day of the period (opaque text)
        csv_text: CSV export of the rows
        totals: Overall adjusted totals rendered as "Hh Mm"
    """

    employee_name: str
    period_start: str
    period_end: str
    csv_text: str
    totals: Dict[str, str]

    def to_form(self) -> Dict[str, str]:
        """Return the payload as flat form fields."""
        form = {
            "name": self.employee_name,
            "start_date": self.period_start,
            "end_date": self.period_end,
            "timesheet_csv": self.csv_text,
        }
        form.update(self.totals)
        return form


def build_payload(
    employee_name: Optional[str],
    period_start: Optional[str],
    period_end: Optional[str],
    rows: Sequence[TimeEntryRow],
    basic_threshold: int = BASIC_THRESHOLD_MINUTES,
) -> SubmissionPayload:
    """Validate the inputs and assemble the submission payload.

    Args:
        employee_name: Name of the employee
        period_start: First day of the period
        period_end: Last day of the period
        rows: Rows to submit
        basic_threshold: Weekly basic minutes before overtime counts

    Returns:
        SubmissionPayload ready to post

    Raises:
        MissingRequiredInputError: If the name, a period date or rows are missing
    """
    required = [
        ("employee name", employee_name),
        ("period start", period_start),
        ("period end", period_end),
    ]
    missing = [label for label, value in required if not value or not value.strip()]
    if missing:
        raise MissingRequiredInputError(f"Missing required input: {', '.join(missing)}")
    if not rows:
        raise MissingRequiredInputError("No rows to submit")

    overall = recalculate(rows, basic_threshold=basic_threshold).overall

    return SubmissionPayload(
        employee_name=employee_name.strip(),
        period_start=period_start.strip(),
        period_end=period_end.strip(),
        csv_text=rows_to_csv(rows),
        totals={
            "total_basic": format_hm(overall.basic),
            "total_ot15": format_hm(overall.ot15),
            "total_ot20": format_hm(overall.ot20),
            "total_hours": format_hm(overall.total),
        },
    )


class SubmissionService:
    """Posts timesheet payloads to a hosted form endpoint.

    Attributes:
        url: Endpoint receiving the form POST
        timeout: Request timeout in seconds
        retry_handler: Retry policy for transient failures
        session: requests session used for the POST

    Example:
        >>> service = SubmissionService("https://forms.example.com/timesheet")
        >>> service.submit(build_payload("Jo Bloggs", "17/03", "23/03", rows))
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        retry_handler: Optional[RetryHandler] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the submission service.

        Args:
            url: Endpoint receiving the form POST
            timeout: Request timeout in seconds (default: 10)
            retry_handler: Retry policy (default: 3 retries with backoff)
            session: requests session (default: a new session)
        """
        self.url = url
        self.timeout = timeout
        self.retry_handler = retry_handler or RetryHandler()
        self.session = session or requests.Session()

    def submit(self, payload: SubmissionPayload) -> requests.Response:
        """Post the payload, retrying transient failures.

        Args:
            payload: Payload built by build_payload

        Returns:
            The successful HTTP response

        Raises:
            SubmissionError: If the endpoint rejects the submission or
                cannot be reached after retries
        """
        logger.info(
            f"Submitting timesheet for {payload.employee_name} "
            f"({payload.period_start} to {payload.period_end})"
        )
        try:
            response = self.retry_handler.execute_with_retry(
                self._post, payload.to_form()
            )
        except RetryExhaustedException as e:
            raise SubmissionError(f"Submission failed after retries: {e}") from e
        except requests.exceptions.RequestException as e:
            raise SubmissionError(f"Submission rejected: {e}") from e

        logger.info(f"Submission accepted with HTTP {response.status_code}")
        return response

    def _post(self, form: Dict[str, str]) -> requests.Response:
        response = self.session.post(self.url, data=form, timeout=self.timeout)
        response.raise_for_status()
        return response
