"""Base model for the timesheet data models.

This module provides a base Pydantic model with the configuration shared by
every input record of the timesheet checker.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation on construction and assignment
    - Population by field name as well as by alias
    - Rejection of unknown fields

    Example:
        >>> class Label(BaseDataModel):
        ...     text: str
        >>> Label(text="Week 1").model_dump()
        {'text': 'Week 1'}
    """

    model_config = ConfigDict(
        # Validate on assignment to catch errors early
        validate_assignment=True,
        # Allow both attribute names and aliases (e.g. "break")
        populate_by_name=True,
        # Unknown fields are a caller bug
        extra="forbid",
        frozen=False,
    )
