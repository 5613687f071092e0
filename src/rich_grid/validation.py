"""Run the caller's filter/validate hooks over a composed answer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Union

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Please enter a valid value"

# validate(answer) returns True to accept, or False / an error message to reject
Validator = Callable[[Any], Union[bool, str]]
Filter = Callable[[Any], Any]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one submission.

    Attributes:
        is_valid: Whether the answer was accepted.
        value: The answer after filtering.
        error: Message to show when rejected.
    """

    is_valid: bool
    value: Any
    error: str | None = None


def run_validation(
    answer: Any,
    validate: Validator | None = None,
    filter: Filter | None = None,
) -> ValidationResult:
    """Filter then validate ``answer``.

    A validator returning a string rejects with that message; returning a
    falsy value rejects with DEFAULT_ERROR. An exception raised by either
    hook rejects the submission and its text becomes the message.
    """
    value = answer
    try:
        if filter is not None:
            value = filter(answer)
        outcome = True if validate is None else validate(value)
    except Exception as e:
        logger.warning("Answer validation raised %s: %s", type(e).__name__, e)
        return ValidationResult(is_valid=False, value=value, error=str(e) or type(e).__name__)

    if isinstance(outcome, str):
        return ValidationResult(is_valid=False, value=value, error=outcome or DEFAULT_ERROR)
    if outcome:
        return ValidationResult(is_valid=True, value=value)
    return ValidationResult(is_valid=False, value=value, error=DEFAULT_ERROR)
