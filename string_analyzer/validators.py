import logging
from typing import Any

from string_analyzer.exceptions import MissingFieldError, ValidationError, WrongTypeError

logger = logging.getLogger(__name__)


def validate_create_payload(payload: Any) -> str:
    """
    Check a POST /strings body and return the string to analyze.

    Absent, null or empty ``value`` raises MissingFieldError; any other
    non-string value raises WrongTypeError; text that is not
    encodable as UTF-8 raises ValidationError. Nothing is stored on failure.
    """
    if not isinstance(payload, dict):
        raise MissingFieldError("Invalid request body or missing 'value' field")

    value = payload.get("value")
    if value is None or value == "":
        raise MissingFieldError("Invalid request body or missing 'value' field")

    if not isinstance(value, str):
        logger.warning(f"Rejected 'value' of type {type(value).__name__}")
        raise WrongTypeError("Invalid data type for 'value' (must be string)")

    # Lone surrogates cannot be hashed or serialised as UTF-8
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError("'value' is not valid UTF-8 text")

    return value
