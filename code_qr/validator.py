"""Validation state derived from a normalized code."""

from dataclasses import dataclass
from typing import Optional

from .config import CODE_LENGTH


@dataclass(frozen=True)
class ValidationState:
    """Derived validity of a code."""
    is_empty: bool
    is_valid: bool
    message: Optional[str] = None


def validate(code: str) -> ValidationState:
    """Derive validation state from code length.

    An empty code carries no message: "not started" is not an error.
    """
    length = len(code)
    if length == 0:
        return ValidationState(is_empty=True, is_valid=False)

    if length == CODE_LENGTH:
        return ValidationState(is_empty=False, is_valid=True)

    return ValidationState(
        is_empty=False,
        is_valid=False,
        message=(
            f"Enter exactly {CODE_LENGTH} characters (current: {length})"
        )
    )


def counter(code: str) -> str:
    """Character counter text, e.g. "3/12"."""
    return f"{len(code)}/{CODE_LENGTH}"
