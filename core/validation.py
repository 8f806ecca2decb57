"""
Input validation for issue payloads.

Validation returns a result object instead of raising, so callers can map
failures onto their own response contract.
"""

from dataclasses import dataclass, field
from typing import Any

REQUIRED_FIELDS = ("issue_title", "issue_text", "created_by")
OPTIONAL_FIELDS = ("assigned_to", "status_text")
CREATE_FIELDS = REQUIRED_FIELDS + OPTIONAL_FIELDS

_TRUE_VALUES = {"true"}
_FALSE_VALUES = {"false"}


@dataclass
class ValidationResult:
    """Result of validating a new issue payload."""

    valid: bool
    fields: dict[str, str] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)


def pick(payload: dict[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    """Return only the given keys that are present in ``payload``."""
    return {key: payload[key] for key in keys if key in payload}


def validate_new_issue(payload: dict[str, Any]) -> ValidationResult:
    """
    Validate the fields of an issue to be created.

    Unknown keys are dropped. Required fields must be non-empty strings;
    optional fields, when present, must be strings.

    Args:
        payload: Raw request body.

    Returns:
        ValidationResult with the cleaned fields on success, or the names of
        missing and invalid fields on failure.
    """
    candidate = pick(payload, CREATE_FIELDS)
    missing = []
    invalid = []

    for name in REQUIRED_FIELDS:
        value = candidate.get(name)
        if value is None or value == "":
            missing.append(name)
        elif not isinstance(value, str):
            invalid.append(name)

    for name in OPTIONAL_FIELDS:
        value = candidate.get(name)
        if value is None:
            candidate.pop(name, None)
        elif not isinstance(value, str):
            invalid.append(name)

    if missing or invalid:
        return ValidationResult(valid=False, missing=missing, invalid=invalid)
    return ValidationResult(valid=True, fields=candidate)


def parse_bool(value: Any, strict: bool = False) -> bool:
    """
    Map an external boolean representation to ``bool``.

    Booleans pass through. Strings are compared literally against
    ``"true"``/``"false"``. Anything else is False, or raises ValueError
    when ``strict`` is set.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES or not strict:
            return False
    elif not strict:
        return False
    raise ValueError(f"Not a boolean value: {value!r}")
