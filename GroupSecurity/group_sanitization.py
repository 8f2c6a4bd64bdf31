"""
GROUP SANITIZATION
==================
Validate a whole group payload and build its sanitized form.

FLOW:
- sanitize_and_validate_group() runs every field validator and collects
  all errors in field order.
- first_group_error() stops at the first failing field.

WHY:
- Create flows report every problem at once; edit forms show one at a time.

HOW:
- Validators see the raw values. Only a fully valid payload yields
  sanitized data: trimmed name, trimmed and escaped description,
  verbatim category/privacy, and truthy passthrough fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from GroupSecurity.error_handling import InvalidGroupDataError
from GroupSecurity.input_validation import (
    ValidationResult,
    trim_whitespace,
    validate_group_category,
    validate_group_description,
    validate_group_name,
    validate_group_privacy,
)
from GroupSecurity.xss_protection import sanitize_text


GROUP_FIELDS = ("name", "description", "category", "privacy")
PASSTHROUGH_FIELDS = ("creatorId", "banner", "icon")

_VALIDATORS = {
    "name": validate_group_name,
    "description": validate_group_description,
    "category": validate_group_category,
    "privacy": validate_group_privacy,
}


@dataclass
class GroupValidationResult:
    valid: bool
    sanitized: dict[str, Any] | None = None
    errors: list[str] = field(default_factory=list)
    failed_fields: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True, "sanitized": self.sanitized}
        return {"valid": False, "errors": list(self.errors)}


def _require_mapping(group_data: Any) -> Mapping:
    if not isinstance(group_data, Mapping):
        raise InvalidGroupDataError(group_data)
    return group_data


def _sanitize_field(name: str, value: str) -> str:
    if name == "name":
        return trim_whitespace(value)
    if name == "description":
        return sanitize_text(trim_whitespace(value))
    return value


def sanitize_and_validate_group(group_data: Mapping) -> GroupValidationResult:
    group_data = _require_mapping(group_data)
    errors: list[str] = []
    failed: list[str] = []
    sanitized: dict[str, Any] = {}

    for name in GROUP_FIELDS:
        value = group_data.get(name)
        result = _VALIDATORS[name](value)
        if not result.valid:
            errors.append(result.error)
            failed.append(name)
        else:
            sanitized[name] = _sanitize_field(name, value)

    if errors:
        return GroupValidationResult(valid=False, errors=errors, failed_fields=failed)

    for name in PASSTHROUGH_FIELDS:
        value = group_data.get(name)
        if value:
            sanitized[name] = value

    return GroupValidationResult(valid=True, sanitized=sanitized)


def first_group_error(group_data: Mapping) -> ValidationResult:
    """Validate fields in order and return the first failure, if any."""
    group_data = _require_mapping(group_data)
    for name in GROUP_FIELDS:
        result = _VALIDATORS[name](group_data.get(name))
        if not result.valid:
            return result
    return ValidationResult.ok()
