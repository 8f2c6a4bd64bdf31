"""
ERROR HANDLING
==============
Exception types for callers that want failures raised instead of returned.
"""

# FLOW:
# - Validators report field problems as data.
# - raise_for_result() turns a rejected GroupValidationResult into an exception.
# WHY:
# - Handlers can choose between inspecting results and catching errors.
# HOW:
# - GroupValidationError carries the ordered error list.

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from GroupSecurity.group_sanitization import GroupValidationResult


class GroupSecurityError(Exception):
    """Base class for group security errors."""


class InvalidGroupDataError(GroupSecurityError, TypeError):
    """Group payload is not a mapping."""

    def __init__(self, received: Any):
        self.received_type = type(received).__name__
        super().__init__(f"Group data must be a mapping, got {self.received_type}")


class GroupValidationError(GroupSecurityError, ValueError):
    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def raise_for_result(result: "GroupValidationResult") -> dict[str, Any]:
    """Return the sanitized group, or raise GroupValidationError."""
    if not result.valid:
        raise GroupValidationError(result.errors)
    return result.sanitized
