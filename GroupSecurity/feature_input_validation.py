"""
FEATURE: INPUT VALIDATION & SANITIZATION
"""

# FLOW:
# - Re-export escaping, field validators and the group sanitizer.
# WHY:
# - Offers a single import point for group input hygiene.
# HOW:
# - Re-exports validation helpers.

from GroupSecurity.error_handling import GroupValidationError, InvalidGroupDataError, raise_for_result
from GroupSecurity.group_sanitization import (
    GroupValidationResult,
    first_group_error,
    sanitize_and_validate_group,
)
from GroupSecurity.input_validation import (
    GROUP_CATEGORIES,
    GROUP_PRIVACY_SETTINGS,
    ValidationResult,
    validate_group_category,
    validate_group_description,
    validate_group_name,
    validate_group_privacy,
)
from GroupSecurity.xss_protection import escape_html, sanitize_text

__all__ = [
    "GROUP_CATEGORIES",
    "GROUP_PRIVACY_SETTINGS",
    "GroupValidationError",
    "GroupValidationResult",
    "InvalidGroupDataError",
    "ValidationResult",
    "escape_html",
    "first_group_error",
    "raise_for_result",
    "sanitize_and_validate_group",
    "sanitize_text",
    "validate_group_category",
    "validate_group_description",
    "validate_group_name",
    "validate_group_privacy",
]
