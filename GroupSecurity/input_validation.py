"""
INPUT VALIDATION
================
Field validators for user-submitted group metadata.

FLOW:
- validate_group_name/description/category/privacy() each return a
  ValidationResult carrying at most one error message.

WHY:
- Rejects malformed or oversized group fields before they reach storage.

HOW:
- Required check, then normalization, then bounds and allowlists.
  The first failing check wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


GROUP_NAME_MIN_LENGTH = 3
GROUP_NAME_MAX_LENGTH = 60
GROUP_DESCRIPTION_MIN_LENGTH = 10
GROUP_DESCRIPTION_MAX_LENGTH = 500

GROUP_CATEGORIES = (
    "Technology",
    "Education",
    "NEET",
    "JEE",
    "Coding",
    "Health",
    "Entertainment",
    "College Life",
    "Others",
)

GROUP_PRIVACY_SETTINGS = ("public", "private", "restricted")

# ECMAScript WhiteSpace and LineTerminator characters, the set a browser
# trim() and \s use. Unlike str.strip(), excludes U+001C..U+001F and U+0085.
WHITESPACE_CHARS = (
    "\t\n\v\f\r \xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_CLASS = r"\t\n\v\f\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_GROUP_NAME_RE = re.compile(r"[a-zA-Z0-9" + _WHITESPACE_CLASS + r"\-_]+")


def trim_whitespace(value: str) -> str:
    return value.strip(WHITESPACE_CHARS)


def text_length(value: str) -> int:
    """Length in UTF-16 code units, so emoji count as two."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)

    def as_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "error": self.error}


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_group_name(name: Any) -> ValidationResult:
    if not _is_present(name):
        return ValidationResult.fail("Group name is required")

    trimmed = trim_whitespace(name)

    if text_length(trimmed) < GROUP_NAME_MIN_LENGTH:
        return ValidationResult.fail(f"Group name must be at least {GROUP_NAME_MIN_LENGTH} characters")

    if text_length(trimmed) > GROUP_NAME_MAX_LENGTH:
        return ValidationResult.fail(f"Group name must be at most {GROUP_NAME_MAX_LENGTH} characters")

    if not _GROUP_NAME_RE.fullmatch(trimmed):
        return ValidationResult.fail(
            "Group name can only contain letters, numbers, spaces, hyphens, and underscores"
        )

    return ValidationResult.ok()


def validate_group_description(description: Any) -> ValidationResult:
    if not _is_present(description):
        return ValidationResult.fail("Description is required")

    trimmed = trim_whitespace(description)

    if text_length(trimmed) < GROUP_DESCRIPTION_MIN_LENGTH:
        return ValidationResult.fail(f"Description must be at least {GROUP_DESCRIPTION_MIN_LENGTH} characters")

    if text_length(trimmed) > GROUP_DESCRIPTION_MAX_LENGTH:
        return ValidationResult.fail(f"Description must be at most {GROUP_DESCRIPTION_MAX_LENGTH} characters")

    return ValidationResult.ok()


def validate_group_category(category: Any) -> ValidationResult:
    if not _is_present(category):
        return ValidationResult.fail("Category is required")

    if category not in GROUP_CATEGORIES:
        return ValidationResult.fail("Invalid category")

    return ValidationResult.ok()


def validate_group_privacy(privacy: Any) -> ValidationResult:
    if not _is_present(privacy):
        return ValidationResult.fail("Privacy setting is required")

    if privacy not in GROUP_PRIVACY_SETTINGS:
        return ValidationResult.fail("Privacy must be public, private, or restricted")

    return ValidationResult.ok()
