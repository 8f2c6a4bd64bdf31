"""
GROUP SUBMISSION REVIEW
=======================
Entry point for handlers that accept a new group from a user.

FLOW:
- Refuse creators still cooling down, then validate and sanitize.
- Only an accepted group starts the creator's next cooldown.
- Record the outcome in the audit trail and metrics.

WHY:
- Keeps handlers down to a single call with a single result to surface.

HOW:
- Wraps action_rate_limiting and group_sanitization; logs only event
  names, user ids and counts, never the submitted text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from GroupSecurity.action_rate_limiting import (
    ActionRateLimiter,
    RateLimitResult,
    check_join_request_rate_limit,
    peek_group_create_rate_limit,
    record_group_create,
)
from GroupSecurity.activity_logging import get_security_logger
from GroupSecurity.audit_trail import audit
from GroupSecurity.group_sanitization import sanitize_and_validate_group
from GroupSecurity.metrics import increment_feature_event, record_validation_failure
from GroupSecurity.security_config import feature_enabled


@dataclass
class SubmissionReview:
    accepted: bool
    sanitized: dict[str, Any] | None = None
    errors: list[str] = field(default_factory=list)
    wait_time: int | None = None


def _throttle_message(wait_time: int) -> str:
    return f"Please wait {wait_time} seconds before creating another group"


def review_group_submission(
    group_data: Mapping,
    user_id: str | None = None,
    limiter: ActionRateLimiter | None = None,
) -> SubmissionReview:
    logger = get_security_logger()
    rate_limited = user_id is not None and feature_enabled("group-rate-limit", True)

    if rate_limited:
        throttle = peek_group_create_rate_limit(user_id, limiter)
        if not throttle.allowed:
            logger.warning("group_submission throttled user_id=%s wait=%s", user_id, throttle.wait_time)
            increment_feature_event("group-rate-limit")
            audit("group_submission_throttled", user_id, f"wait={throttle.wait_time}")
            return SubmissionReview(
                accepted=False,
                errors=[_throttle_message(throttle.wait_time)],
                wait_time=throttle.wait_time,
            )

    result = sanitize_and_validate_group(group_data)
    increment_feature_event("group-validation")

    if not result.valid:
        for name in result.failed_fields:
            record_validation_failure(name)
        logger.info(
            "group_submission rejected user_id=%s fields=%s",
            user_id,
            ",".join(result.failed_fields),
        )
        audit("group_submission_rejected", user_id, f"errors={len(result.errors)}")
        return SubmissionReview(accepted=False, errors=list(result.errors))

    if rate_limited:
        record_group_create(user_id, limiter)
    logger.info("group_submission accepted user_id=%s", user_id)
    audit("group_submission_accepted", user_id)
    return SubmissionReview(accepted=True, sanitized=result.sanitized)


def review_join_request(
    user_id: str,
    group_id: str,
    limiter: ActionRateLimiter | None = None,
) -> RateLimitResult:
    result = check_join_request_rate_limit(user_id, group_id, limiter)
    if not result.allowed:
        increment_feature_event("join-rate-limit")
        audit("join_request_throttled", user_id, f"group_id={group_id} wait={result.wait_time}")
    return result
