"""
FEATURE: RATE LIMITING
"""

# FLOW:
# - Re-export the action limiter and submission review helpers.
# WHY:
# - Simplifies throttling usage across handlers.
# HOW:
# - Re-exports ActionRateLimiter and friends.

from GroupSecurity.action_rate_limiting import (
    ActionRateLimiter,
    RateLimitResult,
    check_group_create_rate_limit,
    check_join_request_rate_limit,
    peek_group_create_rate_limit,
    record_group_create,
)
from GroupSecurity.group_submission import SubmissionReview, review_group_submission, review_join_request

__all__ = [
    "ActionRateLimiter",
    "RateLimitResult",
    "SubmissionReview",
    "check_group_create_rate_limit",
    "check_join_request_rate_limit",
    "peek_group_create_rate_limit",
    "record_group_create",
    "review_group_submission",
    "review_join_request",
]
