"""
AUDIT TRAIL
===========
Lightweight audit logging for group submissions and join requests.
"""

# FLOW:
# - Call audit() on accepted/rejected/throttled actions.
# WHY:
# - Provides accountability for group creation abuse.
# HOW:
# - Emits structured log lines to <LOG_DIR>/audit.log.

from __future__ import annotations

from GroupSecurity.activity_logging import get_security_logger
from GroupSecurity.metrics import increment_feature_event
from GroupSecurity.security_config import feature_enabled


def audit(event: str, user_id: str | None = None, details: str | None = None) -> None:
    if not feature_enabled("audit-trail", True):
        return
    logger = get_security_logger("security.audit", "audit.log")
    logger.info(
        "event=%s user_id=%s details=%s",
        event,
        user_id if user_id is not None else "-",
        details or "",
    )
    increment_feature_event("audit-trail")
