"""
SECURITY METRICS
================
Prometheus-backed metrics for group validation and throttling.
"""

from __future__ import annotations

from typing import Dict

from prometheus_client import Counter

from GroupSecurity.security_config import SECURITY_SETTINGS


_FEATURE_EVENTS = None
_VALIDATION_FAILURES = None
_FEATURE_EVENTS_SAMPLE = "group_security_feature_events_total"
_VALIDATION_FAILURES_SAMPLE = "group_security_validation_failures_total"


def _enabled() -> bool:
    return bool(SECURITY_SETTINGS["PROMETHEUS_ENABLED"])


def _init_metrics() -> None:
    global _FEATURE_EVENTS, _VALIDATION_FAILURES
    if _FEATURE_EVENTS or not _enabled():
        return
    _FEATURE_EVENTS = Counter(
        "group_security_feature_events",
        "Count of group security feature events",
        ["feature"],
    )
    _VALIDATION_FAILURES = Counter(
        "group_security_validation_failures",
        "Count of rejected group fields",
        ["field"],
    )


def increment_feature_event(feature: str, amount: int = 1) -> None:
    _init_metrics()
    if not _FEATURE_EVENTS:
        return
    _FEATURE_EVENTS.labels(feature=feature).inc(amount)


def record_validation_failure(field: str) -> None:
    _init_metrics()
    if not _VALIDATION_FAILURES:
        return
    _VALIDATION_FAILURES.labels(field=field).inc()


def _counter_value(counter, sample_name: str, label: str, value: str) -> int:
    for metric in counter.collect():
        for sample in metric.samples:
            if sample.name == sample_name and sample.labels.get(label) == value:
                return int(sample.value)
    return 0


def get_feature_metrics_snapshot(features: list[str]) -> Dict[str, Dict[str, int]]:
    _init_metrics()
    snapshot: Dict[str, Dict[str, int]] = {}
    for feature in features:
        events = _counter_value(_FEATURE_EVENTS, _FEATURE_EVENTS_SAMPLE, "feature", feature) if _FEATURE_EVENTS else 0
        snapshot[feature] = {"events": events}
    return snapshot


def get_validation_failure_count(field: str) -> int:
    _init_metrics()
    if not _VALIDATION_FAILURES:
        return 0
    return _counter_value(_VALIDATION_FAILURES, _VALIDATION_FAILURES_SAMPLE, "field", field)
