from __future__ import annotations

from datetime import timezone

import pytest

from pulsecheck.domain.entities.health import (
    HealthReport,
    OverallStatus,
    ProbeOutcome,
    ProbeStatus,
    describe_error,
    utc_now,
)


def test_probe_outcome_constructors() -> None:
    assert ProbeOutcome.ok().status is ProbeStatus.OK
    failed = ProbeOutcome.failed("connection refused", latency_ms=1.5)
    assert failed.status is ProbeStatus.FAILED
    assert failed.reason == "connection refused"
    assert failed.latency_ms == 1.5
    timed_out = ProbeOutcome.timed_out()
    assert timed_out.status is ProbeStatus.TIMED_OUT
    assert timed_out.reason is None


def test_probe_outcome_is_immutable() -> None:
    outcome = ProbeOutcome.ok()
    with pytest.raises(AttributeError):
        outcome.status = ProbeStatus.FAILED  # type: ignore[misc]


def test_report_is_ok_only_when_every_outcome_is_ok() -> None:
    now = utc_now()
    healthy = HealthReport.from_outcomes(
        now, {"database": ProbeOutcome.ok(), "cache": ProbeOutcome.ok()}
    )
    assert healthy.overall_status is OverallStatus.OK
    assert healthy.failing_services == []

    degraded = HealthReport.from_outcomes(
        now, {"database": ProbeOutcome.ok(), "cache": ProbeOutcome.timed_out()}
    )
    assert degraded.overall_status is OverallStatus.DEGRADED
    assert degraded.failing_services == ["cache"]


def test_empty_report_is_ok() -> None:
    report = HealthReport.from_outcomes(utc_now(), {})
    assert report.overall_status is OverallStatus.OK
    assert dict(report.services) == {}


def test_report_services_keep_order_and_are_read_only() -> None:
    source = {"b": ProbeOutcome.ok(), "a": ProbeOutcome.ok()}
    report = HealthReport.from_outcomes(utc_now(), source)
    source["c"] = ProbeOutcome.ok()

    assert list(report.services) == ["b", "a"]
    with pytest.raises(TypeError):
        report.services["c"] = ProbeOutcome.ok()  # type: ignore[index]


def test_describe_error_falls_back_to_class_name() -> None:
    assert describe_error(ConnectionRefusedError("connection refused")) == (
        "connection refused"
    )
    assert describe_error(TimeoutError()) == "TimeoutError"


def test_utc_now_is_timezone_aware() -> None:
    assert utc_now().tzinfo == timezone.utc


def test_direct_construction_derives_status_from_outcomes() -> None:
    services = {"database": ProbeOutcome.ok(), "cache": ProbeOutcome.failed("down")}

    report = HealthReport(timestamp=utc_now(), services=services)
    services["cache"] = ProbeOutcome.ok()

    assert report.overall_status is OverallStatus.DEGRADED
    assert report.services["cache"].status is ProbeStatus.FAILED
    with pytest.raises(TypeError):
        report.services["cache"] = ProbeOutcome.ok()  # type: ignore[index]


def test_overall_status_cannot_be_supplied() -> None:
    with pytest.raises(TypeError):
        HealthReport(  # type: ignore[call-arg]
            overall_status=OverallStatus.OK,
            timestamp=utc_now(),
            services={"cache": ProbeOutcome.failed("down")},
        )
