from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pulsecheck.application.dtos.health_dto import (
    HealthResponseDTO,
    ResponseMapper,
    describe_outcome,
)
from pulsecheck.domain.entities.health import HealthReport, ProbeOutcome

NOW = datetime(2024, 9, 9, 12, 0, 0, 987654, tzinfo=timezone.utc)


def test_describe_outcome_strings() -> None:
    assert describe_outcome(ProbeOutcome.ok()) == "ok"
    assert describe_outcome(ProbeOutcome.failed("connection refused")) == (
        "error: connection refused"
    )
    assert describe_outcome(ProbeOutcome.timed_out()) == "error: timeout"


def test_healthy_report_maps_to_200() -> None:
    report = HealthReport.from_outcomes(
        NOW, {"database": ProbeOutcome.ok(), "cache": ProbeOutcome.ok()}
    )

    status_code, payload = ResponseMapper.to_response(report)

    assert status_code == 200
    assert payload == {
        "status": "ok",
        "timestamp": "2024-09-09T12:00:00+00:00",
        "services": {"database": "ok", "cache": "ok"},
    }


def test_failed_cache_maps_to_503() -> None:
    report = HealthReport.from_outcomes(
        NOW,
        {
            "database": ProbeOutcome.ok(),
            "cache": ProbeOutcome.failed("connection refused"),
        },
    )

    status_code, payload = ResponseMapper.to_response(report)

    assert status_code == 503
    assert payload["status"] == "error"
    assert payload["services"] == {
        "database": "ok",
        "cache": "error: connection refused",
    }


def test_timed_out_probe_maps_to_503() -> None:
    report = HealthReport.from_outcomes(NOW, {"cache": ProbeOutcome.timed_out()})
    status_code, payload = ResponseMapper.to_response(report)
    assert status_code == 503
    assert payload["services"] == {"cache": "error: timeout"}


def test_empty_report_maps_to_200() -> None:
    status_code, payload = ResponseMapper.to_response(HealthReport.from_outcomes(NOW, {}))
    assert status_code == 200
    assert payload["status"] == "ok"
    assert payload["services"] == {}


def test_service_order_follows_report() -> None:
    report = HealthReport.from_outcomes(
        NOW, {"zeta": ProbeOutcome.ok(), "alpha": ProbeOutcome.ok()}
    )
    _, payload = ResponseMapper.to_response(report)
    assert list(payload["services"]) == ["zeta", "alpha"]


def test_timestamp_keeps_offset() -> None:
    local = NOW.astimezone(timezone(timedelta(hours=2)))
    dto = HealthResponseDTO.from_domain(HealthReport.from_outcomes(local, {}))
    assert dto.timestamp == "2024-09-09T14:00:00+02:00"
    assert datetime.fromisoformat(dto.timestamp) == NOW.replace(microsecond=0)


def test_mapping_is_deterministic() -> None:
    report = HealthReport.from_outcomes(NOW, {"cache": ProbeOutcome.failed("boom")})
    assert ResponseMapper.to_response(report) == ResponseMapper.to_response(report)
