from __future__ import annotations

import pytest

from src.domain.algorithms.report_format import (
    DEFAULT_REPORT_RECEIVER,
    REPORT_SUBJECT,
    course_digits,
    format_report,
    report_timestamp,
    speed_knots,
)
from src.domain.exceptions import ConfigurationError, ExtractionError
from src.domain.models import PositionRecord


def _record(**overrides: str) -> PositionRecord:
    values = {
        "id": "1",
        "imei": "300434000000000",
        "time_utc": "2024-03-01T10:00:00",
        "time": "2024-03-01T11:00:00",
        "latitude": "28.123400",
        "longitude": "-15.432100",
        "elevation": "0.00 m from MSL",
        "velocity": "10 km/h",
        "course": "7.5",
        "valid_gps_fix": "true",
        "visibility": "true",
    }
    values.update(overrides)
    return PositionRecord(**values)


def test_speed_knots_uses_leading_number() -> None:
    assert speed_knots("10 km/h") == pytest.approx(5.39957)
    assert speed_knots("0.0 km/h") == 0.0


def test_speed_knots_rejects_unreadable_velocity() -> None:
    with pytest.raises(ExtractionError) as excinfo:
        speed_knots("fast km/h")
    assert excinfo.value.property_name == "Velocity"


@pytest.mark.parametrize(
    ("course", "expected"),
    [("7.5", "007"), ("123.9", "123"), ("45", "045"), ("359.99 ° True", "359")],
)
def test_course_digits_truncates_and_pads(course: str, expected: str) -> None:
    assert course_digits(course) == expected


@pytest.mark.parametrize(
    ("time_utc", "expected"),
    [
        ("2024-03-01T10:00:00", "2024-03-01 10:00:00"),
        ("2024-03-01T10:00:00Z", "2024-03-01 10:00:00"),
        ("2024-03-01T10:00:00+02:00", "2024-03-01 08:00:00"),
        ("3/1/2024 10:00:00 PM", "2024-03-01 22:00:00"),
        ("12/31/2023 12:05:09 AM", "2023-12-31 00:05:09"),
    ],
)
def test_report_timestamp_renders_utc(time_utc: str, expected: str) -> None:
    assert report_timestamp(time_utc) == expected


def test_report_timestamp_rejects_garbage() -> None:
    with pytest.raises(ExtractionError) as excinfo:
        report_timestamp("yesterday")
    assert excinfo.value.property_name == "Time UTC"


def test_format_report_layout() -> None:
    msg = format_report(
        _record(velocity="0 km/h"),
        vessel_id="244123456",
        sender="boat@example.com",
        recipient="ops@example.com",
    )

    assert msg.to == "ops@example.com"
    assert msg.from_address == "boat@example.com"
    assert msg.subject == REPORT_SUBJECT
    assert msg.text == (
        "________________\n"
        "MMSI=244123456\n"
        "LAT=28.123400\n"
        "LON=-15.432100\n"
        "SPEED=0\n"
        "COURSE=007\n"
        "TIMESTAMP=2024-03-01 10:00:00\n"
        "________________"
    )


def test_format_report_speed_line_in_knots() -> None:
    msg = format_report(_record(), vessel_id="244123456", sender="boat@example.com")

    speed_line = next(line for line in msg.text.splitlines() if line.startswith("SPEED="))
    assert float(speed_line.split("=", 1)[1]) == pytest.approx(5.39957)


def test_format_report_defaults_recipient() -> None:
    msg = format_report(
        _record(), vessel_id="244123456", sender="boat@example.com", recipient=None
    )

    assert msg.to == DEFAULT_REPORT_RECEIVER


def test_format_report_is_idempotent() -> None:
    record = _record(course="123.9")

    first = format_report(record, vessel_id="1", sender="a@example.com")
    second = format_report(record, vessel_id="1", sender="a@example.com")

    assert first == second


@pytest.mark.parametrize(
    ("vessel_id", "sender"), [("244123456", None), ("244123456", ""), (None, "a@b.c")]
)
def test_format_report_requires_sender_and_vessel(
    vessel_id: str | None, sender: str | None
) -> None:
    with pytest.raises(ConfigurationError):
        format_report(_record(), vessel_id=vessel_id, sender=sender)
