from __future__ import annotations

from datetime import datetime, timezone

from src.domain.exceptions import ConfigurationError, ExtractionError
from src.domain.models.position import PositionRecord
from src.domain.models.report import ReportMessage

KMH_TO_KNOTS = 0.539957
DEFAULT_REPORT_RECEIVER = "report@marinetraffic.com"
REPORT_SUBJECT = "sAIS self-report"
SEPARATOR = "________________"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Garmin writes "Time UTC" as e.g. "3/1/2024 10:00:00 AM".
_FEED_TIME_FORMATS = ("%m/%d/%Y %I:%M:%S %p", "%m/%d/%Y %H:%M:%S")


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def speed_knots(velocity: str) -> float:
    """Convert a feed velocity such as ``"10 km/h"`` to knots."""

    try:
        kmh = float(velocity.split(" ")[0])
    except ValueError as exc:
        raise ExtractionError("Velocity", f"Unreadable velocity: {velocity!r}") from exc
    return kmh * KMH_TO_KNOTS


def course_digits(course: str) -> str:
    # Truncates, never rounds: "123.9" -> "123".
    return course.split(".")[0].rjust(3, "0")


def report_timestamp(time_utc: str) -> str:
    """Reformat the feed's UTC time; values with an offset are converted to UTC."""

    raw = time_utc.strip()
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _FEED_TIME_FORMATS:
            try:
                parsed = datetime.strptime(raw, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        raise ExtractionError("Time UTC", f"Unreadable timestamp: {time_utc!r}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime(TIMESTAMP_FORMAT)


def format_report(
    record: PositionRecord,
    *,
    vessel_id: str | None,
    sender: str | None,
    recipient: str | None = None,
) -> ReportMessage:
    if not sender:
        raise ConfigurationError("REPORT_SENDER environment variable is missing.")
    if not vessel_id:
        raise ConfigurationError("REPORT_MMSI environment variable is missing.")

    body = "\n".join(
        (
            SEPARATOR,
            f"MMSI={vessel_id}",
            f"LAT={record.latitude}",
            f"LON={record.longitude}",
            f"SPEED={_format_number(speed_knots(record.velocity))}",
            f"COURSE={course_digits(record.course)}",
            f"TIMESTAMP={report_timestamp(record.time_utc)}",
            SEPARATOR,
        )
    )

    return ReportMessage(
        to=recipient or DEFAULT_REPORT_RECEIVER,
        from_address=sender,
        subject=REPORT_SUBJECT,
        text=body,
    )
