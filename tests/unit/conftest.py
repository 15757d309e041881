from __future__ import annotations

from typing import Callable

import pytest

KML_NS = "http://www.opengis.net/kml/2.2"

DEFAULT_PROPERTIES: dict[str, str] = {
    "Id": "100",
    "IMEI": "300434000000000",
    "Time UTC": "3/1/2024 10:00:00 AM",
    "Time": "3/1/2024 11:00:00 AM",
    "Latitude": "28.123400",
    "Longitude": "-15.432100",
    "Elevation": "0.00 m from MSL",
    "Velocity": "10.0 km/h",
    "Course": "123.90 ° True",
    "Valid GPS Fix": "True",
}


def position_placemark(
    props: dict[str, str | None] | None = None, *, visibility: str | None = "True"
) -> str:
    """Build a position placemark; a ``None`` value drops that property."""

    merged: dict[str, str | None] = {**DEFAULT_PROPERTIES, **(props or {})}
    data = "".join(
        f'<Data name="{name}"><value>{value}</value></Data>'
        for name, value in merged.items()
        if value is not None
    )
    vis = f"<visibility>{visibility}</visibility>" if visibility is not None else ""
    return (
        f"<Placemark><name>Position</name>{vis}"
        f"<ExtendedData>{data}</ExtendedData>"
        "<Point><coordinates>-15.4321,28.1234,0</coordinates></Point></Placemark>"
    )


TRACK_PLACEMARK = (
    "<Placemark><name>Track</name>"
    "<LineString><coordinates>-15.4,28.1,0 -15.5,28.2,0</coordinates></LineString>"
    "</Placemark>"
)


def kml_document(*placemarks: str) -> str:
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<kml xmlns="{KML_NS}"><Document><name>MapShare</name>'
        f"<Folder><name>Traveller</name>{''.join(placemarks)}</Folder>"
        "</Document></kml>"
    )


@pytest.fixture
def make_kml() -> Callable[..., str]:
    return kml_document


@pytest.fixture
def make_placemark() -> Callable[..., str]:
    return position_placemark


@pytest.fixture
def track_placemark() -> str:
    return TRACK_PLACEMARK
