from __future__ import annotations

import xml.etree.ElementTree as ET

from src.domain.exceptions import ExtractionError
from src.domain.models.position import PositionRecord

# (field, KML Data name) in the order Garmin writes them.
REQUIRED_PROPERTIES: tuple[tuple[str, str], ...] = (
    ("id", "Id"),
    ("imei", "IMEI"),
    ("time_utc", "Time UTC"),
    ("time", "Time"),
    ("latitude", "Latitude"),
    ("longitude", "Longitude"),
    ("elevation", "Elevation"),
    ("velocity", "Velocity"),
    ("course", "Course"),
    ("valid_gps_fix", "Valid GPS Fix"),
)

_STRUCTURAL_PATH = ("document", "folder")


def _local_name(tag: object) -> str:
    # Comments and processing instructions carry a callable tag.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1].lower()


def _first_child(node: ET.Element, name: str) -> ET.Element | None:
    for child in node:
        if _local_name(child.tag) == name:
            return child
    return None


def _children(node: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in node if _local_name(child.tag) == name]


def _attribute(node: ET.Element, name: str) -> str | None:
    for key, value in node.attrib.items():
        if _local_name(key) == name:
            return value
    return None


def _text(node: ET.Element | None) -> str | None:
    if node is None or node.text is None:
        return None
    return node.text.strip()


def _property(extended_data: ET.Element, name: str) -> str:
    value: str | None = None
    for data in _children(extended_data, "data"):
        if _attribute(data, "name") != name:
            continue
        # Later duplicates override earlier ones.
        value = _text(_first_child(data, "value"))

    if not value:
        raise ExtractionError(name)
    return value


def _to_record(placemark: ET.Element, extended_data: ET.Element) -> PositionRecord:
    values = {field: _property(extended_data, name) for field, name in REQUIRED_PROPERTIES}
    values["valid_gps_fix"] = values["valid_gps_fix"].lower()

    visibility = _text(_first_child(placemark, "visibility"))
    return PositionRecord(
        **values,
        visibility=visibility.lower() if visibility is not None else None,
    )


def extract_placemarks(kml: str | bytes | None) -> tuple[PositionRecord, ...]:
    """Return the position placemarks of an inReach MapShare KML feed.

    The feed is read as ``kml > Document > Folder > Placemark*``; if any part
    of that path is missing the feed holds nothing new and ``()`` is returned.
    Placemarks without ``ExtendedData`` (the trailing track line) are skipped.
    A placemark that has ``ExtendedData`` but misses a required ``Data`` entry
    fails the whole document with :class:`ExtractionError`.

    Records keep document order, which the feed guarantees is chronological.
    """

    if not kml or not kml.strip():
        return ()

    try:
        root = ET.fromstring(kml)
    except ET.ParseError as exc:
        raise ExtractionError("kml", f"Route feed is not well-formed XML: {exc}") from exc

    node: ET.Element | None = root
    for segment in _STRUCTURAL_PATH:
        node = _first_child(node, segment) if node is not None else None
    if node is None:
        return ()

    records: list[PositionRecord] = []
    for placemark in _children(node, "placemark"):
        extended_data = _first_child(placemark, "extendeddata")
        if extended_data is None:
            continue
        records.append(_to_record(placemark, extended_data))

    return tuple(records)
