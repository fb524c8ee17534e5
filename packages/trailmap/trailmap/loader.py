"""JSON loading for marker and visit collections."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from trailmap.models import Marker, Visit

# Generic key -> park-data key.
_MARKER_ALIASES = {
    "id": "parkCode",
    "displayName": "name",
    "region": "states",
    "category": "designation",
}
_VISIT_FIELDS = ("markerId", "parkCode", "date")


def _pick(record: dict[str, Any], key: str, default: Any = None) -> Any:
    if key in record:
        return record[key]
    alias = _MARKER_ALIASES.get(key)
    if alias is not None and alias in record:
        return record[alias]
    if key == "region" and "state" in record:
        return record["state"]
    return default


def parse_markers(records: Iterable[dict[str, Any]]) -> list[Marker]:
    """Build Markers from decoded JSON records. Coordinates may be strings."""
    markers: list[Marker] = []
    for i, rec in enumerate(records):
        marker_id = _pick(rec, "id")
        if marker_id is None:
            raise ValueError(f"Marker record {i} has no 'id' or 'parkCode'")
        try:
            lon = float(rec["longitude"])
            lat = float(rec["latitude"])
        except KeyError as e:
            raise ValueError(f"Marker record {i} ('{marker_id}') missing {e}") from e
        markers.append(
            Marker(
                id=str(marker_id),
                lon=lon,
                lat=lat,
                category=str(_pick(rec, "category", "")),
                display_name=str(_pick(rec, "displayName", marker_id)),
                region=str(_pick(rec, "region", "")),
            )
        )
    return markers


def parse_visits(records: Iterable[dict[str, Any]]) -> list[Visit]:
    """Build Visits from decoded JSON records. Dates are kept as raw strings."""
    visits: list[Visit] = []
    for i, rec in enumerate(records):
        marker_id = rec.get("markerId", rec.get("parkCode"))
        if marker_id is None:
            raise ValueError(f"Visit record {i} has no 'markerId' or 'parkCode'")
        if "date" not in rec:
            raise ValueError(f"Visit record {i} ('{marker_id}') has no 'date'")
        extra = {k: v for k, v in rec.items() if k not in _VISIT_FIELDS}
        visits.append(Visit(marker_id=str(marker_id), date=str(rec["date"]), extra=extra))
    return visits


def load_markers(path: str | Path) -> list[Marker]:
    with open(path, encoding="utf-8") as f:
        return parse_markers(json.load(f))


def load_visits(path: str | Path) -> list[Visit]:
    with open(path, encoding="utf-8") as f:
        return parse_visits(json.load(f))
