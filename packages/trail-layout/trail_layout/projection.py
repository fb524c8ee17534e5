"""Projection adapter and a pyproj-backed Albers projector."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

import pyproj

from trailmap.types import Point, Projector

if TYPE_CHECKING:
    from trailmap.config import MapConfig
    from trailmap.models import Marker

log = logging.getLogger(__name__)

_EARTH_RADIUS_M = 6378137.0

# Albers equal-area conic, CONUS standard parallels.
_ALBERS_USA = (
    "+proj=aea +lat_1=29.5 +lat_2=45.5 +lat_0=37.5 +lon_0=-96 "
    "+x_0=0 +y_0=0 +datum=WGS84 +units=m +no_defs"
)


class AlbersProjector:
    """Callable ``(lon, lat) -> (x, y) | None`` in screen space.

    Projected metres are divided by the earth radius and multiplied by
    ``scale``, then translated; y grows downward. Points outside
    ``extent`` (lon_min, lat_min, lon_max, lat_max) are not representable.
    """

    def __init__(
        self,
        scale: float = 900.0,
        translate: Point = (450.0, 500.0 / 2.2),
        extent: tuple[float, float, float, float] = (-180.0, 15.0, -60.0, 72.0),
        crs: str = _ALBERS_USA,
    ) -> None:
        self._scale = scale
        self._translate = translate
        self._extent = extent
        self._transformer = pyproj.Transformer.from_crs(
            pyproj.CRS("EPSG:4326"), pyproj.CRS(crs), always_xy=True
        )

    @classmethod
    def for_config(cls, config: MapConfig) -> AlbersProjector:
        return cls(scale=config.width, translate=(config.width / 2, config.height / 2.2))

    def __call__(self, lon: float, lat: float) -> Point | None:
        lon_min, lat_min, lon_max, lat_max = self._extent
        if not (lon_min <= lon <= lon_max and lat_min <= lat <= lat_max):
            return None
        mx, my = self._transformer.transform(lon, lat)
        if not (math.isfinite(mx) and math.isfinite(my)):
            return None
        k = self._scale / _EARTH_RADIUS_M
        tx, ty = self._translate
        return (tx + mx * k, ty - my * k)


def project(marker: Marker, projector: Projector) -> Point | None:
    """Anchor point for a marker, or None when it cannot be placed."""
    coords = projector(marker.lon, marker.lat)
    if coords is None:
        return None
    return (float(coords[0]), float(coords[1]))


def place_markers(
    markers: Sequence[Marker], projector: Projector, config: MapConfig
) -> list[Marker]:
    """Anchor every placeable marker; unplaceable ones are dropped silently."""
    placed: list[Marker] = []
    for m in markers:
        anchor = project(m, projector)
        if anchor is None:
            continue
        m.anchor = anchor
        m.x, m.y = anchor
        m.radius = config.radius_for(m.id)
        placed.append(m)
    if len(placed) < len(markers):
        log.debug("Dropped %d unplaceable markers", len(markers) - len(placed))
    return placed
