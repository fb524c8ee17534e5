"""trailmap - Marker map core: records, configuration, frame loop and surfaces."""

from trailmap.config import MapConfig
from trailmap.frames import FrameLoop
from trailmap.loader import load_markers, load_visits, parse_markers, parse_visits
from trailmap.models import Marker, Visit
from trailmap.surface import (
    CounterSink,
    RecordingCounter,
    RecordingSurface,
    RecordingTooltip,
    RenderingSurface,
    TooltipView,
)
from trailmap.types import MarkerId, Point, Projector, ScaleAbout, UnknownMarkerError

__all__ = [
    "MapConfig",
    "FrameLoop",
    "Marker",
    "Visit",
    "MarkerId",
    "Point",
    "Projector",
    "ScaleAbout",
    "UnknownMarkerError",
    "RenderingSurface",
    "CounterSink",
    "TooltipView",
    "RecordingSurface",
    "RecordingCounter",
    "RecordingTooltip",
    "load_markers",
    "load_visits",
    "parse_markers",
    "parse_visits",
]
