"""trail-view - Wires layout, reveal and interaction into one map view."""
from __future__ import annotations

from trail_view.view import MapView

__all__ = ["MapView"]
