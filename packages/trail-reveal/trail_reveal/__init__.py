"""trail-reveal - Chronological marker reveal driven by trail-tween."""
from __future__ import annotations

from trail_reveal.chronology import (
    ChronologicalOrder,
    apply_first_visits,
    chronological_order,
    parse_visit_date,
)
from trail_reveal.sequencer import RevealSequencer, RevealTimeline
from trail_reveal.settle import SettleBarrier, wait_for_images

__all__ = [
    "ChronologicalOrder",
    "RevealSequencer",
    "RevealTimeline",
    "SettleBarrier",
    "apply_first_visits",
    "chronological_order",
    "parse_visit_date",
    "wait_for_images",
]
