"""Chronological ordering of visits by first-visit date."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from trailmap.models import Marker, Visit


def parse_visit_date(raw: str) -> datetime | None:
    """Parse an ISO 8601 date or date-time. Returns None if malformed.

    Date-only values mean midnight UTC; naive date-times are read as UTC.
    """
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass
class ChronologicalOrder:
    """Unique marker ids ordered by their earliest visit."""

    marker_ids: list[str] = field(default_factory=list)
    first_visits: dict[str, datetime] = field(default_factory=dict)
    rejected: list[Visit] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.marker_ids)


def chronological_order(visits: Iterable[Visit]) -> ChronologicalOrder:
    """Sort visits oldest first (stable) and keep each marker's first visit.

    Visits with unparseable dates are left out of the order and collected
    in ``rejected``.
    """
    dated: list[tuple[datetime, Visit]] = []
    rejected: list[Visit] = []
    for visit in visits:
        when = parse_visit_date(visit.date)
        if when is None:
            rejected.append(visit)
            continue
        dated.append((when, visit))

    dated.sort(key=lambda pair: pair[0])

    order = ChronologicalOrder(rejected=rejected)
    for when, visit in dated:
        if visit.marker_id in order.first_visits:
            continue
        order.first_visits[visit.marker_id] = when
        order.marker_ids.append(visit.marker_id)
    return order


def apply_first_visits(markers: Sequence[Marker], order: ChronologicalOrder) -> None:
    """Copy first-visit dates onto markers; unvisited markers get None."""
    for m in markers:
        when = order.first_visits.get(m.id)
        m.first_visit = when.date() if when is not None else None
