from __future__ import annotations

import math
from typing import List, Tuple

from ...schemas.rider import LightingContent, MonitoringContent, Performer, PowerContent
from .roster import RosterLike, as_roster

POWER_TYPE = "110V standard"
POWER_DETAILS = "Power for pedals, laptops, and charging devices"
MIN_OUTLETS = 2

LIGHTING_NOTES: Tuple[str, ...] = (
    "Basic stage wash with color options",
    "Spotlights for lead vocalist",
    "No strobes or flashing lights",
)


def monitor_count(roster: RosterLike) -> int:
    return sum(1 for p in as_roster(roster).performers if p.needs_monitor)


def _mix_line(performer: Performer) -> str:
    if not performer.instruments:
        return f"{performer.name} in mix"
    return f"{performer.name}: {', '.join(performer.instruments)} in mix"


def build_monitoring(roster: RosterLike) -> MonitoringContent:
    """Wedge count plus one mix line per performer who needs a monitor.

    Always returned, even when nobody needs a wedge; a count of "0" tells the
    venue as much as a positive one.
    """
    roster = as_roster(roster)
    requirements: List[str] = [_mix_line(p) for p in roster.performers if p.needs_monitor]
    count = len(requirements)
    return MonitoringContent(
        count=str(count),
        summary=f"{count} x Floor monitors (wedges)",
        requirements=requirements,
    )


def outlet_count(band_size: int) -> int:
    """One outlet per two performers, never fewer than two."""
    return max(MIN_OUTLETS, math.ceil(band_size / 2))


def build_power(band_size: int) -> PowerContent:
    return PowerContent(
        power_type=POWER_TYPE,
        outlets=str(outlet_count(band_size)),
        details=POWER_DETAILS,
    )


def build_lighting() -> LightingContent:
    return LightingContent(notes=list(LIGHTING_NOTES))
