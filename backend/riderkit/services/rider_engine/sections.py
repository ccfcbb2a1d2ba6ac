from __future__ import annotations

from typing import Dict

from ...schemas.rider import SectionType

SECTION_TITLES: Dict[str, str] = {
    SectionType.INPUT_LIST.value: "Input List",
    SectionType.BACKLINE.value: "Backline",
    SectionType.MONITORING.value: "Monitoring",
    SectionType.POWER.value: "Power Requirements",
    SectionType.LIGHTING.value: "Lighting",
    SectionType.FOOD_DRINK.value: "Food & Drink",
    SectionType.DRESSING_ROOM.value: "Dressing Room",
    SectionType.GUEST_LIST.value: "Guest List",
    SectionType.TRANSPORTATION.value: "Transportation",
}


def section_id(position: int) -> str:
    """Positional section id; ``position`` is 1-based."""
    return f"section-{position}"
