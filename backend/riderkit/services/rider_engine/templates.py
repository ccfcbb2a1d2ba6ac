"""Starter rosters for common act shapes.

Each template is a roster plus rider type and options; generating from a
template runs it through the normal engine so templates never drift from
what a hand-entered roster of the same shape would produce.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ...schemas.rider import Performer, RiderDocument, RiderOptions, RiderType, Roster
from .assembler import generate_rider
from .errors import UnknownTemplateError


@dataclass(frozen=True)
class RiderTemplate:
    name: str
    rider_type: RiderType
    roster: Roster
    options: RiderOptions = field(default_factory=RiderOptions)


def _roster(*members: tuple) -> Roster:
    return Roster(
        performers=tuple(
            Performer(id=f"member-{i + 1}", name=name, instruments=instruments, needs_di=needs_di)
            for i, (name, instruments, needs_di) in enumerate(members)
        )
    )


TEMPLATES: Dict[str, RiderTemplate] = {
    t.name: t
    for t in (
        RiderTemplate(
            name="solo",
            rider_type=RiderType.TECHNICAL,
            roster=_roster(("Solo Artist", ("Lead Vocals", "Acoustic Guitar"), True)),
            options=RiderOptions(include_backline=False),
        ),
        RiderTemplate(
            name="three_piece",
            rider_type=RiderType.TECHNICAL,
            roster=_roster(
                ("Guitarist", ("Electric Guitar", "Lead Vocals"), False),
                ("Bassist", ("Bass Guitar", "Backing Vocals"), True),
                ("Drummer", ("Drums",), False),
            ),
        ),
        RiderTemplate(
            name="full_band",
            rider_type=RiderType.TECHNICAL,
            roster=_roster(
                ("Singer", ("Lead Vocals",), False),
                ("Lead Guitar", ("Electric Guitar",), False),
                ("Rhythm Guitar", ("Electric Guitar", "Backing Vocals"), False),
                ("Bassist", ("Bass Guitar",), True),
                ("Drummer", ("Drums",), False),
                ("Keys", ("Keyboards/Piano",), True),
            ),
            options=RiderOptions(include_backline=True, include_lighting=True),
        ),
        RiderTemplate(
            name="dj",
            rider_type=RiderType.TECHNICAL,
            roster=_roster(
                ("DJ", ("DJ Equipment",), True),
                ("MC", ("Lead Vocals",), False),
            ),
            options=RiderOptions(include_backline=False),
        ),
        RiderTemplate(
            name="hospitality",
            rider_type=RiderType.HOSPITALITY,
            roster=_roster(
                ("Member 1", ("Lead Vocals",), False),
                ("Member 2", ("Electric Guitar",), False),
                ("Member 3", ("Bass Guitar",), False),
                ("Member 4", ("Drums",), False),
            ),
        ),
    )
}


def list_templates() -> List[RiderTemplate]:
    return list(TEMPLATES.values())


def get_template(name: str) -> RiderTemplate:
    key = (name or "").strip().lower()
    if key not in TEMPLATES:
        raise UnknownTemplateError(name)
    return TEMPLATES[key]


def generate_from_template(name: str) -> RiderDocument:
    t = get_template(name)
    return generate_rider(t.roster, t.rider_type, t.options)
