"""Deterministic stage-plot placement.

Every instrument is classified into a stage role. A role owns a band on the
1000x600 canvas: an anchor row and a starting column, with each further
element of that role stepping along the row. When a row reaches the canvas
edge the band continues on a lane next to its anchor row, nearest lane first,
so a large act stays on the canvas. Coordinates therefore depend only on the
role and the element's ordinal within that role across the whole roster, and
a final occupancy check keeps any two elements off the same point when bands
are configured to share a row.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Set, Tuple

from ...schemas.rider import PerformerPlacement, StagePlotData, StagePlotElement
from .matching import KeywordRule, first_match
from .roster import RosterLike, as_roster, performer_key

CANVAS_WIDTH = 1000
CANVAS_HEIGHT = 600
# Element centres stay this far inside the canvas edge.
CANVAS_MARGIN = 20
X_RANGE: Tuple[float, float] = (CANVAS_MARGIN, CANVAS_WIDTH - CANVAS_MARGIN)
Y_RANGE: Tuple[float, float] = (CANVAS_MARGIN, CANVAS_HEIGHT - CANVAS_MARGIN)


class StageRole(str, enum.Enum):
    DRUMS = "drums"
    DJ = "dj"
    KEYS = "keys"
    BASS = "bass"
    GUITAR = "guitar"
    GUITAR_LEFT = "guitar_left"
    GUITAR_RIGHT = "guitar_right"
    VOCALS = "vocals"
    FALLBACK = "fallback"
    MONITORS = "monitors"


@dataclass(frozen=True)
class StageBand:
    row_y: float
    start_x: float
    step_x: float
    lane_step_y: float = 20

    def __post_init__(self) -> None:
        if not self.step_x:
            raise ValueError("StageBand.step_x must be non-zero")
        if self.lane_step_y <= 0:
            raise ValueError("StageBand.lane_step_y must be positive")

    def anchored_on_canvas(
        self,
        x_range: Tuple[float, float] = X_RANGE,
        y_range: Tuple[float, float] = Y_RANGE,
    ) -> bool:
        return x_range[0] <= self.start_x <= x_range[1] and y_range[0] <= self.row_y <= y_range[1]

    def columns(self, x_range: Tuple[float, float]) -> List[float]:
        low, high = x_range
        xs: List[float] = []
        x = self.start_x
        while low <= x <= high:
            xs.append(x)
            x += self.step_x
        return xs

    def lanes(self, y_range: Tuple[float, float], spacing: float) -> Iterator[float]:
        """Rows ``spacing`` apart around ``row_y`` inside ``y_range``, nearest first,
        downstage before upstage."""
        low, high = y_range
        if low <= self.row_y <= high:
            yield self.row_y
        k = 1
        while True:
            below = self.row_y + k * spacing
            above = self.row_y - k * spacing
            if below > high and above < low:
                return
            if below <= high:
                yield below
            if above >= low:
                yield above
            k += 1

    def slots(
        self,
        x_range: Tuple[float, float] = X_RANGE,
        y_range: Tuple[float, float] = Y_RANGE,
    ) -> Iterator[Tuple[float, float]]:
        """Every point of the band inside the ranges, lane by lane.

        Once every lane is used the lane spacing halves and the walk starts
        over, so a band anchored inside the ranges never runs out of points.
        Points handed out on an earlier pass come round again and are left to
        the caller's occupancy check.
        """
        if not self.anchored_on_canvas(x_range, y_range):
            raise ValueError(f"StageBand anchor ({self.start_x}, {self.row_y}) is off the canvas")
        xs = self.columns(x_range)
        spacing = self.lane_step_y
        while True:
            for y in self.lanes(y_range, spacing):
                for x in xs:
                    yield (x, y)
            spacing /= 2


# Upstage is the top of the canvas. Guitar-left and bass share a row but walk
# away from each other.
DEFAULT_BANDS: Mapping[StageRole, StageBand] = MappingProxyType(
    {
        StageRole.DRUMS: StageBand(row_y=130, start_x=410, step_x=60),
        StageRole.KEYS: StageBand(row_y=190, start_x=140, step_x=60),
        StageRole.DJ: StageBand(row_y=250, start_x=440, step_x=60),
        StageRole.GUITAR_LEFT: StageBand(row_y=320, start_x=320, step_x=-60),
        StageRole.BASS: StageBand(row_y=320, start_x=620, step_x=60),
        StageRole.GUITAR_RIGHT: StageBand(row_y=380, start_x=700, step_x=60),
        StageRole.VOCALS: StageBand(row_y=460, start_x=440, step_x=60),
        StageRole.FALLBACK: StageBand(row_y=520, start_x=60, step_x=60),
        StageRole.MONITORS: StageBand(row_y=560, start_x=120, step_x=90),
    }
)

PLACEABLE_ROLES = frozenset(set(StageRole) - {StageRole.GUITAR})


@dataclass(frozen=True)
class StageKit:
    role: StageRole
    elements: Tuple[str, ...]


FALLBACK_KIT = StageKit(StageRole.FALLBACK, ("Standing Mic",))

# Precedence: a drum kit before a drum machine (both say "drum"); keys before
# bass so "Synth Bass" stays with the keyboards; bass before guitar so
# "Bass Guitar" gets a bass rig; acoustic guitar before electric; vocals last
# so "Guitar/Vocals" is placed as a guitarist.
STAGE_KIT_RULES: Tuple[KeywordRule[StageKit], ...] = (
    KeywordRule(
        StageKit(StageRole.DRUMS, ("Riser", "Drums", "Short Boom Mic Left", "Short Boom Mic Right")),
        all_of=("drum",),
        none_of=("machine",),
    ),
    KeywordRule(StageKit(StageRole.DJ, ("Drum Machine", "Stand")), all_of=("drum", "machine")),
    KeywordRule(StageKit(StageRole.DJ, ("DJ Decks", "Laptop")), all_of=("dj",)),
    KeywordRule(
        StageKit(StageRole.KEYS, ("Electric Piano", "Keyboard Stand", "DI Stereo")),
        any_of=("keyboard", "piano"),
    ),
    KeywordRule(StageKit(StageRole.KEYS, ("Synth", "Keyboard Stand", "DI Stereo")), all_of=("synth",)),
    KeywordRule(StageKit(StageRole.BASS, ("Bass Guitar", "Bass Amp", "DI Mono")), all_of=("bass",)),
    KeywordRule(
        StageKit(StageRole.GUITAR, ("Guitar B", "Guitar Stand", "DI Mono")),
        all_of=("guitar", "acoustic"),
    ),
    KeywordRule(StageKit(StageRole.GUITAR, ("Guitar A", "Guitar Amp", "Pedal Board")), all_of=("guitar",)),
    KeywordRule(StageKit(StageRole.VOCALS, ("Standing Mic",)), all_of=("vocal",)),
)

PERSON_MARKERS: Tuple[str, ...] = ("Person A", "Person B", "Person C", "Person D", "Person E")
MONITOR_ELEMENT = "Foldback Speaker"


def stage_kit(instrument: str) -> StageKit:
    """Return the role and equipment kit for an instrument label."""
    return first_match(STAGE_KIT_RULES, instrument, FALLBACK_KIT)


class _Placer:
    """Hands out coordinates per role and remembers every occupied point."""

    def __init__(self, bands: Mapping[StageRole, StageBand]):
        missing = PLACEABLE_ROLES - set(bands)
        if missing:
            raise ValueError(f"Stage bands missing for roles: {sorted(r.value for r in missing)}")
        off_canvas = sorted(role.value for role in PLACEABLE_ROLES if not bands[role].anchored_on_canvas())
        if off_canvas:
            raise ValueError(f"Stage bands anchored off the canvas: {off_canvas}")
        self.bands = bands
        self.slots: Dict[StageRole, Iterator[Tuple[float, float]]] = {}
        self.occupied: Set[Tuple[float, float]] = set()
        self.placed = 0

    def place(self, role: StageRole, element_type: str) -> StagePlotElement:
        if role not in self.slots:
            self.slots[role] = self.bands[role].slots()
        x, y = next(point for point in self.slots[role] if point not in self.occupied)
        self.occupied.add((x, y))
        self.placed += 1
        return StagePlotElement(id=f"element-{self.placed}", type=element_type, x=x, y=y)


def layout_stage(
    roster: RosterLike,
    bands: Optional[Mapping[StageRole, StageBand]] = None,
) -> List[PerformerPlacement]:
    """Place every performer's equipment on the stage plot.

    Guitars alternate left/right by their occurrence across the roster, first
    guitar on the left. Performers without instruments are skipped.
    """
    roster = as_roster(roster)
    placer = _Placer(bands if bands is not None else DEFAULT_BANDS)
    guitars_seen = 0
    placements: List[PerformerPlacement] = []

    for index, performer in enumerate(roster.performers):
        if not performer.instruments:
            continue

        kits: List[StageKit] = []
        for label in performer.instruments:
            kit = stage_kit(label)
            if kit.role is StageRole.GUITAR:
                side = StageRole.GUITAR_LEFT if guitars_seen % 2 == 0 else StageRole.GUITAR_RIGHT
                guitars_seen += 1
                kit = StageKit(side, kit.elements)
            kits.append(kit)

        elements = [placer.place(kits[0].role, PERSON_MARKERS[index % len(PERSON_MARKERS)])]
        for kit in kits:
            elements.extend(placer.place(kit.role, name) for name in kit.elements)
        if performer.needs_monitor:
            elements.append(placer.place(StageRole.MONITORS, MONITOR_ELEMENT))

        placements.append(
            PerformerPlacement(performer_id=performer_key(performer, index), elements=elements)
        )
    return placements


def build_stage_plot(
    roster: RosterLike,
    bands: Optional[Mapping[StageRole, StageBand]] = None,
) -> StagePlotData:
    """Flatten :func:`layout_stage` into the document's stage-plot payload."""
    placements = layout_stage(roster, bands)
    return StagePlotData(elements=[el for p in placements for el in p.elements])
