from __future__ import annotations

import enum
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RiderType(str, enum.Enum):
    TECHNICAL = "technical"
    HOSPITALITY = "hospitality"


class SectionType(str, enum.Enum):
    INPUT_LIST = "input-list"
    BACKLINE = "backline"
    MONITORING = "monitoring"
    POWER = "power"
    LIGHTING = "lighting"
    FOOD_DRINK = "food-drink"
    DRESSING_ROOM = "dressing-room"
    GUEST_LIST = "guest-list"
    TRANSPORTATION = "transportation"


# ─── Roster (input snapshot) ─────────────────────────────────────────────────


class Performer(BaseModel):
    """One person on stage as captured by the roster form."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str
    instruments: Tuple[str, ...] = ()
    needs_monitor: bool = True
    needs_di: bool = False

    @field_validator("name", mode="before")
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("instruments", mode="before")
    def normalize_instruments(cls, v):
        # Accept a single label as well as a list; drop blank entries.
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        return tuple(s.strip() for s in v if isinstance(s, str) and s.strip())


class Roster(BaseModel):
    model_config = ConfigDict(frozen=True)

    performers: Tuple[Performer, ...] = ()

    @property
    def band_size(self) -> int:
        return len(self.performers)


class RiderOptions(BaseModel):
    """Technical rider switches; ignored for hospitality riders."""

    model_config = ConfigDict(frozen=True)

    include_backline: bool = True
    include_lighting: bool = False


# ─── Section payloads ────────────────────────────────────────────────────────


class InputChannel(BaseModel):
    channel: int
    instrument: str
    mic: str
    notes: str = ""


class InputListContent(BaseModel):
    inputs: List[InputChannel] = Field(default_factory=list)


class BacklineContent(BaseModel):
    venue_provides: List[str] = Field(default_factory=list)
    artist_brings: List[str] = Field(default_factory=list)


class MonitoringContent(BaseModel):
    count: str
    summary: str
    requirements: List[str] = Field(default_factory=list)


class PowerContent(BaseModel):
    power_type: str
    outlets: str
    details: str


class LightingContent(BaseModel):
    notes: List[str] = Field(default_factory=list)


class FoodDrinkContent(BaseModel):
    food: List[str] = Field(default_factory=list)
    drinks: List[str] = Field(default_factory=list)
    water_bottles: int
    soft_drinks: int


class DressingRoomContent(BaseModel):
    seating: int
    requirements: List[str] = Field(default_factory=list)


class GuestListContent(BaseModel):
    count: str
    notes: str


class TransportationContent(BaseModel):
    details: List[str] = Field(default_factory=list)


class SectionBase(BaseModel):
    id: str
    title: str


class InputListSection(SectionBase):
    type: Literal["input-list"] = "input-list"
    content: InputListContent


class BacklineSection(SectionBase):
    type: Literal["backline"] = "backline"
    content: BacklineContent


class MonitoringSection(SectionBase):
    type: Literal["monitoring"] = "monitoring"
    content: MonitoringContent


class PowerSection(SectionBase):
    type: Literal["power"] = "power"
    content: PowerContent


class LightingSection(SectionBase):
    type: Literal["lighting"] = "lighting"
    content: LightingContent


class FoodDrinkSection(SectionBase):
    type: Literal["food-drink"] = "food-drink"
    content: FoodDrinkContent


class DressingRoomSection(SectionBase):
    type: Literal["dressing-room"] = "dressing-room"
    content: DressingRoomContent


class GuestListSection(SectionBase):
    type: Literal["guest-list"] = "guest-list"
    content: GuestListContent


class TransportationSection(SectionBase):
    type: Literal["transportation"] = "transportation"
    content: TransportationContent


RiderSection = Annotated[
    Union[
        InputListSection,
        BacklineSection,
        MonitoringSection,
        PowerSection,
        LightingSection,
        FoodDrinkSection,
        DressingRoomSection,
        GuestListSection,
        TransportationSection,
    ],
    Field(discriminator="type"),
]


# ─── Stage plot ──────────────────────────────────────────────────────────────


class StagePlotElement(BaseModel):
    id: str
    type: str
    x: float
    y: float
    rotation: float = 0
    scale_x: float = 1
    scale_y: float = 1


class StagePlotData(BaseModel):
    elements: List[StagePlotElement] = Field(default_factory=list)


class PerformerPlacement(BaseModel):
    """Elements placed on behalf of a single performer, in roster order."""

    performer_id: str
    elements: List[StagePlotElement] = Field(default_factory=list)


# ─── Document ────────────────────────────────────────────────────────────────


class RiderDocument(BaseModel):
    name: str
    type: RiderType
    sections: List[RiderSection] = Field(default_factory=list)
    # Only technical riders carry a stage plot
    stage_plot_data: Optional[StagePlotData] = None

    def section(self, kind: SectionType | str):
        """Return the first section of ``kind`` or ``None``."""
        kind = SectionType(kind)
        for s in self.sections:
            if s.type == kind:
                return s
        return None


# ─── API payloads ────────────────────────────────────────────────────────────


class RiderGenerateIn(BaseModel):
    roster: List[Performer] = Field(default_factory=list)
    rider_type: RiderType = RiderType.TECHNICAL
    options: RiderOptions = Field(default_factory=RiderOptions)


class RiderTemplateRead(BaseModel):
    name: str
    rider_type: RiderType
    roster: List[Performer]
    options: RiderOptions
