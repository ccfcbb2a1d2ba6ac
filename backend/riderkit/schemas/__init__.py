from .rider import (
    RiderType,
    SectionType,
    Performer,
    Roster,
    RiderOptions,
    InputChannel,
    InputListContent,
    BacklineContent,
    MonitoringContent,
    PowerContent,
    LightingContent,
    FoodDrinkContent,
    DressingRoomContent,
    GuestListContent,
    TransportationContent,
    InputListSection,
    BacklineSection,
    MonitoringSection,
    PowerSection,
    LightingSection,
    FoodDrinkSection,
    DressingRoomSection,
    GuestListSection,
    TransportationSection,
    RiderSection,
    StagePlotElement,
    StagePlotData,
    PerformerPlacement,
    RiderDocument,
    RiderGenerateIn,
    RiderTemplateRead,
)
