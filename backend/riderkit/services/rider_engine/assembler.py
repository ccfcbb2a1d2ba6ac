from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ...schemas.rider import (
    BacklineContent,
    BacklineSection,
    InputListContent,
    InputListSection,
    LightingSection,
    MonitoringSection,
    PowerSection,
    RiderDocument,
    RiderOptions,
    RiderType,
    StagePlotData,
)
from .backline import aggregate_backline
from .errors import InvalidRosterError
from .hospitality import build_hospitality_sections
from .inputs import build_input_list
from .requirements import build_lighting, build_monitoring, build_power
from .roster import RosterLike, as_roster
from .sections import SECTION_TITLES, section_id
from .stage_layout import build_stage_plot

logger = logging.getLogger(__name__)


def rider_name(rider_type: RiderType, band_size: int) -> str:
    label = "Technical" if rider_type is RiderType.TECHNICAL else "Hospitality"
    return f"{label} Rider - {band_size} Members"


def _as_options(options: Union[RiderOptions, Dict[str, Any], None]) -> RiderOptions:
    if isinstance(options, RiderOptions):
        return options
    return RiderOptions.model_validate(options or {})


def _technical_sections(roster, options: RiderOptions) -> List:
    sections: List = []

    def add(cls, kind: str, content) -> None:
        sections.append(
            cls(id=section_id(len(sections) + 1), title=SECTION_TITLES[kind], content=content)
        )

    add(InputListSection, "input-list", InputListContent(inputs=build_input_list(roster)))
    if options.include_backline:
        add(BacklineSection, "backline", BacklineContent(**aggregate_backline(roster)))
    add(MonitoringSection, "monitoring", build_monitoring(roster))
    add(PowerSection, "power", build_power(roster.band_size))
    if options.include_lighting:
        add(LightingSection, "lighting", build_lighting())
    return sections


def generate_rider(
    roster: RosterLike,
    rider_type: Union[RiderType, str] = RiderType.TECHNICAL,
    options: Union[RiderOptions, Dict[str, Any], None] = None,
) -> RiderDocument:
    """Build a technical or hospitality rider for ``roster``.

    Technical riders get the input list, optional backline, monitoring, power,
    optional lighting and a stage plot. Hospitality riders get the four
    band-size scaled sections and no stage plot. The same inputs always
    produce the same document.

    Raises :class:`InvalidRosterError` when the roster has no performers.
    """
    roster = as_roster(roster)
    rider_type = RiderType(rider_type)
    opts = _as_options(options)

    band_size = roster.band_size
    if band_size == 0:
        logger.warning("Refusing to generate %s rider for an empty roster", rider_type.value)
        raise InvalidRosterError()

    stage_plot: Optional[StagePlotData] = None
    if rider_type is RiderType.TECHNICAL:
        sections = _technical_sections(roster, opts)
        stage_plot = build_stage_plot(roster)
    else:
        sections = build_hospitality_sections(band_size)

    doc = RiderDocument(
        name=rider_name(rider_type, band_size),
        type=rider_type,
        sections=sections,
        stage_plot_data=stage_plot,
    )
    logger.debug(
        "Generated %s with %d sections and %d stage elements",
        doc.name,
        len(doc.sections),
        len(stage_plot.elements) if stage_plot else 0,
    )
    return doc
