"""Rider and stage-plot generation engine."""

from .assembler import generate_rider, rider_name
from .backline import aggregate_backline, backline_item
from .errors import InvalidRosterError, RiderEngineError, UnknownTemplateError
from .hospitality import build_hospitality_sections
from .inputs import build_input_list
from .mics import resolve_mic
from .requirements import build_lighting, build_monitoring, build_power, monitor_count, outlet_count
from .roster import as_roster
from .stage_layout import DEFAULT_BANDS, StageBand, StageRole, build_stage_plot, layout_stage, stage_kit
from .templates import generate_from_template, get_template, list_templates

__all__ = [
    "generate_rider",
    "rider_name",
    "aggregate_backline",
    "backline_item",
    "InvalidRosterError",
    "RiderEngineError",
    "UnknownTemplateError",
    "build_hospitality_sections",
    "build_input_list",
    "resolve_mic",
    "build_lighting",
    "build_monitoring",
    "build_power",
    "monitor_count",
    "outlet_count",
    "as_roster",
    "DEFAULT_BANDS",
    "StageBand",
    "StageRole",
    "build_stage_plot",
    "layout_stage",
    "stage_kit",
    "generate_from_template",
    "get_template",
    "list_templates",
]
