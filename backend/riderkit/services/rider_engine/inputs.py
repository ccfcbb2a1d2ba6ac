from __future__ import annotations

from typing import List, Tuple

from ...schemas.rider import InputChannel, Performer
from .matching import is_drum_kit
from .mics import resolve_mic
from .roster import RosterLike, as_roster

DI_NOTE = "DI Box required"

# Canonical close-mic plan for any drum kit, in console order.
DRUM_KIT_CHANNELS: Tuple[Tuple[str, str], ...] = (
    ("Kick Drum", "Beta 52 or equivalent"),
    ("Snare", "SM57"),
    ("Hi-Hat", "Condenser"),
    ("Tom 1", "Sennheiser e604"),
    ("Tom 2", "Sennheiser e604"),
    ("Floor Tom", "Sennheiser e604"),
    ("Overhead L", "Condenser"),
    ("Overhead R", "Condenser"),
)


def _performer_channels(performer: Performer) -> List[Tuple[str, str, str]]:
    rows: List[Tuple[str, str, str]] = []
    for label in performer.instruments:
        if is_drum_kit(label):
            # needs_di never applies to the kit
            rows.extend((name, mic, "") for name, mic in DRUM_KIT_CHANNELS)
            continue
        rows.append((label, resolve_mic(label), DI_NOTE if performer.needs_di else ""))
    return rows


def build_input_list(roster: RosterLike) -> List[InputChannel]:
    """Expand every performer's instruments into console input channels.

    Channels follow roster order, then each performer's instrument order, and
    are numbered from 1.
    """
    roster = as_roster(roster)
    channels: List[InputChannel] = []
    for performer in roster.performers:
        for instrument, mic, notes in _performer_channels(performer):
            channels.append(
                InputChannel(
                    channel=len(channels) + 1,
                    instrument=instrument,
                    mic=mic,
                    notes=notes,
                )
            )
    return channels
