from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .matching import KeywordRule, first_match
from .roster import RosterLike, as_roster

DRUM_KIT = "Full drum kit with hardware"
BASS_AMP = "Bass amp (Ampeg or equivalent, 300W+)"
GUITAR_AMP = "Guitar amp (Marshall or Fender equivalent)"
KEYBOARD_STANDS = "Keyboard stands and power"

ARTIST_BRINGS: Tuple[str, ...] = (
    "All instruments, cables, and personal equipment",
    "Pedals and effects",
)

# Drums first, then bass ahead of the electric-guitar rule so "Electric Bass"
# asks for a bass amp. Acoustic guitars, vocals and horns imply nothing.
BACKLINE_RULES: Tuple[KeywordRule[str], ...] = (
    KeywordRule(DRUM_KIT, all_of=("drum",)),
    KeywordRule(BASS_AMP, all_of=("bass",)),
    KeywordRule(GUITAR_AMP, all_of=("guitar", "electric")),
    KeywordRule(KEYBOARD_STANDS, any_of=("keyboard", "piano")),
)


def backline_item(instrument: str) -> Optional[str]:
    """Return the venue-provided item implied by ``instrument``, if any."""
    return first_match(BACKLINE_RULES, instrument)


def aggregate_backline(roster: RosterLike) -> Dict[str, List[str]]:
    """Split backline into what the venue provides and what the artist brings.

    ``venue_provides`` is deduplicated in first-occurrence order: two electric
    guitarists still ask for one guitar-amp line.
    """
    roster = as_roster(roster)
    venue: Dict[str, None] = {}
    for performer in roster.performers:
        for label in performer.instruments:
            item = backline_item(label)
            if item is not None:
                venue.setdefault(item, None)
    return {
        "venue_provides": list(venue),
        "artist_brings": list(ARTIST_BRINGS),
    }
