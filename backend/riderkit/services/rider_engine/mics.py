from __future__ import annotations

from typing import Tuple

from .matching import KeywordRule, first_match

DEFAULT_MIC = "SM57 or equivalent"

# Order matters: "Acoustic Guitar" has to hit the DI rule before the generic
# guitar rule, and "Bass Guitar" has to hit the guitar rule before the bass
# rule. Vocals are checked first so "Guitar/Vocals" gets a vocal mic.
MIC_RULES: Tuple[KeywordRule[str], ...] = (
    KeywordRule("Shure SM58 or equivalent", all_of=("vocal",)),
    KeywordRule("DI Box", all_of=("guitar", "acoustic")),
    KeywordRule("SM57 on amp", all_of=("guitar",)),
    KeywordRule("DI + Beta 52 on amp", all_of=("bass",)),
    KeywordRule("DI Box (stereo)", any_of=("keyboard", "piano", "synth")),
    KeywordRule("SM57 or condenser", any_of=("sax", "trumpet", "horn")),
)


def resolve_mic(instrument: str) -> str:
    """Return the recommended microphone or DI for an instrument label.

    Never fails: labels that match no rule get :data:`DEFAULT_MIC`.
    """
    return first_match(MIC_RULES, instrument, DEFAULT_MIC)
