"""Ordered keyword rule tables shared by every instrument classifier.

Instrument labels are free text ("Lead Vocals", "Acoustic Guitar",
"Keyboards/Piano"), so classification is a case-insensitive substring match
against an ordered table. The first rule that matches wins; a table is only
correct together with its ordering, and each table in this package documents
the precedence it relies on next to its declaration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeywordRule(Generic[T]):
    """Match when every ``all_of`` keyword, at least one ``any_of`` keyword
    (if any are given) and none of the ``none_of`` keywords appear."""

    result: T
    all_of: Tuple[str, ...] = ()
    any_of: Tuple[str, ...] = ()
    none_of: Tuple[str, ...] = ()

    def matches(self, label: str) -> bool:
        text = (label or "").lower()
        if any(k not in text for k in self.all_of):
            return False
        if self.any_of and not any(k in text for k in self.any_of):
            return False
        return not any(k in text for k in self.none_of)


def first_match(rules: Iterable[KeywordRule[T]], label: str, default: Optional[T] = None) -> Optional[T]:
    """Return the result of the first rule matching ``label``."""
    for rule in rules:
        if rule.matches(label):
            return rule.result
    return default


def is_drum_kit(label: str) -> bool:
    """True for any label the input list expands into the eight-channel kit."""
    return "drum" in (label or "").lower()
