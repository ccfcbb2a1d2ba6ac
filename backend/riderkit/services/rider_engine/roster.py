from __future__ import annotations

from typing import Any, Iterable, Union

from ...schemas.rider import Performer, Roster

RosterLike = Union[Roster, Iterable[Union[Performer, dict]]]


def as_roster(value: RosterLike) -> Roster:
    """Return an immutable :class:`Roster` snapshot of ``value``.

    Lists of performers or plain dicts (as posted by the capture form) are
    validated into fresh frozen models so later mutation by the caller cannot
    leak into a generation in progress.
    """
    if isinstance(value, Roster):
        return value
    if value is None:
        return Roster()
    return Roster(performers=tuple(_as_performer(p) for p in value))


def _as_performer(value: Any) -> Performer:
    if isinstance(value, Performer):
        return value
    return Performer.model_validate(value)


def performer_key(performer: Performer, index: int) -> str:
    """Opaque id for ``performer``; positional when the caller gave none."""
    return performer.id or f"performer-{index + 1}"
