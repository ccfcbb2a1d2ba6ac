from __future__ import annotations

from typing import List

from ...schemas.rider import (
    DressingRoomContent,
    DressingRoomSection,
    FoodDrinkContent,
    FoodDrinkSection,
    GuestListContent,
    GuestListSection,
    TransportationContent,
    TransportationSection,
)
from .sections import SECTION_TITLES, section_id

WATER_PER_MEMBER = 3
SOFT_DRINKS_PER_MEMBER = 2
EXTRA_SEATS = 2
EXTRA_GUESTS = 2

GUEST_LIST_NOTES = "Guest list names provided 24 hours before show"
TRANSPORT_DETAILS = (
    "Load-in access at stage door",
    "2 parking passes",
    "Prefer covered loading area",
)


def water_bottles(band_size: int) -> int:
    return WATER_PER_MEMBER * band_size


def soft_drinks(band_size: int) -> int:
    return SOFT_DRINKS_PER_MEMBER * band_size


def dressing_room_seating(band_size: int) -> int:
    return band_size + EXTRA_SEATS


def guest_list_count(band_size: int) -> int:
    return band_size + EXTRA_GUESTS


def build_hospitality_sections(band_size: int) -> List:
    """Return the food-drink, dressing-room, guest-list and transportation
    sections, in that order, scaled to ``band_size``."""
    water = water_bottles(band_size)
    sodas = soft_drinks(band_size)
    seats = dressing_room_seating(band_size)

    food_drink = FoodDrinkSection(
        id=section_id(1),
        title=SECTION_TITLES["food-drink"],
        content=FoodDrinkContent(
            food=[
                f"Light meal or substantial snacks for {band_size} people",
                "Vegetarian options preferred",
                "No major allergens",
            ],
            drinks=[
                f"{water} bottles of water",
                f"{sodas} soft drinks (variety)",
                "Coffee/tea service",
            ],
            water_bottles=water,
            soft_drinks=sodas,
        ),
    )
    dressing_room = DressingRoomSection(
        id=section_id(2),
        title=SECTION_TITLES["dressing-room"],
        content=DressingRoomContent(
            seating=seats,
            requirements=[
                "1 secure, private dressing room",
                f"Seating for {seats} people",
                "Mirrors and adequate lighting",
                "Table for food and drinks",
                "Power outlets for devices",
            ],
        ),
    )
    guest_list = GuestListSection(
        id=section_id(3),
        title=SECTION_TITLES["guest-list"],
        content=GuestListContent(count=str(guest_list_count(band_size)), notes=GUEST_LIST_NOTES),
    )
    transportation = TransportationSection(
        id=section_id(4),
        title=SECTION_TITLES["transportation"],
        content=TransportationContent(details=list(TRANSPORT_DETAILS)),
    )
    return [food_drink, dressing_room, guest_list, transportation]
