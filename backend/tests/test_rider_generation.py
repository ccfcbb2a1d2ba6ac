import logging

import pytest

from riderkit.schemas.rider import RiderDocument, RiderOptions, RiderType, Roster
from riderkit.services.rider_engine import InvalidRosterError, generate_rider


def _types(doc):
    return [s.type for s in doc.sections]


def test_technical_rider_default_options(trio):
    doc = generate_rider(trio, "technical")
    assert doc.name == "Technical Rider - 3 Members"
    assert doc.type is RiderType.TECHNICAL
    assert _types(doc) == ["input-list", "backline", "monitoring", "power"]
    assert doc.stage_plot_data is not None
    assert doc.stage_plot_data.elements


def test_technical_rider_option_flags(trio):
    doc = generate_rider(trio, RiderType.TECHNICAL, {"include_backline": False, "include_lighting": True})
    assert _types(doc) == ["input-list", "monitoring", "power", "lighting"]
    assert [s.id for s in doc.sections] == ["section-1", "section-2", "section-3", "section-4"]


def test_technical_rider_contents(trio):
    doc = generate_rider(trio, RiderType.TECHNICAL, RiderOptions(include_lighting=True))
    inputs = doc.section("input-list").content.inputs
    assert len(inputs) == 1 + 8 + 1
    assert doc.section("backline").content.venue_provides == [
        "Guitar amp (Marshall or Fender equivalent)",
        "Full drum kit with hardware",
    ]
    assert doc.section("monitoring").content.count == "3"
    assert doc.section("power").content.outlets == "2"
    assert doc.section("lighting").title == "Lighting"


def test_hospitality_rider(full_band):
    doc = generate_rider(full_band, "hospitality", {"include_lighting": True})
    assert doc.name == "Hospitality Rider - 8 Members"
    assert _types(doc) == ["food-drink", "dressing-room", "guest-list", "transportation"]
    assert doc.stage_plot_data is None
    assert doc.section("food-drink").content.water_bottles == 24


def test_generation_is_deterministic(full_band):
    first = generate_rider(full_band, "technical", {"include_lighting": True})
    second = generate_rider(full_band, "technical", {"include_lighting": True})
    assert first.model_dump_json() == second.model_dump_json()


def test_generation_does_not_mutate_roster(full_band):
    before = full_band.model_dump()
    generate_rider(full_band, "technical")
    assert full_band.model_dump() == before


def test_empty_roster_is_rejected(caplog):
    caplog.set_level(logging.WARNING, logger="riderkit.services.rider_engine.assembler")
    with pytest.raises(InvalidRosterError):
        generate_rider([], "technical", {})
    with pytest.raises(InvalidRosterError):
        generate_rider(Roster(), "hospitality")
    assert any("empty roster" in r.getMessage() for r in caplog.records)


def test_invalid_roster_error_is_a_value_error():
    with pytest.raises(ValueError):
        generate_rider([], "technical")


def test_unknown_rider_type_is_rejected(trio):
    with pytest.raises(ValueError):
        generate_rider(trio, "catering")


def test_performer_without_instruments_does_not_crash(performer):
    roster = Roster(performers=(performer("Ghost"), performer("Ana", "Lead Vocals")))
    doc = generate_rider(roster, "technical")
    assert doc.name == "Technical Rider - 2 Members"
    assert [c.instrument for c in doc.section("input-list").content.inputs] == ["Lead Vocals"]
    assert doc.section("monitoring").content.requirements == ["Ghost in mix", "Ana: Lead Vocals in mix"]


def test_document_round_trips_through_json(full_band):
    doc = generate_rider(full_band, "technical", {"include_lighting": True})
    restored = RiderDocument.model_validate_json(doc.model_dump_json())
    assert restored == doc


def test_debug_log_on_generation(trio, caplog):
    caplog.set_level(logging.DEBUG, logger="riderkit.services.rider_engine.assembler")
    generate_rider(trio, "technical")
    assert any("Technical Rider - 3 Members" in r.getMessage() for r in caplog.records)
