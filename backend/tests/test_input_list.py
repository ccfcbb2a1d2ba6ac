from riderkit.schemas.rider import Roster
from riderkit.services.rider_engine.inputs import DI_NOTE, DRUM_KIT_CHANNELS, build_input_list

EXPECTED_KIT = [
    ("Kick Drum", "Beta 52 or equivalent"),
    ("Snare", "SM57"),
    ("Hi-Hat", "Condenser"),
    ("Tom 1", "Sennheiser e604"),
    ("Tom 2", "Sennheiser e604"),
    ("Floor Tom", "Sennheiser e604"),
    ("Overhead L", "Condenser"),
    ("Overhead R", "Condenser"),
]


def test_drums_expand_to_eight_fixed_channels(performer):
    for needs_di in (False, True):
        roster = Roster(performers=(performer("Ben", "Drums", needs_di=needs_di),))
        channels = build_input_list(roster)
        assert [(c.instrument, c.mic) for c in channels] == EXPECTED_KIT
        assert all(c.notes == "" for c in channels)
        assert [c.channel for c in channels] == list(range(1, 9))


def test_drum_kit_channels_replace_the_performer_label(performer):
    roster = Roster(performers=(performer("Ben", "Jazz drum kit"),))
    assert [c.instrument for c in build_input_list(roster)] == [n for n, _ in DRUM_KIT_CHANNELS]


def test_single_channel_with_di_note(performer):
    roster = Roster(performers=(performer("Ana", "Acoustic Guitar", needs_di=True),))
    (channel,) = build_input_list(roster)
    assert channel.instrument == "Acoustic Guitar"
    assert channel.mic == "DI Box"
    assert channel.notes == DI_NOTE


def test_channel_order_follows_roster_then_instruments(performer):
    roster = Roster(
        performers=(
            performer("Cleo", "Lead Vocals", "Acoustic Guitar"),
            performer("Ben", "Drums"),
            performer("Dee", "Bass"),
        )
    )
    names = [c.instrument for c in build_input_list(roster)]
    assert names[:2] == ["Lead Vocals", "Acoustic Guitar"]
    assert names[2:10] == [n for n, _ in DRUM_KIT_CHANNELS]
    assert names[10:] == ["Bass"]


def test_performer_without_instruments_contributes_nothing(performer):
    roster = Roster(performers=(performer("Nobody"), performer("Ana", "Violin")))
    channels = build_input_list(roster)
    assert [(c.channel, c.instrument, c.mic) for c in channels] == [(1, "Violin", "SM57 or equivalent")]


def test_accepts_plain_performer_dicts():
    channels = build_input_list([{"name": "Ana", "instruments": ["Trumpet"]}])
    assert channels[0].mic == "SM57 or condenser"
