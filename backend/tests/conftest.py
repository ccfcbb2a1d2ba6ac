from pathlib import Path
from dotenv import load_dotenv
import pytest

from riderkit.schemas.rider import Performer, Roster

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / '.env.test')


def make_performer(name, *instruments, needs_monitor=True, needs_di=False, id=None):
    return Performer(
        id=id,
        name=name,
        instruments=instruments,
        needs_monitor=needs_monitor,
        needs_di=needs_di,
    )


@pytest.fixture
def trio():
    """Guitar, drums and vocals; the smallest roster touching three stage roles."""
    return Roster(
        performers=(
            make_performer("Ana", "Electric Guitar", id="p1"),
            make_performer("Ben", "Drums", id="p2"),
            make_performer("Cleo", "Lead Vocals", id="p3"),
        )
    )


@pytest.fixture
def full_band():
    return Roster(
        performers=(
            make_performer("Singer", "Lead Vocals", id="a"),
            make_performer("Lead", "Electric Guitar", id="b"),
            make_performer("Rhythm", "Acoustic Guitar", "Backing Vocals", id="c", needs_di=True),
            make_performer("Low End", "Bass Guitar", id="d", needs_monitor=False),
            make_performer("Sticks", "Drums", id="e"),
            make_performer("Keys", "Keyboards/Piano", "Synthesizer", id="f", needs_di=True),
            make_performer("Horns", "Saxophone", "Trumpet", id="g", needs_monitor=False),
            make_performer("Selector", "DJ Equipment", id="h"),
        )
    )


@pytest.fixture
def performer():
    """Factory for performers: ``performer("Ana", "Electric Guitar", needs_di=True)``."""
    return make_performer
