import numpy as np
import pytest

from istyle.events import ALL_EVENTS
from istyle.events import CallbackSlots
from istyle.events import EventKind
from istyle.events import MOUSE_EVENTS
from istyle.events import NO_CALLBACK
from istyle.events import check_callback_id


def test_slots_start_empty():
    slots = CallbackSlots()

    for kind in ALL_EVENTS:
        assert slots[kind] == NO_CALLBACK
        assert not slots.active(kind)


def test_last_write_wins():
    slots = CallbackSlots()

    for value in (3, 17, -4, 2**63 - 1, 8):
        slots.set(EventKind.LEFT_PRESS, value)

    assert slots[EventKind.LEFT_PRESS] == 8
    assert slots.active(EventKind.LEFT_PRESS)

    # Other slots are untouched.
    assert slots[EventKind.LEFT_RELEASE] == NO_CALLBACK


def test_zero_disables_slot():
    slots = CallbackSlots()
    slots.set(EventKind.MOUSE_MOVE, 5)
    slots.set(EventKind.MOUSE_MOVE, 0)

    assert not slots.active(EventKind.MOUSE_MOVE)


def test_missing_slot():
    slots = CallbackSlots(MOUSE_EVENTS)

    assert EventKind.KEY_PRESS not in slots
    assert not slots.active(EventKind.KEY_PRESS)

    with pytest.raises(KeyError):
        slots.set(EventKind.KEY_PRESS, 1)


def test_clear():
    slots = CallbackSlots()

    for i, kind in enumerate(slots, start=1):
        slots.set(kind, i)

    slots.clear()
    assert not any(slots.active(kind) for kind in slots)


@pytest.mark.parametrize('value', [2**63, -2**63 - 1])
def test_id_out_of_range(value):
    with pytest.raises(ValueError):
        check_callback_id(value)


@pytest.mark.parametrize('value', [1.0, '1', None, True])
def test_id_wrong_type(value):
    with pytest.raises(TypeError):
        check_callback_id(value)


def test_id_accepts_numpy_integers():
    assert check_callback_id(np.int64(12)) == 12
    assert type(check_callback_id(np.int64(12))) is int
