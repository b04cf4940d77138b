import pytest
from unittest.mock import MagicMock

import istyle.handles as handles
from istyle.custom import InteractorStyleCustom
from istyle.events import EventKind
from istyle.image import InteractorStyleImage
from istyle.trackball import InteractorStyleTrackballActor
from istyle.trampoline import CallbackInvoker


@pytest.fixture
def handle():
    h = handles.create('image')
    yield h
    handles.destroy(h)


def test_create_kinds():
    created = [handles.create(kind)
               for kind in ('image', 'trackball_actor', 'custom')]

    assert 0 not in created
    assert len(set(created)) == 3

    assert isinstance(handles.style(created[0]), InteractorStyleImage)
    assert isinstance(handles.style(created[1]),
                      InteractorStyleTrackballActor)
    assert isinstance(handles.style(created[2]), InteractorStyleCustom)

    for h in created:
        handles.destroy(h)


def test_create_unknown_kind():
    with pytest.raises(ValueError):
        handles.create('joystick')


def test_default_and_custom_invoker():
    h = handles.create('image')
    assert handles.style(h).invoker is handles.registry
    handles.destroy(h)

    invoker = MagicMock(spec=CallbackInvoker)
    h = handles.create('custom', invoker)
    assert handles.style(h).invoker is invoker
    handles.destroy(h)


def test_destroy_twice():
    h = handles.create('trackball_actor')

    handles.destroy(h)
    handles.destroy(h)

    assert handles.style(h) is None


@pytest.mark.parametrize('null', [None, 0])
def test_null_handle_is_noop(null):
    handles.destroy(null)

    handles.set_left_button_press_callback_id(null, 3)
    handles.set_key_press_callback_id(null, 3)
    handles.set_selection_mode(null, True)

    assert handles.style(null) is None
    assert handles.is_moving(null) is False
    assert handles.get_selection_positions(null) == (0, 0, 0, 0)


def test_destroyed_handle_is_noop():
    h = handles.create('image')
    handles.destroy(h)

    handles.set_mouse_move_callback_id(h, 1)
    handles.set_selection_mode(h, True)

    assert handles.is_moving(h) is False


def test_set_callback_ids(handle):
    setters = {
        EventKind.LEFT_PRESS: handles.set_left_button_press_callback_id,
        EventKind.LEFT_RELEASE: handles.set_left_button_release_callback_id,
        EventKind.RIGHT_PRESS: handles.set_right_button_press_callback_id,
        EventKind.RIGHT_RELEASE: handles.set_right_button_release_callback_id,
        EventKind.MIDDLE_PRESS: handles.set_middle_button_press_callback_id,
        EventKind.MIDDLE_RELEASE:
            handles.set_middle_button_release_callback_id,
        EventKind.MOUSE_MOVE: handles.set_mouse_move_callback_id,
        EventKind.KEY_PRESS: handles.set_key_press_callback_id,
    }

    for i, (kind, setter) in enumerate(setters.items(), start=1):
        setter(handle, i)
        setter(handle, 10*i)

    callbacks = handles.style(handle).interaction.callbacks

    for i, kind in enumerate(setters, start=1):
        assert callbacks[kind] == 10*i


def test_trackball_has_no_key_slot():
    h = handles.create('trackball_actor')

    with pytest.raises(KeyError):
        handles.set_key_press_callback_id(h, 1)

    handles.destroy(h)


def test_selection_queries(handle):
    handles.set_selection_mode(handle, True)

    assert handles.style(handle).get_selection_mode()
    assert handles.is_moving(handle) is False
    assert handles.get_selection_positions(handle) == (0, 0, 0, 0)


def test_trackball_has_no_selection():
    h = handles.create('trackball_actor')

    handles.set_selection_mode(h, True)

    assert handles.is_moving(h) is False
    assert handles.get_selection_positions(h) == (0, 0, 0, 0)

    handles.destroy(h)


def test_destroy_clears_callbacks():
    h = handles.create('image')
    obj = handles.style(h)

    handles.set_left_button_press_callback_id(h, 5)
    handles.destroy(h)

    assert not obj.interaction.callbacks.active(EventKind.LEFT_PRESS)
