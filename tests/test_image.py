import pytest

from istyle.events import EventKind
from istyle.image import ImageInteraction


@pytest.fixture
def image(source, defaults, invoker):
    return ImageInteraction(source, defaults, invoker)


def test_initial_state(image):
    assert not image.selection_mode
    assert not image.moving
    assert image.selection_positions() == (0, 0, 0, 0)


def test_rubber_band_drag(image, source, defaults, invoker):
    image.set_callback_id(EventKind.LEFT_PRESS, 1)
    image.set_callback_id(EventKind.MOUSE_MOVE, 2)
    image.set_callback_id(EventKind.LEFT_RELEASE, 3)
    image.set_selection_mode(True)

    source.position = (10, 20)
    image.on_left_button_down()

    assert image.moving
    assert image.selection_positions() == (10, 20, 10, 20)
    invoker.on_left_press.assert_called_once_with(1, 10, 20)
    defaults.left_button_down.assert_not_called()

    source.position = (30, 40)
    image.on_mouse_move()

    assert image.selection_positions() == (10, 20, 30, 40)
    invoker.on_mouse_move.assert_called_once_with(2, 30, 40)
    defaults.mouse_move.assert_not_called()

    image.on_left_button_up()

    assert not image.moving
    assert image.selection_positions() == (10, 20, 30, 40)
    invoker.on_left_release.assert_called_once_with(3, 30, 40)


def test_selection_mode_off_delegates(image, source, defaults, invoker):
    source.position = (5, 5)
    image.on_left_button_down()

    assert not image.moving
    defaults.left_button_down.assert_called_once_with()
    invoker.on_left_press.assert_not_called()

    image.on_mouse_move()
    image.on_left_button_up()

    defaults.mouse_move.assert_called_once_with()
    defaults.left_button_up.assert_called_once_with()
    assert image.selection_positions() == (0, 0, 0, 0)


def test_move_without_drag_keeps_rectangle(image, source):
    image.set_selection_mode(True)

    source.position = (1, 2)
    image.on_left_button_down()
    image.on_left_button_up()

    source.position = (50, 60)
    image.on_mouse_move()

    assert image.selection_positions() == (1, 2, 1, 2)


def test_disabling_cancels_drag(image, source, defaults):
    image.set_selection_mode(True)
    image.on_left_button_down()
    assert image.moving

    image.set_selection_mode(False)
    assert not image.moving

    image.on_mouse_move()
    defaults.mouse_move.assert_called_once_with()


def test_enabling_does_not_start_drag(image):
    image.set_selection_mode(True)
    image.set_selection_mode(True)

    assert image.selection_mode
    assert not image.moving


def test_moving_tracks_last_start_or_end(image, source):
    image.set_selection_mode(True)

    image.on_left_button_down()
    image.on_left_button_down()
    assert image.moving

    image.end_select()
    assert not image.moving

    image.start_select()
    assert image.moving

    image.set_selection_mode(False)
    assert not image.moving


@pytest.mark.parametrize('handler, kind, trampoline, default', [
    ('on_middle_button_down', EventKind.MIDDLE_PRESS, 'on_middle_press',
     'middle_button_down'),
    ('on_middle_button_up', EventKind.MIDDLE_RELEASE, 'on_middle_release',
     'middle_button_up'),
    ('on_right_button_down', EventKind.RIGHT_PRESS, 'on_right_press',
     'right_button_down'),
    ('on_right_button_up', EventKind.RIGHT_RELEASE, 'on_right_release',
     'right_button_up'),
])
def test_other_buttons_always_delegate(image, source, defaults, invoker,
                                       handler, kind, trampoline, default):
    image.set_selection_mode(True)
    image.on_left_button_down()

    source.position = (3, 4)
    getattr(image, handler)()
    getattr(invoker, trampoline).assert_not_called()
    getattr(defaults, default).assert_called_once_with()

    image.set_callback_id(kind, 9)
    getattr(image, handler)()
    getattr(invoker, trampoline).assert_called_once_with(9, 3, 4)
    assert getattr(defaults, default).call_count == 2


def test_consumed_char(image, source, defaults, invoker):
    image.set_callback_id(EventKind.KEY_PRESS, 4)
    invoker.on_key_press.return_value = 1

    source.key = 'f'
    image.on_char()

    invoker.on_key_press.assert_called_once_with(4, 'f')
    defaults.char.assert_not_called()
    assert source.renders == 1


def test_unconsumed_char(image, source, defaults, invoker):
    image.set_callback_id(EventKind.KEY_PRESS, 4)

    source.key = 'Escape'
    image.on_char()

    invoker.on_key_press.assert_called_once_with(4, 'Escape')
    defaults.char.assert_called_once_with()
    assert source.renders == 1


def test_char_without_callback(image, source, defaults, invoker):
    image.on_char()

    invoker.on_key_press.assert_not_called()
    defaults.char.assert_called_once_with()
    assert source.renders == 1


def test_key_press(image, source, defaults, invoker):
    image.set_callback_id(EventKind.KEY_PRESS, 6)
    source.key = None

    invoker.on_key_press.return_value = 1
    image.on_key_press()
    invoker.on_key_press.assert_called_once_with(6, '')
    defaults.key_press.assert_not_called()

    invoker.on_key_press.return_value = 0
    image.on_key_press()
    defaults.key_press.assert_called_once_with()

    assert source.renders == 2


def test_cleared_callback_is_not_invoked(image, invoker):
    image.set_callback_id(EventKind.LEFT_PRESS, 7)
    image.set_callback_id(EventKind.LEFT_PRESS, 0)

    image.on_left_button_down()
    invoker.on_left_press.assert_not_called()
