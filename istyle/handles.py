# Copyright 2024, m3shware
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

""" Handle based interface.

Flat functions that operate on integer style handles, for hosts that cannot
hold Python objects directly. Every function checks its handle first: a
null handle (:obj:`None` or 0) or the handle of a destroyed style turns the
call into a no-op that returns a neutral value.

.. code-block:: python
   :linenos:

   import istyle.handles as handles
   from istyle.events import EventKind

   h = handles.create('image')
   cid = handles.registry.register(EventKind.LEFT_PRESS, print)

   handles.set_left_button_press_callback_id(h, cid)
   handles.set_selection_mode(h, True)

   iren.SetInteractorStyle(handles.style(h))
   ...
   handles.destroy(h)
"""

from itertools import count

from istyle.custom import InteractorStyleCustom
from istyle.events import EventKind
from istyle.image import InteractorStyleImage
from istyle.trackball import InteractorStyleTrackballActor
from istyle.trampoline import CallbackRegistry


STYLES = {
    'image': InteractorStyleImage,
    'trackball_actor': InteractorStyleTrackballActor,
    'custom': InteractorStyleCustom,
}

registry = CallbackRegistry()
""" Default trampoline bridge for styles created by :func:`create`. """

# Live styles by handle. Handles are never reused.
_styles = dict()
_handles = count(1)


def create(kind='image', invoker=None):
    """ Create an interactor style.

    Parameters
    ----------
    kind : str, optional
        One of ``'image'``, ``'trackball_actor'`` or ``'custom'``.
    invoker : CallbackInvoker, optional
        Trampoline bridge, the module level :data:`registry` by default.

    Returns
    -------
    int
        Style handle, never 0.

    Raises
    ------
    ValueError
        If `kind` is not a known style.
    """
    try:
        style_type = STYLES[kind]
    except KeyError:
        raise ValueError(f"unknown interactor style '{kind}'") from None

    style = style_type(registry if invoker is None else invoker)

    handle = next(_handles)
    _styles[handle] = style

    return handle


def style(handle):
    """ Interactor style behind a handle, :obj:`None` if there is none.
    """
    if not handle:
        return None

    return _styles.get(handle)


def destroy(handle):
    """ Release a style.

    Removes its observers, clears its callback ids and detaches it from its
    interactor. Destroying a null or already destroyed handle does nothing.
    """
    if not handle:
        return

    obj = _styles.pop(handle, None)

    if obj is not None:
        obj.release()


def _set_callback_id(handle, kind, callback_id):
    obj = style(handle)

    if obj is not None:
        obj.set_callback_id(kind, callback_id)


def set_left_button_press_callback_id(handle, callback_id):
    _set_callback_id(handle, EventKind.LEFT_PRESS, callback_id)


def set_left_button_release_callback_id(handle, callback_id):
    _set_callback_id(handle, EventKind.LEFT_RELEASE, callback_id)


def set_right_button_press_callback_id(handle, callback_id):
    _set_callback_id(handle, EventKind.RIGHT_PRESS, callback_id)


def set_right_button_release_callback_id(handle, callback_id):
    _set_callback_id(handle, EventKind.RIGHT_RELEASE, callback_id)


def set_middle_button_press_callback_id(handle, callback_id):
    _set_callback_id(handle, EventKind.MIDDLE_PRESS, callback_id)


def set_middle_button_release_callback_id(handle, callback_id):
    _set_callback_id(handle, EventKind.MIDDLE_RELEASE, callback_id)


def set_mouse_move_callback_id(handle, callback_id):
    _set_callback_id(handle, EventKind.MOUSE_MOVE, callback_id)


def set_key_press_callback_id(handle, callback_id):
    """ Set the key press callback id.

    Raises
    ------
    KeyError
        For styles without keyboard interception (trackball actor).
    """
    _set_callback_id(handle, EventKind.KEY_PRESS, callback_id)


def _selection_style(handle):
    """ Style behind `handle` if it supports rubber-band selection.
    """
    obj = style(handle)

    if obj is None or not hasattr(obj, 'set_selection_mode'):
        return None

    return obj


def set_selection_mode(handle, enabled):
    obj = _selection_style(handle)

    if obj is not None:
        obj.set_selection_mode(enabled)


def is_moving(handle):
    obj = _selection_style(handle)

    if obj is None:
        return False

    return obj.is_moving()


def get_selection_positions(handle):
    """ Rubber-band corners ``(start_x, start_y, end_x, end_y)``.

    Returns ``(0, 0, 0, 0)`` for null handles and styles without
    selection support.
    """
    obj = _selection_style(handle)

    if obj is None:
        return (0, 0, 0, 0)

    return obj.get_selection_positions()
