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

""" Trackball actor interactor style.

Direct manipulation of actors (rotate, spin, pan, dolly, scale) with
callbacks that also receive the actor under the mouse cursor.
"""

import vtk

from istyle.events import EventKind
from istyle.interaction import Interaction
from istyle.source import StyleMixin


class TrackballActorInteraction(Interaction):
    """ Trackball actor state machine.

    Left button and mouse move callbacks are actor aware: the picked actor
    (or :obj:`None`) is passed along with the event position. Picking only
    happens if a callback is registered for the event. Middle and right
    button callbacks only receive the position. The stock handlers always
    run afterwards.
    """

    def _notify_actor(self, kind, trampoline):
        if self.callbacks.active(kind):
            x, y = self._position()
            trampoline(self.callbacks[kind], x, y, self._source.pick(x, y))

    def on_left_button_down(self):
        self._notify_actor(EventKind.LEFT_PRESS,
                           self._invoker.on_left_press_with_actor)
        self._defaults.left_button_down()

    def on_left_button_up(self):
        self._notify_actor(EventKind.LEFT_RELEASE,
                           self._invoker.on_left_release_with_actor)
        self._defaults.left_button_up()

    def on_mouse_move(self):
        self._notify_actor(EventKind.MOUSE_MOVE,
                           self._invoker.on_mouse_move_with_actor)
        self._defaults.mouse_move()

    def on_middle_button_down(self):
        self._notify(EventKind.MIDDLE_PRESS, self._invoker.on_middle_press)
        self._defaults.middle_button_down()

    def on_middle_button_up(self):
        self._notify(EventKind.MIDDLE_RELEASE, self._invoker.on_middle_release)
        self._defaults.middle_button_up()

    def on_right_button_down(self):
        self._notify(EventKind.RIGHT_PRESS, self._invoker.on_right_press)
        self._defaults.right_button_down()

    def on_right_button_up(self):
        self._notify(EventKind.RIGHT_RELEASE, self._invoker.on_right_release)
        self._defaults.right_button_up()


class InteractorStyleTrackballActor(StyleMixin,
                                    vtk.vtkInteractorStyleTrackballActor):
    """ Trackball actor interactor style with callback routing.

    Parameters
    ----------
    invoker : CallbackInvoker, optional
        Trampoline bridge. A private
        :class:`~istyle.trampoline.CallbackRegistry` by default.

    Note
    ----
    Register left button and mouse move callbacks with
    ``with_actor=True``, see :meth:`~istyle.source.StyleMixin.set_callback`.
    Keyboard events are not intercepted.
    """

    def __init__(self, invoker=None):
        self._init_routing(TrackballActorInteraction, invoker)
