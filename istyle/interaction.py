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

""" Interaction state machine building blocks.

An interaction receives three capabilities at construction:

`source`
    The event source. Provides ``event_position()``, ``key_sym()``,
    ``render()`` and ``pick(x, y)``, see
    :class:`istyle.source.InteractorEvents`.
`defaults`
    Stock event handling of the underlying VTK interactor style. Provides
    ``left_button_down()``, ``left_button_up()``, ``middle_button_down()``,
    ``middle_button_up()``, ``right_button_down()``, ``right_button_up()``,
    ``mouse_move()``, ``char()`` and ``key_press()``, see
    :class:`istyle.source.StockHandlers`.
`invoker`
    The trampoline bridge, see :class:`istyle.trampoline.CallbackInvoker`.

Event handlers assume that the event source is attached to a live
interactor. Adapters check this before forwarding an event.
"""

from istyle.events import CallbackSlots
from istyle.events import EventKind
from istyle.events import MOUSE_EVENTS
from istyle.selection import RubberBand


class Interaction:
    """ Interaction base class.

    Parameters
    ----------
    source : InteractorEvents
        Event source.
    defaults : StockHandlers
        Stock event handlers.
    invoker : CallbackInvoker
        Trampoline bridge.
    """

    kinds = MOUSE_EVENTS
    """ Event kinds that get a callback slot. """

    def __init__(self, source, defaults, invoker):
        self._source = source
        self._defaults = defaults
        self._invoker = invoker

        self.callbacks = CallbackSlots(self.kinds)

    @property
    def invoker(self):
        return self._invoker

    def set_callback_id(self, kind, callback_id):
        """ Register a callback id for an event kind.

        Raises
        ------
        KeyError
            If this interaction has no slot for `kind`.
        """
        self.callbacks.set(kind, callback_id)

    def _position(self):
        """ Current event position as a pair of Python integers.
        """
        x, y = self._source.event_position()
        return int(x), int(y)

    def _notify(self, kind, trampoline):
        """ Pass the event position to `trampoline` if a callback is set.
        """
        if self.callbacks.active(kind):
            trampoline(self.callbacks[kind], *self._position())

    def _notify_key(self):
        """ Pass the current key symbol to the key press trampoline.

        Returns
        -------
        bool
            The callback consumed the event.
        """
        if not self.callbacks.active(EventKind.KEY_PRESS):
            return False

        # The interactor reports no key symbol for some synthetic events.
        key = self._source.key_sym() or ''
        consumed = self._invoker.on_key_press(
            self.callbacks[EventKind.KEY_PRESS], key)

        return bool(consumed)


class RubberBandMixin:
    """ Rubber-band selection on left button drag.

    While a drag is in progress the stock left button and mouse move
    handlers are not called, which keeps the camera still.
    """

    def _init_rubber_band(self):
        self.rubber_band = RubberBand()

    @property
    def selection_mode(self):
        return self.rubber_band.enabled

    @property
    def moving(self):
        return self.rubber_band.moving

    def set_selection_mode(self, enabled):
        """ Toggle selection mode. Disabling cancels an active drag.
        """
        self.rubber_band.set_enabled(enabled)

    def selection_positions(self):
        """ Corners of the current or last rubber band.

        Returns
        -------
        tuple
            ``(start_x, start_y, end_x, end_y)``
        """
        return self.rubber_band.positions()

    def start_select(self):
        """ Anchor a new rubber band at the current event position.
        """
        self.rubber_band.start_select(self._position())

    def end_select(self):
        self.rubber_band.end_select()

    def on_left_button_down(self):
        # A new press while selection mode is on restarts the rubber band,
        # even if a previous drag never received its release event.
        if self.rubber_band.enabled:
            self.start_select()

        self._notify(EventKind.LEFT_PRESS, self._invoker.on_left_press)

        if not self.rubber_band.moving:
            self._defaults.left_button_down()

    def on_left_button_up(self):
        if self.rubber_band.moving:
            self.end_select()

        self._notify(EventKind.LEFT_RELEASE, self._invoker.on_left_release)

        # The drag has just been ended above, so the stock handler sees the
        # release. It has no interaction state to end in this case.
        if not self.rubber_band.moving:
            self._defaults.left_button_up()

    def on_mouse_move(self):
        if self.rubber_band.moving:
            self.rubber_band.update(self._position())

        self._notify(EventKind.MOUSE_MOVE, self._invoker.on_mouse_move)

        if not self.rubber_band.moving:
            self._defaults.mouse_move()
