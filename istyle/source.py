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

""" VTK event source adapters.

:class:`InteractorEvents` and :class:`StockHandlers` wrap a VTK interactor
style object so that the interaction classes never talk to VTK directly.
:class:`StyleMixin` holds the observer plumbing shared by the VTK
interactor style subclasses of this package.
"""

import istyle.picking as picking
from istyle.trampoline import CallbackRegistry


class InteractorEvents:
    """ Event source backed by the interactor of a style.

    Parameters
    ----------
    style : vtkInteractorStyle
        Interactor style whose interactor provides the event data.
    """

    def __init__(self, style):
        self._style = style

    @property
    def attached(self):
        """ The style is attached to an interactor.

        :type: bool
        """
        return self._style.GetInteractor() is not None

    def event_position(self):
        return self._style.GetInteractor().GetEventPosition()

    def key_sym(self):
        return self._style.GetInteractor().GetKeySym()

    def render(self):
        self._style.GetInteractor().Render()

    def pick(self, x, y):
        """ Actor at display position ``(x, y)``, see
        :func:`istyle.picking.pick_actor`.
        """
        return picking.pick_actor(self._style.GetInteractor(), x, y)


class StockHandlers:
    """ Stock event handlers of a VTK interactor style.

    Calling one of the ``On...()`` methods of a Python subclass of a VTK
    interactor style always runs the C++ implementation of the base class.
    """

    def __init__(self, style):
        self._style = style

    def left_button_down(self):
        self._style.OnLeftButtonDown()

    def left_button_up(self):
        self._style.OnLeftButtonUp()

    def middle_button_down(self):
        self._style.OnMiddleButtonDown()

    def middle_button_up(self):
        self._style.OnMiddleButtonUp()

    def right_button_down(self):
        self._style.OnRightButtonDown()

    def right_button_up(self):
        self._style.OnRightButtonUp()

    def mouse_move(self):
        self._style.OnMouseMove()

    def char(self):
        self._style.OnChar()

    def key_press(self):
        self._style.OnKeyPress()


# VTK event names and the interaction methods they are routed to. See the
# vtkCommand class documentation for an enumeration of all events.
EVENT_HANDLERS = {
    'LeftButtonPressEvent': 'on_left_button_down',
    'LeftButtonReleaseEvent': 'on_left_button_up',
    'MiddleButtonPressEvent': 'on_middle_button_down',
    'MiddleButtonReleaseEvent': 'on_middle_button_up',
    'RightButtonPressEvent': 'on_right_button_down',
    'RightButtonReleaseEvent': 'on_right_button_up',
    'MouseMoveEvent': 'on_mouse_move',
    'CharEvent': 'on_char',
    'KeyPressEvent': 'on_key_press',
}


class StyleMixin:
    """ Route VTK events of an interactor style to an interaction.

    Once an observer for an event is registered, the style no longer calls
    its stock handler for that event by itself. The interaction decides if
    and when the stock handler runs.
    """

    def _init_routing(self, interaction_type, invoker):
        if invoker is None:
            invoker = CallbackRegistry()

        self.events = InteractorEvents(self)
        self.interaction = interaction_type(self.events, StockHandlers(self),
                                            invoker)
        self._observers = []

        for event, handler in EVENT_HANDLERS.items():
            if hasattr(self.interaction, handler):
                self._observers.append(self.AddObserver(event, self._route))

    def _route(self, irenstyle, event):
        """ Event observer.

        Parameters
        ----------
        irenstyle : vtkInteractorStyle
            The corresponding interactor style, same as ``self``.
        event : str
            String identifier of the event, e.g. ``'MouseMoveEvent'``.
        """
        # Event data is only valid while attached to an interactor.
        if not self.events.attached:
            return

        getattr(self.interaction, EVENT_HANDLERS[event])()

    @property
    def invoker(self):
        return self.interaction.invoker

    def set_callback_id(self, kind, callback_id):
        self.interaction.set_callback_id(kind, callback_id)

    def set_callback(self, kind, callback, with_actor=False):
        """ Register a Python callable for an event kind.

        Only available if the style's invoker is a
        :class:`~istyle.trampoline.CallbackRegistry`.

        Parameters
        ----------
        kind : EventKind
            Event kind.
        callback : callable
            Host callback, see :class:`~istyle.trampoline.CallbackRegistry`
            for the expected signatures.
        with_actor : bool, optional
            Register for the actor aware trampoline.

        Returns
        -------
        int
            The callback id now stored in the slot for `kind`.
        """
        invoker = self.interaction.invoker

        if not isinstance(invoker, CallbackRegistry):
            raise TypeError('style invoker is not a CallbackRegistry')

        if kind not in self.interaction.callbacks:
            raise KeyError(f'no callback slot for {kind.name}')

        callback_id = invoker.register(kind, callback, with_actor)
        self.interaction.set_callback_id(kind, callback_id)

        return callback_id

    def release(self):
        """ Remove event observers, clear callback ids and detach.
        """
        for tag in self._observers:
            self.RemoveObserver(tag)

        self._observers.clear()
        self.interaction.callbacks.clear()

        if self.GetInteractor() is not None:
            self.SetInteractor(None)
