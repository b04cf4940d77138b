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

""" Trampoline bridge.

Interactor styles never hold host callables. They store integer ids and
hand them to a :class:`CallbackInvoker` together with the event data. The
invoker resolves the id and calls whatever the host registered under it.

:class:`CallbackRegistry` is the host side implementation used by default.

.. code-block:: python
   :linenos:

   from istyle.events import EventKind
   from istyle.trampoline import CallbackRegistry

   registry = CallbackRegistry()

   def clicked(x, y):
       print('left press at', x, y)

   cid = registry.register(EventKind.LEFT_PRESS, clicked)
   registry.on_left_press(cid, 10, 20)
"""

from itertools import count

import istyle.console as console
from istyle.events import EventKind
from istyle.events import NO_CALLBACK


class CallbackInvoker:
    """ Trampoline contract.

    All methods are called synchronously from inside event handlers and are
    expected to return promptly. Coordinates are display coordinates in
    pixels. The `actor` argument of the actor aware trampolines is the
    picked :class:`vtkActor` or :obj:`None`.
    """

    def on_left_press(self, callback_id, x, y):
        raise NotImplementedError

    def on_left_release(self, callback_id, x, y):
        raise NotImplementedError

    def on_mouse_move(self, callback_id, x, y):
        raise NotImplementedError

    def on_right_press(self, callback_id, x, y):
        raise NotImplementedError

    def on_right_release(self, callback_id, x, y):
        raise NotImplementedError

    def on_middle_press(self, callback_id, x, y):
        raise NotImplementedError

    def on_middle_release(self, callback_id, x, y):
        raise NotImplementedError

    def on_key_press(self, callback_id, key):
        """ Key press trampoline.

        Returns
        -------
        int
            Nonzero if the event was consumed. A consumed key event is not
            forwarded to the stock handler of the interactor style.
        """
        raise NotImplementedError

    def on_left_press_with_actor(self, callback_id, x, y, actor):
        raise NotImplementedError

    def on_left_release_with_actor(self, callback_id, x, y, actor):
        raise NotImplementedError

    def on_mouse_move_with_actor(self, callback_id, x, y, actor):
        raise NotImplementedError


class CallbackRegistry(CallbackInvoker):
    """ Map callback ids to Python callables.

    Identifiers are allocated from a counter starting at 1, so a valid id
    never equals :data:`~istyle.events.NO_CALLBACK`. Each id is bound to
    the event kind it was registered for and to the calling convention
    (with or without picked actor).

    Callback signatures:

        .. py:function:: callback(x, y)
        .. py:function:: callback(x, y, actor)
        .. py:function:: callback(key) -> bool

    Note
    ----
    Exceptions raised by a callback propagate into the event handler that
    triggered it.
    """

    def __init__(self):
        self._ids = count(1)
        self._callbacks = dict()

    def __contains__(self, callback_id):
        return callback_id in self._callbacks

    def __len__(self):
        return len(self._callbacks)

    def register(self, kind, callback, with_actor=False):
        """ Register a callable.

        Parameters
        ----------
        kind : EventKind
            Event the callback is meant for.
        callback : callable
            Host callback.
        with_actor : bool, optional
            Register for the actor aware trampoline of `kind`. Only
            available for left button and mouse move events.

        Returns
        -------
        int
            New callback identifier, never 0.

        Raises
        ------
        TypeError
            If `callback` is not callable.
        ValueError
            If `with_actor` is requested for an event without actor aware
            trampoline.
        """
        if not callable(callback):
            raise TypeError('callback must be callable')

        if with_actor and kind not in (EventKind.LEFT_PRESS,
                                       EventKind.LEFT_RELEASE,
                                       EventKind.MOUSE_MOVE):
            raise ValueError(f'no actor aware trampoline for {kind.name}')

        callback_id = next(self._ids)
        self._callbacks[callback_id] = (kind, with_actor, callback)

        return callback_id

    def unregister(self, callback_id):
        """ Forget a callback. Unknown ids are ignored.
        """
        self._callbacks.pop(callback_id, None)

    def clear(self):
        """ Forget all callbacks. Ids are not reused afterwards.
        """
        self._callbacks.clear()

    def _lookup(self, callback_id, kind, with_actor=False):
        """ Resolve an id, :obj:`None` if nothing matches.
        """
        if callback_id == NO_CALLBACK:
            return None

        try:
            registered, actor_aware, callback = self._callbacks[callback_id]
        except KeyError:
            console.warning(f'unknown callback id {callback_id} '
                            f'({kind.name})')
            return None

        # An id registered for a different event or calling convention
        # cannot be called safely with this trampoline's arguments.
        if registered is not kind or actor_aware != with_actor:
            console.warning(f'callback id {callback_id} is registered for '
                            f'{registered.name}, not {kind.name}')
            return None

        return callback

    def _call(self, callback_id, kind, *args, with_actor=False):
        callback = self._lookup(callback_id, kind, with_actor)

        if callback is not None:
            callback(*args)

    def on_left_press(self, callback_id, x, y):
        self._call(callback_id, EventKind.LEFT_PRESS, x, y)

    def on_left_release(self, callback_id, x, y):
        self._call(callback_id, EventKind.LEFT_RELEASE, x, y)

    def on_mouse_move(self, callback_id, x, y):
        self._call(callback_id, EventKind.MOUSE_MOVE, x, y)

    def on_right_press(self, callback_id, x, y):
        self._call(callback_id, EventKind.RIGHT_PRESS, x, y)

    def on_right_release(self, callback_id, x, y):
        self._call(callback_id, EventKind.RIGHT_RELEASE, x, y)

    def on_middle_press(self, callback_id, x, y):
        self._call(callback_id, EventKind.MIDDLE_PRESS, x, y)

    def on_middle_release(self, callback_id, x, y):
        self._call(callback_id, EventKind.MIDDLE_RELEASE, x, y)

    def on_key_press(self, callback_id, key):
        callback = self._lookup(callback_id, EventKind.KEY_PRESS)

        if callback is None:
            return 0

        return 1 if callback(key) else 0

    def on_left_press_with_actor(self, callback_id, x, y, actor):
        self._call(callback_id, EventKind.LEFT_PRESS, x, y, actor,
                   with_actor=True)

    def on_left_release_with_actor(self, callback_id, x, y, actor):
        self._call(callback_id, EventKind.LEFT_RELEASE, x, y, actor,
                   with_actor=True)

    def on_mouse_move_with_actor(self, callback_id, x, y, actor):
        self._call(callback_id, EventKind.MOUSE_MOVE, x, y, actor,
                   with_actor=True)
