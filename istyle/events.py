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

""" Event kinds and callback slots.

Every interactor style owns one callback slot per event kind it handles.
A slot holds an opaque integer identifier that is handed back to the host
through the trampoline bridge, see :mod:`istyle.trampoline`. The value
:data:`NO_CALLBACK` marks an empty slot.
"""

from enum import Enum
from enum import auto


NO_CALLBACK = 0
""" Sentinel identifier. Slots holding this value are never invoked. """

_INT64_MIN = -2**63
_INT64_MAX = 2**63 - 1


class EventKind(Enum):
    """ Mouse and keyboard event enumeration.
    """

    LEFT_PRESS = auto()
    LEFT_RELEASE = auto()
    RIGHT_PRESS = auto()
    RIGHT_RELEASE = auto()
    MIDDLE_PRESS = auto()
    MIDDLE_RELEASE = auto()
    MOUSE_MOVE = auto()

    KEY_PRESS = auto()
    """ Key press event.

    Only styles with keyboard interception (image and custom style)
    provide a slot for this kind of event."""


MOUSE_EVENTS = (EventKind.LEFT_PRESS, EventKind.LEFT_RELEASE,
                EventKind.RIGHT_PRESS, EventKind.RIGHT_RELEASE,
                EventKind.MIDDLE_PRESS, EventKind.MIDDLE_RELEASE,
                EventKind.MOUSE_MOVE)

ALL_EVENTS = MOUSE_EVENTS + (EventKind.KEY_PRESS, )


def check_callback_id(callback_id):
    """ Validate a callback identifier.

    Parameters
    ----------
    callback_id : int
        Identifier to check.

    Returns
    -------
    int
        The identifier as a plain Python integer.

    Raises
    ------
    TypeError
        If `callback_id` is not an integer.
    ValueError
        If `callback_id` does not fit into a signed 64-bit integer.
    """
    # Booleans are integers in Python but passing one is almost certainly
    # a mistake at the call site.
    if isinstance(callback_id, bool) or not hasattr(callback_id, '__index__'):
        raise TypeError(f'callback id must be an integer, got '
                        f'{type(callback_id).__name__}')

    callback_id = callback_id.__index__()

    if not _INT64_MIN <= callback_id <= _INT64_MAX:
        raise ValueError(f'callback id {callback_id} out of 64-bit range')

    return callback_id


class CallbackSlots:
    """ Callback identifier table.

    Parameters
    ----------
    kinds : iterable of EventKind
        Event kinds that get a slot. All slots start out empty.

    Note
    ----
    Slots are only modified by explicit calls to :meth:`set`, the last
    value written wins.
    """

    def __init__(self, kinds=ALL_EVENTS):
        self._ids = {kind: NO_CALLBACK for kind in kinds}

    def __contains__(self, kind):
        """ Slot availability check.
        """
        return kind in self._ids

    def __getitem__(self, kind):
        """ Registered identifier for `kind`, :data:`NO_CALLBACK` if empty.
        """
        return self._ids[kind]

    def __iter__(self):
        return iter(self._ids)

    def set(self, kind, callback_id):
        """ Store a callback identifier.

        Parameters
        ----------
        kind : EventKind
            Affected slot.
        callback_id : int
            New identifier, :data:`NO_CALLBACK` clears the slot.

        Raises
        ------
        KeyError
            If there is no slot for `kind`.
        """
        if kind not in self._ids:
            raise KeyError(f'no callback slot for {kind.name}')

        self._ids[kind] = check_callback_id(callback_id)

    def active(self, kind):
        """ Check if a callback is registered for `kind`.

        Kinds without a slot are never active.
        """
        return self._ids.get(kind, NO_CALLBACK) != NO_CALLBACK

    def clear(self):
        """ Empty all slots.
        """
        for kind in self._ids:
            self._ids[kind] = NO_CALLBACK
