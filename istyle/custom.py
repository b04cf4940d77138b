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

""" Custom trackball camera interactor style.

Camera style for scene viewers that need rubber-band selection: with
selection mode enabled a left button drag defines a rectangle instead of
rotating the camera. Combine with :func:`istyle.picking.area_pick` and
:mod:`istyle.overlay` to select and highlight actors.
"""

import vtk

from istyle.events import EventKind
from istyle.interaction import Interaction
from istyle.interaction import RubberBandMixin
from istyle.source import StyleMixin


class CustomInteraction(Interaction, RubberBandMixin):
    """ Trackball camera state machine with rubber-band selection.

    Only left button, mouse move and key press events have callback slots.
    """

    kinds = (EventKind.LEFT_PRESS, EventKind.LEFT_RELEASE,
             EventKind.MOUSE_MOVE, EventKind.KEY_PRESS)

    def __init__(self, source, defaults, invoker):
        super().__init__(source, defaults, invoker)
        self._init_rubber_band()

    def on_key_press(self):
        if not self._notify_key():
            self._defaults.key_press()


class InteractorStyleCustom(StyleMixin,
                            vtk.vtkInteractorStyleTrackballCamera):
    """ Trackball camera interactor style with rubber-band selection.

    Parameters
    ----------
    invoker : CallbackInvoker, optional
        Trampoline bridge. A private
        :class:`~istyle.trampoline.CallbackRegistry` by default.
    """

    def __init__(self, invoker=None):
        self._init_routing(CustomInteraction, invoker)

    def set_selection_mode(self, enabled):
        self.interaction.set_selection_mode(enabled)

    def get_selection_mode(self):
        return self.interaction.selection_mode

    def is_moving(self):
        return self.interaction.moving

    def get_selection_positions(self):
        return self.interaction.selection_positions()
