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

""" Image interactor style.

Callback routing for 2D image viewing (window/level, slicing, picking) with
an optional rubber-band selection on left button drag.

.. code-block:: python
   :linenos:

   import vtk

   from istyle.events import EventKind
   from istyle.image import InteractorStyleImage

   def key_press(key):
       # Returning True suppresses VTK's own key handling.
       return key == 'r'

   style = InteractorStyleImage()
   style.set_callback(EventKind.KEY_PRESS, key_press)
   style.set_selection_mode(True)

   iren = vtk.vtkRenderWindowInteractor()
   iren.SetInteractorStyle(style)
"""

import vtk

from istyle.events import ALL_EVENTS
from istyle.events import EventKind
from istyle.interaction import Interaction
from istyle.interaction import RubberBandMixin
from istyle.source import StyleMixin


class ImageInteraction(Interaction, RubberBandMixin):
    """ Image interaction state machine.

    Left button and mouse move events drive the rubber band when selection
    mode is enabled, see :class:`~istyle.interaction.RubberBandMixin`.
    Middle and right button events always reach the stock handlers. Key
    events can be consumed by the key press callback and always trigger a
    render pass.
    """

    kinds = ALL_EVENTS

    def __init__(self, source, defaults, invoker):
        super().__init__(source, defaults, invoker)
        self._init_rubber_band()

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

    def on_char(self):
        """ Character event handler.

        The stock handler only runs if the key press callback did not
        consume the event. This includes VTK's 'f' fly-to and 'r' reset
        commands.
        """
        if not self._notify_key():
            self._defaults.char()

        # Character commands typically change the scene.
        self._source.render()

    def on_key_press(self):
        if not self._notify_key():
            self._defaults.key_press()

        self._source.render()


class InteractorStyleImage(StyleMixin, vtk.vtkInteractorStyleImage):
    """ Image interactor style with callback routing.

    Parameters
    ----------
    invoker : CallbackInvoker, optional
        Trampoline bridge. A private
        :class:`~istyle.trampoline.CallbackRegistry` by default.

    Note
    ----
    Events received while the style is not attached to an interactor are
    ignored, including the stock handling.
    """

    def __init__(self, invoker=None):
        self._init_routing(ImageInteraction, invoker)

    def set_selection_mode(self, enabled):
        self.interaction.set_selection_mode(enabled)

    def get_selection_mode(self):
        return self.interaction.selection_mode

    def is_moving(self):
        return self.interaction.moving

    def get_selection_positions(self):
        return self.interaction.selection_positions()
