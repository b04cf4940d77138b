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

""" Rubber-band selection state.
"""

import numpy as np


class RubberBand:
    """ Rubber-band rectangle.

    Tracks the corners of a drag-to-select rectangle in display coordinates
    together with the selection mode and the drag state.

    Attributes
    ----------
    enabled : bool
        Selection mode. A drag can only start while enabled.
    moving : bool
        A drag is in progress.

    Note
    ----
    The corners of the last drag are retained after the drag ends. They are
    only replaced once a new drag starts.
    """

    def __init__(self):
        self.enabled = False
        self.moving = False

        self._start = np.zeros(2, dtype=np.int32)
        self._end = np.zeros(2, dtype=np.int32)

    def __repr__(self):
        sx, sy, ex, ey = self.positions()
        return (f'RubberBand(({sx}, {sy}), ({ex}, {ey}), '
                f'enabled={self.enabled}, moving={self.moving})')

    @property
    def start(self):
        """ Anchor corner.

        :type: ndarray, shape (2, )
        """
        return self._start.copy()

    @property
    def end(self):
        """ Moving corner.

        :type: ndarray, shape (2, )
        """
        return self._end.copy()

    def set_enabled(self, enabled):
        """ Toggle selection mode.

        Disabling cancels a drag in progress. Enabling does not touch the
        drag state.
        """
        self.enabled = bool(enabled)

        if not self.enabled:
            self.moving = False

    def start_select(self, pos):
        """ Anchor both corners at `pos` and start dragging.
        """
        self._start[:] = pos
        self._end[:] = pos
        self.moving = True

    def update(self, pos):
        """ Move the free corner to `pos`. Ignored unless dragging.
        """
        if self.moving:
            self._end[:] = pos

    def end_select(self):
        self.moving = False

    def positions(self):
        """ Rectangle corners.

        Returns
        -------
        tuple
            ``(start_x, start_y, end_x, end_y)`` as Python integers.
        """
        return (*(int(v) for v in self._start), *(int(v) for v in self._end))

    def bounds(self, size=None):
        """ Normalized rectangle.

        Parameters
        ----------
        size : 2-tuple (int, int), optional
            Window size. If given the rectangle is clamped to the pixel
            range ``[0, width-1] x [0, height-1]``.

        Returns
        -------
        tuple
            ``(xmin, ymin, xmax, ymax)`` as Python integers.
        """
        lo = np.minimum(self._start, self._end)
        hi = np.maximum(self._start, self._end)

        if size is not None:
            top = np.asarray(size, dtype=np.int32) - 1
            lo = np.clip(lo, 0, top)
            hi = np.clip(hi, 0, top)

        return int(lo[0]), int(lo[1]), int(hi[0]), int(hi[1])
