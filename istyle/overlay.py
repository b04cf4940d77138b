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

""" Rubber-band overlay.

Draw the selection rectangle directly into the pixel buffer of a render
window. Grab the frame once when a drag starts and redraw the rectangle on
top of that frame on every mouse move. This avoids a full render pass per
mouse move event.

.. code-block:: python
   :linenos:

   frame = overlay.grab_frame(renwin)             # left button press

   out = overlay.draw_rubber_band(frame, (x0, y0), (x, y))
   overlay.blit_frame(renwin, out)                # mouse move, back + Frame
"""

import numpy as np
import vtk

from vtk.util.numpy_support import numpy_to_vtk
from vtk.util.numpy_support import vtk_to_numpy


def draw_rubber_band(frame, start, end, color=(255, 255, 0), thickness=2):
    """ Draw a rectangle outline.

    Parameters
    ----------
    frame : array_like, shape (height, width, 4)
        RGBA image, row 0 is the bottom row of the window.
    start : 2-tuple (int, int)
        First corner in pixels.
    end : 2-tuple (int, int)
        Opposite corner in pixels.
    color : array_like, shape (3, ), optional
        Line color, 8 bits per channel.
    thickness : int, optional
        Line width in pixels. Lines grow towards the inside of the
        rectangle.

    Returns
    -------
    ndarray
        A copy of `frame` with the rectangle drawn into it. Drawn pixels
        are fully opaque.

    Raises
    ------
    ValueError
        If `frame` is not an RGBA image or `thickness` is not positive.
    """
    out = np.array(frame, dtype=np.uint8, copy=True)

    if out.ndim != 3 or out.shape[2] != 4:
        raise ValueError(f'expected RGBA frame, got shape {out.shape}')

    if thickness < 1:
        raise ValueError(f'thickness must be positive, got {thickness}')

    height, width = out.shape[:2]

    if height == 0 or width == 0:
        return out

    # Clamp both corners to the frame. A rectangle that lies completely
    # outside the frame degenerates to a line along the frame border.
    xmin, xmax = np.clip(sorted((start[0], end[0])), 0, width-1)
    ymin, ymax = np.clip(sorted((start[1], end[1])), 0, height-1)

    rgba = np.array((*color[:3], 255), dtype=np.uint8)

    # Horizontal lines at the bottom and top, vertical lines on the left
    # and right. Slices are clipped to the rectangle so that thick lines
    # of a small rectangle do not spill over.
    out[ymin:min(ymin+thickness, ymax+1), xmin:xmax+1] = rgba
    out[max(ymax-thickness+1, ymin):ymax+1, xmin:xmax+1] = rgba
    out[ymin:ymax+1, xmin:min(xmin+thickness, xmax+1)] = rgba
    out[ymin:ymax+1, max(xmax-thickness+1, xmin):xmax+1] = rgba

    return out


def grab_frame(renwin, front=True):
    """ Read the RGBA pixel buffer of a render window.

    Parameters
    ----------
    renwin : vtkRenderWindow
        Render window.
    front : bool, optional
        Read from the front buffer (what is currently displayed).

    Returns
    -------
    ndarray, shape (height, width, 4)
        Pixel data, row 0 is the bottom row of the window.
    """
    width, height = renwin.GetSize()

    data = vtk.vtkUnsignedCharArray()
    renwin.GetRGBACharPixelData(0, 0, width-1, height-1, int(front), data)

    return vtk_to_numpy(data).reshape(height, width, 4).copy()


def blit_frame(renwin, frame, front=False):
    """ Write RGBA pixel data to a render window and display it.

    Parameters
    ----------
    renwin : vtkRenderWindow
        Render window.
    frame : array_like, shape (height, width, 4)
        Pixel data, usually obtained from :func:`grab_frame`.
    front : bool, optional
        Write straight into the front buffer. By default the pixels go to
        the back buffer, which is then presented by ``renwin.Frame()``.

    Note
    ----
    ``Frame()`` copies the back buffer over the displayed one, so it must
    not be called after writing to the front buffer.

    Raises
    ------
    ValueError
        If the frame size does not match the window size.
    """
    width, height = renwin.GetSize()
    frame = np.ascontiguousarray(frame, dtype=np.uint8)

    if frame.shape != (height, width, 4):
        raise ValueError(f'frame shape {frame.shape} does not match window '
                         f'size {width}x{height}')

    data = numpy_to_vtk(frame.reshape(-1, 4), deep=True,
                        array_type=vtk.VTK_UNSIGNED_CHAR)

    renwin.SetRGBACharPixelData(0, 0, width-1, height-1, data, int(front))

    if not front:
        renwin.Frame()
