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

""" Picking helpers.

Prop and area picking at display coordinates. Both functions pick against
the first renderer of the interactor's render window.
"""

import vtk


def first_renderer(iren):
    """ First renderer of an interactor's render window.

    Parameters
    ----------
    iren : vtkRenderWindowInteractor or None
        Render window interactor.

    Returns
    -------
    vtkRenderer
        Results in :obj:`None` if there is no interactor, no render window
        or the render window has no renderers.
    """
    if iren is None:
        return None

    renwin = iren.GetRenderWindow()

    if renwin is None:
        return None

    return renwin.GetRenderers().GetFirstRenderer()


def pick_actor(iren, x, y, picker=None):
    """ Topmost actor at a display position.

    Parameters
    ----------
    iren : vtkRenderWindowInteractor
        Render window interactor.
    x : int
        Display x-coordinate.
    y : int
        Display y-coordinate.
    picker : vtkPropPicker, optional
        Picker to use. A new one is created for every call by default.

    Returns
    -------
    vtkActor
        Results in :obj:`None` if nothing was picked, if the picked prop
        is not an actor or if there is no renderer to pick from.
    """
    ren = first_renderer(iren)

    if ren is None:
        return None

    if picker is None:
        picker = vtk.vtkPropPicker()

    picker.Pick(x, y, 0.0, ren)
    prop = picker.GetViewProp()

    # Image slices, 2D actors and volumes are props but not actors.
    if isinstance(prop, vtk.vtkActor):
        return prop

    return None


def area_pick(iren, x0, y0, x1, y1, picker=None):
    """ Actors inside a display rectangle.

    Parameters
    ----------
    iren : vtkRenderWindowInteractor
        Render window interactor.
    x0, y0 : int
        First corner of the rectangle in display coordinates.
    x1, y1 : int
        Opposite corner of the rectangle in display coordinates.
    picker : vtkAreaPicker, optional
        Picker to use. A new one is created for every call by default.

    Returns
    -------
    list[vtkActor]
        Picked actors, empty if nothing was picked.

    Note
    ----
    Rubber-band corners are reported in the interactor's event coordinates.
    Convert them if the picker expects a different origin.
    """
    ren = first_renderer(iren)

    if ren is None:
        return []

    if picker is None:
        picker = vtk.vtkAreaPicker()

    if not picker.AreaPick(x0, y0, x1, y1, ren):
        return []

    props = picker.GetProp3Ds()
    props.InitTraversal()

    actors = []
    for _ in range(props.GetNumberOfItems()):
        prop = props.GetNextProp3D()

        if isinstance(prop, vtk.vtkActor):
            actors.append(prop)

    return actors
