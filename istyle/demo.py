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

""" Interactor style demo.

Opens a window with a row of spheres and prints the events routed through
the selected interactor style:

>>> python -m istyle.demo --style custom

With the custom style a left button drag selects spheres by rubber band.
The trackball actor style reports the sphere under the mouse cursor.
"""

import vtk

from vtk.util import colors

import istyle.console as console
import istyle.overlay as overlay
import istyle.picking as picking
from istyle.custom import InteractorStyleCustom
from istyle.events import EventKind
from istyle.image import InteractorStyleImage
from istyle.trackball import InteractorStyleTrackballActor


def _scene(count=5):
    """ Renderer holding `count` spheres along the x-axis.
    """
    ren = vtk.vtkRenderer()
    ren.SetBackground(colors.dim_grey)

    for i in range(count):
        src = vtk.vtkSphereSource()
        src.SetCenter(2.0*i - 4.0, 0.0, 0.0)
        src.SetRadius(0.8)
        src.SetThetaResolution(24)
        src.SetPhiResolution(16)

        mapper = vtk.vtkPolyDataMapper()
        mapper.SetInputConnection(src.GetOutputPort())

        actor = vtk.vtkActor()
        actor.SetMapper(mapper)
        actor.GetProperty().SetColor(0.8 - 0.1*i, 0.3 + 0.12*i, 0.4)

        ren.AddActor(actor)

    ren.ResetCamera()
    return ren


def _report(name):
    def callback(*args):
        console.message(f'{name} {args}')
    return callback


def _image_style():
    style = InteractorStyleImage()

    for kind in (EventKind.LEFT_PRESS, EventKind.RIGHT_PRESS,
                 EventKind.MIDDLE_PRESS):
        style.set_callback(kind, _report(kind.name.lower()))

    def key_press(key):
        console.message(f'key {key!r}')
        # Keep VTK's wireframe toggle away from image views.
        return key.lower() == 'w'

    style.set_callback(EventKind.KEY_PRESS, key_press)
    return style


def _trackball_style():
    style = InteractorStyleTrackballActor()

    def picked(x, y, actor):
        where = 'nothing' if actor is None else f'actor at {actor.GetCenter()}'
        console.message(f'left press ({x}, {y}) over {where}')

    style.set_callback(EventKind.LEFT_PRESS, picked, with_actor=True)
    style.set_callback(EventKind.RIGHT_PRESS, _report('right_press'))

    return style


def _custom_style(renwin):
    style = InteractorStyleCustom()
    style.set_selection_mode(True)

    # Frame captured at the start of a drag. The rubber band is drawn on
    # top of it on every mouse move.
    cache = {}

    def press(x, y):
        renwin.Render()
        cache['frame'] = overlay.grab_frame(renwin)

    def move(x, y):
        if style.is_moving() and 'frame' in cache:
            sx, sy, ex, ey = style.get_selection_positions()
            frame = overlay.draw_rubber_band(cache['frame'], (sx, sy),
                                             (ex, ey))
            overlay.blit_frame(renwin, frame)

    def release(x, y):
        cache.pop('frame', None)

        sx, sy, ex, ey = style.get_selection_positions()
        actors = picking.area_pick(style.GetInteractor(), sx, sy, ex, ey)

        console.message(f'selected {len(actors)} actor(s) in '
                        f'({sx}, {sy}) - ({ex}, {ey})', bold=True)

        for actor in actors:
            actor.GetProperty().SetColor(colors.yellow)

        renwin.Render()

    def key_press(key):
        if key == 's':
            style.set_selection_mode(not style.get_selection_mode())
            console.message(f'selection mode {style.get_selection_mode()}')
            return True

        return False

    style.set_callback(EventKind.LEFT_PRESS, press)
    style.set_callback(EventKind.MOUSE_MOVE, move)
    style.set_callback(EventKind.LEFT_RELEASE, release)
    style.set_callback(EventKind.KEY_PRESS, key_press)

    return style


def _main():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument('--style', default='image',
                        choices=('image', 'trackball_actor', 'custom'),
                        help='interactor style')
    parser.add_argument('--verbose', action='store_true',
                        help='warn about unknown callback ids')

    args = parser.parse_args()
    console.verbose = args.verbose

    renwin = vtk.vtkRenderWindow()
    renwin.SetSize(900, 600)
    renwin.SetWindowName(f'istyle - {args.style}')
    renwin.AddRenderer(_scene())

    if args.style == 'image':
        style = _image_style()
    elif args.style == 'trackball_actor':
        style = _trackball_style()
    else:
        style = _custom_style(renwin)

    iren = vtk.vtkRenderWindowInteractor()
    iren.SetRenderWindow(renwin)
    iren.SetInteractorStyle(style)

    renwin.Render()
    iren.Start()

    style.release()


if __name__ == '__main__':
    _main()
