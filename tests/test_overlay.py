import numpy as np
import pytest
import vtk

from istyle.overlay import blit_frame
from istyle.overlay import draw_rubber_band
from istyle.overlay import grab_frame


def test_outline():
    frame = np.zeros((10, 12, 4), dtype=np.uint8)

    out = draw_rubber_band(frame, (8, 7), (2, 1), color=(255, 0, 0),
                           thickness=1)

    red = np.array([255, 0, 0, 255], dtype=np.uint8)

    # Corners and edges are drawn.
    for x, y in [(2, 1), (8, 1), (2, 7), (8, 7), (5, 1), (2, 4), (8, 4)]:
        assert np.array_equal(out[y, x], red)

    # Interior and outside stay untouched.
    assert not out[2:7, 3:8].any()
    assert not out[8:, :].any()
    assert not out[:, 9:].any()

    # The input frame is not modified.
    assert not frame.any()


def test_thickness():
    frame = np.zeros((20, 20, 4), dtype=np.uint8)
    out = draw_rubber_band(frame, (0, 0), (19, 19), thickness=3)

    assert out[2, 10, 3] == 255
    assert out[3, 10, 3] == 0
    assert out[10, 17, 3] == 255
    assert out[10, 16, 3] == 0


def test_clamped_to_frame():
    frame = np.zeros((5, 5, 4), dtype=np.uint8)
    out = draw_rubber_band(frame, (-10, -10), (100, 100), thickness=1)

    assert out[0, :, 3].all()
    assert out[4, :, 3].all()
    assert out[:, 0, 3].all()
    assert out[:, 4, 3].all()
    assert not out[1:4, 1:4].any()


def test_invalid_arguments():
    with pytest.raises(ValueError):
        draw_rubber_band(np.zeros((4, 4, 3)), (0, 0), (1, 1))

    with pytest.raises(ValueError):
        draw_rubber_band(np.zeros((4, 4, 4)), (0, 0), (1, 1), thickness=0)


@pytest.fixture
def renwin():
    ren = vtk.vtkRenderer()
    ren.SetBackground(0.0, 0.0, 0.0)

    renwin = vtk.vtkRenderWindow()
    renwin.SetOffScreenRendering(1)
    renwin.SetSize(64, 48)
    renwin.AddRenderer(ren)
    renwin.Render()

    yield renwin

    renwin.Finalize()


def test_grab_frame_shape(renwin):
    frame = grab_frame(renwin)

    assert frame.shape == (48, 64, 4)
    assert frame.dtype == np.uint8


def test_blit_displays_rubber_band(renwin):
    frame = grab_frame(renwin)
    out = draw_rubber_band(frame, (10, 5), (40, 30), color=(255, 255, 0),
                           thickness=1)

    blit_frame(renwin, out)
    shown = grab_frame(renwin)

    yellow = np.array([255, 255, 0], dtype=np.uint8)

    for x, y in [(10, 5), (40, 30), (25, 5), (10, 20), (40, 20)]:
        assert np.array_equal(shown[y, x, :3], yellow)

    # Inside and outside of the rectangle keep the background.
    assert np.array_equal(shown[20, 25, :3], frame[20, 25, :3])
    assert np.array_equal(shown[2, 2, :3], frame[2, 2, :3])


def test_blit_front_buffer(renwin):
    frame = grab_frame(renwin)
    out = draw_rubber_band(frame, (0, 0), (63, 47), color=(0, 255, 0),
                           thickness=1)

    blit_frame(renwin, out, front=True)
    shown = grab_frame(renwin)

    assert np.array_equal(shown[0, 30, :3], [0, 255, 0])


def test_blit_size_mismatch(renwin):
    with pytest.raises(ValueError):
        blit_frame(renwin, np.zeros((10, 10, 4), dtype=np.uint8))
