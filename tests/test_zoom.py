from yanta.core import zoom


def test_zoom_steps():
    assert zoom.zoom_in(zoom.DEFAULT_ZOOM) == 15.0
    assert zoom.zoom_out(zoom.DEFAULT_ZOOM) == 5.0
    assert zoom.reset_zoom() == 10.0


def test_zoom_is_clamped():
    level = zoom.DEFAULT_ZOOM
    for _ in range(10):
        level = zoom.zoom_out(level)
    assert level == zoom.MIN_ZOOM
    assert zoom.zoom_in(level) == 10.0
    assert zoom.zoom_in(198.0) == zoom.MAX_ZOOM


def test_point_size():
    assert zoom.point_size(12.5) == 12
    assert zoom.point_size(1000) == 200
