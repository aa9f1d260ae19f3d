import pytest

from orbitinvaders.bounds import Rect
from orbitinvaders.drawraw import (
    BLEED_MARGIN,
    BatchLayout,
    QuadBatch,
    fix_texture_bleeding,
    rect_to_texture_coordinates,
)


def test_textured_quad_vertices_and_indices():
    q = QuadBatch(texture="tex")
    x, y, w, h = 1.0, 2.0, 3.0, 4.0
    tr = Rect(0.1, 0.2, 0.3, 0.4)
    q.batch_textured_quad(x, y, w, h, tr)
    batch = q.flush()
    assert batch.layout is BatchLayout.XY_ST
    assert batch.texture == "tex"
    assert list(batch.vertices) == [
        x, y + h, tr.x, tr.y + tr.h,
        x, y, tr.x, tr.y,
        x + w, y, tr.x + tr.w, tr.y,
        x + w, y + h, tr.x + tr.w, tr.y + tr.h,
    ]
    assert batch.indices == (0, 1, 2, 0, 2, 3)
    assert batch.vertex_count == 4


def test_second_quad_indices_offset():
    q = QuadBatch()
    q.batch_rgb_quad(0, 0, 1, 1, 0.5, 0.5, 0.5)
    q.batch_rgb_quad(0, 0, 1, 1, 0.5, 0.5, 0.5)
    assert q.vertex_count == 8
    assert q.index_count == 12
    batch = q.flush()
    assert batch.indices[6:] == (4, 5, 6, 4, 6, 7)
    assert len(batch.vertices) == 8 * BatchLayout.XY_RGB.components


def test_colored_quad_carries_colour():
    q = QuadBatch()
    q.batch_colored_textured_quad(0, 0, 2, 2, Rect(0, 0, 1, 1), 0.1, 0.2, 0.3, 0.4)
    batch = q.flush()
    comps = BatchLayout.XY_ST_RGBA.components
    for i in range(4):
        assert batch.vertices[i * comps + 4:(i + 1) * comps] == (0.1, 0.2, 0.3, 0.4)


def test_flush_resets_and_goes_to_sink():
    received = []
    q = QuadBatch(sink=received.append)
    q.batch_rgb_quad(0, 0, 1, 1, 1, 1, 1)
    q.flush()
    assert len(received) == 1
    assert q.vertex_count == 0
    assert q.index_count == 0
    assert q.flushed == []


def test_auto_flush_near_capacity():
    q = QuadBatch(max_vertices=12)
    q.batch_textured_quad(0, 0, 1, 1, Rect(0, 0, 1, 1))
    assert q.flushed == []
    q.batch_textured_quad(0, 0, 1, 1, Rect(0, 0, 1, 1))
    assert len(q.flushed) == 1
    assert q.flushed[0].vertex_count == 8
    assert q.vertex_count == 0


def test_mixing_layouts_raises():
    q = QuadBatch()
    q.batch_rgb_quad(0, 0, 1, 1, 1, 1, 1)
    with pytest.raises(ValueError):
        q.batch_textured_quad(0, 0, 1, 1, Rect(0, 0, 1, 1))


def test_fix_texture_bleeding():
    r = fix_texture_bleeding(Rect(10.0, 20.0, 30.0, 40.0))
    assert r.x == pytest.approx(10.0 + BLEED_MARGIN)
    assert r.y == pytest.approx(20.0 + BLEED_MARGIN)
    assert r.w == pytest.approx(30.0 - 2 * BLEED_MARGIN)
    assert r.h == pytest.approx(40.0 - 2 * BLEED_MARGIN)


def test_rect_to_texture_coordinates():
    r = rect_to_texture_coordinates(Rect(10.0, 20.0, 30.0, 40.0), 100.0, 200.0)
    assert r.x == pytest.approx((10.0 + BLEED_MARGIN) / 100.0)
    assert r.y == pytest.approx((20.0 + BLEED_MARGIN) / 200.0)
    assert r.w == pytest.approx((30.0 - 2 * BLEED_MARGIN) / 100.0)
    assert r.h == pytest.approx((40.0 - 2 * BLEED_MARGIN) / 200.0)


def test_rect_to_texture_coordinates_rejects_empty_texture():
    with pytest.raises(ValueError):
        rect_to_texture_coordinates(Rect(0, 0, 1, 1), 0, 10)