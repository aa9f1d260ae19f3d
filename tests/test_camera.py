import pytest

from orbitinvaders.bounds import BoxBounds
from orbitinvaders.camera import GAME_HEIGHT, GAME_WIDTH, MIN_ZOOM, Camera
from orbitinvaders.raw_input import Key, Keyboard
from orbitinvaders.vec import Vec


def pressed(*keys):
    kb = Keyboard()
    kb.update(keys)
    return kb


def test_starts_with_top_left_at_origin():
    cam = Camera()
    tl = cam.top_left()
    assert tl.x == pytest.approx(0.0)
    assert tl.y == pytest.approx(0.0)
    assert cam.size().x == pytest.approx(GAME_WIDTH)
    assert cam.size().y == pytest.approx(GAME_HEIGHT)


def test_size_shrinks_with_zoom():
    cam = Camera()
    cam.set_zoom(2.0)
    assert cam.size().x == pytest.approx(GAME_WIDTH / 2.0)
    assert cam.size().y == pytest.approx(GAME_HEIGHT / 2.0)


def test_set_center_round_trip_with_shake():
    cam = Camera()
    cam.screenshake_offset = Vec(3.0, -4.0)
    cam.set_center(Vec(120.0, 50.0))
    c = cam.center()
    assert c.x == pytest.approx(120.0)
    assert c.y == pytest.approx(50.0)
    assert cam.x == pytest.approx(120.0 + 3.0)
    assert cam.y == pytest.approx(50.0 - 4.0)


def test_set_top_left_round_trip():
    cam = Camera()
    cam.set_zoom(3.0)
    cam.set_top_left(Vec(-20.0, 75.0))
    tl = cam.top_left()
    assert tl.x == pytest.approx(-20.0)
    assert tl.y == pytest.approx(75.0)
    b = cam.bounds()
    assert b.left == pytest.approx(-20.0)
    assert b.width == pytest.approx(cam.size().x)


def test_zoom_preserving_center_and_top_left():
    cam = Camera()
    cam.set_center(Vec(10.0, 20.0))
    cam.set_zoom(2.0)
    assert cam.center().x == pytest.approx(10.0)
    assert cam.center().y == pytest.approx(20.0)
    before = cam.top_left()
    cam.set_zoom(0.5, preserve_center=False)
    after = cam.top_left()
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_screen_world_round_trip():
    cam = Camera()
    cam.set_zoom(1.5)
    cam.set_center(Vec(33.0, -12.0))
    world = Vec(7.0, 9.0)
    back = cam.screen_to_world(cam.world_to_screen(world))
    assert back.x == pytest.approx(world.x)
    assert back.y == pytest.approx(world.y)


def test_top_left_maps_to_screen_origin():
    cam = Camera()
    cam.set_center(Vec(500.0, 500.0))
    s = cam.world_to_screen(cam.top_left())
    assert s.x == pytest.approx(0.0)
    assert s.y == pytest.approx(0.0)


def test_clamp_to_keeps_view_inside():
    cam = Camera()
    limit = BoxBounds(0.0, 0.0, 1000.0, 1000.0)
    cam.set_center(Vec(-500.0, 2000.0))
    cam.clamp_to(limit)
    b = cam.bounds()
    assert b.left >= limit.left - 1e-6
    assert b.right() <= limit.right() + 1e-6
    assert b.top >= limit.top - 1e-6
    assert b.bottom() <= limit.bottom() + 1e-6


def test_clamp_to_small_limit_centres():
    cam = Camera()
    limit = BoxBounds(10.0, 10.0, 100.0, 60.0)
    cam.set_center(Vec(900.0, -900.0))
    cam.clamp_to(limit)
    assert cam.center().x == pytest.approx(limit.center().x)
    assert cam.center().y == pytest.approx(limit.center().y)


def test_rotation_rads_round_trip():
    cam = Camera()
    cam.set_rotation_rads(1.25)
    assert cam.rotation_rads() == pytest.approx(1.25)


def test_screen_bounds_ignore_camera():
    cam = Camera()
    cam.set_zoom(4.0)
    cam.set_center(Vec(-300.0, 300.0))
    b = cam.screen_bounds()
    assert (b.left, b.top, b.width, b.height) == (0.0, 0.0, GAME_WIDTH, GAME_HEIGHT)


def test_move_with_arrows_moves_right_only():
    cam = Camera()
    before = cam.center()
    cam.move_with_arrows(pressed(Key.RIGHT), 0.1)
    after = cam.center()
    assert after.x > before.x
    assert after.y == pytest.approx(before.y)


def test_move_with_arrows_scaled_by_zoom():
    a = Camera()
    b = Camera()
    b.set_zoom(2.0)
    kb = pressed(Key.UP)
    ya, yb = a.center().y, b.center().y
    a.move_with_arrows(kb, 0.1)
    b.move_with_arrows(kb, 0.1)
    assert (b.center().y - yb) == pytest.approx((a.center().y - ya) / 2.0)
    assert a.center().y < ya


def test_zoom_keys():
    cam = Camera()
    cam.change_zoom_with_keys(pressed(Key.EQUALS), 0.5)
    assert cam.zoom > 1.0
    cam.change_zoom_with_keys(pressed(Key.KP_MINUS), 100.0)
    assert cam.zoom == pytest.approx(MIN_ZOOM)


def test_no_keys_changes_nothing():
    cam = Camera()
    cam.change_zoom_with_keys(pressed(), 1.0)
    cam.rotate_with_page_keys(pressed(), 1.0)
    assert cam.zoom == 1.0
    assert cam.rotation_degs == 0.0


def test_rotate_with_page_keys():
    cam = Camera()
    cam.rotate_with_page_keys(pressed(Key.PAGEDOWN), 1.0)
    assert cam.rotation_degs > 0.0
    cam.rotate_with_page_keys(pressed(Key.PAGEUP), 2.0)
    assert cam.rotation_degs < 0.0