"""The world camera: position, zoom and rotation, with screen/world conversions."""

from __future__ import annotations

from .angles import degs_to_rads, rads_to_degs
from .bounds import BoxBounds
from .raw_input import Key, Keyboard
from .vec import Vec

GAME_WIDTH = 800
GAME_HEIGHT = 800
MIN_ZOOM = 0.01


class Camera:
    """A view onto the world of a fixed virtual resolution.

    x and y hold the raw camera centre, which includes the screenshake offset;
    center() and set_center() work with the centre without the shake.
    """

    def __init__(self, game_width: float = GAME_WIDTH, game_height: float = GAME_HEIGHT) -> None:
        self.game_width = game_width
        self.game_height = game_height
        self.zoom_x = 1.0
        self.zoom_y = 1.0
        self.rotation_degs = 0.0
        self.screenshake_offset = Vec.ZERO
        self.x = game_width / 2
        self.y = game_height / 2

    @property
    def zoom(self) -> float:
        return self.zoom_x

    def size(self) -> Vec:
        """Size of the visible world area."""
        return Vec(self.game_width / self.zoom_x, self.game_height / self.zoom_y)

    def center(self) -> Vec:
        return Vec(self.x, self.y) - self.screenshake_offset

    def top_left(self) -> Vec:
        return self.center() - self.size() / 2.0

    def set_center(self, pos: Vec) -> None:
        self.x = pos.x + self.screenshake_offset.x
        self.y = pos.y + self.screenshake_offset.y

    def set_top_left(self, pos: Vec) -> None:
        self.set_center(pos + self.size() / 2.0)

    def bounds(self) -> BoxBounds:
        """The visible world area."""
        top_left = self.top_left()
        size = self.size()
        return BoxBounds(top_left.x, top_left.y, size.x, size.y)

    def clamp_to(self, limit: BoxBounds) -> None:
        """Move the camera so its view stays inside limit, centring it if limit is smaller."""
        c = self.center()
        cx, cy = c.x, c.y
        size = self.size()
        half_w = min(limit.width, size.x) / 2.0
        half_h = min(limit.height, size.y) / 2.0
        if cx + half_w > limit.right():
            cx = limit.right() - half_w
        if cx - half_w < limit.left:
            cx = limit.left + half_w
        if cy + half_h > limit.bottom():
            cy = limit.bottom() - half_h
        if cy - half_h < limit.top:
            cy = limit.top + half_h
        self.set_center(Vec(cx, cy))

    def set_zoom(self, zoom: float, preserve_center: bool = True) -> None:
        """Set the zoom, keeping the centre or, if preserve_center is false, the top-left."""
        if preserve_center:
            self.zoom_x = zoom
            self.zoom_y = zoom
        else:
            top_left = self.top_left()
            self.zoom_x = zoom
            self.zoom_y = zoom
            self.set_top_left(top_left)

    def rotation_rads(self) -> float:
        return degs_to_rads(self.rotation_degs)

    def set_rotation_rads(self, rads: float) -> None:
        self.rotation_degs = rads_to_degs(rads)

    def world_to_screen(self, world: Vec) -> Vec:
        """World point to screen coordinates; rotation is not taken into account."""
        return (world - self.top_left()) * self.zoom_x

    def screen_to_world(self, screen: Vec) -> Vec:
        """Screen point to world coordinates; rotation is not taken into account."""
        return screen / self.zoom_x + self.top_left()

    def screen_bounds(self) -> BoxBounds:
        """The whole screen in screen coordinates, unaffected by zoom or position."""
        return BoxBounds(0.0, 0.0, self.game_width, self.game_height)

    def move_with_arrows(self, keyboard: Keyboard, dt: float, velocity: float = 50.0) -> None:
        """Pan with the arrow keys, faster when zoomed out."""
        c = self.center()
        cx, cy = c.x, c.y
        step = velocity * dt * 10 / self.zoom
        if keyboard.is_pressed(Key.RIGHT):
            cx += step
        if keyboard.is_pressed(Key.LEFT):
            cx -= step
        if keyboard.is_pressed(Key.DOWN):
            cy += step
        if keyboard.is_pressed(Key.UP):
            cy -= step
        self.set_center(Vec(cx, cy))

    def change_zoom_with_keys(self, keyboard: Keyboard, dt: float, velocity: float = 1.0) -> None:
        """Zoom in with plus or equals, out with minus, never below MIN_ZOOM."""
        zoom = self.zoom
        if keyboard.is_pressed(Key.EQUALS) or keyboard.is_pressed(Key.KP_PLUS):
            zoom += velocity * dt
            self.set_zoom(zoom)
        if keyboard.is_pressed(Key.MINUS) or keyboard.is_pressed(Key.KP_MINUS):
            zoom -= velocity * dt
            if zoom < MIN_ZOOM:
                zoom = MIN_ZOOM
            self.set_zoom(zoom)

    def rotate_with_page_keys(self, keyboard: Keyboard, dt: float, velocity: float = 45.0) -> None:
        """Rotate with page down (clockwise) and page up."""
        rotation = self.rotation_degs
        if keyboard.is_pressed(Key.PAGEDOWN):
            rotation += velocity * dt
        if keyboard.is_pressed(Key.PAGEUP):
            rotation -= velocity * dt
        self.rotation_degs = rotation