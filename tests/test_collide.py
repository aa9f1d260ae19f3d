from dataclasses import dataclass
from typing import Any

import pytest

from orbitinvaders.bounds import BoxBounds, CircleBounds
from orbitinvaders.collide import collide, colliding_pairs, colliding_pairs_within, self_collide
from orbitinvaders.entity import BoxEntity, CircleEntity
from orbitinvaders.vec import Vec


@dataclass(eq=False)
class _Ball(CircleEntity):
    colliding_with: Any = "unset"


def test_overlapping_boxes_collide():
    a = BoxBounds(0.0, 0.0, 4.0, 4.0)
    assert collide(a, BoxBounds(2.0, 2.0, 4.0, 4.0))
    assert not collide(a, BoxBounds(10.0, 0.0, 4.0, 4.0))


def test_touching_boxes_do_not_collide():
    a = BoxBounds(0.0, 0.0, 4.0, 4.0)
    b = BoxBounds(a.right(), 0.0, 4.0, 4.0)
    assert not collide(a, b)


def test_circles():
    a = CircleBounds(Vec(0.0, 0.0), 1.0)
    assert collide(a, CircleBounds(Vec(1.5, 0.0), 1.0))
    assert not collide(a, CircleBounds(Vec(2.0, 0.0), 1.0))


def test_circle_and_box_either_order():
    box = BoxBounds(0.0, 0.0, 4.0, 4.0)
    near = CircleBounds(Vec(5.0, 2.0), 2.0)
    far = CircleBounds(Vec(20.0, 2.0), 2.0)
    assert collide(near, box)
    assert collide(box, near)
    assert not collide(far, box)
    assert not collide(box, far)


def test_entities():
    box = BoxEntity(pos=Vec(0.0, 0.0), size=Vec(4.0, 4.0))
    ball = CircleEntity(pos=Vec(1.0, 1.0), radius=1.0)
    other_ball = CircleEntity(pos=Vec(1.5, 1.0), radius=1.0)
    assert collide(ball, box)
    assert collide(ball, other_ball)
    assert collide(box, BoxEntity(pos=Vec(1.0, 1.0), size=Vec(2.0, 2.0)))


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        collide(Vec(), BoxBounds())


def test_colliding_pairs_skips_self():
    a = CircleEntity(pos=Vec(0.0, 0.0), radius=1.0)
    b = CircleEntity(pos=Vec(1.0, 0.0), radius=1.0)
    c = CircleEntity(pos=Vec(50.0, 0.0), radius=1.0)
    pairs = list(colliding_pairs([a, b, c], [a, b, c]))
    assert pairs == [(a, b), (b, a)]


def test_colliding_pairs_within_each_pair_once():
    a = CircleEntity(pos=Vec(0.0, 0.0), radius=1.0)
    b = CircleEntity(pos=Vec(1.0, 0.0), radius=1.0)
    c = CircleEntity(pos=Vec(1.5, 0.0), radius=1.0)
    assert list(colliding_pairs_within([a, b, c])) == [(a, b), (a, c), (b, c)]


def test_self_collide_sets_partners():
    a = _Ball(pos=Vec(0.0, 0.0), radius=1.0)
    b = _Ball(pos=Vec(1.0, 0.0), radius=1.0)
    lonely = _Ball(pos=Vec(100.0, 0.0), radius=1.0)
    self_collide([a, b, lonely])
    assert a.colliding_with is b
    assert b.colliding_with is a
    assert lonely.colliding_with is None