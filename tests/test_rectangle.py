import pytest

from gfckit.rectangle import Rectangle
from gfckit.vector import Vector


def test_default_is_empty():
    r = Rectangle()
    assert r.is_empty()
    assert r == Rectangle(0, 0, 0, 0)


def test_negative_size_turns_inside_out():
    r = Rectangle(10, 20, -4, -6)
    assert (r.w, r.h) == (4, 6)
    assert r.left == 10 - 4
    assert r.bottom == 20 - 6
    assert r.right == 10
    assert r.top == 20


def test_set_coll_collapses():
    r = Rectangle().set_coll(5, 5, -3, 7)
    assert r.w == 0
    assert r.h == 7
    assert r.is_empty()


def test_set_tops_matches_corners():
    r = Rectangle().set_tops(2, 3, 8, 9)
    assert (r.left, r.bottom, r.right, r.top) == (2, 3, 8, 9)


def test_set_tops_reversed_equals_forward():
    assert Rectangle().set_tops(8, 9, 2, 3) == Rectangle().set_tops(2, 3, 8, 9)


def test_set_tops_coll_reversed_is_empty():
    r = Rectangle().set_tops_coll(8, 9, 2, 3)
    assert r.w == 0 and r.h == 0


def test_center():
    r = Rectangle(0, 0, 10, 20)
    assert r.center_x == 10 // 2
    assert r.center_y == 20 // 2


def test_copy_is_independent():
    r = Rectangle(1, 2, 3, 4)
    c = r.copy()
    c.offset(5, 5)
    assert r == Rectangle(1, 2, 3, 4)
    assert c != r


def test_to_vector():
    assert Rectangle(3, 4, 5, 6).to_vector() == Vector(3, 4)


def test_y_inv_twice_is_identity():
    r = Rectangle(3, 4, 5, 6)
    r.y_inv(100).y_inv(100)
    assert r == Rectangle(3, 4, 5, 6)


def test_y_inv_keeps_height():
    r = Rectangle(3, 4, 5, 6).y_inv(100)
    assert r.top == 100 - 4


def test_set_empty():
    assert Rectangle(1, 2, 3, 4).set_empty() == Rectangle()


def test_offset_and_move_to():
    r = Rectangle(1, 2, 3, 4)
    r.offset(Vector(2.9, -1.2))
    assert (r.x, r.y) == (1 + 2, 2 - 1)
    r.move_to(10, 11)
    assert (r.x, r.y, r.w, r.h) == (10, 11, 3, 4)


def test_offset_requires_both_numbers():
    with pytest.raises(TypeError):
        Rectangle().offset(3)


def test_grow_then_shrink_round_trip():
    r = Rectangle(10, 10, 20, 20)
    r.grow(1, 2, 3, 4).grow(-1, -2, -3, -4)
    assert r == Rectangle(10, 10, 20, 20)


def test_grow_forms_agree():
    assert Rectangle(10, 10, 5, 5).grow(2) == Rectangle(10, 10, 5, 5).grow(2, 2, 2, 2)
    assert Rectangle(10, 10, 5, 5).grow(2, 3) == Rectangle(10, 10, 5, 5).grow(2, 2, 3, 3)


def test_union_covers_both():
    a, b = Rectangle(0, 0, 4, 4), Rectangle(10, 10, 2, 2)
    u = a + b
    for r in (a, b):
        assert u.contains(r.left, r.bottom)
        assert u.contains(r.right, r.top)


def test_intersection_of_overlapping():
    a, b = Rectangle(0, 0, 10, 10), Rectangle(5, 5, 10, 10)
    i = a * b
    assert (i.left, i.bottom) == (b.left, b.bottom)
    assert (i.right, i.top) == (a.right, a.top)


def test_intersection_of_disjoint_is_empty():
    i = Rectangle(0, 0, 2, 2) * Rectangle(5, 5, 2, 2)
    assert i.is_empty()


def test_contains_includes_edges():
    r = Rectangle(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert r.contains(Vector(10, 10))
    assert not r.contains(11, 5)


def test_intersects_excludes_touching():
    a = Rectangle(0, 0, 10, 10)
    assert a.intersects(Rectangle(5, 5, 10, 10))
    assert not a.intersects(Rectangle(10, 0, 5, 5))
    assert Rectangle(5, 5, 10, 10).intersects(a)


def test_vector_add_sub_round_trip():
    r = Rectangle(1, 2, 3, 4)
    v = Vector(5, 6)
    assert (r + v) - v == r


def test_unhashable_because_mutable():
    with pytest.raises(TypeError):
        hash(Rectangle())