"""Test the Vec2/Vec3 point types and Color."""

import pytest

from soft_rasterizer.color import Color, RED, WHITE, parse_hex_color
from soft_rasterizer.math_utils import Vec2, Vec3


def test_vec2_arithmetic():
    a, b = Vec2(1, 2), Vec2(3, 5)
    assert a + b == Vec2(4, 7)
    assert b - a == Vec2(2, 3)
    assert a * 3 == Vec2(3, 6)
    assert a.transposed() == Vec2(2, 1)
    assert a.cross(b) == 1 * 5 - 2 * 3


def test_vec2_is_immutable():
    p = Vec2(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


def test_vec2_tuple_interop():
    p = Vec2(4, 9)
    x, y = p
    assert (x, y) == (4, 9)
    assert p == (4, 9)
    assert p[1] == 9
    assert Vec2.of((4, 9)) == p
    assert Vec2.of(p) is p
    assert len({Vec2(1, 1), Vec2(1, 1)}) == 1
    with pytest.raises(IndexError):
        p[2]


def test_vec3_ops():
    a, b = Vec3(1, 0, 0), Vec3(0, 1, 0)
    assert (a + b) * 2 == Vec3(2, 2, 0)
    assert a - b == Vec3(1, -1, 0)
    assert Vec3(2, 4, 6) * 0.5 == Vec3(1, 2, 3)
    assert list(Vec3(1, 2, 3)) == [1.0, 2.0, 3.0]
    assert Vec3(1, 2, 3)[2] == 3.0
    with pytest.raises(IndexError):
        a[3]


def test_vec3_is_immutable():
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    with pytest.raises(AttributeError):
        v.w = 0
    assert v == Vec3(1, 2, 3)
    assert len({Vec3(1, 2, 3), v}) == 1


def test_color_defaults_and_validation():
    assert Color(1, 2, 3) == (1, 2, 3, 255)
    assert Color.gray(7) == Color(7, 7, 7)
    assert RED.rgb == (255, 0, 0)
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, 0, 0, -1)


@pytest.mark.parametrize("text,expected", [
    ("#FFFFFF", WHITE),
    ("ff0000", RED),
    ("  #0a0b0c ", Color(10, 11, 12)),
    ("#01020304", Color(1, 2, 3, 4)),
    ("#FFF", None),
    ("zzzzzz", None),
    (None, None),
])
def test_parse_hex_color(text, expected):
    assert parse_hex_color(text) == expected
