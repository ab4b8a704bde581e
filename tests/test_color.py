import pytest

from gfckit.color import Color


def test_default_is_opaque_black():
    assert Color() == Color.black()
    assert Color().a == 255


def test_channels_wrap_like_bytes():
    assert Color(256, 0, 0).r == 0
    assert Color(-1, 0, 0).r == 255


def test_add_saturates():
    c = Color(200, 10, 0) + Color(100, 10, 0)
    assert c.r == 255
    assert c.g == 10 + 10
    assert c.a == 255


def test_sub_clamps_to_zero():
    c = Color(10, 100, 0, 255) - Color(50, 40, 0, 255)
    assert c.r == 0
    assert c.g == 100 - 40
    assert c.a == 0


def test_multiply_by_white_is_identity():
    c = Color(12, 34, 56, 78)
    assert c * Color.white() == Color(12, 34, 56, 78)


def test_multiply_by_black_clears_rgb():
    c = Color(12, 34, 56)
    result = c * Color.black()
    assert (result.r, result.g, result.b) == (0, 0, 0)


def test_multiply_by_int_full_is_identity():
    c = Color(12, 34, 56, 200)
    assert c * 255 == c


def test_invert_twice_is_identity():
    c = Color(1, 2, 3, 4)
    assert ~~c == c


def test_invert_black_inverts_alpha_too():
    assert ~Color.black() == Color(255, 255, 255, 0)


def test_xor_with_self_is_zero():
    c = Color(9, 8, 7, 6)
    assert c ^ c == Color(0, 0, 0, 0)


def test_and_or_bitwise():
    a = Color(0b1100, 0, 0, 255)
    b = Color(0b1010, 0, 0, 255)
    assert (a & b).r == 0b1100 & 0b1010
    assert (a | b).r == 0b1100 | 0b1010


def test_secondary_colours():
    assert Color.yellow() == Color.red() | Color.green()
    assert Color.cyan() == Color(0, 255, 255)
    assert Color.magenta() == Color(255, 0, 255)


def test_light_and_dark_defaults():
    assert Color.light_red() == Color(255, 128, 128)
    assert Color.dark_gray() == Color(128, 128, 128)
    assert Color.light_gray() == Color(192, 192, 192)
    assert Color.dark_blue() == Color(0, 0, 128)


def test_any_but_single():
    assert Color.any_but(Color.red()) == Color.black()
    assert Color.any_but(Color.black()) == Color.white()


def test_any_but_pair():
    assert Color.any_but(Color.black(), Color.white()) == Color.dark_gray()
    assert Color.any_but(Color.white(), Color.red()) == Color.black()


def test_any_but_requires_one_or_two():
    with pytest.raises(TypeError):
        Color.any_but()


@pytest.mark.parametrize(
    "hue, expected",
    [(0, Color.red()), (120, Color.green()), (240, Color.blue())],
)
def test_hsb_primaries(hue, expected):
    assert Color.hsb(hue, 1.0, 1.0) == expected


def test_hsb_no_saturation_is_white():
    assert Color.hsb(0, 0.0, 1.0) == Color.white()


def test_hsb_negative_hue_gives_black():
    assert Color.hsb(-90, 1.0, 1.0) == Color.black()