import pytest

from vgengine.color import Color


def test_to_u32_layout():
    assert Color(1.0, 1.0, 1.0, 1.0).to_u32() == 0xFFFFFFFF
    assert Color(0.0, 0.0, 0.0, 0.0).to_u32() == 0
    assert Color(1.0, 0.0, 0.0, 1.0).to_u32() == 0xFFFF0000


@pytest.mark.parametrize("value", [0x00000000, 0xFFFFFFFF, 0x80FF007D, 0x12345678])
def test_u32_round_trip(value):
    assert Color.from_u32(value).to_u32() == value


def test_to_u32_clamps_out_of_range():
    assert Color(2.0, -1.0, 5.0, 3.0).to_u32() == Color(1.0, 0.0, 1.0, 1.0).to_u32()


def test_clamped_within_unit_range():
    c = Color(1.5, -0.2, 0.3, 7.0).clamped()
    assert all(0.0 <= ch <= 1.0 for ch in c)
    assert c.b == 0.3


def test_premultiply_round_trip():
    c = Color(0.2, 0.4, 0.8, 0.5)
    assert list(c.premultiply().unpremultiply()) == pytest.approx(
        [0.2, 0.4, 0.8, 0.5], abs=1e-9
    )


def test_make_premultiplied_matches_premultiply():
    assert Color.make_premultiplied(0.2, 0.4, 0.6, 0.5) == Color(0.2, 0.4, 0.6, 0.5).premultiply()


def test_unpremultiply_transparent_is_black():
    assert Color(0.3, 0.3, 0.3, 0.0).unpremultiply() == Color(0.0, 0.0, 0.0, 0.0)


def test_lerp_endpoints():
    a = Color(0.1, 0.2, 0.3, 0.4)
    b = Color(0.9, 0.8, 0.7, 0.6)
    assert list(a.lerp(b, 0.0)) == pytest.approx([0.1, 0.2, 0.3, 0.4], abs=1e-9)
    assert list(a.lerp(b, 1.0)) == pytest.approx([0.9, 0.8, 0.7, 0.6], abs=1e-9)


def test_blend_opaque_source_wins():
    src = Color(0.2, 0.4, 0.6, 1.0)
    dest = Color(0.9, 0.9, 0.9, 1.0)
    assert list(src.blend(dest)) == pytest.approx([0.2, 0.4, 0.6, 1.0], abs=1e-9)
    assert list(src.blend_premultiplied(dest)) == pytest.approx(
        [0.2, 0.4, 0.6, 1.0], abs=1e-9
    )


def test_blend_transparent_source_keeps_dest():
    src = Color(0.5, 0.5, 0.5, 0.0)
    dest = Color(0.1, 0.2, 0.3, 1.0)
    assert list(src.blend(dest)) == pytest.approx([0.1, 0.2, 0.3, 1.0], abs=1e-9)
    assert list(Color(0.0, 0.0, 0.0, 0.0).blend_premultiplied(dest)) == pytest.approx(
        [0.1, 0.2, 0.3, 1.0], abs=1e-9
    )


def test_blend_both_transparent():
    clear = Color(0.7, 0.7, 0.7, 0.0)
    assert clear.blend(clear) == Color(0.0, 0.0, 0.0, 0.0)


def test_tint_with_white_is_clamp():
    c = Color(0.3, 1.2, 0.5, 0.8)
    assert c.tint(Color(1.0, 1.0, 1.0, 1.0)) == c.clamped()


def test_tint_lerp_endpoints():
    c = Color(0.3, 0.6, 0.9, 1.0)
    tint = Color(0.5, 0.5, 0.5, 1.0)
    assert list(c.tint_lerp(tint, 0.0)) == pytest.approx([0.3, 0.6, 0.9, 1.0], abs=1e-9)
    assert list(c.tint_lerp(tint, 1.0)) == pytest.approx(list(c.tint(tint)), abs=1e-9)


def test_brightness_keeps_alpha():
    c = Color(0.2, 0.3, 0.4, 0.5)
    b = c.brightness(2.0)
    assert b.a == c.a
    assert list(b) == pytest.approx([0.4, 0.6, 0.8, 0.5], abs=1e-9)
    assert c.brightness(1.0) == c