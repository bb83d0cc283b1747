import pytest

from blockworld.bitmasks import (
    MASK_LIGHT_LEVEL,
    MASK_RGB,
    MASK_ROTATION,
    VertexInfo,
    main,
    pack_vertex_info,
    unpack_vertex_info,
)


@pytest.mark.parametrize(
    "rgb, light, rotation",
    [(0xF0000F, 13, 3), (0, 0, 0), (0xFFFFFF, 15, 3), (0x123456, 7, 1)],
)
def test_round_trip(rgb, light, rotation):
    packed = pack_vertex_info(rgb, light, rotation)
    assert unpack_vertex_info(packed) == VertexInfo(rgb, light, rotation)


def test_packed_fits_in_32_bits():
    packed = pack_vertex_info(0x7FFFFFFF, 0xFF, 0xFF)
    assert 0 <= packed < 2**32


def test_fields_do_not_overlap():
    rgb_only = pack_vertex_info(0xFFFFFF, 0, 0)
    light_only = pack_vertex_info(0, 15, 0)
    rotation_only = pack_vertex_info(0, 0, 3)
    assert rgb_only == MASK_RGB
    assert light_only == MASK_LIGHT_LEVEL
    assert rotation_only == MASK_ROTATION
    assert rgb_only & light_only == 0
    assert rgb_only & rotation_only == 0
    assert light_only & rotation_only == 0


def test_overflowing_light_does_not_touch_rgb():
    packed = pack_vertex_info(0xABCDEF, 0x1F, 0)
    assert unpack_vertex_info(packed).rgb == 0xABCDEF


def test_known_packing():
    assert pack_vertex_info(0xF0000F, 13, 3) == 0xF0000FDC


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "thecolor=f0000f\nf0000f,d,3\n"