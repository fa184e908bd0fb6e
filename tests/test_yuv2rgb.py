import numpy as np
import pytest

from yuvmat.rgb2yuv import ChromaOrder, argb8888_to_yuv420sp
from yuvmat.yuv2rgb import (
    yuv420_to_argb8888,
    yuv420sp_to_argb8888,
    yuv420sp_to_argb8888_half_size,
    yuv420sp_to_rgb565,
    yuv_to_argb,
)


def _sample_image(width, height):
    pixels = [
        0xFF000000 | ((17 * i) & 0xFF) << 16 | ((53 * i + 7) & 0xFF) << 8 | ((91 * i) & 0xFF)
        for i in range(width * height)
    ]
    return argb8888_to_yuv420sp(pixels, width, height)


def test_black_is_opaque_black():
    assert yuv_to_argb(16, 128, 128) == 0xFF000000


def test_luma_below_sixteen_clamps_to_black():
    assert yuv_to_argb(0, 128, 128) == yuv_to_argb(16, 128, 128)


def test_full_luma_is_white():
    assert yuv_to_argb(255, 128, 128) == 0xFFFFFFFF


@pytest.mark.parametrize("luma", range(16, 256, 17))
def test_neutral_chroma_is_grey(luma):
    value = yuv_to_argb(luma, 128, 128)
    r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    assert r == g == b
    assert value >> 24 == 0xFF


def test_luma_is_monotonic():
    greys = [yuv_to_argb(luma, 128, 128) & 0xFF for luma in range(256)]
    assert greys == sorted(greys)


def test_planar_matches_semi_planar():
    width, height = 6, 4
    data = _sample_image(width, height)
    y_plane = data[: width * height]
    uv_plane = data[width * height :]
    v_plane = uv_plane[0::2]
    u_plane = uv_plane[1::2]
    planar = yuv420_to_argb8888(
        y_plane, u_plane, v_plane, width, height, width, width // 2, 1
    )
    semi = yuv420sp_to_argb8888(y_plane, uv_plane, width, height)
    assert planar.tolist() == semi.tolist()


def test_planar_with_pixel_stride_two():
    width, height = 4, 4
    data = _sample_image(width, height)
    y_plane = data[: width * height]
    uv_plane = data[width * height :]
    # Interleaved chroma read as two planes with a pixel stride of 2.
    planar = yuv420_to_argb8888(
        y_plane, uv_plane[1:], uv_plane, width, height, width, width, 2
    )
    semi = yuv420sp_to_argb8888(y_plane, uv_plane, width, height)
    assert planar.tolist() == semi.tolist()


def test_planar_honours_row_stride_padding():
    width, height = 2, 2
    padded_y = bytes([100, 110, 0, 0, 120, 130, 0, 0])
    tight_y = bytes([100, 110, 120, 130])
    chroma = bytes([90])
    padded = yuv420_to_argb8888(padded_y, chroma, chroma, width, height, 4, 1, 1)
    tight = yuv420_to_argb8888(tight_y, chroma, chroma, width, height, 2, 1, 1)
    assert padded.tolist() == tight.tolist()


def test_order_swap_gives_same_pixels():
    width, height = 4, 2
    data = bytearray(_sample_image(width, height))
    swapped = bytearray(data)
    chroma = swapped[width * height :]
    chroma[0::2], chroma[1::2] = data[width * height + 1 :: 2], data[width * height :: 2]
    swapped[width * height :] = chroma
    vu = yuv420sp_to_argb8888(data[:8], data[8:], width, height, ChromaOrder.VU)
    uv = yuv420sp_to_argb8888(swapped[:8], swapped[8:], width, height, ChromaOrder.UV)
    assert vu.tolist() == uv.tolist()


def test_output_shape_and_dtype():
    out = yuv420sp_to_argb8888(_sample_image(6, 4)[:24], _sample_image(6, 4)[24:], 6, 4)
    assert out.dtype == np.uint32
    assert out.shape == (24,)


def test_half_size_of_uniform_image():
    data = argb8888_to_yuv420sp([0xFF3080C0] * 16, 4, 4)
    full = yuv420sp_to_argb8888(data[:16], data[16:], 4, 4)
    half = yuv420sp_to_argb8888_half_size(data, 4, 4)
    assert half.shape == (4,)
    assert set(half.tolist()) == {full.tolist()[0]}


def test_half_size_averages_luma():
    luma = [16, 16, 216, 216]
    data = bytes(luma + [128, 128])
    half = yuv420sp_to_argb8888_half_size(data, 2, 2)
    assert half.tolist() == [yuv_to_argb(116, 128, 128)]


def test_rgb565_matches_argb_channels():
    width, height = 6, 4
    data = _sample_image(width, height)
    argb = yuv420sp_to_argb8888(data[: width * height], data[width * height :], width, height)
    rgb565 = yuv420sp_to_rgb565(data, width, height)
    assert rgb565.dtype == np.uint16
    for wide, narrow in zip(argb.tolist(), rgb565.tolist()):
        assert (narrow >> 11) == ((wide >> 16) & 0xFF) >> 3
        assert ((narrow >> 5) & 0x3F) == ((wide >> 8) & 0xFF) >> 2
        assert (narrow & 0x1F) == (wide & 0xFF) >> 3


def test_rgb565_black_and_white():
    black = yuv420sp_to_rgb565(bytes([16, 16, 16, 16, 128, 128]), 2, 2)
    white = yuv420sp_to_rgb565(bytes([255, 255, 255, 255, 128, 128]), 2, 2)
    assert black.tolist() == [0, 0, 0, 0]
    assert white.tolist() == [0xFFFF] * 4


def test_short_chroma_plane_raises():
    with pytest.raises(ValueError):
        yuv420sp_to_argb8888(bytes(4), bytes(1), 2, 2)


def test_short_planar_luma_raises():
    with pytest.raises(ValueError):
        yuv420_to_argb8888(bytes(3), bytes(1), bytes(1), 2, 2, 2, 1, 1)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        yuv420sp_to_rgb565(bytes(6), 2, -2)