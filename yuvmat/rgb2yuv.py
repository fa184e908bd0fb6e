"""Conversion of packed RGB pixels to YUV 4:2:0 semi-planar images."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union

import numpy as np

PixelData = Union[bytes, bytearray, memoryview, Iterable[int], np.ndarray]


class ChromaOrder(Enum):
    """Order of the two chroma bytes in an interleaved chroma plane."""

    VU = "vu"  # NV21: V first, then U
    UV = "uv"  # NV12: U first, then V


def _as_array(data: PixelData) -> np.ndarray:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8).astype(np.int64)
    return np.asarray(data, dtype=np.int64).ravel()


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")


def _pixel_grid(pixels: PixelData, width: int, height: int) -> np.ndarray:
    _check_dimensions(width, height)
    values = _as_array(pixels)
    if values.size != width * height:
        raise ValueError(
            f"expected {width * height} pixels for a {width}x{height} image, got {values.size}"
        )
    return values.reshape(height, width)


def _block_sum(term: np.ndarray, width: int, height: int) -> np.ndarray:
    """Sum each 2x2 block of ``term``; partial blocks at odd edges sum fewer pixels."""
    blocks_h = (height + 1) // 2
    blocks_w = (width + 1) // 2
    padded = np.zeros((2 * blocks_h, 2 * blocks_w), dtype=np.int64)
    padded[:height, :width] = term
    return padded.reshape(blocks_h, 2, blocks_w, 2).sum(axis=(1, 3)) & 0xFF


def _encode(
    r: np.ndarray,
    g: np.ndarray,
    b: np.ndarray,
    width: int,
    height: int,
    order: ChromaOrder,
) -> bytes:
    luma = ((66 * r + 129 * g + 25 * b + 128) >> 8) + 16
    # Each chroma term has the divide by four of the block average factored in.
    v_term = ((112 * r - 94 * g - 18 * b + 128) >> 10) + 32
    u_term = ((-38 * r - 74 * g + 112 * b + 128) >> 10) + 32

    v_sum = _block_sum(v_term, width, height)
    u_sum = _block_sum(u_term, width, height)

    chroma = np.empty(v_sum.shape + (2,), dtype=np.uint8)
    if order is ChromaOrder.VU:
        chroma[..., 0] = v_sum
        chroma[..., 1] = u_sum
    else:
        chroma[..., 0] = u_sum
        chroma[..., 1] = v_sum

    return (luma & 0xFF).astype(np.uint8).tobytes() + chroma.tobytes()


def argb8888_to_yuv420sp(
    pixels: PixelData,
    width: int,
    height: int,
    order: ChromaOrder = ChromaOrder.VU,
) -> bytes:
    """Convert 32-bit ARGB pixels (row-major) to a YUV 4:2:0 semi-planar image.

    The result holds ``width * height`` luma bytes followed by one interleaved
    chroma pair for every 2x2 block; odd sizes round the block count up.
    """
    grid = _pixel_grid(pixels, width, height)
    r = (grid >> 16) & 0xFF
    g = (grid >> 8) & 0xFF
    b = grid & 0xFF
    return _encode(r, g, b, width, height, order)


def rgb565_to_yuv420sp(
    pixels: PixelData,
    width: int,
    height: int,
    order: ChromaOrder = ChromaOrder.VU,
) -> bytes:
    """Convert 16-bit RGB 565 pixels (row-major) to a YUV 4:2:0 semi-planar image."""
    grid = _pixel_grid(pixels, width, height)
    r5 = (grid >> 11) & 0x1F
    g6 = (grid >> 5) & 0x3F
    b5 = grid & 0x1F
    # Replicate the high bits into the low ones to span the full 0-255 range.
    r = (r5 << 3) | (r5 >> 2)
    g = (g6 << 2) | (g6 >> 4)
    b = (b5 << 3) | (b5 >> 2)
    return _encode(r, g, b, width, height, order)