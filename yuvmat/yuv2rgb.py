"""Conversion of YUV 4:2:0 images to packed ARGB 8888 and RGB 565 pixels."""

from __future__ import annotations

from typing import Iterable, Tuple, Union

import numpy as np

from yuvmat.rgb2yuv import ChromaOrder

PlaneData = Union[bytes, bytearray, memoryview, Iterable[int], np.ndarray]

# 2 ** 18 - 1: channels are clamped to this before being scaled to 8 bits.
_MAX_CHANNEL_VALUE = 262143


def _as_array(data: PlaneData) -> np.ndarray:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8).astype(np.int64)
    return np.asarray(data, dtype=np.int64).ravel()


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")


def _take(plane: np.ndarray, indices: np.ndarray, name: str) -> np.ndarray:
    if indices.size and (indices.max() >= plane.size or indices.min() < 0):
        raise ValueError(
            f"{name} plane too short: needs index {int(indices.max())}, has {plane.size} samples"
        )
    return plane[indices]


def _yuv_to_channels(
    y: np.ndarray, u: np.ndarray, v: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return R, G, B clamped to the 18-bit intermediate range."""
    y = np.maximum(y - 16, 0)
    u = u - 128
    v = v - 128
    r = 1192 * y + 1634 * v
    g = 1192 * y - 833 * v - 400 * u
    b = 1192 * y + 2066 * u
    return (
        np.clip(r, 0, _MAX_CHANNEL_VALUE),
        np.clip(g, 0, _MAX_CHANNEL_VALUE),
        np.clip(b, 0, _MAX_CHANNEL_VALUE),
    )


def _pack_argb(y: np.ndarray, u: np.ndarray, v: np.ndarray) -> np.ndarray:
    r, g, b = _yuv_to_channels(y, u, v)
    r = (r >> 10) & 0xFF
    g = (g >> 10) & 0xFF
    b = (b >> 10) & 0xFF
    return (0xFF000000 | (r << 16) | (g << 8) | b).astype(np.uint32)


def _pack_rgb565(y: np.ndarray, u: np.ndarray, v: np.ndarray) -> np.ndarray:
    r, g, b = _yuv_to_channels(y, u, v)
    r = (r >> 13) & 0x1F
    g = (g >> 12) & 0x3F
    b = (b >> 13) & 0x1F
    return ((r << 11) | (g << 5) | b).astype(np.uint16)


def yuv_to_argb(y: int, u: int, v: int) -> int:
    """Convert one YUV sample to an opaque 32-bit ARGB value."""
    packed = _pack_argb(
        np.array([y], dtype=np.int64),
        np.array([u], dtype=np.int64),
        np.array([v], dtype=np.int64),
    )
    return int(packed[0])


def _grid(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    rows, cols = np.meshgrid(
        np.arange(height, dtype=np.int64), np.arange(width, dtype=np.int64), indexing="ij"
    )
    return rows.ravel(), cols.ravel()


def yuv420_to_argb8888(
    y_plane: PlaneData,
    u_plane: PlaneData,
    v_plane: PlaneData,
    width: int,
    height: int,
    y_row_stride: int,
    uv_row_stride: int,
    uv_pixel_stride: int,
) -> np.ndarray:
    """Convert a planar YUV 4:2:0 image with arbitrary strides to ARGB pixels.

    Returns a flat ``uint32`` array of ``width * height`` pixels in row order.
    """
    _check_dimensions(width, height)
    rows, cols = _grid(width, height)
    y_idx = y_row_stride * rows + cols
    uv_idx = uv_row_stride * (rows >> 1) + (cols >> 1) * uv_pixel_stride
    y = _take(_as_array(y_plane), y_idx, "Y")
    u = _take(_as_array(u_plane), uv_idx, "U")
    v = _take(_as_array(v_plane), uv_idx, "V")
    return _pack_argb(y, u, v)


def _semi_planar_samples(
    y_plane: np.ndarray,
    uv_plane: np.ndarray,
    width: int,
    height: int,
    order: ChromaOrder,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    _check_dimensions(width, height)
    rows, cols = _grid(width, height)
    y = _take(y_plane, rows * width + cols, "Y")
    offset = (rows >> 1) * width + 2 * (cols >> 1)
    first = _take(uv_plane, offset, "chroma")
    second = _take(uv_plane, offset + 1, "chroma")
    if order is ChromaOrder.VU:
        return y, second, first
    return y, first, second


def yuv420sp_to_argb8888(
    y_plane: PlaneData,
    uv_plane: PlaneData,
    width: int,
    height: int,
    order: ChromaOrder = ChromaOrder.VU,
) -> np.ndarray:
    """Convert a semi-planar YUV 4:2:0 image to a flat ``uint32`` ARGB array."""
    y, u, v = _semi_planar_samples(
        _as_array(y_plane), _as_array(uv_plane), width, height, order
    )
    return _pack_argb(y, u, v)


def yuv420sp_to_argb8888_half_size(
    data: PlaneData,
    width: int,
    height: int,
    order: ChromaOrder = ChromaOrder.VU,
) -> np.ndarray:
    """Convert a semi-planar YUV 4:2:0 image to ARGB at half width and height.

    ``data`` holds the luma plane followed by the interleaved chroma plane.
    Each output luma is the mean of a 2x2 luma block.
    """
    _check_dimensions(width, height)
    samples = _as_array(data)
    stride = width
    out_w = width >> 1
    out_h = height >> 1
    luma = samples[: width * height]
    chroma = samples[width * height :]

    rows, cols = _grid(out_w, out_h)
    top_left = rows * (2 * out_w + stride) + 2 * cols
    y = (
        _take(luma, top_left, "Y")
        + _take(luma, top_left + 1, "Y")
        + _take(luma, top_left + stride, "Y")
        + _take(luma, top_left + stride + 1, "Y")
    ) >> 2
    uv_idx = 2 * (rows * out_w + cols)
    first = _take(chroma, uv_idx, "chroma")
    second = _take(chroma, uv_idx + 1, "chroma")
    if order is ChromaOrder.VU:
        return _pack_argb(y, second, first)
    return _pack_argb(y, first, second)


def yuv420sp_to_rgb565(
    data: PlaneData,
    width: int,
    height: int,
    order: ChromaOrder = ChromaOrder.VU,
) -> np.ndarray:
    """Convert a semi-planar YUV 4:2:0 image to a flat ``uint16`` RGB 565 array.

    ``data`` holds the luma plane followed by the interleaved chroma plane.
    """
    _check_dimensions(width, height)
    samples = _as_array(data)
    y, u, v = _semi_planar_samples(
        samples[: width * height], samples[width * height :], width, height, order
    )
    return _pack_rgb565(y, u, v)