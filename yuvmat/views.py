"""Views onto parts of a matrix that share its buffer."""

from __future__ import annotations

import numpy as np

from yuvmat.mat import Mat


def _require_data(mat: Mat) -> np.ndarray:
    if mat.empty() or mat.data is None:
        raise ValueError("matrix holds no data")
    return mat.data


def _check_index(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")


def _check_span(start: int, count: int, limit: int, what: str) -> None:
    _check_index(start, what)
    _check_index(count, f"{what} count")
    if start < 0 or count < 0 or start + count > limit:
        raise IndexError(
            f"{what} range [{start}, {start + count}) is outside [0, {limit})"
        )


def _slice(data: np.ndarray, offset: int, nbytes: int) -> np.ndarray:
    end = min(offset + nbytes, data.size)
    return data[offset:end]


def channel(mat: Mat, c: int) -> Mat:
    """Return channel ``c`` as a two-dimensional matrix sharing the buffer."""
    data = _require_data(mat)
    _check_span(c, 1, mat.c, "channel")
    offset = mat.cstep * c * mat.elemsize
    nbytes = mat.w * mat.h * mat.elemsize
    return Mat._from_buffer(
        _slice(data, offset, nbytes), mat.w, mat.h, None, mat.elemsize, mat.elempack
    )


def channel_range(mat: Mat, c: int, channels: int) -> Mat:
    """Return ``channels`` channels starting at ``c`` as a shared 3-D matrix."""
    data = _require_data(mat)
    _check_span(c, channels, mat.c, "channel")
    offset = mat.cstep * c * mat.elemsize
    nbytes = mat.cstep * channels * mat.elemsize
    return Mat._from_buffer(
        _slice(data, offset, nbytes),
        mat.w,
        mat.h,
        channels,
        mat.elemsize,
        mat.elempack,
    )


def row(mat: Mat, y: int) -> np.ndarray:
    """Return row ``y`` as a writable ``float32`` view of the buffer.

    The view covers ``w * elemsize`` bytes, so packed elements contribute
    ``elempack`` floats each.
    """
    data = _require_data(mat)
    _check_span(y, 1, mat.h, "row")
    nbytes = mat.w * mat.elemsize
    if nbytes % 4:
        raise ValueError(
            f"a row of {nbytes} bytes cannot be read as 32-bit floats"
        )
    offset = mat.w * y * mat.elemsize
    return data[offset:offset + nbytes].view(np.float32)


def row_range(mat: Mat, y: int, rows: int) -> Mat:
    """Return ``rows`` rows starting at ``y`` as a shared 2-D matrix."""
    data = _require_data(mat)
    _check_span(y, rows, mat.h, "row")
    offset = mat.w * y * mat.elemsize
    nbytes = mat.w * rows * mat.elemsize
    return Mat._from_buffer(
        _slice(data, offset, nbytes), mat.w, rows, None, mat.elemsize, mat.elempack
    )


def element_range(mat: Mat, x: int, n: int) -> Mat:
    """Return ``n`` elements starting at ``x`` as a shared 1-D matrix."""
    data = _require_data(mat)
    _check_span(x, n, mat.total(), "element")
    offset = x * mat.elemsize
    nbytes = n * mat.elemsize
    return Mat._from_buffer(
        _slice(data, offset, nbytes), n, None, None, mat.elemsize, mat.elempack
    )