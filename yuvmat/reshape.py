"""Reshaping of matrices, sharing the buffer where the layout allows it."""

from __future__ import annotations

from typing import Optional

import numpy as np

from yuvmat.alignment import align_size
from yuvmat.mat import Mat

# Channels of a three-dimensional matrix start on boundaries of this many bytes.
_CHANNEL_ALIGN = 16


def _check_target(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def _shared(mat: Mat, w: int, h: Optional[int], c: Optional[int]) -> Mat:
    return Mat._from_buffer(mat.data, w, h, c, mat.elemsize, mat.elempack)


def _flatten_into(mat: Mat, target: Mat) -> None:
    """Copy the channels of a padded 3-D ``mat`` back to back into ``target``."""
    plane = mat.w * mat.h * mat.elemsize
    if mat.data is None or target.data is None or plane == 0 or mat.c == 0:
        return
    step = mat.cstep * mat.elemsize
    source = mat.data[: mat.c * step].reshape(mat.c, step)[:, :plane]
    target.data[: mat.c * plane] = source.ravel()


def _align_into(mat: Mat, target: Mat) -> None:
    """Spread the contiguous planes of ``mat`` over the padded channels of ``target``."""
    plane = target.w * target.h * mat.elemsize
    if mat.data is None or target.data is None or plane == 0 or target.c == 0:
        return
    step = target.cstep * target.elemsize
    destination = target.data[: target.c * step].reshape(target.c, step)
    destination[:, :plane] = mat.data[: target.c * plane].reshape(target.c, plane)


def reshape(
    mat: Mat, w: int, h: Optional[int] = None, c: Optional[int] = None
) -> Mat:
    """Return ``mat`` with a new 1-, 2- or 3-dimensional shape.

    The element count must stay the same. The result shares the buffer of
    ``mat`` unless channel padding has to be removed or added, in which case
    the data is copied into a new buffer.
    """
    if mat.dims == 0:
        raise ValueError("matrix holds no data")
    _check_target(w, "w")
    if h is None and c is not None:
        raise TypeError("c given without h")
    if h is not None:
        _check_target(h, "h")
    if c is not None:
        _check_target(c, "c")

    count = mat.w * mat.h * mat.c
    wanted = w * (1 if h is None else h) * (1 if c is None else c)
    if count != wanted:
        raise ValueError(
            f"cannot reshape {count} elements into {wanted}"
        )

    if c is None:
        if mat.dims == 3 and mat.cstep != mat.w * mat.h:
            result = Mat(w, h, None, mat.elemsize, mat.elempack)
            _flatten_into(mat, result)
            return result
        return _shared(mat, w, h, None)

    if mat.dims < 3:
        aligned = align_size(w * h * mat.elemsize, _CHANNEL_ALIGN) // mat.elemsize
        if w * h != aligned:
            result = Mat(w, h, c, mat.elemsize, mat.elempack)
            _align_into(mat, result)
            return result
    elif mat.c != c:
        return reshape(reshape(mat, w * h * c), w, h, c)

    return _shared(mat, w, h, c)