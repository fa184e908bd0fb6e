"""A three-dimensional matrix of packed elements backed by a flat byte buffer."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from yuvmat.alignment import align_size

# Channels of a three-dimensional matrix start on boundaries of this many bytes.
_CHANNEL_ALIGN = 16
# Whole buffers are rounded up to a multiple of this many bytes.
_BUFFER_ALIGN = 4

FillValue = Union[int, float, np.generic]


def _check_extent(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def _check_element(elemsize: int, elempack: int) -> None:
    for value, what in ((elemsize, "elemsize"), (elempack, "elempack")):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{what} must be an int, got {type(value).__name__}")
        if value <= 0:
            raise ValueError(f"{what} must be positive, got {value}")


def _layout(w: int, h: Optional[int], c: Optional[int], elemsize: int):
    """Return ``(dims, w, h, c, cstep)`` for the requested shape."""
    _check_extent(w, "w")
    if h is None:
        if c is not None:
            raise TypeError("c given without h")
        return 1, w, 1, 1, w
    _check_extent(h, "h")
    if c is None:
        return 2, w, h, 1, w * h
    _check_extent(c, "c")
    cstep = align_size(w * h * elemsize, _CHANNEL_ALIGN) // elemsize
    return 3, w, h, c, cstep


class Mat:
    """A 1-, 2- or 3-dimensional matrix of elements stored in a byte buffer.

    ``data`` is a ``uint8`` numpy array (or ``None`` when nothing is
    allocated). Each channel of a three-dimensional matrix occupies ``cstep``
    elements, padded so that channels start on 16-byte boundaries. Matrices
    that share a buffer see each other's writes.
    """

    def __init__(
        self,
        w: Optional[int] = None,
        h: Optional[int] = None,
        c: Optional[int] = None,
        elemsize: int = 4,
        elempack: int = 1,
    ) -> None:
        self._reset()
        if w is None:
            if h is not None or c is not None:
                raise TypeError("h or c given without w")
            return
        self.create(w, h, c, elemsize, elempack)

    def _reset(self) -> None:
        self.data: Optional[np.ndarray] = None
        self.elemsize = 0
        self.elempack = 0
        self.dims = 0
        self.w = 0
        self.h = 0
        self.c = 0
        self.cstep = 0

    @classmethod
    def _from_buffer(
        cls,
        data: np.ndarray,
        w: int,
        h: Optional[int] = None,
        c: Optional[int] = None,
        elemsize: int = 4,
        elempack: int = 1,
    ) -> "Mat":
        """Wrap an existing byte buffer without copying it."""
        _check_element(elemsize, elempack)
        dims, w, h, c, cstep = _layout(w, h, c, elemsize)
        mat = cls()
        mat.data = data
        mat.elemsize = elemsize
        mat.elempack = elempack
        mat.dims = dims
        mat.w = w
        mat.h = h
        mat.c = c
        mat.cstep = cstep
        return mat

    def create(
        self,
        w: int,
        h: Optional[int] = None,
        c: Optional[int] = None,
        elemsize: int = 4,
        elempack: int = 1,
    ) -> None:
        """Allocate storage for the given shape, keeping it if already matching."""
        _check_element(elemsize, elempack)
        dims, w, h, c, cstep = _layout(w, h, c, elemsize)
        if (
            self.dims == dims
            and self.w == w
            and self.h == h
            and self.c == c
            and self.elemsize == elemsize
            and self.elempack == elempack
        ):
            return

        self.release()
        self.elemsize = elemsize
        self.elempack = elempack
        self.dims = dims
        self.w = w
        self.h = h
        self.c = c
        self.cstep = cstep

        total = self.total()
        if total > 0:
            size = align_size(total * elemsize, _BUFFER_ALIGN)
            self.data = np.zeros(size, dtype=np.uint8)

    def create_like(self, other: "Mat") -> None:
        """Allocate storage with the shape and element layout of ``other``."""
        if other.dims == 1:
            self.create(other.w, None, None, other.elemsize, other.elempack)
        elif other.dims == 2:
            self.create(other.w, other.h, None, other.elemsize, other.elempack)
        elif other.dims == 3:
            self.create(other.w, other.h, other.c, other.elemsize, other.elempack)

    def release(self) -> None:
        """Drop the buffer and reset the matrix to the empty state."""
        self._reset()

    def empty(self) -> bool:
        """Return True when no data is held."""
        return self.data is None or self.total() == 0

    def total(self) -> int:
        """Number of elements, channel padding included."""
        return self.cstep * self.c

    def fill(self, value: FillValue) -> None:
        """Write ``value`` into each of the first ``total()`` slots.

        Python ints are written as 32-bit integers and floats as 32-bit
        floats; numpy scalars are written with their own type.
        """
        if isinstance(value, np.generic):
            dtype = value.dtype
        elif isinstance(value, int):
            dtype = np.dtype(np.int32)
        elif isinstance(value, float):
            dtype = np.dtype(np.float32)
        else:
            raise TypeError(f"cannot fill with {type(value).__name__}")

        count = self.total()
        if count == 0 or self.data is None:
            return
        nbytes = count * dtype.itemsize
        if nbytes > self.data.size:
            raise ValueError(
                f"{count} values of {dtype.itemsize} bytes do not fit in {self.data.size} bytes"
            )
        self.data[:nbytes].view(dtype)[:] = value

    def clone(self) -> "Mat":
        """Return a deep copy with its own buffer."""
        if self.empty():
            return Mat()
        if self.dims == 1:
            copy = Mat(self.w, None, None, self.elemsize, self.elempack)
        elif self.dims == 2:
            copy = Mat(self.w, self.h, None, self.elemsize, self.elempack)
        else:
            copy = Mat(self.w, self.h, self.c, self.elemsize, self.elempack)
        nbytes = self.total() * self.elemsize
        copy.data[:nbytes] = self.data[:nbytes]
        return copy

    def __repr__(self) -> str:
        return (
            f"Mat(dims={self.dims}, w={self.w}, h={self.h}, c={self.c}, "
            f"elemsize={self.elemsize}, elempack={self.elempack}, cstep={self.cstep})"
        )