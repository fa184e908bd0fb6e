# yuvmat

This package converts between packed RGB pixels and YUV 4:2:0 images. It also
provides a small matrix ("blob") type of one to three dimensions whose
channels are stored on aligned boundaries.

The conversions use fixed-point integer arithmetic and run on numpy. The same
input gives the same bytes on every platform.

## Installation

From a checkout of the package:

```
pip install .
```

To run the tests, install the `test` extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Pixel conversions

### `yuvmat.rgb2yuv`

These functions take pixels in row-major order. The pixels can be a sequence
of ints, a numpy array, or raw bytes. Each function returns `bytes` holding:

1. `width * height` luma (Y) bytes, then
2. one interleaved chroma pair for every 2×2 block of pixels.

If the width or height is odd, the number of blocks is rounded up, so the
edge blocks are kept. The chroma of a block is built from the pixels that
block actually contains.

- `argb8888_to_yuv420sp(pixels, width, height, order=ChromaOrder.VU)` takes
  32-bit ARGB values. The alpha channel is ignored.
- `rgb565_to_yuv420sp(pixels, width, height, order=ChromaOrder.VU)` takes
  16-bit RGB 565 values. Each channel is widened to 8 bits by copying its
  high bits into the low bits.
- `ChromaOrder.VU` puts V first (NV21). `ChromaOrder.UV` puts U first (NV12).

A `ValueError` is raised in two cases:

- the width or height is negative;
- the number of pixels is not `width * height`.

### `yuvmat.yuv2rgb`

Each 18-bit intermediate channel is clamped and then scaled down.

- `yuv_to_argb(y, u, v)` converts one sample to an opaque `0xFFRRGGBB` int.
- `yuv420_to_argb8888(y_plane, u_plane, v_plane, width, height, y_row_stride, uv_row_stride, uv_pixel_stride)`
  reads separate Y, U and V planes with any row and pixel strides, such as
  camera image planes.
- `yuv420sp_to_argb8888(y_plane, uv_plane, width, height, order=ChromaOrder.VU)`
  reads a Y plane and an interleaved chroma plane.
- `yuv420sp_to_argb8888_half_size(data, width, height, order=ChromaOrder.VU)`
  reads one buffer: luma followed by chroma. It returns an image of half the
  width and half the height. Each output luma value is the mean of a 2×2 luma
  block.
- `yuv420sp_to_rgb565(data, width, height, order=ChromaOrder.VU)` reads one
  buffer: luma followed by chroma. It returns RGB 565 values.

The ARGB functions return a flat `uint32` numpy array and the RGB 565
function returns a flat `uint16` array, each in row order. A `ValueError` is
raised when a plane is too short for the requested size and strides.

### Example

```python
from yuvmat.rgb2yuv import ChromaOrder, argb8888_to_yuv420sp
from yuvmat.yuv2rgb import yuv420sp_to_argb8888

width, height = 4, 2
pixels = [0xFF808080] * (width * height)

nv21 = argb8888_to_yuv420sp(pixels, width, height, ChromaOrder.VU)
y_plane, uv_plane = nv21[: width * height], nv21[width * height :]
argb = yuv420sp_to_argb8888(y_plane, uv_plane, width, height, ChromaOrder.VU)
```

## Matrices

### `yuvmat.mat`

`Mat(w, h=None, c=None, elemsize=4, elempack=1)` builds a matrix:

| Arguments given | Result |
| --- | --- |
| only `w` | 1-D matrix |
| `w` and `h` | 2-D matrix |
| `w`, `h` and `c` | 3-D matrix |
| no arguments | empty matrix |

The storage is a `uint8` numpy array in `data`, or `None` when nothing is
allocated. In a 3-D matrix each channel takes `cstep` elements, padded so
that every channel starts on a 16-byte boundary.

- `create(w, h, c, elemsize, elempack)` allocates zeroed storage. It keeps the
  existing storage if the shape and element layout already match.
- `create_like(other)` allocates storage with the shape and layout of `other`.
- `release()` drops the storage and resets the matrix to the empty state.
- `empty()` returns `True` when no data is held.
- `total()` returns the number of elements, including channel padding.
- `fill(value)` writes `value` into every slot:
  - a Python int is written as a 32-bit integer;
  - a Python float is written as a 32-bit float;
  - a numpy scalar is written with its own type.
- `clone()` returns a deep copy.

### `yuvmat.views`

These functions return matrices or arrays that share the buffer of the
matrix they come from, so a write through one is seen by the other:

- `channel(mat, c)`
- `channel_range(mat, c, channels)`
- `row(mat, y)`, which returns a writable `float32` numpy view
- `row_range(mat, y, rows)`
- `element_range(mat, x, n)`

Out-of-range requests raise `IndexError`. A matrix with no data raises
`ValueError`.

### `yuvmat.reshape`

- `reshape(mat, w, h=None, c=None)` returns the matrix with a new 1-, 2- or
  3-D shape. The element count must stay the same, otherwise `ValueError` is
  raised. The result shares the buffer unless channel padding has to be
  removed or added. In that case the data is copied into a new matrix.

### `yuvmat.alignment`

- `align_size(size, n)` rounds `size` up to a multiple of `n`.
- `align_address(address, n=16)` rounds an address or byte offset up to a
  multiple of `n`.

In both functions `n` must be a positive power of two. `MALLOC_ALIGN` is the
default of 16.

### `yuvmat.layer_types`

- `LayerType` is an `IntEnum` of the built-in layer kinds, from `AbsVal`
  (0) to `Noop` (68).
- `layer_type_from_name(name)` looks up a layer kind by its exact name. It
  raises `KeyError` for an unknown name.
- `CUSTOM_BIT` (`1 << 8`) is the bit that marks user-registered layer types.

## What this package does not do

The package does not load or run neural networks. `LayerType` only names the
layer kinds; there is no layer implementation, model loader or inference.

It has no memory pools, no GPU storage and no command-line tool.