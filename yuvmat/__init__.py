"""Integer YUV 4:2:0 / RGB pixel conversions and a channel-aligned blob matrix."""

__version__ = "0.1.0"

__all__ = ["alignment", "layer_types", "mat", "reshape", "rgb2yuv", "views", "yuv2rgb"]