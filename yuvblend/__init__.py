"""Read 24-bit BMP images and raw YUV 4:2:0 video, and overlay a picture onto every video frame."""

__version__ = "1.0.0"