"""Conversion of BMP pictures to YUV 4:2:0 frames."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import repeat

from yuvblend.bmp import BMP, Pixel
from yuvblend.frame import YUV420Frame

logger = logging.getLogger(__name__)


def _to_byte(value: float) -> int:
    # Truncate toward zero, then keep the low byte, as an 8-bit store does.
    return int(value) & 0xFF


def _convert_rows(pixels: Sequence[Pixel], frame: YUV420Frame, start: int, end: int) -> None:
    width = frame.width
    half_width = width // 2
    for i in range(start, end):
        for j, p in enumerate(pixels[i * width : (i + 1) * width]):
            frame.y[i * width + j] = _to_byte(0.299 * p.r + 0.587 * p.g + 0.114 * p.b)
            if i % 2 == 0 and j % 2 == 0:
                index = (i // 2) * half_width + j // 2
                if index < len(frame.u):
                    frame.u[index] = _to_byte(128 - 0.14713 * p.r - 0.28886 * p.g + 0.436 * p.b)
                    frame.v[index] = _to_byte(128 + 0.615 * p.r - 0.51499 * p.g - 0.10001 * p.b)


def bmp_to_yuv420(bmp: BMP, num_threads: int = 4) -> YUV420Frame:
    """Convert a BMP to a YUV 4:2:0 frame, splitting its rows among worker threads."""
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1.")
    logger.info("Converting BMP to YUV420 format...")
    width, height = bmp.width, bmp.height
    frame = YUV420Frame.blank(width, height)
    rows_each = height // num_threads
    starts = [rows_each * k for k in range(num_threads)]
    ends = starts[1:] + [height]
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        list(pool.map(_convert_rows, repeat(bmp.pixels), repeat(frame), starts, ends))
    logger.info("Successfully converted BMP to YUV420!")
    return frame