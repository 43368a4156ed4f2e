"""Stamping a still picture onto every frame of a video."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from yuvblend.frame import YUV420Frame
from yuvblend.overlay import overlay
from yuvblend.yuv420 import YUV420Video

logger = logging.getLogger(__name__)


def blend(video: YUV420Video, image: YUV420Frame, num_threads: int = 4) -> int:
    """Overlay ``image`` at the top-left of every frame; return the number of frames done."""
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1.")
    frames = video.frames
    total = len(frames)
    per_thread = total // num_threads
    starts = [per_thread * k for k in range(num_threads)]
    ends = starts[1:] + [total]

    def work(start: int, end: int) -> int:
        for frame in frames[start:end]:
            overlay(frame, image, 0, 0)
        return end - start

    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        processed = sum(pool.map(work, starts, ends))
    logger.info("Frames processed: %d / %d", processed, total)
    return processed