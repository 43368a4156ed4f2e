"""Raw planar YUV 4:2:0 video files."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from yuvblend.frame import YUV420Frame

logger = logging.getLogger(__name__)


def _split_frames(data: bytes, width: int, height: int) -> Iterator[YUV420Frame]:
    luma = width * height
    chroma = (width // 2) * (height // 2)
    total = luma + 2 * chroma
    whole = len(data) // total
    # The reader only notices the end of the file after a short read, so the
    # bytes after the last whole frame, even none, form a final zero-padded frame.
    for start in range(0, (whole + 1) * total, total):
        chunk = data[start : start + total].ljust(total, b"\0")
        yield YUV420Frame(
            width,
            height,
            chunk[:luma],
            chunk[luma : luma + chroma],
            chunk[luma + chroma :],
        )


class YUV420Video:
    """A sequence of YUV 4:2:0 frames of one size loaded from a raw file."""

    def __init__(self, path: str | PathLike[str], width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Frame dimensions must be positive.")
        self.width = width
        self.height = height
        logger.info("Loading YUV file...")
        data = Path(path).read_bytes()
        self.frames = list(_split_frames(data, width, height))
        logger.info("YUV file loaded successfully.")

    def save(self, path: str | PathLike[str]) -> None:
        """Write every frame, planes in Y, U, V order, to a raw file."""
        logger.info("Saving YUV file...")
        with open(path, "wb") as out:
            for frame in self.frames:
                out.write(frame.to_bytes())
        logger.info("YUV file saved successfully.")