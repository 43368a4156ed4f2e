"""Command line: stamp a BMP picture onto every frame of a raw YUV 4:2:0 video."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence

from yuvblend.blender import blend
from yuvblend.bmp import BMP, BMPError
from yuvblend.converter import bmp_to_yuv420
from yuvblend.overlay import OverlayError
from yuvblend.yuv420 import YUV420Video

_USAGE = (
    "Usage: {prog} <bmpFileName> <inputYUVFileName> <yuvFilewidth> "
    "<yuvFileHeight> <resultYUVFileName>"
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _run(bmp_path: str, yuv_path: str, width_text: str, height_text: str, out_path: str) -> None:
    width = _parse_int(width_text)
    height = _parse_int(height_text)
    video = YUV420Video(yuv_path, width, height)
    picture = BMP(bmp_path)
    frame = bmp_to_yuv420(picture)
    blend(video, frame)
    video.save(out_path)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 5:
        print(_USAGE.format(prog="yuvblend"), file=sys.stderr)
        return 1

    log = logging.getLogger("yuvblend")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = log.level
    log.addHandler(handler)
    log.setLevel(logging.INFO)
    try:
        _run(*args[:5])
    except (BMPError, OverlayError, OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
    finally:
        log.removeHandler(handler)
        log.setLevel(previous_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())