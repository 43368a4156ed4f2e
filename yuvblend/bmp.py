"""Reading and writing uncompressed 24-bit BMP images."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

logger = logging.getLogger(__name__)

_FILE_HEADER = struct.Struct("<HIHHI")
_DIB_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADERS_SIZE = _FILE_HEADER.size + _DIB_HEADER.size
_SIGNATURE = 0x4D42  # "BM"


class BMPError(Exception):
    """Raised when a BMP file cannot be read or written."""


@dataclass(frozen=True)
class Pixel:
    """One 24-bit pixel in the order BMP stores it."""

    b: int
    g: int
    r: int

    def __bytes__(self) -> bytes:
        return bytes((self.b, self.g, self.r))


def _row_size(width: int) -> int:
    return (width * 3 + 3) & ~3


class BMP:
    """A 24-bit uncompressed bitmap; pixels are kept in the row order of the file."""

    def __init__(self, path: str | PathLike[str]) -> None:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise BMPError("Could not open BMP file.") from exc

        if len(data) < _FILE_HEADER.size:
            raise BMPError("Not a valid BMP file.")
        file_type, _, _, _, offset = _FILE_HEADER.unpack_from(data)
        if file_type != _SIGNATURE:
            raise BMPError("Not a valid BMP file.")
        if len(data) < _HEADERS_SIZE:
            raise BMPError("Truncated BMP header.")

        _, width, height, _, bit_count, compression, *_ = _DIB_HEADER.unpack_from(
            data, _FILE_HEADER.size
        )
        if bit_count != 24:
            raise BMPError("Only 24-bit BMP files are supported.")
        if compression != 0:
            raise BMPError("Only uncompressed BMP files are supported.")
        if width < 0 or height < 0:
            raise BMPError("Negative BMP dimensions are not supported.")

        self._headers = data[:_HEADERS_SIZE]
        self.width = width
        self.height = height

        stride = _row_size(width)
        body = data[offset : offset + stride * height].ljust(stride * height, b"\0")
        self.pixels = [
            Pixel(*body[start : start + 3])
            for row_start in range(0, stride * height, stride or 1)
            for start in range(row_start, row_start + width * 3, 3)
        ][: width * height]
        logger.info("BMP file loaded successfully.")

    def save(self, path: str | PathLike[str]) -> None:
        """Write the image with its original headers and padded pixel rows."""
        padding = bytes(_row_size(self.width) - self.width * 3)
        try:
            with open(path, "wb") as out:
                out.write(self._headers)
                for row_start in range(0, self.width * self.height, self.width or 1):
                    row = self.pixels[row_start : row_start + self.width]
                    out.write(b"".join(bytes(pixel) for pixel in row) + padding)
        except OSError as exc:
            raise BMPError("Could not open output BMP file.") from exc
        logger.info("BMP file saved successfully.")