"""Planar YUV 4:2:0 frames."""

from __future__ import annotations

from dataclasses import dataclass


def _plane_sizes(width: int, height: int) -> tuple[int, int]:
    return width * height, (width // 2) * (height // 2)


@dataclass
class YUV420Frame:
    """A picture held as a full-size luma plane and two quarter-size chroma planes."""

    width: int
    height: int
    y: bytearray
    u: bytearray
    v: bytearray

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Frame dimensions must not be negative.")
        self.y = bytearray(self.y)
        self.u = bytearray(self.u)
        self.v = bytearray(self.v)
        luma, chroma = _plane_sizes(self.width, self.height)
        if len(self.y) != luma:
            raise ValueError(f"Luma plane must hold {luma} bytes, got {len(self.y)}.")
        if len(self.u) != chroma or len(self.v) != chroma:
            raise ValueError(f"Chroma planes must hold {chroma} bytes each.")

    @classmethod
    def blank(cls, width: int, height: int) -> YUV420Frame:
        """Return a frame of the given size with every sample set to zero."""
        luma, chroma = _plane_sizes(width, height)
        return cls(width, height, bytearray(luma), bytearray(chroma), bytearray(chroma))

    def to_bytes(self) -> bytes:
        """Return the planes in Y, U, V order as one block of bytes."""
        return bytes(self.y + self.u + self.v)

    def __len__(self) -> int:
        return len(self.y) + len(self.u) + len(self.v)