"""Placing one YUV 4:2:0 frame over another."""

from __future__ import annotations

from yuvblend.frame import YUV420Frame


class OverlayError(ValueError):
    """Raised when the foreground does not fit inside the background."""


def overlay(background: YUV420Frame, foreground: YUV420Frame, x: int = 0, y: int = 0) -> None:
    """Copy ``foreground`` into ``background`` with its top-left corner at (x, y)."""
    if foreground.width > background.width or foreground.height > background.height:
        raise OverlayError("Picture size exceeds YUV frame size.")
    if (
        x < 0
        or y < 0
        or foreground.width + x > background.width
        or foreground.height + y > background.height
    ):
        raise OverlayError("Overlay position out of bounds.")

    bw, fw = background.width, foreground.width
    for i in range(foreground.height):
        dst = (i + y) * bw + x
        background.y[dst : dst + fw] = foreground.y[i * fw : (i + 1) * fw]
        for j in range(fw):
            src = (i // 2) * (fw // 2) + j // 2
            target = ((i + y) // 2) * (bw // 2) + (j + x) // 2
            if src < len(foreground.u) and target < len(background.u):
                background.u[target] = foreground.u[src]
                background.v[target] = foreground.v[src]