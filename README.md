# yuvblend

yuvblend takes an uncompressed 24-bit BMP image and copies it into the
top-left corner of every frame of a raw planar YUV 4:2:0 (I420) video file.
The result is written to a new raw YUV 4:2:0 file.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Command line

```
yuvblend <bmpFileName> <inputYUVFileName> <yuvFileWidth> <yuvFileHeight> <resultYUVFileName>
```

Example:

```
yuvblend logo.bmp input_352x288.yuv 352 288 output.yuv
```

Raw YUV files carry no header, so the frame width and height must be given.
Each is read from the integer at the start of its argument; anything after the
digits is ignored.

With fewer than five arguments the command prints a usage line to standard
error and exits with status 1. Progress messages go to standard output. If
something goes wrong (a file cannot be read, the BMP is not a 24-bit
uncompressed image, the dimensions are invalid, or the picture does not fit
inside a video frame) the message is printed to standard error, no output file
is written, and the command still exits with status 0.

## Library use

```python
from yuvblend.bmp import BMP
from yuvblend.yuv420 import YUV420Video
from yuvblend.converter import bmp_to_yuv420
from yuvblend.blender import blend

video = YUV420Video("input.yuv", 352, 288)
image = bmp_to_yuv420(BMP("logo.bmp"), 4)
done = blend(video, image, 4)
video.save("output.yuv")
```

Modules:

- `yuvblend.frame`: `YUV420Frame` is a dataclass that holds `width`, `height`
  and the `y`, `u` and `v` planes as `bytearray`s. It checks the plane sizes
  when it is built. `YUV420Frame.blank(width, height)` gives an all-zero frame,
  `to_bytes()` gives the planes in Y, U, V order, and `len()` gives their total
  size.
- `yuvblend.bmp`: `BMP(path)` reads a 24-bit uncompressed BMP file. It has
  `width`, `height` and `pixels`, a list of `Pixel` values (`b`, `g`, `r`) kept
  in the row order of the file. `save(path)` writes the image back with its
  original headers and padded rows. Files it cannot open or handle raise
  `BMPError`.
- `yuvblend.yuv420`: `YUV420Video(path, width, height)` loads a raw file into
  `frames`, a list of `YUV420Frame`. Width and height must be positive, or
  `ValueError` is raised; a missing file raises `OSError`. Any bytes after the
  last whole frame, and even none at all, make one more frame padded with zero
  bytes, so a file of N whole frames loads as N + 1 frames. `save(path)` writes
  every frame.
- `yuvblend.converter`: `bmp_to_yuv420(bmp, num_threads=4)` converts a BMP to a
  `YUV420Frame`, splitting the rows among worker threads. Chroma is taken from
  the pixel at each even row and even column.
- `yuvblend.overlay`: `overlay(background, foreground, x=0, y=0)` copies one
  frame into another with its top-left corner at (x, y) and raises
  `OverlayError` (a `ValueError`) when the foreground is larger than the
  background or does not fit at that position.
- `yuvblend.blender`: `blend(video, image, num_threads=4)` overlays the image at
  the top-left of every frame of a `YUV420Video`, spread over worker threads,
  and returns the number of frames processed. An `OverlayError` from any frame
  is raised to the caller.
- `yuvblend.cli`: `main(argv=None)` is the command above.

Progress messages are sent to the `yuvblend` logger.

## What it does not do

The picture is always placed at the top-left corner and copied over the video
with no transparency or mixing. Only 24-bit uncompressed BMP files and raw
I420 video are read; other image or video formats are not supported.

## Running the tests

```
pip install ".[test]"
pytest
```