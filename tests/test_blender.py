import pytest

from yuvblend.blender import blend
from yuvblend.frame import YUV420Frame
from yuvblend.overlay import OverlayError
from yuvblend.yuv420 import YUV420Video

FRAME = bytes([200] * 8 + [50, 60, 70, 80])


def make_video(tmp_path, count):
    path = tmp_path / "in.yuv"
    path.write_bytes(FRAME * count)
    return YUV420Video(path, 4, 2)


def stamp():
    return YUV420Frame(2, 2, bytes([1, 2, 3, 4]), bytes([9]), bytes([11]))


@pytest.mark.parametrize("threads", [1, 2, 3, 8])
def test_every_frame_gets_the_image(tmp_path, threads):
    video = make_video(tmp_path, 5)
    done = blend(video, stamp(), threads)
    assert done == len(video.frames)
    for frame in video.frames:
        assert [frame.y[0], frame.y[1], frame.y[4], frame.y[5]] == [1, 2, 3, 4]
        assert frame.u[0] == 9
        assert frame.v[0] == 11


def test_area_outside_image_is_untouched(tmp_path):
    video = make_video(tmp_path, 2)
    blend(video, stamp())
    for frame in video.frames[:2]:
        assert [frame.y[2], frame.y[3], frame.y[6], frame.y[7]] == [200] * 4
        assert frame.u[1] == 60
        assert frame.v[1] == 80


def test_oversized_image_is_rejected(tmp_path):
    video = make_video(tmp_path, 1)
    with pytest.raises(OverlayError):
        blend(video, YUV420Frame.blank(6, 2))


def test_zero_threads_is_rejected(tmp_path):
    video = make_video(tmp_path, 1)
    with pytest.raises(ValueError):
        blend(video, stamp(), 0)