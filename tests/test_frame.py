import pytest

from yuvblend.frame import YUV420Frame


def test_blank_has_plane_sizes_and_zero_samples():
    frame = YUV420Frame.blank(4, 2)
    assert len(frame.y) == 4 * 2
    assert len(frame.u) == (4 // 2) * (2 // 2)
    assert len(frame.v) == len(frame.u)
    assert set(frame.to_bytes()) == {0}


def test_blank_odd_dimensions_round_chroma_down():
    frame = YUV420Frame.blank(3, 3)
    assert len(frame.y) == 9
    assert len(frame.u) == 1
    assert len(frame.v) == 1


def test_to_bytes_orders_planes_y_u_v():
    frame = YUV420Frame(4, 2, b"\x01\x02\x03\x04\x05\x06\x07\x08", b"\x09\x0a", b"\x0b\x0c")
    assert frame.to_bytes() == bytes(range(1, 13))


def test_len_matches_serialised_size():
    frame = YUV420Frame.blank(6, 4)
    assert len(frame) == len(frame.to_bytes())


def test_planes_are_mutable_bytearrays():
    frame = YUV420Frame(2, 2, b"\x00" * 4, b"\x00", b"\x00")
    frame.y[0] = 42
    assert frame.to_bytes()[0] == 42


def test_wrong_luma_length_is_rejected():
    with pytest.raises(ValueError):
        YUV420Frame(2, 2, b"\x00" * 3, b"\x00", b"\x00")


def test_wrong_chroma_length_is_rejected():
    with pytest.raises(ValueError):
        YUV420Frame(2, 2, b"\x00" * 4, b"\x00\x00", b"\x00")


def test_negative_dimensions_are_rejected():
    with pytest.raises(ValueError):
        YUV420Frame.blank(-2, 2)