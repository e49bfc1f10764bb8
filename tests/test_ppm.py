import pytest

from raycfg.ppm import PpmImage


def test_header_and_black_pixels():
    image = PpmImage(2, 1)
    assert image.to_bytes() == b"P6\n2 1\n255\n" + bytes(6)


def test_set_pixel_is_stored_row_major():
    image = PpmImage(2, 2)
    image.set_pixel(1, 0, 10, 20, 30)
    image.set_pixel(0, 1, 40, 50, 60)
    data = image.to_bytes()
    body = data[len(b"P6\n2 2\n255\n"):]
    assert body == bytes([0, 0, 0, 10, 20, 30, 40, 50, 60, 0, 0, 0])
    assert image[1, 0] == (10, 20, 30)
    assert image[0, 1] == (40, 50, 60)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_bounds_pixels_are_ignored(x, y):
    image = PpmImage(3, 2)
    before = image.to_bytes()
    image.set_pixel(x, y, 1, 2, 3)
    assert image.to_bytes() == before


def test_values_keep_only_low_byte():
    image = PpmImage(1, 1)
    image.set_pixel(0, 0, 256, 255, -1)
    assert image[0, 0] == (0, 255, 255)


def test_getitem_outside_raises():
    with pytest.raises(IndexError):
        PpmImage(1, 1)[1, 0]


def test_save_creates_directory_and_writes_bytes(tmp_path):
    image = PpmImage(2, 1, "out.ppm")
    image.set_pixel(0, 0, 255, 0, 255)
    path = image.save(tmp_path / "shots")
    assert path == tmp_path / "shots" / "out.ppm"
    assert path.read_bytes() == image.to_bytes()


def test_save_without_filename_raises(tmp_path):
    with pytest.raises(ValueError):
        PpmImage(1, 1).save(tmp_path)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        PpmImage(-1, 2)