import numpy as np
import pytest
from PIL import Image

from minitasks.imaging import (
    ImageEditor,
    adjust_brightness,
    adjust_contrast,
    box_blur,
    contrast_factor,
    crop,
    load_image,
    parse_crop_values,
    parse_resize_values,
    resize,
    save_image,
    to_grayscale,
)


def _gradient(height=6, width=8):
    rows = np.arange(height).reshape(-1, 1) * 20
    cols = np.arange(width).reshape(1, -1) * 10
    red = (rows + cols) % 256
    green = (rows * 2 + cols) % 256
    blue = (cols * 3) % 256
    return np.stack([red, green, blue], axis=2).astype(np.uint8)


def _uniform(value, height=4, width=5):
    return np.full((height, width, 3), value, dtype=np.uint8)


def test_grayscale_channels_equal():
    gray = to_grayscale(_gradient())
    assert gray.shape == (6, 8, 3)
    assert np.array_equal(gray[:, :, 0], gray[:, :, 1])
    assert np.array_equal(gray[:, :, 1], gray[:, :, 2])


def test_grayscale_keeps_neutral_values():
    for value in (0, 100, 255):
        assert np.array_equal(to_grayscale(_uniform(value)), _uniform(value))


def test_grayscale_accepts_alpha_channel():
    rgba = np.full((2, 2, 4), 100, dtype=np.uint8)
    assert np.array_equal(to_grayscale(rgba), _uniform(100, 2, 2))


def test_blur_radius_zero_is_identity():
    image = _gradient()
    assert np.array_equal(box_blur(image, 0), image)


def test_blur_keeps_uniform_image():
    assert np.array_equal(box_blur(_uniform(77), 3), _uniform(77))


def test_blur_spreads_bright_pixel():
    image = _uniform(0, 5, 5)
    image[2, 2] = 255
    blurred = box_blur(image, 1)
    assert blurred.shape == image.shape
    assert blurred[2, 2, 0] < 255
    assert blurred[1, 1, 0] > 0
    assert blurred[0, 0, 0] == 0


def test_blur_negative_radius_raises():
    with pytest.raises(ValueError):
        box_blur(_gradient(), -1)


def test_brightness_saturates():
    assert np.array_equal(adjust_brightness(_uniform(250), 10), _uniform(255))
    assert np.array_equal(adjust_brightness(_uniform(5), -10), _uniform(0))


def test_brightness_zero_is_identity():
    image = _gradient()
    assert np.array_equal(adjust_brightness(image, 0), image)


def test_brightness_full_range():
    assert np.array_equal(adjust_brightness(_gradient(), 255), _uniform(255, 6, 8))
    assert np.array_equal(adjust_brightness(_gradient(), -255), _uniform(0, 6, 8))


def test_contrast_identity_and_zero():
    image = _gradient()
    assert np.array_equal(adjust_contrast(image, 1.0), image)
    assert np.array_equal(adjust_contrast(image, 0.0), np.zeros_like(image))


def test_contrast_doubles_and_saturates():
    assert np.array_equal(adjust_contrast(_uniform(100), 2.0), _uniform(200))
    assert np.array_equal(adjust_contrast(_uniform(200), 4.0), _uniform(255))


def test_contrast_factor_from_slider():
    assert contrast_factor(100) == 1.0
    assert contrast_factor(400) == 4.0
    assert contrast_factor(0) == 0.0


@pytest.mark.parametrize("value", [-1, 401])
def test_contrast_factor_out_of_range(value):
    with pytest.raises(ValueError):
        contrast_factor(value)


def test_crop_matches_slice():
    image = _gradient()
    result = crop(image, 1, 2, 5, 6)
    assert result.shape == (4, 4, 3)
    assert np.array_equal(result, image[2:6, 1:5])


@pytest.mark.parametrize(
    "box",
    [(3, 0, 3, 4), (0, 4, 2, 1), (-1, 0, 2, 2), (0, 0, 9, 2), (0, 0, 2, 7)],
)
def test_crop_invalid_rectangle(box):
    with pytest.raises(ValueError):
        crop(_gradient(), *box)


def test_resize_shape_and_uniform_content():
    result = resize(_uniform(42), 10, 3)
    assert result.shape == (3, 10, 3)
    assert np.array_equal(result, _uniform(42, 3, 10))


def test_resize_same_size_is_identity():
    image = _gradient()
    assert np.array_equal(resize(image, 8, 6), image)


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-2, 3)])
def test_resize_invalid_size(size):
    with pytest.raises(ValueError):
        resize(_gradient(), *size)


def test_parse_crop_values_truncates():
    assert parse_crop_values(["1", "2.7", " 3 ", "4"]) == [1, 2, 3, 4]


def test_parse_crop_values_errors():
    with pytest.raises(ValueError):
        parse_crop_values(["1", "x", "3", "4"])
    with pytest.raises(ValueError):
        parse_crop_values(["1", "2", "3"])


def test_parse_resize_values():
    assert parse_resize_values(["640", "480.9"]) == [640, 480]
    with pytest.raises(ValueError):
        parse_resize_values(["", "10"])
    with pytest.raises(ValueError):
        parse_resize_values(["10"])


def test_save_and_load_round_trip(tmp_path):
    image = _gradient()
    path = tmp_path / "picture.png"
    save_image(image, path)
    assert np.array_equal(load_image(path), image)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "missing.png")


def test_load_non_image(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("not an image")
    with pytest.raises(ValueError):
        load_image(path)


def test_editor_requires_image(tmp_path):
    editor = ImageEditor()
    with pytest.raises(ValueError):
        editor.apply(to_grayscale)
    with pytest.raises(ValueError):
        editor.save(tmp_path / "out.png")
    with pytest.raises(ValueError):
        editor.undo()


@pytest.fixture
def loaded_editor(tmp_path):
    path = tmp_path / "source.png"
    Image.fromarray(_gradient(), mode="RGB").save(path)
    editor = ImageEditor()
    editor.load(path)
    return editor


def test_editor_apply_and_undo(loaded_editor):
    original = loaded_editor.image.copy()
    loaded_editor.apply(adjust_brightness, 50)
    brightened = loaded_editor.image.copy()
    loaded_editor.apply(crop, 0, 0, 4, 3)
    assert loaded_editor.image.shape == (3, 4, 3)

    assert np.array_equal(loaded_editor.undo(), brightened)
    assert np.array_equal(loaded_editor.undo(), original)
    assert np.array_equal(loaded_editor.undo(), original)
    assert len(loaded_editor.history) == 1


def test_editor_failed_operation_keeps_state(loaded_editor):
    before = loaded_editor.image.copy()
    history_length = len(loaded_editor.history)
    with pytest.raises(ValueError):
        loaded_editor.apply(crop, 0, 0, 100, 100)
    assert np.array_equal(loaded_editor.image, before)
    assert len(loaded_editor.history) == history_length


def test_editor_save(loaded_editor, tmp_path):
    loaded_editor.apply(to_grayscale)
    out = tmp_path / "gray.png"
    loaded_editor.save(out)
    assert np.array_equal(load_image(out), loaded_editor.image)