"""Tests for image file helpers, metrics and synthetic images."""

import os
import subprocess
import sys
import warnings

import numpy as np
import pytest
from blurhash_codec import encode_image
from blurhash_codec.utils.image_io import encode_file, load_image, save_image
from blurhash_codec.utils.metrics import compare_placeholder, quadrant_means
from blurhash_codec.utils.test_images import (
    generate_gradient,
    generate_quadrants,
    generate_solid,
    generate_stripes,
)


def test_png_round_trip(tmp_path):
    """Saved RGBA PNGs load back unchanged."""
    image = generate_quadrants(20, 10)
    path = str(tmp_path / "quadrants.png")
    save_image(image, path)
    loaded = load_image(path)
    assert loaded.shape == (10, 20, 4)
    assert np.array_equal(loaded, image)


def test_rgb_file_loads_opaque(tmp_path):
    """Three-channel files gain an opaque alpha channel."""
    image = generate_gradient(12, 9)[:, :, :3]
    path = str(tmp_path / "gradient.png")
    save_image(image, path)
    loaded = load_image(path)
    assert loaded.shape == (9, 12, 4)
    assert np.array_equal(loaded[:, :, :3], image)
    assert np.all(loaded[:, :, 3] == 255)


def test_encode_file_matches_array(tmp_path):
    """Encoding a file equals encoding its pixels."""
    image = generate_gradient(16, 12)
    path = str(tmp_path / "gradient.png")
    save_image(image, path)
    assert encode_file(path, 4, 3) == encode_image(image, 4, 3)


def test_load_missing_file(tmp_path):
    """Unreadable paths raise ValueError."""
    with pytest.raises(ValueError, match="Could not load"):
        load_image(str(tmp_path / "missing.png"))


def test_quadrant_means():
    """Each quadrant of a four-colour image averages to its colour."""
    colors = [(10, 20, 30), (40, 50, 60), (70, 80, 90), (100, 110, 120)]
    means = quadrant_means(generate_quadrants(8, 6, colors))
    assert np.allclose(means.reshape(4, 3), colors)


def test_compare_identical_images():
    """Identical images have zero quadrant error and SSIM 1."""
    image = generate_stripes(32, 24)
    stats = compare_placeholder(image, image.copy())
    assert stats['max_quadrant_error'] == 0.0
    assert np.isclose(stats['ssim_rgb'], 1.0)


def test_compare_shape_mismatch():
    """Images of different size cannot be compared."""
    with pytest.raises(ValueError):
        compare_placeholder(generate_solid(4, 4), generate_solid(5, 4))


def test_synthetic_images_are_rgba():
    """Generators return opaque uint8 RGBA."""
    for image in [generate_solid(), generate_quadrants(), generate_gradient(), generate_stripes()]:
        assert image.dtype == np.uint8
        assert image.shape[2] == 4
        assert np.all(image[:, :, 3] == 255)


def test_identical_psnr_is_infinite_without_warning():
    """Zero error gives inf PSNR and no divide-by-zero warning."""
    image = generate_gradient(16, 12)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        stats = compare_placeholder(image, image.copy())
    assert np.isinf(stats['psnr_rgb'])


def test_codec_import_does_not_load_skimage():
    """Importing the codec leaves scikit-image unloaded."""
    code = "import sys, blurhash_codec; print('skimage' in sys.modules)"
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env = dict(os.environ, PYTHONPATH=root)
    out = subprocess.run(
        [sys.executable, "-c", code], capture_output=True, text=True, check=True, env=env, cwd=root
    )
    assert out.stdout.strip() == "False"
