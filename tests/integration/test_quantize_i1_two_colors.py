import numpy as np
import pytest

from utils import time_block
from data_gen import make_two_color_image, RED, BLUE

from colorquant import ColorQuantizer


@pytest.mark.parametrize("init", ["k-means++", "random"])
def test_i1_two_pixels_two_colors_reproduced(seed_all, torch_device, init):
    """
    2x1 image (red, blue), K=2: both colors become centroids, each pixel keeps
    its own color and the two pixels get different labels.
    """
    img = make_two_color_image()

    quantizer = ColorQuantizer(n_colors=2, sample_size=2, init=init,
                               random_state=seed_all, device=torch_device)
    with time_block("I1-two-colors", meta={"n": 2, "K": 2, "init": init}):
        result = quantizer.quantize_image(img)

    assert result.image.shape == (1, 2, 3)
    assert result.image[0, 0].tolist() == list(RED)
    assert result.image[0, 1].tolist() == list(BLUE)

    labels = result.labels.tolist()
    assert labels[0] != labels[1]
    assert sorted(labels) == [0, 1]
    assert result.converged

    palette = sorted(tuple(c) for c in result.palette.tolist())
    assert palette == sorted([RED, BLUE])


def test_i1_sample_covers_both_pixels(seed_all):
    result = ColorQuantizer(n_colors=2, random_state=seed_all).quantize_image(make_two_color_image())
    assert sorted(result.sample_indices.tolist()) == [0, 1]
    assert np.isclose(result.inertia, 0.0)
