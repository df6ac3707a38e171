import pytest
import torch

from utils import time_block
from data_gen import make_solid_image

from colorquant import ColorQuantizer


@pytest.mark.parametrize("n_colors", [2, 3, 5])
@pytest.mark.parametrize("init", ["k-means++", "random"])
def test_i2_solid_image_unchanged(seed_all, torch_device, n_colors, init):
    """
    8x6 single-color image, sample of 10, K > 1: every centroid collapses onto
    the one color and the output equals the input.
    """
    img = make_solid_image(width=8, height=6, color=(12, 200, 77))

    quantizer = ColorQuantizer(n_colors=n_colors, sample_size=10, init=init,
                               random_state=seed_all, device=torch_device)
    with time_block("I2-solid", meta={"n": 48, "K": n_colors, "init": init}):
        result = quantizer.quantize_image(img)

    assert torch.equal(result.image, torch.from_numpy(img))
    assert result.centroids.n_clusters == n_colors
    assert result.sample_indices.shape == (10,)

    # Ties go to the lowest identifier, so one label covers the image
    assert result.labels.unique().numel() == 1
    assert result.labels[0].item() == 0
    assert result.converged
