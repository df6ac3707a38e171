import numpy as np

from utils import time_block, match_palettes, labels_equal_up_to_perm
from data_gen import make_noisy_palette_image

from colorquant import ColorQuantizer
from colorquant.utils.metrics import count_colors

PALETTE = [(30, 30, 30), (220, 220, 220), (200, 40, 40), (40, 180, 60)]


def test_i3_recovers_noisy_palette(seed_all, torch_device):
    """
    Pixels drawn from four well separated colors plus small noise: the learned
    palette matches the source palette within a few levels, and every pixel
    lands with the other pixels of its source color.
    """
    img, y = make_noisy_palette_image(PALETTE, width=40, height=30, noise=4.0, seed=seed_all)

    quantizer = ColorQuantizer(n_colors=4, sample_size=600,
                               random_state=seed_all, device=torch_device)
    with time_block("I3-palette", meta={"n": img.shape[0] * img.shape[1], "K": 4}):
        result = quantizer.quantize_image(img)

    err, _ = match_palettes(result.palette, np.asarray(PALETTE))
    assert err <= 3.0, f"Palette error {err} too large"

    assert labels_equal_up_to_perm(result.labels, y)
    assert count_colors(result.image) == 4


def test_i3_iteration_cap(seed_all):
    """max_iter=1 stops after one pass without declaring convergence."""
    img, _ = make_noisy_palette_image(PALETTE, width=20, height=20, noise=4.0, seed=seed_all)

    result = ColorQuantizer(n_colors=4, max_iter=1, random_state=seed_all).quantize_image(img)

    assert result.n_iter == 1
    assert not result.converged
    assert count_colors(result.image) <= 4
