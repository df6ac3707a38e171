# tests/test_reconstructor.py
"""
Image reconstruction from labels and centroids.
"""

from __future__ import annotations

import pytest
import torch

from colorquant.base.data_structures import CentroidSet
from colorquant.base.exceptions import InputShapeMismatch
from colorquant.quantization.reconstructor import reconstruct_image, palette_colors


def test_paints_pixels_with_centroid_colors():
    centroids = torch.tensor([[1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
    labels = torch.tensor([0, 1, 1, 0])

    img = reconstruct_image(labels, centroids, width=2, height=2)

    assert img.dtype == torch.uint8
    assert img.shape == (2, 2, 3)
    assert img[0, 0].tolist() == [255, 0, 0]
    assert img[0, 1].tolist() == [0, 0, 255]
    assert img[1, 0].tolist() == [0, 0, 255]
    assert img[1, 1].tolist() == [255, 0, 0]


def test_row_major_layout_non_square():
    means = torch.linspace(0, 1, 6).unsqueeze(1).repeat(1, 3)
    centroids = CentroidSet(means=means, n_clusters=6, dimension=3)

    img = reconstruct_image(torch.arange(6), centroids, width=3, height=2)

    assert img.shape == (2, 3, 3)
    # Pixel (x=0, y=1) is index 3
    assert img[1, 0].tolist() == palette_colors(centroids)[3].tolist()


def test_rounds_instead_of_truncating():
    centroids = torch.tensor([[100.6 / 255, 100.4 / 255, 0.2 / 255]])
    img = reconstruct_image(torch.zeros(1, dtype=torch.long), centroids, width=1, height=1)
    assert img[0, 0].tolist() == [101, 100, 0]


def test_clamps_out_of_range_values():
    centroids = torch.tensor([[1.2, -0.1, 0.5]])
    img = reconstruct_image(torch.zeros(2, dtype=torch.long), centroids, width=2, height=1)
    assert img[0, 0].tolist() == [255, 0, 128]


def test_label_count_mismatch():
    centroids = torch.rand(2, 3)
    with pytest.raises(InputShapeMismatch):
        reconstruct_image(torch.zeros(5, dtype=torch.long), centroids, width=2, height=2)


def test_unknown_label():
    centroids = torch.rand(2, 3)
    with pytest.raises(ValueError):
        reconstruct_image(torch.tensor([0, 2]), centroids, width=2, height=1)


def test_inputs_not_mutated(generator):
    means = torch.rand(4, 3, generator=generator)
    labels = torch.randint(4, (12,), generator=generator)
    means_before, labels_before = means.clone(), labels.clone()

    reconstruct_image(labels, means, width=4, height=3)

    assert torch.equal(means, means_before)
    assert torch.equal(labels, labels_before)


def test_palette_colors_wide_range():
    colors = palette_colors(torch.tensor([[1.0, 0.5, 0.0]]), max_value=1023)
    assert colors.dtype == torch.int64
    assert colors.tolist() == [[1023, 512, 0]]
