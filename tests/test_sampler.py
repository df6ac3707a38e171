# tests/test_sampler.py
"""
Training-sample selection: exact count, no duplicates, reproducibility.
"""

from __future__ import annotations

import pytest
import torch

from colorquant.base.exceptions import InvalidSampleSize
from colorquant.quantization.sampler import (
    sample_indices, sample_features, clip_sample_size
)


@pytest.mark.parametrize("total,n", [(100, 1), (100, 30), (1000, 999), (20, 20)])
def test_exact_count_no_duplicates(generator, total, n):
    idx = sample_indices(total, n, generator=generator)

    assert idx.dtype == torch.long
    assert idx.shape == (n,)
    assert torch.unique(idx).numel() == n
    assert int(idx.min()) >= 0 and int(idx.max()) < total


def test_full_sample_is_permutation(generator):
    idx = sample_indices(50, 50, generator=generator)
    assert sorted(idx.tolist()) == list(range(50))


@pytest.mark.parametrize("n", [11, 0, -3])
def test_invalid_sample_size(generator, n):
    with pytest.raises(InvalidSampleSize):
        sample_indices(10, n, generator=generator)


def test_same_seed_same_sample():
    g1 = torch.Generator().manual_seed(3)
    g2 = torch.Generator().manual_seed(3)
    assert torch.equal(sample_indices(10_000, 100, generator=g1),
                       sample_indices(10_000, 100, generator=g2))


def test_every_index_reachable(generator):
    seen = set()
    for _ in range(500):
        seen.update(sample_indices(5, 1, generator=generator).tolist())
    assert seen == {0, 1, 2, 3, 4}


def test_sample_features_rows_match_indices(generator):
    features = torch.rand(200, 3, generator=generator)
    sample, idx = sample_features(features, 25, generator=generator)

    assert sample.shape == (25, 3)
    assert torch.equal(sample, features[idx])


def test_sample_features_too_large(generator):
    with pytest.raises(InvalidSampleSize):
        sample_features(torch.rand(4, 3), 5, generator=generator)


def test_clip_sample_size():
    assert clip_sample_size(1000, 16) == 16
    assert clip_sample_size(1000, 5000) == 1000
