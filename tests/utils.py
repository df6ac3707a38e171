# tests/utils.py
"""
Small, reusable helpers used across the colorquant test suite.

Functions:
- match_palettes(found, expected): best permutation pairing two palettes; returns (max_error, perm).
- labels_equal_up_to_perm(y1, y2): whether two labelings differ only by renaming clusters.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import itertools
import json
import time
from contextlib import contextmanager
from typing import Any, Dict, Tuple

import numpy as np
import torch


def _to_numpy(x) -> np.ndarray:
    if isinstance(x, torch.Tensor):
        x = x.detach().cpu().numpy()
    return np.asarray(x)


def match_palettes(found, expected) -> Tuple[float, Tuple[int, ...]]:
    """
    Pair each found color with an expected color, minimizing the worst error.

    Returns
    -------
    (max_error, perm)
      max_error: largest absolute channel difference after pairing
      perm     : tuple p such that expected[p[i]] is paired with found[i]

    Brute force over permutations; keep palettes small.
    """
    F = _to_numpy(found).astype(np.float64)
    E = _to_numpy(expected).astype(np.float64)
    if F.shape != E.shape:
        raise ValueError(f"Shape mismatch: {F.shape} vs {E.shape}")

    k = F.shape[0]
    best_err = np.inf
    best_perm: Tuple[int, ...] = tuple(range(k))
    for perm in itertools.permutations(range(k)):
        err = float(np.max(np.abs(F - E[list(perm)])))
        if err < best_err:
            best_err = err
            best_perm = perm
    return best_err, best_perm


def labels_equal_up_to_perm(y1, y2) -> bool:
    """True if a one-to-one renaming of y2's labels turns it into y1."""
    a = _to_numpy(y1)
    b = _to_numpy(y2)
    if a.shape != b.shape:
        return False
    forward: Dict[int, int] = {}
    backward: Dict[int, int] = {}
    for u, v in zip(a.tolist(), b.tolist()):
        if forward.setdefault(v, u) != u or backward.setdefault(u, v) != v:
            return False
    return True


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """Print '[timing] label {meta} 0.123s'."""
    meta_str = f" {json.dumps(meta, sort_keys=True)}" if meta else ""
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
