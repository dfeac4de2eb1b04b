"""Process-wide setting for the grid dimension used by parallel kernels."""

from __future__ import annotations

import threading

_DEFAULT_GRID_DIM = 32

_lock = threading.Lock()
_grid_dim = _DEFAULT_GRID_DIM


def set_grid_dim(dim: int) -> None:
    """Set the grid dimension; it must be a positive integer."""
    global _grid_dim
    with _lock:
        if dim <= 0:
            raise ValueError(f"grid dimension must be positive, got {dim}")
        _grid_dim = dim


def get_grid_dim() -> int:
    """Return the current grid dimension."""
    with _lock:
        return _grid_dim