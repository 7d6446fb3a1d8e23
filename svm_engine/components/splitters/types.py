from __future__ import annotations

"""Splitter return contracts.

Splitters yield a single, stable fold payload shape so orchestrators never
have to guess tuple layouts.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Split:
    """A single train/test split (fold).

    ``idx_tr`` / ``idx_te`` are row indices into the original X/y; they are
    used to put pooled out-of-fold predictions back in dataset order.
    """

    Xtr: np.ndarray
    Xte: np.ndarray
    ytr: np.ndarray
    yte: np.ndarray
    idx_tr: np.ndarray
    idx_te: np.ndarray
