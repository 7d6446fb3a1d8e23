from __future__ import annotations
from typing import Iterator

import numpy as np
from sklearn.model_selection import KFold

from svm_engine.components.splitters.types import Split
from svm_engine.errors import InvalidArgument


def check_n_folds(n_folds: int, n_samples: int) -> int:
    if isinstance(n_folds, bool) or not isinstance(n_folds, (int, np.integer)):
        raise InvalidArgument(f"fold count must be an integer; got {n_folds!r}")
    n_folds = int(n_folds)
    if n_folds < 2:
        raise InvalidArgument(f"fold count must be at least 2; got {n_folds}")
    if n_folds > n_samples:
        raise InvalidArgument(
            f"fold count {n_folds} exceeds the number of examples ({n_samples})"
        )
    return n_folds


def generate_contiguous_folds(
    X: np.ndarray,
    y: np.ndarray,
    n_splits: int,
) -> Iterator[Split]:
    """Yield :class:`Split` for each fold, in fold order.

    Folds are contiguous slices of the dataset in its given order (no
    shuffling). Sizes differ by at most one; the first ``n % n_splits`` folds
    hold the extra example.
    """
    X = np.asarray(X)
    y = np.asarray(y).ravel()
    if X.shape[0] != y.shape[0]:
        raise ValueError(f"X and y length mismatch: {X.shape[0]} vs {y.shape[0]}")

    n_splits = check_n_folds(n_splits, X.shape[0])
    splitter = KFold(n_splits=n_splits, shuffle=False)

    for train_idx, test_idx in splitter.split(X, y):
        yield Split(
            Xtr=X[train_idx],
            Xte=X[test_idx],
            ytr=y[train_idx],
            yte=y[test_idx],
            idx_tr=np.asarray(train_idx, dtype=int),
            idx_te=np.asarray(test_idx, dtype=int),
        )
