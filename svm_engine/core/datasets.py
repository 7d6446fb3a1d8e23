from __future__ import annotations

"""Dataset and feature-vector coercion.

Conventions
-----------
- A dataset is an ordered sequence of ``(features, label)`` pairs.
- Internally X is 2D: (n_samples, n_features) and y is 1D: (n_samples,).
- Every example of one dataset shares a single dimensionality.
"""

from typing import Any, Iterable, NamedTuple, Sequence, Tuple

import numpy as np

from svm_engine.errors import DimensionMismatch, InconsistentDimensions, InvalidDataset


class Example(NamedTuple):
    features: Sequence[float]
    label: float


Dataset = Sequence[Tuple[Sequence[float], float]]


def _as_vector(features: Any, *, where: str) -> np.ndarray:
    try:
        v = np.asarray(features, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidDataset(f"{where}: features are not numeric ({exc})") from exc
    if v.ndim != 1:
        raise InvalidDataset(f"{where}: features must be a flat sequence; got shape {v.shape}")
    if v.shape[0] < 1:
        raise InvalidDataset(f"{where}: feature vector is empty")
    if not np.all(np.isfinite(v)):
        raise InvalidDataset(f"{where}: features contain NaN or infinity")
    return v


def coerce_dataset(dataset: Iterable[Any]) -> Tuple[np.ndarray, np.ndarray]:
    """Return (X, y) for a sequence of (features, label) pairs.

    Raises
    ------
    InvalidDataset
        Empty dataset, malformed example, non-numeric or non-finite values.
    InconsistentDimensions
        Examples disagree on dimensionality.
    """
    if dataset is None:
        raise InvalidDataset("dataset is None")

    rows = []
    labels = []
    n_features = None
    for i, example in enumerate(dataset):
        try:
            features, label = example
        except (TypeError, ValueError) as exc:
            raise InvalidDataset(f"example {i}: expected a (features, label) pair") from exc

        v = _as_vector(features, where=f"example {i}")
        if n_features is None:
            n_features = v.shape[0]
        elif v.shape[0] != n_features:
            raise InconsistentDimensions(
                f"example {i} has {v.shape[0]} features; expected {n_features}"
            )

        try:
            y = float(label)
        except (TypeError, ValueError) as exc:
            raise InvalidDataset(f"example {i}: label {label!r} is not a number") from exc
        if not np.isfinite(y):
            raise InvalidDataset(f"example {i}: label is NaN or infinity")

        rows.append(v)
        labels.append(y)

    if not rows:
        raise InvalidDataset("dataset is empty")

    return np.vstack(rows), np.asarray(labels, dtype=float)


def coerce_features(features: Any, *, n_features: int) -> np.ndarray:
    """Return a single feature vector as a (1, n_features) row."""
    try:
        v = np.asarray(features, dtype=float)
    except (TypeError, ValueError) as exc:
        raise DimensionMismatch(f"features are not numeric ({exc})") from exc
    if v.ndim != 1 or v.shape[0] != n_features:
        raise DimensionMismatch(
            f"expected a vector of {n_features} features; got shape {v.shape}"
        )
    if not np.all(np.isfinite(v)):
        raise InvalidDataset("features contain NaN or infinity")
    return v[None, :]


def coerce_rows(rows: Any, *, n_features: int) -> np.ndarray:
    """Return a batch of feature vectors as (n_rows, n_features)."""
    try:
        X = np.asarray(rows, dtype=float)
    except (TypeError, ValueError) as exc:
        raise DimensionMismatch(f"rows are not a rectangular numeric batch ({exc})") from exc
    if X.ndim == 1 and X.shape[0] == 0:
        return X.reshape(0, n_features)
    if X.ndim != 2 or X.shape[1] != n_features:
        raise DimensionMismatch(
            f"expected rows of {n_features} features; got shape {X.shape}"
        )
    if not np.all(np.isfinite(X)):
        raise InvalidDataset("features contain NaN or infinity")
    return X
