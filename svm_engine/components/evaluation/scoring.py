from __future__ import annotations

"""Report construction.

Classification reports carry accuracy (plus confusion / per-class metrics);
regression reports carry mean squared error and libsvm's squared correlation
coefficient. A report never mixes the two families.
"""

from typing import Optional, Sequence

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    confusion_matrix,
    mean_squared_error,
    precision_recall_fscore_support,
)

from svm_engine.contracts.results import ClassMetrics, Report
from svm_engine.contracts.types import ProblemKind


def _as_1d(v: Sequence[float]) -> np.ndarray:
    return np.asarray(v, dtype=float).ravel()


def squared_correlation(y_true: Sequence[float], y_pred: Sequence[float]) -> Optional[float]:
    """Squared Pearson correlation between targets and predictions.

    None when either side is constant (the coefficient is undefined).
    """
    t = _as_1d(y_true)
    p = _as_1d(y_pred)
    n = t.shape[0]
    if n == 0:
        return None
    num = n * np.dot(p, t) - p.sum() * t.sum()
    den = (n * np.dot(p, p) - p.sum() ** 2) * (n * np.dot(t, t) - t.sum() ** 2)
    if den <= 0:
        return None
    return float(num * num / den)


def build_report(
    kind: ProblemKind,
    y_true: Sequence[float],
    y_pred: Sequence[float],
    *,
    include_class_metrics: bool = True,
) -> Report:
    t = _as_1d(y_true)
    p = _as_1d(y_pred)
    if t.shape[0] != p.shape[0]:
        raise ValueError(f"y_true and y_pred length mismatch: {t.shape[0]} vs {p.shape[0]}")

    payload = {
        "kind": kind,
        "n_examples": int(t.shape[0]),
        "y_true": t.tolist(),
        "y_pred": p.tolist(),
    }

    if kind == "regression":
        payload["mse"] = float(mean_squared_error(t, p))
        payload["squared_correlation"] = squared_correlation(t, p)
        return Report(**payload)

    payload["accuracy"] = float(accuracy_score(t, p))
    if include_class_metrics:
        labels = np.unique(np.concatenate([t, p]))
        cm = confusion_matrix(t, p, labels=labels)
        precision, recall, f1, support = precision_recall_fscore_support(
            t, p, labels=labels, zero_division=0
        )
        payload["labels"] = [float(v) for v in labels]
        payload["confusion"] = cm.astype(int).tolist()
        payload["per_class"] = [
            ClassMetrics(
                label=float(labels[i]),
                precision=float(precision[i]),
                recall=float(recall[i]),
                f1=float(f1[i]),
                support=int(support[i]),
            )
            for i in range(labels.shape[0])
        ]
    return Report(**payload)
